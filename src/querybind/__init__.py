"""Bind URL query parameters onto pydantic models and dataclasses."""

from __future__ import annotations

from querybind.binding.descriptors import FieldDescriptor, FieldKind, describe
from querybind.binding.errors import FieldErrors
from querybind.binding.markers import Embedded, Query
from querybind.binding.parse import parse, parse_query_string
from querybind.binding.tags import FieldTag, resolve_tag
from querybind.binding.walker import bind_fields
from querybind.core.config import BindSettings
from querybind.core.exceptions import (
    DecodeError,
    EmptyMessagesError,
    PreconditionError,
    QueryBindError,
    RecordTypeError,
)
from querybind.core.protocols import QuerySanitizer, QueryUnmarshaler, TextUnmarshaler

__all__ = [
    "BindSettings",
    "DecodeError",
    "Embedded",
    "EmptyMessagesError",
    "FieldDescriptor",
    "FieldErrors",
    "FieldKind",
    "PreconditionError",
    "Query",
    "QueryBindError",
    "QuerySanitizer",
    "QueryUnmarshaler",
    "RecordTypeError",
    "TextUnmarshaler",
    "bind_fields",
    "describe",
    "parse",
    "parse_query_string",
    "resolve_tag",
]

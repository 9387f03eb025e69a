"""Field descriptor tables: the per-type binding plan, built once and cached.

A table lists a record's bindable fields in declaration order with their
resolved tag, kind, value type and structural zero. Embedded sub-records
are expanded into child tables when the parent is described.
"""

from __future__ import annotations

import asyncio
import dataclasses
import functools
import logging
import queue
import types
import typing
from collections.abc import Callable, MutableSequence, Sequence
from enum import Enum, StrEnum
from typing import Any, Union

from pydantic import BaseModel

from querybind.binding.markers import Embedded, Query
from querybind.binding.tags import SKIPPED, FieldTag, resolve_tag
from querybind.core.config import DEFAULT_SETTINGS, BindSettings
from querybind.core.exceptions import RecordTypeError

logger = logging.getLogger(__name__)

_SEQUENCE_ORIGINS = (list, Sequence, MutableSequence)
_CHANNEL_TYPES = (queue.Queue, queue.SimpleQueue, asyncio.Queue)


class FieldKind(StrEnum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    IGNORED = "ignored"
    EMBEDDED = "embedded"


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    """How one record attribute is bound.

    ``value_type`` is the element type for sequences and the record type
    for embedded fields.
    """

    attr: str
    tag: FieldTag
    kind: FieldKind
    value_type: Any = None
    zero: Any = None
    children: tuple[FieldDescriptor, ...] = ()

    @property
    def name(self) -> str:
        return self.tag.name


def is_record_type(tp: Any) -> bool:
    """True for pydantic models and dataclasses."""
    if not isinstance(tp, type):
        return False
    return issubclass(tp, BaseModel) or dataclasses.is_dataclass(tp)


def _split_annotated(tp: Any) -> tuple[Any, tuple[Any, ...]]:
    if typing.get_origin(tp) is typing.Annotated:
        base, *metadata = typing.get_args(tp)
        return base, tuple(metadata)
    return tp, ()


def _record_fields(record_type: type) -> list[tuple[str, Any, tuple[Any, ...]]]:
    """Return ``(attr, type, metadata)`` per field in declaration order."""
    if issubclass(record_type, BaseModel):
        return [
            (attr, info.annotation, tuple(info.metadata))
            for attr, info in record_type.model_fields.items()
        ]
    try:
        hints = typing.get_type_hints(record_type, include_extras=True)
    except NameError as exc:
        unresolved = next(
            (
                field.name
                for field in dataclasses.fields(record_type)
                if isinstance(field.type, str) and exc.name and exc.name in field.type
            ),
            exc.name,
        )
        raise RecordTypeError(
            f"cannot resolve annotation of {record_type.__name__}.{unresolved}: {exc}"
        ) from exc
    fields = []
    for field in dataclasses.fields(record_type):
        base, metadata = _split_annotated(hints.get(field.name, field.type))
        fields.append((field.name, base, metadata))
    return fields


def _is_optional(tp: Any) -> bool:
    origin = typing.get_origin(tp)
    return origin in (Union, types.UnionType) and type(None) in typing.get_args(tp)


def _unwrap_optional(tp: Any) -> Any:
    """Strip one level of ``Optional`` (and ``Annotated``) from an element type."""
    tp, _ = _split_annotated(tp)
    if _is_optional(tp):
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return _split_annotated(args[0])[0]
    return tp


def _is_ignorable(tp: Any) -> bool:
    origin = typing.get_origin(tp) or tp
    if _is_optional(tp):
        return True
    if origin is Callable or origin is tuple or tp is complex:
        return True
    if isinstance(origin, type) and issubclass(origin, _CHANNEL_TYPES):
        return True
    return isinstance(tp, (types.FunctionType, types.BuiltinFunctionType))


def _is_sequence(tp: Any) -> bool:
    origin = typing.get_origin(tp) or tp
    return origin in _SEQUENCE_ORIGINS


def zero_value(tp: Any) -> Any:
    """Structural zero of ``tp``: what a no-argument construction yields.

    Enums have no constructor zero; their zero is the member whose value
    equals the zero of the value's own type, if any. Types that cannot be
    constructed without arguments have ``None`` as zero.
    """
    if not isinstance(tp, type):
        return None
    if issubclass(tp, Enum):
        for member in tp:
            if member.value == zero_value(type(member.value)):
                return member
        return None
    try:
        return tp()
    except (TypeError, ValueError):
        return None


def _describe_field(
    attr: str, tp: Any, metadata: tuple[Any, ...], settings: BindSettings
) -> FieldDescriptor:
    if any(isinstance(marker, Embedded) for marker in metadata):
        if not is_record_type(tp):
            raise RecordTypeError(f"embedded field {attr!r} is not a record type: {tp!r}")
        return FieldDescriptor(
            attr, SKIPPED, FieldKind.EMBEDDED, tp, children=_describe(tp, settings),
        )

    if _is_ignorable(tp):
        return FieldDescriptor(attr, SKIPPED, FieldKind.IGNORED, tp)

    annotation = next((m.tag for m in metadata if isinstance(m, Query)), "")
    tag = resolve_tag(annotation, attr, settings=settings)
    if tag.skipped:
        return FieldDescriptor(attr, tag, FieldKind.IGNORED, tp)

    if _is_sequence(tp):
        args = typing.get_args(tp)
        element = _unwrap_optional(args[0]) if args else str
        return FieldDescriptor(attr, tag, FieldKind.SEQUENCE, element)

    return FieldDescriptor(attr, tag, FieldKind.SCALAR, tp, zero=zero_value(tp))


@functools.lru_cache(maxsize=None)
def _describe(record_type: type, settings: BindSettings) -> tuple[FieldDescriptor, ...]:
    table = tuple(
        _describe_field(attr, tp, metadata, settings)
        for attr, tp, metadata in _record_fields(record_type)
    )
    logger.debug(
        "Described %s: %d fields (%s)",
        record_type.__name__, len(table), ", ".join(f"{d.attr}:{d.kind}" for d in table),
    )
    return table


def describe(
    record_type: type, settings: BindSettings | None = None
) -> tuple[FieldDescriptor, ...]:
    """Return the cached descriptor table for ``record_type``.

    Raises:
        RecordTypeError: ``record_type`` is not a pydantic model or dataclass.
    """
    if not is_record_type(record_type):
        raise RecordTypeError(
            f"expected a pydantic model or dataclass type, got {record_type!r}"
        )
    return _describe(record_type, settings or DEFAULT_SETTINGS)

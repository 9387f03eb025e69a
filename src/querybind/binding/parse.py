"""Entry points: bind a parameter multimap or raw query string onto a record."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import parse_qs

from pydantic import BaseModel

from querybind.binding.descriptors import is_record_type
from querybind.binding.errors import FieldErrors
from querybind.binding.walker import bind_fields
from querybind.core.config import BindSettings
from querybind.core.exceptions import PreconditionError, RecordTypeError
from querybind.core.protocols import MultiValueMapping, QuerySanitizer
from querybind.core.types import ParamsInput


def _raw_values(key: str, value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return list(value)
    raise PreconditionError(
        f"parameter {key!r} must be a string or a sequence of strings, "
        f"got {type(value).__name__}"
    )


def normalize_params(params: ParamsInput | Any) -> dict[str, list[str]]:
    """Return ``params`` as a plain ``name -> [values]`` dict.

    Accepts ``MultiValueMapping`` containers (Starlette ``QueryParams``) and
    ordinary mappings whose values are a string or a sequence of strings.
    """
    if isinstance(params, MultiValueMapping):
        return {key: list(params.getlist(key)) for key in params}
    if isinstance(params, Mapping):
        return {key: _raw_values(key, value) for key, value in params.items()}
    raise PreconditionError(f"unsupported parameter container: {type(params).__name__}")


def _is_frozen(record: Any) -> bool:
    if isinstance(record, BaseModel):
        return bool(type(record).model_config.get("frozen"))
    return dataclasses.is_dataclass(record) and record.__dataclass_params__.frozen


def parse(
    params: ParamsInput | Any, record: Any, *, settings: BindSettings | None = None
) -> FieldErrors:
    """Bind ``params`` onto ``record`` and return the per-parameter errors.

    After binding, a record implementing ``QuerySanitizer`` gets a chance to
    add or drop errors.

    Raises:
        RecordTypeError: ``record`` is not a mutable pydantic model or
            dataclass instance.
        PreconditionError: ``params`` is not a mapping of strings.
    """
    if not is_record_type(type(record)):
        raise RecordTypeError(
            f"expected a pydantic model or dataclass instance, got {type(record).__name__}"
        )
    if _is_frozen(record):
        raise RecordTypeError(f"cannot bind onto frozen record {type(record).__name__}")

    errors = FieldErrors()
    bind_fields(normalize_params(params), record, errors, settings=settings)

    if isinstance(record, QuerySanitizer):
        record.sanitize_query(errors)
    return errors


def parse_query_string(
    query: str, record: Any, *, settings: BindSettings | None = None
) -> FieldErrors:
    """Parse ``a=1&b=2`` (blank values kept) and bind it onto ``record``."""
    return parse(parse_qs(query.removeprefix("?"), keep_blank_values=True), record, settings=settings)

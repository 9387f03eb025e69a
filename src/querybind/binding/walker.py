"""Walk a record's descriptor table and dispatch each field to its decoder."""

from __future__ import annotations

from typing import Any

from querybind.binding.decoders import decode_scalar, decode_sequence
from querybind.binding.descriptors import FieldDescriptor, FieldKind, describe
from querybind.binding.errors import FieldErrors
from querybind.core.config import DEFAULT_SETTINGS, BindSettings
from querybind.core.types import RawParams


def _embedded_record(record: Any, descriptor: FieldDescriptor) -> Any:
    sub = getattr(record, descriptor.attr)
    if sub is None:
        sub = descriptor.value_type()
        setattr(record, descriptor.attr, sub)
    return sub


def _walk(
    params: RawParams,
    record: Any,
    table: tuple[FieldDescriptor, ...],
    errors: FieldErrors,
    settings: BindSettings,
) -> None:
    for descriptor in table:
        if descriptor.kind is FieldKind.EMBEDDED:
            _walk(params, _embedded_record(record, descriptor), descriptor.children, errors, settings)
        elif descriptor.kind is FieldKind.SEQUENCE:
            values = list(params.get(descriptor.name, ()))
            decode_sequence(record, descriptor, values, errors, settings=settings)
        elif descriptor.kind is FieldKind.SCALAR:
            values = list(params.get(descriptor.name, ()))
            decode_scalar(record, descriptor, values, errors)


def bind_fields(
    params: RawParams,
    record: Any,
    errors: FieldErrors,
    *,
    settings: BindSettings | None = None,
) -> None:
    """Bind ``params`` onto ``record`` in place, collecting failures in ``errors``.

    ``params`` maps each parameter name to its raw values in arrival order.
    Every field is visited even after a failure.
    """
    settings = settings or DEFAULT_SETTINGS
    _walk(params, record, describe(type(record), settings), errors, settings)

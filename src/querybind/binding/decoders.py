"""Scalar and sequence decoders for a single descriptor."""

from __future__ import annotations

import logging
from typing import Any

from querybind.binding.convert import convert
from querybind.binding.descriptors import FieldDescriptor
from querybind.binding.errors import FieldErrors
from querybind.core.config import DEFAULT_SETTINGS, BindSettings
from querybind.core.protocols import QueryUnmarshaler, TextUnmarshaler

logger = logging.getLogger(__name__)


def decode_value(value_type: Any, raw: str) -> Any:
    """Decode one non-empty raw string into ``value_type``.

    A ``QueryUnmarshaler`` wins over a ``TextUnmarshaler``, which wins over
    the generic converter.

    Raises:
        ValueError: the chosen decoder rejected ``raw`` (``DecodeError`` for
            the generic converter). Custom decoders may also raise
            ``TypeError`` or ``LookupError``; callers treat all three as
            decode failures.
    """
    if isinstance(value_type, type):
        if issubclass(value_type, QueryUnmarshaler):
            return value_type.unmarshal_query(raw)
        if issubclass(value_type, TextUnmarshaler):
            return value_type.unmarshal_text(raw)
    return convert(raw, value_type)


# Raised by decoders, converters and validated assignment for bad input.
DECODE_FAILURES = (ValueError, TypeError, LookupError)


def _record_failure(errors: FieldErrors, name: str, raw: str, exc: Exception) -> None:
    logger.debug("Failed to decode %s=%r: %s", name, raw, exc)
    errors.add(name, str(exc) or exc.__class__.__name__)


def decode_scalar(
    record: Any, descriptor: FieldDescriptor, values: list[str], errors: FieldErrors
) -> None:
    """Bind the first raw value (or the tag default) onto a scalar field.

    A non-zero current value is kept when no value arrived. Decode failures
    and rejected assignments (pydantic ``validate_assignment``) leave the
    field as it was.
    """
    raw = values[0] if values else ""
    if raw == "":
        if getattr(record, descriptor.attr) != descriptor.zero:
            return
        raw = descriptor.tag.default
    if raw == "":
        return

    try:
        setattr(record, descriptor.attr, decode_value(descriptor.value_type, raw))
    except DECODE_FAILURES as exc:
        _record_failure(errors, descriptor.name, raw, exc)


def decode_sequence(
    record: Any,
    descriptor: FieldDescriptor,
    values: list[str],
    errors: FieldErrors,
    *,
    settings: BindSettings | None = None,
) -> None:
    """Bind repeated or separator-joined values onto a list field.

    A single value is split on the separator; repeated keys are taken
    as-is so elements may contain the separator. New input replaces the
    current list, and the first bad element leaves it empty.
    """
    settings = settings or DEFAULT_SETTINGS
    values = [value for value in values if value != ""]
    if not values:
        if getattr(record, descriptor.attr):
            return
        if descriptor.tag.default == "":
            return
        values = [descriptor.tag.default]

    if len(values) == 1:
        values = values[0].split(settings.separator)

    raw = settings.separator.join(values)
    try:
        setattr(record, descriptor.attr, [])
        decoded = []
        for raw in values:
            decoded.append(decode_value(descriptor.value_type, raw))
        raw = settings.separator.join(values)
        setattr(record, descriptor.attr, decoded)
    except DECODE_FAILURES as exc:
        _record_failure(errors, descriptor.name, raw, exc)

"""Resolve a field's ``Query`` annotation into a parameter name and default."""

from __future__ import annotations

from typing import NamedTuple

from querybind.core.config import DEFAULT_SETTINGS, BindSettings


class FieldTag(NamedTuple):
    """Parameter name and raw default string for one field."""

    name: str
    default: str

    @property
    def skipped(self) -> bool:
        return self.name == ""


SKIPPED = FieldTag("", "")


def resolve_tag(
    annotation: str, field_name: str, *, settings: BindSettings | None = None
) -> FieldTag:
    """Split ``name[,default]`` on the first separator.

    The default keeps any further separators (``"ids,1,2"`` -> ``("ids", "1,2")``).
    An empty name falls back to ``field_name``; the skip sentinel yields
    ``SKIPPED``. Malformed input never raises.
    """
    settings = settings or DEFAULT_SETTINGS
    if annotation == settings.skip_sentinel:
        return SKIPPED

    name, _, default = annotation.partition(settings.separator)
    name = name.strip() or field_name
    return FieldTag(name, default.strip())

"""Type aliases used across querybind."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

ParamName = str
RawValues = list[str]
RawParams = Mapping[ParamName, RawValues]
ParamsInput = Mapping[ParamName, str | Sequence[str]]

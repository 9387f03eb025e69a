"""Binding configuration using pydantic-settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class BindSettings(BaseSettings):
    """Lexical settings shared by the tag resolver and the sequence decoder.

    Frozen so an instance can key the descriptor cache.
    """

    model_config = {"env_prefix": "QUERYBIND_", "frozen": True}

    separator: str = Field(",", min_length=1)
    skip_sentinel: str = "-"


DEFAULT_SETTINGS = BindSettings()

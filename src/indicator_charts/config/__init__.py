"""Shared configuration helpers and dataclasses."""

from .runtime import env_bool, env_float, env_int, env_str
from .settings import ChartMargins, ChartSettings

__all__ = [
    "ChartMargins",
    "ChartSettings",
    "env_bool",
    "env_float",
    "env_int",
    "env_str",
]

"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_bool, env_float, env_str
from .settings import DialogSettings, load_settings

__all__ = [
    "ConfigurationError",
    "DialogSettings",
    "env_bool",
    "env_float",
    "env_str",
    "load_settings",
]

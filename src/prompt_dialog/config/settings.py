"""
Settings for server discovery and prompt delivery.

Values come from ``PROMPT_DIALOG_*`` environment variables and fall back to
the defaults the target tool ships with:

- PROMPT_DIALOG_TOOL_SIGNATURE: substring identifying the server process
- PROMPT_DIALOG_HOST: host used for every HTTP call
- PROMPT_DIALOG_TIMEOUT_SECONDS: total timeout per HTTP request
- PROMPT_DIALOG_DEBUG: enable diagnostic logging
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError
from .runtime import env_bool, env_float, env_str

DEFAULT_TOOL_SIGNATURE = "opencode"
DEFAULT_HOST = "localhost"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class DialogSettings:
    """
    Immutable runtime settings.

    Attributes:
        tool_signature: Command-line substring that marks a candidate process
        host: Host name the server listens on
        request_timeout_seconds: Bound applied to validation and publish calls
        debug: Whether diagnostic logging is enabled
    """

    tool_signature: str = DEFAULT_TOOL_SIGNATURE
    host: str = DEFAULT_HOST
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.tool_signature:
            raise ConfigurationError.invalid_value("tool_signature", self.tool_signature, "Must not be empty")
        if self.request_timeout_seconds <= 0:
            raise ConfigurationError.invalid_value(
                "request_timeout_seconds",
                self.request_timeout_seconds,
                "Must be greater than zero",
            )


def load_settings() -> DialogSettings:
    """Build settings from the environment."""
    return DialogSettings(
        tool_signature=env_str("PROMPT_DIALOG_TOOL_SIGNATURE", DEFAULT_TOOL_SIGNATURE),
        host=env_str("PROMPT_DIALOG_HOST", DEFAULT_HOST),
        request_timeout_seconds=env_float("PROMPT_DIALOG_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS),
        debug=bool(env_bool("PROMPT_DIALOG_DEBUG", or_value=False)),
    )


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "DEFAULT_TOOL_SIGNATURE",
    "DialogSettings",
    "load_settings",
]

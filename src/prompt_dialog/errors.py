"""Error types raised by server discovery and prompt delivery.

Exception classes support two patterns:
1. No-argument raise: raise ProtocolError()
2. Contextual attributes: err = ProtocolError(port=4096); raise err
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class PromptDialogError(Exception):
    """Base exception for all prompt dialog errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Prompt dialog error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ServerConnectionError(PromptDialogError):
    """Could not reach the server."""

    port: Optional[int] = None


class ProtocolError(PromptDialogError):
    """Server response is missing required fields."""

    port: Optional[int] = None


class DiscoveryError(PromptDialogError):
    """No matching server could be found."""

    port: Optional[int] = None
    cause: Optional[BaseException] = None

    @classmethod
    def no_processes(cls, signature: str) -> "DiscoveryError":
        """Create error for an empty process scan."""
        return cls(f"No {signature} processes found. Start {signature} with: {signature} --port 8080")

    @classmethod
    def explicit_port(cls, signature: str, port: int, cause: BaseException) -> "DiscoveryError":
        """Create error for a requested port that failed validation."""
        return cls(f"No {signature} server responding on port {port}: {cause}", port=port, cause=cause)

    @classmethod
    def no_matching_server(cls, signature: str, directory: Path) -> "DiscoveryError":
        """Create error for a scan where no server matched the directory."""
        return cls(f"No {signature} server found for directory: {directory}")

    @classmethod
    def from_last_error(cls, error: PromptDialogError) -> "DiscoveryError":
        """Wrap the last validation failure seen during a scan."""
        return cls(str(error), port=getattr(error, "port", None), cause=error)


class TransportError(PromptDialogError):
    """Failed to deliver the prompt."""

    step: str = ""
    port: Optional[int] = None
    text_appended: bool = False


class AppendFailedError(TransportError):
    """Failed to append prompt text."""

    step = "append"


class SubmitFailedError(TransportError):
    """Prompt text was appended but the submit command failed."""

    step = "submit"
    text_appended = True


__all__ = [
    "AppendFailedError",
    "DiscoveryError",
    "PromptDialogError",
    "ProtocolError",
    "ServerConnectionError",
    "SubmitFailedError",
    "TransportError",
]

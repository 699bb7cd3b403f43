"""Value objects shared by discovery and the prompt client."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ProcessCandidate:
    """A process whose command line looks like a server launch."""

    pid: int
    cmdline: str


@dataclass(frozen=True)
class ResolvedServer:
    """A validated server ready to receive prompts.

    ``pid`` is 0 when the server was reached through an explicit port.
    """

    pid: int
    port: int
    cwd: Path

    def with_pid(self, pid: int) -> "ResolvedServer":
        return replace(self, pid=pid)


@dataclass(frozen=True)
class PathResponse:
    """Body of ``GET /path``."""

    directory: Optional[str] = None
    worktree: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "PathResponse":
        """Raises TypeError when a present field is not a string."""
        return cls(
            directory=_optional_str("directory", payload.get("directory")),
            worktree=_optional_str("worktree", payload.get("worktree")),
        )

    def working_directory(self) -> Optional[str]:
        """Return ``directory`` when present, else ``worktree``."""
        if self.directory is not None:
            return self.directory
        return self.worktree


def _optional_str(field: str, value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"{field} must be a string, got {type(value).__name__}")


__all__ = ["PathResponse", "ProcessCandidate", "ResolvedServer"]

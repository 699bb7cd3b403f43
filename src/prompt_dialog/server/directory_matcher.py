"""Working-directory matching between the caller and a server."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def canonicalize(path: Path) -> Path:
    """Resolve symlinks strictly, falling back to ``path`` as given."""
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        logger.debug("Could not canonicalize %s; using it as given", path)
        return path


def _is_within(path: Path, ancestor: Path) -> bool:
    return path == ancestor or ancestor in path.parents


def directories_match(current: Path, server_cwd: Path) -> bool:
    """
    Return True when either directory contains the other.

    Both paths are canonicalized first. Nested project directories match in
    both directions; unrelated siblings do not.
    """
    ours = canonicalize(current)
    theirs = canonicalize(server_cwd)
    return _is_within(ours, theirs) or _is_within(theirs, ours)


__all__ = ["canonicalize", "directories_match"]

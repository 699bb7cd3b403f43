"""Placeholder parameters supplied as ``key=value`` arguments."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping

logger = logging.getLogger(__name__)

CLIPBOARD_PLACEHOLDER = "clipboard"
PLACEHOLDER_MARKER = "@"


def parse_params(args: Iterable[str]) -> Dict[str, str]:
    """
    Build the parameter map from ``key=value`` arguments.

    Splits on the first ``=`` only and trims both sides. Entries without
    ``=`` or with an empty key are dropped. Later duplicates overwrite
    earlier ones while keeping the first position.
    """
    params: Dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        key = key.strip()
        if not sep or not key:
            logger.debug("Ignoring malformed parameter %r", arg)
            continue
        params[key] = value.strip()
    return params


def build_placeholder_names(params: Mapping[str, str]) -> List[str]:
    """Return placeholder names in priority order, built-ins first."""
    names = [CLIPBOARD_PLACEHOLDER]
    for key in params:
        if key not in names:
            names.append(key)
    return names


def display_names(names: Iterable[str]) -> List[str]:
    """Return ``@name`` labels sorted for display."""
    return [f"{PLACEHOLDER_MARKER}{name}" for name in sorted(names)]


__all__ = [
    "CLIPBOARD_PLACEHOLDER",
    "PLACEHOLDER_MARKER",
    "build_placeholder_names",
    "display_names",
    "parse_params",
]

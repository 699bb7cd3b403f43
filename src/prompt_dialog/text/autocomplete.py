"""Inline autocomplete for the trailing placeholder token."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .params import PLACEHOLDER_MARKER

_TOKEN_TERMINATORS = (" ", "\n")


def _trailing_partial(text: str) -> Optional[Tuple[int, str]]:
    """Return the marker index and lower-cased partial name of the open token."""
    marker = text.rfind(PLACEHOLDER_MARKER)
    if marker == -1:
        return None
    tail = text[marker + len(PLACEHOLDER_MARKER) :]
    if any(terminator in tail for terminator in _TOKEN_TERMINATORS):
        return None
    return marker, tail.lower()


def _first_prefix_match(partial: str, placeholder_names: Sequence[str]) -> Optional[str]:
    for name in placeholder_names:
        if name.lower().startswith(partial):
            return name
    return None


def suggest(text: str, placeholder_names: Sequence[str]) -> Tuple[str, bool]:
    """
    Return ``(suggestion, visible)`` for the token being typed at the end of ``text``.

    A bare ``@`` suggests the first placeholder. A partial name suggests the
    first placeholder it prefixes, case-insensitively. A completed or closed
    token suggests nothing.
    """
    found = _trailing_partial(text)
    if found is None:
        return "", False
    _, partial = found

    if any(name.lower() == partial for name in placeholder_names):
        return "", False

    if not partial:
        if placeholder_names:
            return f"{PLACEHOLDER_MARKER}{placeholder_names[0]}", True
        return "", False

    match = _first_prefix_match(partial, placeholder_names)
    if match is None:
        return "", False
    return f"{PLACEHOLDER_MARKER}{match}", True


def accept(text: str, placeholder_names: Sequence[str]) -> str:
    """
    Complete the trailing token of ``text`` and append a space.

    Returns ``text`` unchanged when the token is closed or matches nothing.
    """
    found = _trailing_partial(text)
    if found is None:
        return text
    marker, partial = found

    match = _first_prefix_match(partial, placeholder_names)
    if match is None:
        return text
    return f"{text[:marker]}{PLACEHOLDER_MARKER}{match} "


__all__ = ["accept", "suggest"]

"""Highlight overlay for placeholder tokens."""

from __future__ import annotations

from typing import List, Sequence

from .params import PLACEHOLDER_MARKER


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def _token_end(text: str, start: int, name: str) -> int:
    """Return the end index of ``@name`` at ``start``, or -1 when absent.

    Names match case-insensitively.
    """
    name_start = start + len(PLACEHOLDER_MARKER)
    end = name_start + len(name)
    if not name or text[name_start:end].lower() != name.lower():
        return -1
    if end < len(text) and _is_word_char(text[end]):
        return -1
    return end


def build_highlight(text: str, placeholder_names: Sequence[str]) -> str:
    """
    Return an overlay of ``text`` that keeps only placeholder tokens.

    Recognized ``@name`` tokens are copied verbatim, newlines are kept and
    every other character becomes a space, so the result lines up with
    ``text`` character for character. Names match case-insensitively and
    the overlay keeps the original spelling. A token must end at a non-word
    character or at the end of the text.
    """
    overlay: List[str] = ["\n" if char == "\n" else " " for char in text]

    start = text.find(PLACEHOLDER_MARKER)
    while start != -1:
        for name in placeholder_names:
            end = _token_end(text, start, name)
            if end != -1:
                overlay[start:end] = text[start:end]
        start = text.find(PLACEHOLDER_MARKER, start + 1)

    return "".join(overlay)


__all__ = ["build_highlight"]

"""Placeholder token expansion."""

from __future__ import annotations

from typing import Callable, Mapping

from .clipboard import read_clipboard
from .params import CLIPBOARD_PLACEHOLDER, PLACEHOLDER_MARKER

ClipboardReader = Callable[[], str]

_CLIPBOARD_TOKEN = f"{PLACEHOLDER_MARKER}{CLIPBOARD_PLACEHOLDER}"


def expand(text: str, params: Mapping[str, str], *, clipboard_reader: ClipboardReader = read_clipboard) -> str:
    """
    Replace ``@clipboard`` and ``@<key>`` tokens in ``text``.

    The clipboard is read at most once, so every ``@clipboard`` receives the
    same snapshot. Parameter keys are applied longest first so that ``@path``
    never consumes the start of ``@pathname``. Replacement is literal.
    """
    if _CLIPBOARD_TOKEN in text:
        text = text.replace(_CLIPBOARD_TOKEN, clipboard_reader())

    for key in sorted(params, key=len, reverse=True):
        text = text.replace(f"{PLACEHOLDER_MARKER}{key}", params[key])
    return text


__all__ = ["expand"]

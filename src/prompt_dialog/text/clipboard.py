"""Best-effort system clipboard access."""

import logging

import pyperclip

logger = logging.getLogger(__name__)


def read_clipboard() -> str:
    """Return the clipboard text, or an empty string when none is available."""
    try:
        content = pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        logger.debug("Clipboard unavailable: %s", exc)
        return ""
    if not isinstance(content, str):
        return ""
    return content


__all__ = ["read_clipboard"]

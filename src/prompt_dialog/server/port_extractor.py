"""Port extraction from process command lines."""

from __future__ import annotations

from typing import Optional

PORT_FLAG = "--port"
_PORT_PREFIX = f"{PORT_FLAG}="
_MAX_PORT = 65535


def _parse_port(value: str) -> Optional[int]:
    if value.startswith("+"):
        value = value[1:]
    if not (value.isascii() and value.isdigit()):
        return None
    port = int(value)
    if port > _MAX_PORT:
        return None
    return port


def extract_port(cmdline: str) -> Optional[int]:
    """
    Return the port passed to ``--port`` in ``cmdline``.

    Accepts both ``--port 4096`` and ``--port=4096``. Tokens whose value is
    missing or not an unsigned 16-bit integer are skipped; the first valid
    value wins.
    """
    parts = cmdline.split()
    for index, part in enumerate(parts):
        if part == PORT_FLAG:
            if index + 1 < len(parts):
                port = _parse_port(parts[index + 1])
                if port is not None:
                    return port
        elif part.startswith(_PORT_PREFIX):
            port = _parse_port(part[len(_PORT_PREFIX) :])
            if port is not None:
                return port
    return None


__all__ = ["PORT_FLAG", "extract_port"]

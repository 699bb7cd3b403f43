"""Confirm a port hosts a compatible server and read its working directory."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import aiohttp

from ..config import DialogSettings
from ..errors import ProtocolError, ServerConnectionError
from .http_session import NETWORK_ERROR_TYPES, base_url, build_http_session
from .models import PathResponse, ResolvedServer

logger = logging.getLogger(__name__)

PATH_ENDPOINT = "/path"


async def fetch_path(port: int, settings: DialogSettings) -> PathResponse:
    """
    GET ``/path`` on ``port``.

    Raises:
        ServerConnectionError: When the request cannot be completed
        ProtocolError: When the body is not a JSON object or its
            directory fields are not strings
    """
    url = f"{base_url(settings.host, port)}{PATH_ENDPOINT}"
    try:
        async with build_http_session(timeout_seconds=settings.request_timeout_seconds) as session:
            async with session.get(url) as response:
                response.raise_for_status()
                payload: Any = await response.json(content_type=None)
    except (json.JSONDecodeError, UnicodeDecodeError, aiohttp.ContentTypeError) as exc:
        raise ProtocolError(f"Failed to parse path response from port {port}", port=port) from exc
    except NETWORK_ERROR_TYPES as exc:
        raise ServerConnectionError(f"Failed to connect to server on port {port}: {exc}", port=port) from exc

    if not isinstance(payload, dict):
        raise ProtocolError(f"Unexpected path response from port {port}: {payload!r}", port=port)
    try:
        return PathResponse.from_payload(payload)
    except TypeError as exc:
        raise ProtocolError(f"Malformed path response from port {port}: {exc}", port=port) from exc


async def validate_server(port: int, settings: Optional[DialogSettings] = None) -> ResolvedServer:
    """
    Validate that ``port`` hosts a server and return its handle.

    The returned ``pid`` is 0; callers that know the owning process fill it in.

    Raises:
        ServerConnectionError: When the server cannot be reached
        ProtocolError: When neither ``directory`` nor ``worktree`` is returned
    """
    settings = settings or DialogSettings()
    path_response = await fetch_path(port, settings)

    cwd = path_response.working_directory()
    if cwd is None:
        raise ProtocolError(f"Server on port {port} did not return a working directory", port=port)

    logger.debug("Validated server on port %s (cwd: %s)", port, cwd)
    return ResolvedServer(pid=0, port=port, cwd=Path(cwd))


__all__ = ["PATH_ENDPOINT", "fetch_path", "validate_server"]

"""
Server discovery.

Finds the running server that belongs to the caller's directory, either by
validating an explicit port or by scanning processes and matching working
directories.

Usage:
    from prompt_dialog.server.discovery import discover_server

    server = await discover_server(Path.cwd())
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional

from ..config import DialogSettings
from ..errors import DiscoveryError, PromptDialogError, ProtocolError, ServerConnectionError
from .directory_matcher import directories_match
from .models import ResolvedServer
from .port_extractor import extract_port
from .process_scanner import ProcessScanner, PsutilProcessScanner
from .validator import validate_server

logger = logging.getLogger(__name__)

Validator = Callable[[int, DialogSettings], Awaitable[ResolvedServer]]


async def discover_server(
    cwd: Path,
    port: Optional[int] = None,
    *,
    settings: Optional[DialogSettings] = None,
    scanner: Optional[ProcessScanner] = None,
    validator: Validator = validate_server,
) -> ResolvedServer:
    """
    Discover a server for ``cwd``.

    If ``port`` is given it is validated directly and no scan happens.
    Otherwise candidates are tried in scan order and the first one whose
    working directory contains, or is contained in, ``cwd`` wins.

    Args:
        cwd: Directory the caller is working in
        port: Explicit port that skips scanning
        settings: Runtime settings, defaults when omitted
        scanner: Candidate source, psutil-backed when omitted
        validator: Coroutine that validates a port

    Raises:
        DiscoveryError: When no server could be resolved
    """
    settings = settings or DialogSettings()
    logger.debug("Discovering %s server (cwd: %s)", settings.tool_signature, cwd)

    if port is not None:
        return await _validate_explicit_port(port, settings, validator)

    scanner = scanner or PsutilProcessScanner(settings.tool_signature)
    candidates = scanner.scan()
    if not candidates:
        raise DiscoveryError.no_processes(settings.tool_signature)

    last_error: Optional[PromptDialogError] = None
    for candidate in candidates:
        candidate_port = extract_port(candidate.cmdline)
        if candidate_port is None:
            logger.debug("Skipping PID %s: no usable --port in %r", candidate.pid, candidate.cmdline)
            continue

        try:
            server = await validator(candidate_port, settings)
        except (ServerConnectionError, ProtocolError) as exc:
            logger.debug("Candidate PID %s on port %s failed validation: %s", candidate.pid, candidate_port, exc)
            last_error = exc
            continue

        server = server.with_pid(candidate.pid)
        if directories_match(cwd, server.cwd):
            logger.debug("Matched server PID %s on port %s (cwd: %s)", server.pid, server.port, server.cwd)
            return server
        logger.debug("Server on port %s serves %s, not %s", server.port, server.cwd, cwd)

    if last_error is not None:
        raise DiscoveryError.from_last_error(last_error) from last_error
    raise DiscoveryError.no_matching_server(settings.tool_signature, cwd)


async def _validate_explicit_port(port: int, settings: DialogSettings, validator: Validator) -> ResolvedServer:
    try:
        return await validator(port, settings)
    except (ServerConnectionError, ProtocolError) as exc:
        raise DiscoveryError.explicit_port(settings.tool_signature, port, exc) from exc


__all__ = ["discover_server"]

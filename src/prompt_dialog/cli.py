"""
Command-line entry point.

Usage:
    prompt-dialog [--port PORT] [--debug] [key=value ...]
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from . import __version__
from .config import ConfigurationError, DialogSettings, load_settings
from .errors import DiscoveryError
from .logging_config import setup_logging
from .server.client import PromptClient
from .server.discovery import discover_server
from .server.models import ResolvedServer
from .text.params import build_placeholder_names, display_names, parse_params
from .ui.async_runner import AsyncRunner
from .ui.controller import PromptController

logger = logging.getLogger(__name__)

_MAX_PORT = 65535


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from exc
    if not 0 <= port <= _MAX_PORT:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prompt-dialog",
        description="Frameless prompt dialog for a running local server",
    )
    parser.add_argument("-p", "--port", type=_port, default=None, help="Server port (auto-discovers if not specified)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("params", nargs="*", metavar="key=value", help="Values for @key placeholders")
    return parser


def _create_view(placeholder_labels: Sequence[str]):
    """Create the Tk window, or return None when no display is available."""
    try:
        import tkinter
    except ImportError as exc:
        logger.error("tkinter is required to show the dialog: %s", exc)
        return None

    from .ui.tk_view import TkPromptView

    try:
        return TkPromptView(placeholder_labels)
    except tkinter.TclError as exc:
        logger.error("Failed to create dialog window: %s", exc)
        return None


def _discover(runner: AsyncRunner, cwd: Path, port: Optional[int], settings: DialogSettings) -> Union[ResolvedServer, DiscoveryError]:
    try:
        return runner.run(discover_server(cwd, port, settings=settings))
    except DiscoveryError as exc:
        return exc


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        setup_logging(debug=args.debug)
        logger.error("Invalid configuration: %s", exc)
        return 2

    debug = args.debug or settings.debug
    setup_logging(debug=debug)

    params = parse_params(args.params)
    placeholder_names = build_placeholder_names(params)
    cwd = Path.cwd()

    runner = AsyncRunner()
    try:
        result = _discover(runner, cwd, args.port, settings)

        view = _create_view(display_names(placeholder_names))
        if view is None:
            return 1

        controller = PromptController(view, runner, placeholder_names, params)
        view.bind(controller)
        controller.show_discovery_result(result, lambda server: PromptClient.for_server(server, settings))
        view.run()
    finally:
        runner.close()
    return 0


__all__ = ["build_parser", "main"]

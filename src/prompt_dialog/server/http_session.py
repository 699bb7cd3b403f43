"""aiohttp session creation and network failure classification."""

import asyncio
import socket

import aiohttp

NETWORK_ERROR_TYPES = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
    socket.gaierror,
    OSError,
)

_USER_AGENT = "prompt-dialog"


def build_http_session(*, timeout_seconds: float) -> aiohttp.ClientSession:
    """
    Create an aiohttp ClientSession bounded by a total request timeout.

    Args:
        timeout_seconds: Total request timeout in seconds

    Returns:
        Configured aiohttp.ClientSession
    """
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    headers = {"User-Agent": _USER_AGENT}

    return aiohttp.ClientSession(timeout=timeout, headers=headers)


def base_url(host: str, port: int) -> str:
    return f"http://{host}:{port}"


__all__ = ["NETWORK_ERROR_TYPES", "base_url", "build_http_session"]

"""HTTP client that delivers prompts to a resolved server."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..config import DialogSettings
from ..errors import AppendFailedError, SubmitFailedError
from .http_session import NETWORK_ERROR_TYPES, base_url, build_http_session
from .models import ResolvedServer

logger = logging.getLogger(__name__)

PUBLISH_ENDPOINT = "/tui/publish"
APPEND_EVENT = "tui.prompt.append"
EXECUTE_EVENT = "tui.command.execute"
SUBMIT_COMMAND = "prompt.submit"


def build_publish_body(event_type: str, properties: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": event_type, "properties": properties}


class PromptClient:
    """Publishes prompt events to a server's TUI."""

    def __init__(self, port: int, settings: Optional[DialogSettings] = None):
        self.port = port
        self.settings = settings or DialogSettings()

    @classmethod
    def for_server(cls, server: ResolvedServer, settings: Optional[DialogSettings] = None) -> "PromptClient":
        return cls(server.port, settings)

    @property
    def base_url(self) -> str:
        return base_url(self.settings.host, self.port)

    async def _publish(self, body: Dict[str, Any]) -> None:
        url = f"{self.base_url}{PUBLISH_ENDPOINT}"
        async with build_http_session(timeout_seconds=self.settings.request_timeout_seconds) as session:
            async with session.post(url, json=body) as response:
                response.raise_for_status()

    async def append_prompt(self, text: str) -> None:
        """POST a ``tui.prompt.append`` event carrying ``text``."""
        try:
            await self._publish(build_publish_body(APPEND_EVENT, {"text": text}))
        except NETWORK_ERROR_TYPES as exc:
            raise AppendFailedError(f"Failed to append prompt text: {exc}", port=self.port) from exc

    async def submit_prompt(self) -> None:
        """POST a ``tui.command.execute`` event for ``prompt.submit``."""
        try:
            await self._publish(build_publish_body(EXECUTE_EVENT, {"command": SUBMIT_COMMAND}))
        except NETWORK_ERROR_TYPES as exc:
            raise SubmitFailedError(f"Failed to submit prompt: {exc}", port=self.port) from exc

    async def send_prompt(self, text: str) -> None:
        """
        Append ``text`` and then submit it.

        Raises:
            AppendFailedError: When the append call fails; submit is not attempted
            SubmitFailedError: When the text was appended but submit failed
        """
        await self.append_prompt(text)
        logger.debug("Appended %d characters to prompt on port %s", len(text), self.port)
        await self.submit_prompt()
        logger.debug("Submitted prompt on port %s", self.port)


__all__ = [
    "APPEND_EVENT",
    "EXECUTE_EVENT",
    "PUBLISH_ENDPOINT",
    "PromptClient",
    "SUBMIT_COMMAND",
    "build_publish_body",
]

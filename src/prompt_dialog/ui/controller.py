"""Interactive state for the prompt window."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence, Union

from ..errors import DiscoveryError
from ..server.client import PromptClient
from ..server.models import ResolvedServer
from ..text.autocomplete import accept, suggest
from ..text.clipboard import read_clipboard
from ..text.expansion import ClipboardReader, expand
from ..text.highlight import build_highlight
from .async_runner import DoneCallback

logger = logging.getLogger(__name__)


class PromptView(Protocol):
    """Window surface driven by the controller."""

    def set_text(self, text: str) -> None: ...

    def set_highlight(self, highlight: str) -> None: ...

    def set_suggestion(self, suggestion: str, visible: bool) -> None: ...

    def set_error_text(self, text: str) -> None: ...

    def set_connected(self, connected: bool) -> None: ...

    def close(self) -> None: ...

    def call_soon(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` on the window's thread."""
        ...


class Runner(Protocol):
    def submit(self, coro: Any, on_done: DoneCallback) -> Any: ...


class PromptController:
    """
    Owns the window state and is only mutated from the window's thread.

    Network results come back through ``view.call_soon``.
    """

    def __init__(
        self,
        view: PromptView,
        runner: Runner,
        placeholder_names: Sequence[str],
        params: Mapping[str, str],
        *,
        clipboard_reader: ClipboardReader = read_clipboard,
    ):
        self.view = view
        self.runner = runner
        self.placeholder_names = list(placeholder_names)
        self.params = dict(params)
        self.clipboard_reader = clipboard_reader

        self.client: Optional[PromptClient] = None
        self.text = ""
        self.highlight = ""
        self.suggestion = ""
        self.suggestion_visible = False
        self.error_text = ""
        self.connected = False
        self.sending = False
        self.closed = False

    def show_discovery_result(
        self,
        result: Union[ResolvedServer, DiscoveryError],
        client_factory: Callable[[ResolvedServer], PromptClient] = PromptClient.for_server,
    ) -> None:
        """Switch to the connected or not-connected state."""
        if isinstance(result, ResolvedServer):
            self.client = client_factory(result)
            self.connected = True
            logger.debug("Connected to server on port %s (cwd: %s)", result.port, result.cwd)
        else:
            self.client = None
            self.connected = False
            self._set_error(str(result))
            logger.debug("Server discovery failed: %s", result)
        self.view.set_connected(self.connected)

    def on_text_changed(self, text: str) -> None:
        self.text = text
        self.highlight = build_highlight(text, self.placeholder_names)
        self.suggestion, self.suggestion_visible = suggest(text, self.placeholder_names)
        self.view.set_highlight(self.highlight)
        self.view.set_suggestion(self.suggestion, self.suggestion_visible)

    def on_accept_suggestion(self) -> bool:
        """Complete the trailing token; returns True when the text changed."""
        completed = accept(self.text, self.placeholder_names)
        if completed == self.text:
            return False
        self.view.set_text(completed)
        self.on_text_changed(completed)
        return True

    def on_submit(self, text: Optional[str] = None) -> None:
        """Expand the text and send it in the background."""
        if text is not None:
            self.text = text
        if not self.text or self.client is None:
            return

        prompt = expand(self.text, self.params, clipboard_reader=self.clipboard_reader)
        if not prompt:
            return

        self.sending = True
        client = self.client
        self.runner.submit(client.send_prompt(prompt), self._deliver_send_result)

    def _deliver_send_result(self, _result: Any, error: Optional[BaseException]) -> None:
        self.view.call_soon(lambda: self._on_send_finished(error))

    def _on_send_finished(self, error: Optional[BaseException]) -> None:
        self.sending = False
        if error is None:
            logger.debug("Prompt sent; closing window")
            self.on_dismiss()
            return
        logger.warning("Prompt delivery failed: %s", error)
        self._set_error(f"Send failed: {error}")

    def on_dismiss(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.view.close()

    def _set_error(self, text: str) -> None:
        self.error_text = text
        self.view.set_error_text(text)


__all__ = ["PromptController", "PromptView", "Runner"]

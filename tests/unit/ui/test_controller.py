"""Tests for PromptController."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, List, Optional
from unittest.mock import MagicMock

from prompt_dialog.errors import DiscoveryError, SubmitFailedError
from prompt_dialog.server.models import ResolvedServer
from prompt_dialog.ui.controller import PromptController

NAMES = ["clipboard", "path"]
PARAMS = {"path": "src/app.py"}


class InlineRunner:
    """Runs submitted coroutines to completion immediately."""

    def __init__(self) -> None:
        self.submitted = 0

    def submit(self, coro: Any, on_done) -> None:
        self.submitted += 1
        try:
            result = asyncio.run(coro)
        except Exception as exc:  # noqa: BLE001
            on_done(None, exc)
        else:
            on_done(result, None)


class FakeClient:
    def __init__(self, error: Optional[BaseException] = None) -> None:
        self.error = error
        self.sent: List[str] = []

    async def send_prompt(self, text: str) -> None:
        self.sent.append(text)
        if self.error is not None:
            raise self.error


def _controller(view, runner=None, clipboard: str = "") -> PromptController:
    return PromptController(
        view,
        runner or InlineRunner(),
        NAMES,
        PARAMS,
        clipboard_reader=MagicMock(return_value=clipboard),
    )


def _connect(controller: PromptController, client: FakeClient) -> None:
    server = ResolvedServer(pid=1, port=4096, cwd=Path("/work"))
    controller.show_discovery_result(server, lambda _server: client)


class TestDiscoveryState:
    """Tests for show_discovery_result."""

    def test_connected(self, recording_view) -> None:
        controller = _controller(recording_view)
        _connect(controller, FakeClient())

        assert controller.connected is True
        assert recording_view.connected is True
        assert recording_view.error_text == ""

    def test_not_connected_shows_error(self, recording_view) -> None:
        controller = _controller(recording_view)
        controller.show_discovery_result(DiscoveryError("No opencode processes found"))

        assert controller.connected is False
        assert controller.client is None
        assert recording_view.connected is False
        assert recording_view.error_text == "No opencode processes found"


class TestTextChanges:
    """Tests for on_text_changed and on_accept_suggestion."""

    def test_updates_highlight_and_suggestion(self, recording_view) -> None:
        controller = _controller(recording_view)

        controller.on_text_changed("Fix @path and @cl")

        assert recording_view.highlight == "    @path        "
        assert recording_view.suggestion == ("@clipboard", True)
        assert controller.suggestion_visible is True

    def test_accept_suggestion_rewrites_text(self, recording_view) -> None:
        controller = _controller(recording_view)
        controller.on_text_changed("Fix @pa")

        assert controller.on_accept_suggestion() is True
        assert recording_view.text == "Fix @path "
        assert controller.text == "Fix @path "
        assert recording_view.suggestion == ("", False)

    def test_accept_without_match_is_noop(self, recording_view) -> None:
        controller = _controller(recording_view)
        controller.on_text_changed("plain")

        assert controller.on_accept_suggestion() is False
        assert ("set_text", "plain") not in recording_view.calls


class TestSubmit:
    """Tests for on_submit."""

    def test_expands_and_sends_then_closes(self, recording_view) -> None:
        controller = _controller(recording_view, clipboard="trace")
        client = FakeClient()
        _connect(controller, client)

        controller.on_submit("Fix @path using @clipboard")
        assert recording_view.closed is False
        recording_view.drain()

        assert client.sent == ["Fix src/app.py using trace"]
        assert recording_view.closed is True
        assert controller.sending is False

    def test_empty_text_is_ignored(self, recording_view) -> None:
        runner = InlineRunner()
        controller = _controller(recording_view, runner)
        _connect(controller, FakeClient())

        controller.on_submit("")

        assert runner.submitted == 0
        assert recording_view.closed is False

    def test_text_expanding_to_nothing_is_ignored(self, recording_view) -> None:
        runner = InlineRunner()
        controller = _controller(recording_view, runner, clipboard="")
        _connect(controller, FakeClient())

        controller.on_submit("@clipboard")

        assert runner.submitted == 0

    def test_submit_without_server_is_ignored(self, recording_view) -> None:
        runner = InlineRunner()
        controller = _controller(recording_view, runner)
        controller.show_discovery_result(DiscoveryError("none"))

        controller.on_submit("hello")

        assert runner.submitted == 0

    def test_failure_shows_error_and_keeps_window(self, recording_view) -> None:
        controller = _controller(recording_view)
        _connect(controller, FakeClient(SubmitFailedError("Failed to submit prompt: reset")))

        controller.on_submit("hello")
        recording_view.drain()

        assert recording_view.error_text == "Send failed: Failed to submit prompt: reset"
        assert recording_view.closed is False
        assert controller.sending is False

    def test_result_waits_for_view_thread(self, recording_view) -> None:
        controller = _controller(recording_view)
        _connect(controller, FakeClient())

        controller.on_submit("hello")

        assert recording_view.pending
        assert controller.sending is True


class TestDismiss:
    """Tests for on_dismiss."""

    def test_closes_once(self, recording_view) -> None:
        controller = _controller(recording_view)

        controller.on_dismiss()
        controller.on_dismiss()

        assert [call for call in recording_view.calls if call[0] == "close"] == [("close", None)]

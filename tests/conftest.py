"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from typing import Any, Callable, List, Tuple

import pytest


@pytest.fixture(autouse=True)
def _clear_prompt_dialog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("PROMPT_DIALOG_"):
            monkeypatch.delenv(name, raising=False)


class RecordingView:
    """In-memory PromptView that records every call."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any]] = []
        self.text = ""
        self.highlight = ""
        self.suggestion = ("", False)
        self.error_text = ""
        self.connected: bool | None = None
        self.closed = False
        self.pending: List[Callable[[], None]] = []

    def set_text(self, text: str) -> None:
        self.calls.append(("set_text", text))
        self.text = text

    def set_highlight(self, highlight: str) -> None:
        self.calls.append(("set_highlight", highlight))
        self.highlight = highlight

    def set_suggestion(self, suggestion: str, visible: bool) -> None:
        self.calls.append(("set_suggestion", (suggestion, visible)))
        self.suggestion = (suggestion, visible)

    def set_error_text(self, text: str) -> None:
        self.calls.append(("set_error_text", text))
        self.error_text = text

    def set_connected(self, connected: bool) -> None:
        self.calls.append(("set_connected", connected))
        self.connected = connected

    def close(self) -> None:
        self.calls.append(("close", None))
        self.closed = True

    def call_soon(self, callback: Callable[[], None]) -> None:
        self.pending.append(callback)

    def drain(self) -> None:
        while self.pending:
            self.pending.pop(0)()


@pytest.fixture
def recording_view() -> RecordingView:
    return RecordingView()

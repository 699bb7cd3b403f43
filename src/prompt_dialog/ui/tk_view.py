"""Frameless tkinter window implementing PromptView."""

from __future__ import annotations

import logging
import queue
import tkinter as tk
from typing import Callable, Optional, Sequence

from .controller import PromptController

logger = logging.getLogger(__name__)

WINDOW_WIDTH = 680
WINDOW_HEIGHT = 240
_POLL_INTERVAL_MS = 50
_PLACEHOLDER_TAG = "placeholder"


class TkPromptView:
    """Thin window; all behavior lives in PromptController."""

    def __init__(self, placeholder_labels: Sequence[str] = ()):
        self.root = tk.Tk()
        self.root.title("Prompt")
        self.root.overrideredirect(True)
        self.root.attributes("-topmost", True)
        self._callbacks: "queue.Queue[Callable[[], None]]" = queue.Queue()
        self._controller: Optional[PromptController] = None

        frame = tk.Frame(self.root, padx=12, pady=12)
        frame.pack(fill=tk.BOTH, expand=True)

        self.status_label = tk.Label(frame, anchor="w")
        self.status_label.pack(fill=tk.X)

        self.text_widget = tk.Text(frame, height=6, wrap=tk.WORD, undo=True)
        self.text_widget.pack(fill=tk.BOTH, expand=True)
        self.text_widget.tag_configure(_PLACEHOLDER_TAG, foreground="#2f6fdd")

        self.suggestion_label = tk.Label(frame, anchor="w", fg="#888888")
        self.suggestion_label.pack(fill=tk.X)

        hint = "Enter to send, Shift+Enter for newline, Tab to complete, Esc to cancel"
        if placeholder_labels:
            hint = f"{hint}  |  {' '.join(placeholder_labels)}"
        tk.Label(frame, text=hint, anchor="w", fg="#888888").pack(fill=tk.X)

        self.error_label = tk.Label(frame, anchor="w", fg="#cc3333", wraplength=WINDOW_WIDTH - 24, justify=tk.LEFT)
        self.error_label.pack(fill=tk.X)

        self._center()

    def bind(self, controller: PromptController) -> None:
        self._controller = controller
        self.text_widget.bind("<KeyRelease>", self._on_key_release)
        self.text_widget.bind("<Tab>", self._on_tab)
        self.text_widget.bind("<Return>", self._on_return)
        self.text_widget.bind("<Shift-Return>", lambda _e: None)
        self.root.bind("<Escape>", lambda _e: controller.on_dismiss())
        self.text_widget.focus_set()

    def _center(self) -> None:
        screen_w = self.root.winfo_screenwidth()
        screen_h = self.root.winfo_screenheight()
        x = (screen_w - WINDOW_WIDTH) // 2
        # Slightly above center
        y = (screen_h - WINDOW_HEIGHT) // 3
        self.root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}+{x}+{y}")
        logger.debug("Screen: %sx%s, window pos: (%s, %s)", screen_w, screen_h, x, y)

    def _current_text(self) -> str:
        return self.text_widget.get("1.0", "end-1c")

    def _on_key_release(self, _event: tk.Event) -> None:
        if self._controller is not None:
            self._controller.on_text_changed(self._current_text())

    def _on_tab(self, _event: tk.Event) -> str:
        if self._controller is not None:
            self._controller.on_text_changed(self._current_text())
            self._controller.on_accept_suggestion()
        return "break"

    def _on_return(self, _event: tk.Event) -> str:
        if self._controller is not None:
            self._controller.on_submit(self._current_text())
        return "break"

    def set_text(self, text: str) -> None:
        self.text_widget.delete("1.0", tk.END)
        self.text_widget.insert("1.0", text)
        self.text_widget.mark_set(tk.INSERT, tk.END)

    def set_highlight(self, highlight: str) -> None:
        self.text_widget.tag_remove(_PLACEHOLDER_TAG, "1.0", tk.END)
        for offset, char in enumerate(highlight):
            if char not in (" ", "\n"):
                index = f"1.0 + {offset} chars"
                self.text_widget.tag_add(_PLACEHOLDER_TAG, index, f"{index} + 1 chars")

    def set_suggestion(self, suggestion: str, visible: bool) -> None:
        self.suggestion_label.configure(text=f"Tab: {suggestion}" if visible else "")

    def set_error_text(self, text: str) -> None:
        self.error_label.configure(text=text)

    def set_connected(self, connected: bool) -> None:
        self.status_label.configure(
            text="Connected" if connected else "Not connected",
            fg="#2e8b57" if connected else "#cc3333",
        )

    def close(self) -> None:
        self.root.quit()

    def call_soon(self, callback: Callable[[], None]) -> None:
        self._callbacks.put(callback)

    def _drain_callbacks(self) -> None:
        while True:
            try:
                callback = self._callbacks.get_nowait()
            except queue.Empty:
                break
            callback()
        self.root.after(_POLL_INTERVAL_MS, self._drain_callbacks)

    def run(self) -> None:
        self.root.after(_POLL_INTERVAL_MS, self._drain_callbacks)
        self.root.mainloop()
        self.root.destroy()


__all__ = ["TkPromptView"]

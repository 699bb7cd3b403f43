"""Window state and the background loop that serves it."""

from .async_runner import AsyncRunner
from .controller import PromptController, PromptView

__all__ = ["AsyncRunner", "PromptController", "PromptView"]

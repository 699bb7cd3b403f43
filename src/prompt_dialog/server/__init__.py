"""Server discovery and communication."""

from .client import PromptClient
from .discovery import discover_server
from .models import ProcessCandidate, ResolvedServer

__all__ = ["ProcessCandidate", "PromptClient", "ResolvedServer", "discover_server"]

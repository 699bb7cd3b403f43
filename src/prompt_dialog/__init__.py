"""Prompt dialog: send short prompts to a running local server."""

__version__ = "0.1.0"

__all__ = ["__version__"]

"""Placeholder text engine: expansion, highlighting and autocomplete."""

from .autocomplete import accept, suggest
from .expansion import expand
from .highlight import build_highlight
from .params import build_placeholder_names, display_names, parse_params

__all__ = [
    "accept",
    "build_highlight",
    "build_placeholder_names",
    "display_names",
    "expand",
    "parse_params",
    "suggest",
]

"""Console formatting for the developer clients."""

from __future__ import annotations

from .fmt import dim, red, bold, cyan, green, yellow, format_error, section_header, format_envelope

__all__ = [
    "bold",
    "cyan",
    "dim",
    "format_envelope",
    "format_error",
    "green",
    "red",
    "section_header",
    "yellow",
]

"""Heuristic, line-oriented symbol locator."""

from linkcomment.locator.ops import (
    SymbolMatch,
    locate_in_document,
    locate_symbol,
    strip_line_comment,
)
from linkcomment.locator.shapes import register_shape, shape_for

__all__ = [
    "SymbolMatch",
    "locate_in_document",
    "locate_symbol",
    "register_shape",
    "shape_for",
    "strip_line_comment",
]

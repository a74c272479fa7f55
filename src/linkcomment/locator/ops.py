"""Symbol locator.

Maps ``(document text, symbol name)`` to the most plausible definition
site without a parser. Lines are scanned in order; the first line whose
comment-stripped form passes the language's shape test AND contains the
name (literal substring, no word boundary) wins. There is no scoring and
no fuzzy fallback: a miss is ``None``.

Nothing is cached. Callers re-run the locator against live text on every
navigation.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from linkcomment.core.languages import LanguageTag, detect_language
from linkcomment.core.logging import get_logger
from linkcomment.locator.shapes import shape_for

if TYPE_CHECKING:
    from linkcomment.navigation.host import Document

log = get_logger("locator")


@dataclass(frozen=True, slots=True)
class SymbolMatch:
    """Located definition site, 0-based."""

    line: int
    column: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


def strip_line_comment(line: str) -> str:
    """Drop everything from the first ``//`` and then the first ``#``, then trim.

    Applied uniformly to every language, so ``#`` inside a C string or a
    ``//`` inside a Python URL also truncate the line.
    """
    return line.split("//", 1)[0].split("#", 1)[0].strip()


def locate_symbol(text: str, symbol_name: str, language: LanguageTag) -> SymbolMatch | None:
    """Find the first line that looks like a definition of ``symbol_name``.

    Args:
        text: Full document text
        symbol_name: Identifier to find, matched literally
        language: Tag selecting the shape test

    Returns:
        Line index and the column of the first occurrence of the name in
        the original line, or None.
    """
    if not text or not symbol_name:
        return None

    shape = shape_for(language)
    for index, line in enumerate(text.split("\n")):
        candidate = strip_line_comment(line)
        if symbol_name not in candidate or not shape(candidate):
            continue
        column = line.find(symbol_name)
        if column != -1:
            log.debug(
                "symbol_located",
                symbol=symbol_name,
                language=language.value,
                line=index,
                column=column,
            )
            return SymbolMatch(line=index, column=column)

    log.debug("symbol_not_located", symbol=symbol_name, language=language.value)
    return None


def locate_in_document(document: Document, symbol_name: str) -> SymbolMatch | None:
    """Locate using the language implied by the document's path."""
    return locate_symbol(document.text, symbol_name, detect_language(Path(document.path)))

"""Editor host collaborators.

The core never renders, opens editors or watches cursors itself. It talks
to the host through the protocols below. ``LocalFileHost`` implements them
against the local filesystem for the CLI and tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from linkcomment.core.console import status
from linkcomment.core.logging import get_logger
from linkcomment.links.models import Position, Span

log = get_logger("host")


@dataclass(frozen=True, slots=True)
class Document:
    """Snapshot of a document's path and live text."""

    path: Path
    text: str


@runtime_checkable
class DecorationHandle(Protocol):
    """Long-lived decoration resource; each ``set_ranges`` replaces the last."""

    def set_ranges(self, ranges: Sequence[Any]) -> None: ...

    def dispose(self) -> None: ...


class DecorationFactory(Protocol):
    def create_decoration(self, kind: str, style: dict[str, Any]) -> DecorationHandle: ...


class EditorHost(Protocol):
    """Services the navigator consumes from the editor."""

    def current_document_path(self) -> Path | None: ...

    def document_text(self, document: Document) -> str: ...

    async def file_exists(self, path: Path) -> bool: ...

    async def load_document(self, path: Path) -> Document: ...

    def report_warning(self, message: str) -> None: ...

    def reveal(self, document: Document, start: Position, end: Position) -> None: ...


@dataclass
class RecordedDecoration:
    """In-memory decoration handle; keeps the last applied range set."""

    kind: str
    style: dict[str, Any]
    ranges: list[Any] = field(default_factory=list)
    disposed: bool = False

    def set_ranges(self, ranges: Sequence[Any]) -> None:
        self.ranges = list(ranges)

    def dispose(self) -> None:
        self.ranges = []
        self.disposed = True


class LocalFileHost:
    """Filesystem-backed host.

    Warnings are printed to the rich console and kept in ``warnings``.
    The last reveal request is kept in ``revealed``.
    """

    def __init__(self, *, echo: bool = True) -> None:
        self._echo = echo
        self._current: Path | None = None
        self.warnings: list[str] = []
        self.revealed: tuple[Path, Span] | None = None
        self.decorations: list[RecordedDecoration] = []

    def open(self, path: str | Path) -> Document:
        """Read a document synchronously and make it current."""
        document = _read_document(Path(path))
        self._current = document.path
        return document

    def current_document_path(self) -> Path | None:
        return self._current

    def document_text(self, document: Document) -> str:
        return document.text

    async def file_exists(self, path: Path) -> bool:
        return path.is_file()

    async def load_document(self, path: Path) -> Document:
        return _read_document(path)

    def report_warning(self, message: str) -> None:
        self.warnings.append(message)
        log.debug("navigation_warning", message=message)
        if self._echo:
            status(message, style="warning")

    def reveal(self, document: Document, start: Position, end: Position) -> None:
        self._current = document.path
        self.revealed = (document.path, Span(start, end))
        log.debug(
            "reveal",
            path=str(document.path),
            line=start.line,
            start=start.column,
            end=end.column,
        )

    def create_decoration(self, kind: str, style: dict[str, Any]) -> RecordedDecoration:
        handle = RecordedDecoration(kind=kind, style=dict(style))
        self.decorations.append(handle)
        return handle


def _read_document(path: Path) -> Document:
    return Document(path=path, text=path.read_text(encoding="utf-8", errors="replace"))

"""Jump from a link to the definition it names.

One ``Navigator`` serves both entry points the host offers:

- click path: ``jump`` resolves the link, then asks the host to select the
  symbol and scroll it into view
- definition lookup: ``definition_at`` finds the link under a position and
  returns the target location without moving the editor

Both go through ``resolve_link``, the single Resolver + Locator pipeline.
Failures never raise to the host; they come back as a ``JumpOutcome``
carrying a ``NavigationError`` and are reported as warnings.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from linkcomment.core.errors import NavigationError
from linkcomment.core.languages import detect_language, get_host_language_id
from linkcomment.core.logging import clear_request_id, get_logger, set_request_id
from linkcomment.links.models import Position
from linkcomment.links.parser import link_at, parse_link
from linkcomment.locator.ops import locate_in_document
from linkcomment.navigation.host import Document, EditorHost
from linkcomment.navigation.resolver import resolve_target

log = get_logger("navigation")


@dataclass(frozen=True, slots=True)
class Location:
    """Definition site inside a target document."""

    path: Path
    line: int
    column: int
    length: int

    @property
    def start(self) -> Position:
        return Position(self.line, self.column)

    @property
    def end(self) -> Position:
        return Position(self.line, self.column + self.length)

    def to_dict(self) -> dict[str, Any]:
        return {"targetPath": str(self.path), "line": self.line, "column": self.column}


@dataclass(frozen=True, slots=True)
class JumpOutcome:
    """Either a location or the navigation error explaining its absence."""

    location: Location | None = None
    error: NavigationError | None = None
    document: Document | None = None

    @property
    def ok(self) -> bool:
        return self.location is not None

    def to_dict(self) -> dict[str, Any]:
        if self.location is not None:
            return self.location.to_dict()
        assert self.error is not None
        return self.error.to_dict()


class Navigator:
    """Follows links to definitions through an ``EditorHost``."""

    def __init__(self, host: EditorHost, enabled_languages: Iterable[str] | None = None) -> None:
        self._host = host
        self._enabled = frozenset(enabled_languages) if enabled_languages is not None else None

    def is_enabled_for(self, path: Path) -> bool:
        if self._enabled is None:
            return True
        return get_host_language_id(detect_language(path)) in self._enabled

    async def resolve_link(
        self,
        source: Document,
        file_path: str | None,
        symbol_name: str,
    ) -> JumpOutcome:
        """Resolve and locate; report a warning on any miss."""
        target = resolve_target(source.path, file_path)
        log.debug(
            "resolve_link",
            source=str(source.path),
            file_path=file_path,
            symbol=symbol_name,
            target=str(target.path),
        )

        if target.is_source:
            document = source
        else:
            if not await self._host.file_exists(target.path):
                return self._fail(NavigationError.file_not_found(str(target.path)))
            try:
                document = await self._host.load_document(target.path)
            except OSError as e:
                log.debug("load_failed", path=str(target.path), reason=str(e))
                return self._fail(NavigationError.file_not_found(str(target.path)))

        match = locate_in_document(
            Document(path=document.path, text=self._host.document_text(document)),
            symbol_name,
        )
        if match is None:
            return self._fail(NavigationError.symbol_not_found(symbol_name, file_path))

        location = Location(
            path=document.path,
            line=match.line,
            column=match.column,
            length=len(symbol_name),
        )
        return JumpOutcome(location=location, document=document)

    async def jump(self, source: Document, file_path: str | None, symbol_name: str) -> JumpOutcome:
        """Resolve the link and select the symbol in the target document."""
        set_request_id()
        try:
            outcome = await self.resolve_link(source, file_path, symbol_name)
            if outcome.location is not None and outcome.document is not None:
                self._host.reveal(outcome.document, outcome.location.start, outcome.location.end)
                log.debug(
                    "jumped",
                    path=str(outcome.location.path),
                    line=outcome.location.line,
                    column=outcome.location.column,
                )
            return outcome
        finally:
            clear_request_id()

    async def definition_at(self, source: Document, line: int, column: int) -> JumpOutcome | None:
        """Definition lookup for the link under ``(line, column)``, if any."""
        if not self.is_enabled_for(source.path):
            return None
        token = link_at(source.text, line, column)
        if token is None:
            return None
        parsed = parse_link(token)
        if parsed is None:
            return None

        set_request_id()
        try:
            return await self.resolve_link(source, parsed.file_path, parsed.symbol_name)
        finally:
            clear_request_id()

    async def on_activate_link(
        self,
        source_path: str | Path,
        file_path: str | None,
        symbol_name: str,
    ) -> dict[str, Any]:
        """Host entry point for an activated link; returns a JSON-ready dict."""
        source_path = Path(source_path)
        try:
            source = await self._host.load_document(source_path)
        except OSError:
            return self._fail(NavigationError.file_not_found(str(source_path))).to_dict()
        outcome = await self.jump(source, file_path, symbol_name)
        return outcome.to_dict()

    def _fail(self, error: NavigationError) -> JumpOutcome:
        log.debug("navigation_failed", error=error.error_name, **error.details)
        self._host.report_warning(error.message)
        return JumpOutcome(error=error)

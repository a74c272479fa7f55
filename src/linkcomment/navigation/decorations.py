"""Cursor-driven show/hide of link markup.

Links on the cursor's line render literally so they can be edited; every
other link collapses to its description. The partition is recomputed from
live text on each cursor move or editor switch.

``DecorationPolicy`` owns the two decoration handles for the lifetime of an
editing session: acquired in the constructor, range sets fully replaced on
each refresh, released by ``close()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType
from typing import Any

from linkcomment.config.constants import DECORATION_HIDE, DECORATION_REPLACE
from linkcomment.config.models import DecorationConfig
from linkcomment.core.errors import InternalError
from linkcomment.core.logging import get_logger
from linkcomment.links.models import LineIndex, Span
from linkcomment.links.parser import iter_links
from linkcomment.navigation.host import DecorationFactory

log = get_logger("decorations")


@dataclass(frozen=True, slots=True)
class CollapsedLink:
    span: Span
    display_text: str

    def to_dict(self) -> dict[str, Any]:
        return {"range": self.span.to_dict(), "displayText": self.display_text}


@dataclass(frozen=True, slots=True)
class DecorationSet:
    literal: list[Span] = field(default_factory=list)
    collapsed: list[CollapsedLink] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "literalRanges": [span.to_dict() for span in self.literal],
            "collapsedRanges": [link.to_dict() for link in self.collapsed],
        }


def partition_links(text: str, cursor_line: int) -> DecorationSet:
    """Split every link into literal (cursor line) and collapsed (elsewhere).

    A link belongs to the line its opening bracket is on.
    """
    index = LineIndex(text)
    result = DecorationSet()
    for token in iter_links(text):
        span = index.span_of(token)
        if span.start.line == cursor_line:
            result.literal.append(span)
        else:
            result.collapsed.append(CollapsedLink(span=span, display_text=token.description))
    return result


def on_document_or_cursor_changed(text: str, cursor_line: int) -> dict[str, Any]:
    """Host-facing form of ``partition_links``."""
    return partition_links(text, cursor_line).to_dict()


def decoration_styles(config: DecorationConfig) -> dict[str, dict[str, Any]]:
    """Render options for the two handles."""
    return {
        DECORATION_HIDE: {"color": "transparent", "opacity": 0},
        DECORATION_REPLACE: {
            "color": config.link_color,
            "underline": config.underline,
        },
    }


class DecorationPolicy:
    """Applies ``partition_links`` to a pair of long-lived decoration handles."""

    def __init__(self, factory: DecorationFactory, config: DecorationConfig | None = None) -> None:
        styles = decoration_styles(config or DecorationConfig())
        self._hide = factory.create_decoration(DECORATION_HIDE, styles[DECORATION_HIDE])
        self._replace = factory.create_decoration(DECORATION_REPLACE, styles[DECORATION_REPLACE])
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def refresh(self, text: str, cursor_line: int) -> DecorationSet:
        """Recompute the partition and fully replace both handles' ranges."""
        if self._closed:
            raise InternalError.unexpected("refresh after close")

        decorations = partition_links(text, cursor_line)
        self._hide.set_ranges([link.span for link in decorations.collapsed])
        self._replace.set_ranges(decorations.collapsed)
        log.debug(
            "decorations_refreshed",
            cursor_line=cursor_line,
            literal=len(decorations.literal),
            collapsed=len(decorations.collapsed),
        )
        return decorations

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._hide.dispose()
        self._replace.dispose()

    def __enter__(self) -> DecorationPolicy:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

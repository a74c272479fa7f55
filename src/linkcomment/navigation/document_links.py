"""Clickable links: one per link token, each activating the jump command."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from linkcomment.config.constants import JUMP_COMMAND_ID, TOOLTIP_PREFIX
from linkcomment.links.models import LineIndex, Span
from linkcomment.links.parser import format_target, iter_links, parse_link


@dataclass(frozen=True, slots=True)
class DocumentLink:
    span: Span
    description: str
    file_path: str | None
    symbol_name: str

    @property
    def tooltip(self) -> str:
        if self.file_path:
            return f"{TOOLTIP_PREFIX} {format_target(self.file_path, self.symbol_name)}"
        return f"{TOOLTIP_PREFIX} current file @{self.symbol_name}"

    @property
    def command(self) -> tuple[str, list[str | None]]:
        return JUMP_COMMAND_ID, [self.file_path, self.symbol_name]

    def command_uri(self) -> str:
        command_id, args = self.command
        return f"command:{command_id}?{quote(json.dumps(args), safe='')}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "range": self.span.to_dict(),
            "description": self.description,
            "filePath": self.file_path,
            "symbolName": self.symbol_name,
            "tooltip": self.tooltip,
        }


def document_links(text: str) -> list[DocumentLink]:
    """All clickable links in document order."""
    index = LineIndex(text)
    links: list[DocumentLink] = []
    for token in iter_links(text):
        parsed = parse_link(token)
        if parsed is None:
            continue
        links.append(
            DocumentLink(
                span=index.span_of(token),
                description=token.description,
                file_path=parsed.file_path,
                symbol_name=parsed.symbol_name,
            )
        )
    return links

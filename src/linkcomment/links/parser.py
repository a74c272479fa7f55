"""Link syntax parser.

Recognizes ``[description](path@symbol)`` and ``[description](@symbol)``
inside arbitrary text. The grammar is regex-level and permissive:
descriptions cannot contain ``]``, targets cannot contain ``)``, and nested
brackets or parens are not balanced.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from linkcomment.links.models import LinkToken, ParsedLink

# [desc](target) where target holds at least one "@" followed by a symbol.
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]*?@[^)]+)\)")

# Path is everything before the FIRST "@"; the symbol keeps any later ones.
_TARGET_PATTERN = re.compile(r"^([^)]*?)@([^)]+)$")


def iter_links(text: str) -> Iterator[LinkToken]:
    """Yield link tokens left-to-right, top-to-bottom.

    Each call starts a fresh scan, so the same text always yields the same
    sequence.
    """
    for match in LINK_PATTERN.finditer(text):
        yield LinkToken(
            description=match.group(1),
            raw_target=match.group(2),
            start=match.start(),
            end=match.end(),
        )


def parse_target(raw_target: str) -> ParsedLink | None:
    """Split a raw ``path@symbol`` target; empty path means current file."""
    match = _TARGET_PATTERN.match(raw_target)
    if not match:
        return None
    return ParsedLink(file_path=match.group(1) or None, symbol_name=match.group(2))


def parse_link(link: LinkToken | str) -> ParsedLink | None:
    """Parse a token, or the first link found in a string."""
    if isinstance(link, LinkToken):
        return parse_target(link.raw_target)
    token = next(iter_links(link), None)
    if token is None:
        return None
    return parse_target(token.raw_target)


def format_target(file_path: str | None, symbol_name: str) -> str:
    return f"{file_path or ''}@{symbol_name}"


def link_at(text: str, line: int, column: int) -> LinkToken | None:
    """Return the link on ``line`` whose span contains ``column``.

    Only the given line is scanned, so links never span lines here. The
    returned token's offsets are relative to the whole text. Positions
    outside the text yield None.
    """
    if line < 0 or column < 0:
        return None

    offset = 0
    lines = text.split("\n")
    if line >= len(lines):
        return None
    for previous in lines[:line]:
        offset += len(previous) + 1

    for token in iter_links(lines[line]):
        if token.start <= column <= token.end:
            return LinkToken(
                description=token.description,
                raw_target=token.raw_target,
                start=offset + token.start,
                end=offset + token.end,
            )
    return None

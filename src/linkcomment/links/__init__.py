"""Link syntax: ``[description](path@symbol)`` tokens embedded in comments."""

from linkcomment.links.models import LineIndex, LinkToken, ParsedLink, Position, Span
from linkcomment.links.parser import (
    LINK_PATTERN,
    format_target,
    iter_links,
    link_at,
    parse_link,
    parse_target,
)

__all__ = [
    "LINK_PATTERN",
    "LineIndex",
    "LinkToken",
    "ParsedLink",
    "Position",
    "Span",
    "format_target",
    "iter_links",
    "link_at",
    "parse_link",
    "parse_target",
]

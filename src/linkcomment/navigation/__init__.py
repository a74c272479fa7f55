"""Navigation and decoration policy on top of the parser, resolver and locator."""

from linkcomment.navigation.decorations import (
    CollapsedLink,
    DecorationPolicy,
    DecorationSet,
    on_document_or_cursor_changed,
    partition_links,
)
from linkcomment.navigation.document_links import DocumentLink, document_links
from linkcomment.navigation.host import (
    DecorationFactory,
    DecorationHandle,
    Document,
    EditorHost,
    LocalFileHost,
    RecordedDecoration,
)
from linkcomment.navigation.jump import JumpOutcome, Location, Navigator
from linkcomment.navigation.resolver import TargetIdentity, resolve_target

__all__ = [
    "CollapsedLink",
    "DecorationFactory",
    "DecorationHandle",
    "DecorationPolicy",
    "DecorationSet",
    "Document",
    "DocumentLink",
    "EditorHost",
    "JumpOutcome",
    "LocalFileHost",
    "Location",
    "Navigator",
    "RecordedDecoration",
    "TargetIdentity",
    "document_links",
    "on_document_or_cursor_changed",
    "partition_links",
    "resolve_target",
]

"""Target resolver: pure path algebra from (source path, link path) to a target.

No existence checks and no I/O happen here; the host decides whether the
resolved path is real before the locator runs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_SEPARATORS = ("/", "\\")


@dataclass(frozen=True, slots=True)
class TargetIdentity:
    """Resolved target document; ``is_source`` means "the document itself"."""

    path: Path
    is_source: bool


def _same_path(a: Path, b: Path) -> bool:
    return os.path.normpath(a) == os.path.normpath(b)


def resolve_target(source_path: str | Path, file_path: str | None) -> TargetIdentity:
    """Resolve a link's path segment against the linking document.

    - ``None`` or ``""``: the source document
    - absolute path: used unchanged
    - relative path or bare filename: joined onto the source's directory
    """
    source = Path(source_path)
    if not file_path:
        return TargetIdentity(path=source, is_source=True)

    if any(sep in file_path for sep in _SEPARATORS) and os.path.isabs(file_path):
        target = Path(file_path)
    else:
        target = Path(os.path.normpath(os.path.join(source.parent, file_path)))

    return TargetIdentity(path=target, is_source=_same_path(target, source))

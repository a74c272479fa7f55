"""Canonical language definitions.

This module defines the authoritative mapping of:
- File extensions → language tags
- Language tags → editor language identifiers
- Which tags carry a dedicated symbol-locator heuristic

Design decisions:
1. Every extension maps to exactly ONE tag. There is no priority resolution;
   ``.h`` is C and ``.hpp`` is C++.
2. Lookup is case-insensitive (extensions are normalized to lowercase).
3. Unknown or missing extensions classify as ``DEFAULT_LANGUAGE``
   (javascript), whose heuristic is the broadest of the family-specific ones.
4. Ruby and C# are classified but have no dedicated heuristic
   (``has_locator=False``); the locator falls back to its generic test.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class LanguageTag(str, Enum):
    """Language identifiers understood by the symbol locator."""

    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    PHP = "php"
    JAVA = "java"
    GO = "go"
    RUST = "rust"
    CPP = "cpp"
    C = "c"
    RUBY = "ruby"
    CSHARP = "csharp"


@dataclass(frozen=True, slots=True)
class Language:
    """Canonical definition for a language tag.

    Attributes:
        tag: Locator tag
        extensions: File extensions including dot (lowercase, e.g. ".py")
        host_language_id: Editor language identifier the host registers
            providers for
        has_locator: False when the tag only gets the generic heuristic
    """

    tag: LanguageTag
    extensions: frozenset[str]
    host_language_id: str
    has_locator: bool = True


# =============================================================================
# Language Definitions
# =============================================================================
# RULES:
# 1. Extensions are lowercase and include the leading dot
# 2. An extension appears in exactly one Language

ALL_LANGUAGES: tuple[Language, ...] = (
    Language(
        tag=LanguageTag.PYTHON,
        extensions=frozenset({".py"}),
        host_language_id="python",
    ),
    Language(
        tag=LanguageTag.JAVASCRIPT,
        extensions=frozenset({".js", ".mjs", ".jsx"}),
        host_language_id="javascript",
    ),
    Language(
        tag=LanguageTag.TYPESCRIPT,
        extensions=frozenset({".ts", ".tsx"}),
        host_language_id="typescript",
    ),
    Language(
        tag=LanguageTag.PHP,
        extensions=frozenset({".php"}),
        host_language_id="php",
    ),
    Language(
        tag=LanguageTag.JAVA,
        extensions=frozenset({".java"}),
        host_language_id="java",
    ),
    Language(
        tag=LanguageTag.CPP,
        extensions=frozenset({".cpp", ".hpp"}),
        host_language_id="cpp",
    ),
    Language(
        tag=LanguageTag.C,
        extensions=frozenset({".c", ".h"}),
        host_language_id="c",
    ),
    Language(
        tag=LanguageTag.GO,
        extensions=frozenset({".go"}),
        host_language_id="go",
    ),
    Language(
        tag=LanguageTag.RUST,
        extensions=frozenset({".rs"}),
        host_language_id="rust",
    ),
    # Classified, generic heuristic only
    Language(
        tag=LanguageTag.RUBY,
        extensions=frozenset({".rb"}),
        host_language_id="ruby",
        has_locator=False,
    ),
    Language(
        tag=LanguageTag.CSHARP,
        extensions=frozenset({".cs"}),
        host_language_id="csharp",
        has_locator=False,
    ),
)

DEFAULT_LANGUAGE = LanguageTag.JAVASCRIPT

# =============================================================================
# Lookup Tables (built from ALL_LANGUAGES)
# =============================================================================

LANGUAGES_BY_TAG: dict[LanguageTag, Language] = {lang.tag: lang for lang in ALL_LANGUAGES}


def _build_extension_map() -> dict[str, LanguageTag]:
    """Build lowercase extension -> tag mapping."""
    result: dict[str, LanguageTag] = {}
    for lang in ALL_LANGUAGES:
        for ext in lang.extensions:
            result[ext.lower()] = lang.tag
    return result


EXTENSION_TO_TAG: dict[str, LanguageTag] = _build_extension_map()

# Tags with a dedicated definition-shape heuristic
SUPPORTED_LANGUAGES: tuple[LanguageTag, ...] = tuple(
    lang.tag for lang in ALL_LANGUAGES if lang.has_locator
)

SUPPORTED_HOST_LANGUAGE_IDS: tuple[str, ...] = tuple(
    LANGUAGES_BY_TAG[tag].host_language_id for tag in SUPPORTED_LANGUAGES
)


# =============================================================================
# Detection Functions
# =============================================================================


def classify_extension(ext: str | None) -> LanguageTag:
    """Map a file extension to a language tag.

    Total over all inputs: ``None``, ``""`` and unknown extensions return
    ``DEFAULT_LANGUAGE``.

    Args:
        ext: File extension including dot (e.g., ".py", ".PY")

    Returns:
        The language tag.
    """
    if not ext:
        return DEFAULT_LANGUAGE
    return EXTENSION_TO_TAG.get(ext.lower(), DEFAULT_LANGUAGE)


def detect_language(path: str | Path) -> LanguageTag:
    """Classify a file path by its final suffix."""
    p = Path(path) if isinstance(path, str) else path
    return classify_extension(p.suffix)


def is_supported(tag: LanguageTag) -> bool:
    """Check if tag has a dedicated locator heuristic."""
    lang = LANGUAGES_BY_TAG.get(tag)
    return lang is not None and lang.has_locator


def get_host_language_id(tag: LanguageTag) -> str:
    """Get the editor language identifier for a tag."""
    return LANGUAGES_BY_TAG[tag].host_language_id

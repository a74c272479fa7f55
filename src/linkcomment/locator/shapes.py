"""Per-language definition-shape tests.

A shape test looks at ONE comment-stripped, trimmed line and answers
"does this line look like it declares something?". It never sees the
symbol name; the locator applies the literal containment check itself.

Each tag is bound to exactly one predicate through ``register_shape``.
Tags without a registration (ruby, csharp) get ``generic_shape``.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from linkcomment.core.languages import LanguageTag

ShapeTest = Callable[[str], bool]

_SHAPES: dict[LanguageTag, ShapeTest] = {}


def register_shape(*tags: LanguageTag) -> Callable[[ShapeTest], ShapeTest]:
    """Bind a shape test to one or more language tags."""

    def decorator(fn: ShapeTest) -> ShapeTest:
        for tag in tags:
            if tag in _SHAPES:
                raise ValueError(f"Shape already registered for {tag.value}")
            _SHAPES[tag] = fn
        return fn

    return decorator


def shape_for(tag: LanguageTag) -> ShapeTest:
    return _SHAPES.get(tag, generic_shape)


def registered_tags() -> frozenset[LanguageTag]:
    return frozenset(_SHAPES)


# =============================================================================
# Shapes
# =============================================================================

_PYTHON = re.compile(r"^\s*(def|class)\s+")

_JS_TS = re.compile(
    r"(function\s+\w+"
    r"|const\s+\w+\s*="
    r"|class\s+\w+"
    r"|=>\s*\{"
    r"|\w+\s*\([^)]*\)\s*\{"
    r"|export\s+(const|function|class)\s+\w+)"
)

_PHP = re.compile(r"^\s*(function|class)\s+")

_JAVA_METHOD = re.compile(r"^\s*(public|private|protected)?\s*(static)?\s*\w+\s+\w+\s*\([^)]*\)\s*\{?")
_JAVA_TYPE = re.compile(r"^\s*(class|interface)\s+")

_GO = re.compile(r"^\s*func\s+")

_RUST = re.compile(r"^\s*(pub\s+)?fn\s+")

_C_FAMILY = re.compile(r"^\s*(\w+\s+)+\w+\s*\([^)]*\)\s*\{?")

_GENERIC_KEYWORDS = ("function", "def", "class")


@register_shape(LanguageTag.PYTHON)
def python_shape(line: str) -> bool:
    return bool(_PYTHON.match(line))


@register_shape(LanguageTag.JAVASCRIPT, LanguageTag.TYPESCRIPT)
def js_shape(line: str) -> bool:
    # Broad OR of declaration forms; recall over precision.
    return bool(_JS_TS.search(line))


@register_shape(LanguageTag.PHP)
def php_shape(line: str) -> bool:
    return bool(_PHP.match(line))


@register_shape(LanguageTag.JAVA)
def java_shape(line: str) -> bool:
    return bool(_JAVA_METHOD.match(line) or _JAVA_TYPE.match(line))


@register_shape(LanguageTag.GO)
def go_shape(line: str) -> bool:
    return bool(_GO.match(line))


@register_shape(LanguageTag.RUST)
def rust_shape(line: str) -> bool:
    return bool(_RUST.match(line))


@register_shape(LanguageTag.C, LanguageTag.CPP)
def c_family_shape(line: str) -> bool:
    return not line.startswith("//") and bool(_C_FAMILY.match(line))


def generic_shape(line: str) -> bool:
    return any(keyword in line for keyword in _GENERIC_KEYWORDS)

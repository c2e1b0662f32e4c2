"""Allowlist tables shared by the validator and the tree sanitizer.

Everything here is an immutable module-level constant.  Tag and attribute
names are lowercase because the fragment parser lowercases them.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

_SVG_PAINT = ("fill", "stroke", "stroke-width")

ALLOWED_TAGS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "p": frozenset({"class"}),
        "div": frozenset({"class", "id", "style"}),
        "span": frozenset({"class", "style"}),
        "a": frozenset({"href", "target", "rel", "class"}),
        "h1": frozenset({"class"}),
        "h2": frozenset({"class"}),
        "h3": frozenset({"class"}),
        "h4": frozenset({"class"}),
        "h5": frozenset({"class"}),
        "h6": frozenset({"class"}),
        "strong": frozenset(),
        "em": frozenset(),
        "b": frozenset(),
        "i": frozenset(),
        "br": frozenset(),
        "ul": frozenset({"class"}),
        "ol": frozenset({"class"}),
        "li": frozenset({"class"}),
        "article": frozenset({"class"}),
        "section": frozenset({"class"}),
        "header": frozenset({"class"}),
        "footer": frozenset({"class"}),
        "canvas": frozenset({"id", "class", "width", "height"}),
        "button": frozenset(
            {"id", "class", "type", "title", "data-type", "data-filter", "data-category"}
        ),
        "input": frozenset({"type", "id", "class", "placeholder"}),
        "select": frozenset({"id", "class"}),
        "option": frozenset({"value"}),
        "label": frozenset({"for", "class"}),
        "svg": frozenset({"viewbox", "xmlns", "class", "width", "height", *_SVG_PAINT}),
        "path": frozenset({"d", "stroke-linecap", "stroke-linejoin", *_SVG_PAINT}),
        "polyline": frozenset({"points", "stroke", "stroke-width"}),
        "circle": frozenset({"cx", "cy", "r", "fill", "stroke"}),
        "rect": frozenset({"x", "y", "width", "height", "fill", "stroke"}),
        "g": frozenset({"class"}),
        "text": frozenset({"x", "y", "fill", "class"}),
    }
)

# Matched case-insensitively anywhere in an attribute value.
UNSAFE_ATTRIBUTE_SUBSTRINGS = frozenset(
    {
        "onerror",
        "onload",
        "onclick",
        "onmouseover",
        "onfocus",
        "onblur",
        "javascript:",
        "data:",
    }
)

# Pass-through keys used by the i18n layer, allowed on every tag.
I18N_ATTRIBUTES = frozenset({"data-i18n", "data-i18n-placeholder"})
DATA_ATTRIBUTE_PREFIX = "data-"

URL_ATTRIBUTES = frozenset({"href", "src"})
SAFE_URL_RE = re.compile(r"^(https?://|#|/|mailto:)", re.IGNORECASE)

ALLOWED_TARGETS = frozenset({"_blank", "_self"})
BLANK_TARGET_REL = "noopener noreferrer"

STYLE_DANGEROUS_RE = re.compile(r"(javascript:|expression|url\(|alert\()", re.IGNORECASE)
# Opt-in tightening: @import, CSS escapes that can spell out a scheme,
# legacy scripting schemes and XBL bindings.
STRICT_STYLE_DANGEROUS_RE = re.compile(
    r"(@import|\\|vbscript:|-moz-binding|behavior\s*:)",
    re.IGNORECASE,
)


def is_allowed_tag(tag: str) -> bool:
    return tag in ALLOWED_TAGS


def allowed_attributes(tag: str) -> frozenset[str]:
    return ALLOWED_TAGS.get(tag, frozenset())

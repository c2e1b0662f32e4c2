"""Regex passes applied to raw markup before it reaches the parser.

These are deliberately blunt: they run on the string, not the tree, so they
also serve as the only line of defense on the parse-failure path.
"""
from __future__ import annotations

import re

_SCRIPT_BLOCK_RE = re.compile(
    r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>",
    re.IGNORECASE,
)
_HANDLER_ATTR_RE = re.compile(
    r"""on[a-zA-Z]+\s*=\s*("[^"]*"|'[^']*'|[^\s>]+)""",
    re.IGNORECASE,
)
_DANGEROUS_SCHEME_RE = re.compile(r"javascript:|data:text/html", re.IGNORECASE)
_STYLE_BLOCK_RE = re.compile(
    r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>",
    re.IGNORECASE,
)
_DANGEROUS_TAG_RE = re.compile(
    r"</?(?:iframe|embed|object|meta|link|base)\b[^>]*>",
    re.IGNORECASE,
)

_FULL_PASSES = (
    _SCRIPT_BLOCK_RE,
    _HANDLER_ATTR_RE,
    _DANGEROUS_SCHEME_RE,
    _STYLE_BLOCK_RE,
    _DANGEROUS_TAG_RE,
)
_MINIMAL_PASSES = (_SCRIPT_BLOCK_RE, _HANDLER_ATTR_RE)


def strip(raw: str) -> str:
    """Remove script/style blocks, handlers, script-capable schemes and
    embedding tags from *raw*.

    Malformed fragments the patterns do not match are left in place for the
    tree pass.  The passes repeat until nothing changes, so a removal can
    never splice two halves into a fresh match.
    """
    return _until_stable(raw, _FULL_PASSES)


def strip_minimal(raw: str) -> str:
    """Remove only ``<script>`` blocks and ``on*=`` handler attributes."""
    return _until_stable(raw, _MINIMAL_PASSES)


def _until_stable(text: str, passes: tuple[re.Pattern[str], ...]) -> str:
    # Every effective pass shortens the string, so this terminates.
    while True:
        previous = text
        for pattern in passes:
            text = pattern.sub("", text)
        if text == previous:
            return text

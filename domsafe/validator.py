"""Per-attribute keep/reject decisions."""
from __future__ import annotations

import re
from collections.abc import Collection

from .policy import (
    ALLOWED_TARGETS,
    DATA_ATTRIBUTE_PREFIX,
    I18N_ATTRIBUTES,
    SAFE_URL_RE,
    STRICT_STYLE_DANGEROUS_RE,
    STYLE_DANGEROUS_RE,
    UNSAFE_ATTRIBUTE_SUBSTRINGS,
    URL_ATTRIBUTES,
    allowed_attributes,
)

# Names that are, or would serialize to something that reads as, a handler.
_HANDLER_NAME_RE = re.compile(r"(^on|on\w+$)", re.IGNORECASE)


def validate(
    tag: str,
    name: str,
    value: str,
    *,
    strict_css: bool = False,
    extra_allowed: Collection[str] = (),
) -> bool:
    """Return True if ``name=value`` may stay on a ``<tag>`` element.

    Rules apply in order and the first that decides wins.  *extra_allowed*
    widens the per-tag allowlist for callers that build elements directly.
    """
    if not is_allowed_name(tag, name, extra_allowed):
        return False

    lowered = value.lower()
    if any(unsafe in lowered for unsafe in UNSAFE_ATTRIBUTE_SUBSTRINGS):
        return False

    if name == "style":
        return is_safe_style(value, strict=strict_css)
    if name in URL_ATTRIBUTES:
        return is_safe_url(value)
    if name == "target":
        return value in ALLOWED_TARGETS
    return True


def is_allowed_name(tag: str, name: str, extra_allowed: Collection[str] = ()) -> bool:
    if not name or _HANDLER_NAME_RE.search(name):
        return False
    if name in I18N_ATTRIBUTES or name.startswith(DATA_ATTRIBUTE_PREFIX):
        return True
    return name in allowed_attributes(tag) or name in extra_allowed


def is_safe_url(value: str) -> bool:
    return SAFE_URL_RE.match(value) is not None


def is_safe_style(value: str, *, strict: bool = False) -> bool:
    if STYLE_DANGEROUS_RE.search(value):
        return False
    return not (strict and STRICT_STYLE_DANGEROUS_RE.search(value))


def needs_rel(name: str, value: str) -> bool:
    """An accepted ``target=_blank`` also requires a forced ``rel``."""
    return name == "target" and value == "_blank"

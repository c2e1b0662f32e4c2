"""Exception and warning types raised by domsafe."""
from __future__ import annotations


class DomsafeError(Exception):
    """Base class for domsafe errors."""


class HTMLParseError(DomsafeError, ValueError):
    """The fragment parser could not build a tree from its input.

    Never escapes the public API: callers recover by falling back to the
    regex-only strip pass.
    """


class SanitizerWarning(RuntimeWarning):
    """Non-fatal sanitizer condition (fallback taken, invalid target, ...)."""

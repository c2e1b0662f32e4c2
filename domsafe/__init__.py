from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .api import (
    escape_html,
    safe_create_element,
    safe_create_fragment,
    safe_set_html,
    safe_set_text,
    sanitize_html,
)
from .config import Config, SafetyConfig
from .errors import DomsafeError, HTMLParseError, SanitizerWarning
from .nodes import ElementNode, TextNode
from .parser import parse_fragment
from .prepass import strip
from .serializer import serialize, text_content

try:
    __version__ = version("domsafe")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "Config",
    "DomsafeError",
    "ElementNode",
    "HTMLParseError",
    "SafetyConfig",
    "SanitizerWarning",
    "TextNode",
    "escape_html",
    "parse_fragment",
    "safe_create_element",
    "safe_create_fragment",
    "safe_set_html",
    "safe_set_text",
    "sanitize_html",
    "serialize",
    "strip",
    "text_content",
]

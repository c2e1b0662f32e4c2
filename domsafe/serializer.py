"""Serialize :mod:`domsafe.nodes` trees back to HTML."""
from __future__ import annotations

import re
from collections.abc import Iterable

from .nodes import ElementNode, Node, TextNode
from .parser import VOID_TAGS

# Decoded character references can spell these out again; re-encode the
# delimiter so the markup never contains them literally.
_SCHEME_RE = re.compile(r"(javascript|data(?=:text/html)):", re.IGNORECASE)
_HANDLER_RE = re.compile(r"(on\w+\s*)=", re.IGNORECASE)


def serialize(nodes: Node | Iterable[Node]) -> str:
    """Return the markup for a node or a sequence of sibling nodes."""
    if isinstance(nodes, (TextNode, ElementNode)):
        nodes = [nodes]
    return _serialize_siblings(nodes)


def text_content(nodes: Node | Iterable[Node]) -> str:
    """Concatenated text of *nodes* and all their descendants."""
    if isinstance(nodes, TextNode):
        return nodes.value
    if isinstance(nodes, ElementNode):
        nodes = nodes.children
    return "".join(text_content(node) for node in nodes)


def _serialize_siblings(nodes: Iterable[Node]) -> str:
    parts: list[str] = []
    pending_text: list[str] = []
    for node in nodes:
        if isinstance(node, TextNode):
            pending_text.append(node.value)
            continue
        if pending_text:
            parts.append(_escape_text("".join(pending_text)))
            pending_text = []
        parts.append(_serialize_element(node))
    if pending_text:
        parts.append(_escape_text("".join(pending_text)))
    return "".join(parts)


def _serialize_element(element: ElementNode) -> str:
    attrs = "".join(
        f' {name}="{_escape_attr(value)}"' for name, value in element.attributes.items()
    )
    if element.tag in VOID_TAGS:
        return f"<{element.tag}{attrs}>"
    return f"<{element.tag}{attrs}>{_serialize_siblings(element.children)}</{element.tag}>"


def _escape_text(text: str) -> str:
    text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    return _neutralize(text)


def _escape_attr(value: str) -> str:
    value = (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )
    return _neutralize(value)


def _neutralize(escaped: str) -> str:
    escaped = _SCHEME_RE.sub(r"\1&#58;", escaped)
    return _HANDLER_RE.sub(r"\1&#61;", escaped)

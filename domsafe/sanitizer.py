"""Allowlist tree rewrite: keep, strip attributes from, or unwrap each element."""
from __future__ import annotations

from collections.abc import Iterable

from .nodes import CleanResult, ElementNode, Node, TextNode
from .policy import BLANK_TARGET_REL, is_allowed_tag
from .validator import needs_rel, validate


def clean(node: Node, *, strict_css: bool = False) -> CleanResult:
    """Return a sanitized copy of *node*.

    Text is copied as-is.  Allowed elements are rebuilt with only the
    attributes the validator accepts.  Disallowed elements are unwrapped: the
    result is the list of their cleaned children, so safe descendants survive.
    The input tree is never modified.
    """
    if isinstance(node, TextNode):
        return TextNode(node.value)

    children: list[Node] = []
    for child in node.children:
        result = clean(child, strict_css=strict_css)
        if isinstance(result, list):
            children.extend(result)
        else:
            children.append(result)

    if not is_allowed_tag(node.tag):
        return children

    return ElementNode(
        node.tag,
        clean_attributes(node.tag, node.attributes, strict_css=strict_css),
        children,
    )


def clean_all(nodes: Iterable[Node], *, strict_css: bool = False) -> list[Node]:
    """Clean a list of siblings, flattening unwrapped results in place."""
    out: list[Node] = []
    for node in nodes:
        result = clean(node, strict_css=strict_css)
        if isinstance(result, list):
            out.extend(result)
        else:
            out.append(result)
    return out


def clean_attributes(
    tag: str,
    attributes: dict[str, str],
    *,
    strict_css: bool = False,
    extra_allowed: Iterable[str] = (),
) -> dict[str, str]:
    allowed_extra = frozenset(extra_allowed)
    out: dict[str, str] = {}
    forced_rel = False
    for name, value in attributes.items():
        if name == "rel" and forced_rel:
            continue
        if not validate(tag, name, value, strict_css=strict_css, extra_allowed=allowed_extra):
            continue
        out[name] = value
        if needs_rel(name, value):
            out["rel"] = BLANK_TARGET_REL
            forced_rel = True
    return out


def prune_scripts(nodes: Iterable[Node]) -> list[Node]:
    """Copy *nodes* without ``<script>`` elements or ``on*`` attributes.

    Used by the relaxed insertion mode, which skips the allowlist but never
    lets script through.
    """
    out: list[Node] = []
    for node in nodes:
        if isinstance(node, TextNode):
            out.append(TextNode(node.value))
        elif node.tag != "script":
            attrs = {
                name: value
                for name, value in node.attributes.items()
                if not name.startswith("on")
            }
            out.append(ElementNode(node.tag, attrs, prune_scripts(node.children)))
    return out

"""Minimal document tree produced by the fragment parser."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class TextNode:
    """Character data.  ``value`` is decoded text, never markup."""

    value: str


@dataclass
class ElementNode:
    """An element with ordered attributes and children.

    Attribute names and the tag name are lowercase.  Valueless attributes
    carry an empty string.
    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def append(self, child: "Node") -> None:
        self.children.append(child)

    def replace_children(self, children: list["Node"]) -> None:
        self.children[:] = children


Node = Union[TextNode, ElementNode]
# A single node, or the promoted children of an unwrapped element.
CleanResult = Union[Node, list[Node]]

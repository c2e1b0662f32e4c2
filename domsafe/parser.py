"""Best-effort HTML fragment parser producing :mod:`domsafe.nodes` trees."""
from __future__ import annotations

from html.parser import HTMLParser

from .errors import HTMLParseError
from .nodes import ElementNode, Node, TextNode

VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)
# Inside these, ``<tag/>`` is a complete element.
FOREIGN_ROOTS = frozenset({"svg", "math"})

DEFAULT_MAX_DEPTH = 256


def parse_fragment(html: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Node]:
    """Parse *html* into a list of top-level nodes.

    Character references are decoded in text and attribute values.  Comments,
    doctypes and processing instructions are dropped.  End tags close the
    nearest open element with the same name; stray end tags are ignored.

    Elements opened below *max_depth* levels are attached empty at the limit
    and their content flows into the deepest open element, so the tree never
    grows deeper than ``max_depth + 1``.  A trailing ``/>`` only closes void
    elements and elements inside ``<svg>`` or ``<math>``.

    Raises:
        HTMLParseError: the underlying tokenizer rejected the input.
    """
    builder = _TreeBuilder(max_depth=max_depth)
    try:
        builder.feed(html)
        builder.close()
    except HTMLParseError:
        raise
    except (AssertionError, ValueError) as exc:
        raise HTMLParseError(f"Could not parse HTML fragment: {exc}") from exc
    return builder.roots


class _TreeBuilder(HTMLParser):
    """Stack-based tree construction on top of the stdlib tokenizer."""

    def __init__(self, *, max_depth: int) -> None:
        super().__init__(convert_charrefs=True)
        self._max_depth = max_depth
        self._open: list[ElementNode] = []
        # Tag names opened past the depth limit, still awaiting their end tag.
        self._overflow: list[str] = []
        self.roots: list[Node] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        element = self._add_element(tag, attrs)
        if element.tag in VOID_TAGS:
            return
        if len(self._open) >= self._max_depth:
            self._overflow.append(element.tag)
            return
        self._open.append(element)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        lname = tag.lower()
        if lname in VOID_TAGS or lname in FOREIGN_ROOTS or self._in_foreign_content():
            self._add_element(tag, attrs)
        else:
            # <div/> opens a div, as in a browser.
            self.handle_starttag(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        lname = tag.lower()
        for index in range(len(self._overflow) - 1, -1, -1):
            if self._overflow[index] == lname:
                del self._overflow[index:]
                return
        for index in range(len(self._open) - 1, -1, -1):
            if self._open[index].tag == lname:
                del self._open[index:]
                self._overflow.clear()
                return

    def handle_data(self, data: str) -> None:
        if not data:
            return
        siblings = self._open[-1].children if self._open else self.roots
        if siblings and isinstance(siblings[-1], TextNode):
            siblings[-1].value += data
        else:
            siblings.append(TextNode(data))

    def _add_element(self, tag: str, attrs: list[tuple[str, str | None]]) -> ElementNode:
        element = ElementNode(tag.lower(), _collect_attributes(attrs))
        if self._open:
            self._open[-1].append(element)
        else:
            self.roots.append(element)
        return element

    def _in_foreign_content(self) -> bool:
        return any(element.tag in FOREIGN_ROOTS for element in self._open)


def _collect_attributes(attrs: list[tuple[str, str | None]]) -> dict[str, str]:
    out: dict[str, str] = {}
    for name, value in attrs:
        if not name:
            continue
        key = name.lower()
        # First occurrence wins, as in browsers.
        if key not in out:
            out[key] = "" if value is None else value
    return out

"""Public sanitizing entry points."""
from __future__ import annotations

import re
import warnings
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from .config import Config, load_config, load_config_from_dict
from .errors import SanitizerWarning
from .nodes import ElementNode, Node, TextNode
from .parser import parse_fragment
from .policy import URL_ATTRIBUTES
from .prepass import strip, strip_minimal
from .sanitizer import clean_all, clean_attributes, prune_scripts
from .serializer import serialize as serialize_nodes
from .validator import is_safe_url

Parser = Callable[[str], list[Node]]
Serializer = Callable[[list[Node]], str]
ConfigLike = Config | Mapping[str, Any] | str | Path | None

_TAG_NAME_RE = re.compile(r"^[a-z][a-z0-9-]*$")
# Elements that execute or embed content the moment they are inserted.
_UNCREATABLE_TAGS = frozenset(
    {"script", "style", "iframe", "embed", "object", "meta", "link", "base"}
)
# Always settable through safe_create_element, whatever the tag allows.
_CREATE_EXTRA_ATTRIBUTES = frozenset({"class", "id"})

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def sanitize_html(
    raw: str | None,
    *,
    config: ConfigLike = None,
    parse: Parser | None = None,
    serialize: Serializer = serialize_nodes,
) -> str:
    """Return *raw* reduced to allowlisted tags and attributes.

    Args:
        raw: Untrusted markup.  ``None`` and non-strings produce ``""``.
        config: ``None``, a ``Config``, a dict-like mapping, or a YAML path.
        parse: Fragment parser; defaults to :func:`domsafe.parser.parse_fragment`
            bounded by ``config.safety.max_depth``.
        serialize: Turns the cleaned node list back into markup.

    If *parse* raises, the regex-stripped markup is returned instead of the
    tree-sanitized result and a :class:`SanitizerWarning` is emitted.
    """
    if not raw or not isinstance(raw, str):
        return ""
    resolved = _resolve_config(config)
    stripped = strip(raw)
    try:
        nodes = _parse(stripped, resolved, parse)
    except Exception as exc:
        warnings.warn(
            f"HTML parse failed; falling back to regex stripping: {exc}",
            SanitizerWarning,
            stacklevel=2,
        )
        return strip_minimal(stripped)

    result = serialize(clean_all(nodes, strict_css=resolved.strict_css))
    if resolved.warn_on_empty and not result and raw.strip():
        warnings.warn(
            f"Sanitized HTML is empty (input length {len(raw)})",
            SanitizerWarning,
            stacklevel=2,
        )
    return result


def escape_html(text: str | None) -> str:
    """Entity-escape ``& < > " '``.  ``None`` and non-strings produce ``""``."""
    if not text or not isinstance(text, str):
        return ""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def safe_create_fragment(
    raw: str | None,
    *,
    config: ConfigLike = None,
    parse: Parser | None = None,
) -> list[Node]:
    """Like :func:`sanitize_html`, but return the cleaned, detached nodes.

    On parse failure the regex-stripped markup comes back as a single text
    node: visible, never interpreted.
    """
    if not raw or not isinstance(raw, str):
        return []
    resolved = _resolve_config(config)
    stripped = strip(raw)
    try:
        nodes = _parse(stripped, resolved, parse)
    except Exception as exc:
        warnings.warn(
            f"HTML parse failed; inserting stripped markup as text: {exc}",
            SanitizerWarning,
            stacklevel=2,
        )
        fallback = strip_minimal(stripped)
        return [TextNode(fallback)] if fallback else []
    return clean_all(nodes, strict_css=resolved.strict_css)


def safe_set_html(
    target: ElementNode,
    raw: str | None,
    *,
    sanitize: bool = True,
    config: ConfigLike = None,
    parse: Parser | None = None,
) -> None:
    """Replace the children of *target* with nodes parsed from *raw*.

    With ``sanitize=False`` the allowlist is skipped, for markup the
    application generated itself, but ``<script>`` blocks and ``on*``
    handlers are still removed.  A *target* that is not an
    :class:`ElementNode` is reported with a warning and left alone.
    """
    if not isinstance(target, ElementNode):
        warnings.warn(
            f"safe_set_html: invalid target {type(target).__name__}; nothing set",
            SanitizerWarning,
            stacklevel=2,
        )
        return
    if not isinstance(raw, str):
        raw = ""

    if sanitize:
        target.replace_children(safe_create_fragment(raw, config=config, parse=parse))
        return

    resolved = _resolve_config(config)
    cleaned = strip_minimal(raw)
    try:
        nodes = prune_scripts(_parse(cleaned, resolved, parse))
    except Exception as exc:
        warnings.warn(
            f"HTML parse failed in relaxed mode; inserting markup as text: {exc}",
            SanitizerWarning,
            stacklevel=2,
        )
        nodes = [TextNode(cleaned)] if cleaned else []

    if resolved.warn_on_empty and not nodes and raw.strip():
        warnings.warn(
            f"Relaxed cleaning left no content (input length {len(raw)})",
            SanitizerWarning,
            stacklevel=2,
        )
    target.replace_children(nodes)


def safe_set_text(target: ElementNode, text: Any) -> None:
    """Replace the children of *target* with a single text node.

    Falsy values (``None``, ``""``, ``0``, ``False``) clear *target*.
    """
    if not isinstance(target, ElementNode):
        warnings.warn(
            f"safe_set_text: invalid target {type(target).__name__}; nothing set",
            SanitizerWarning,
            stacklevel=2,
        )
        return
    if not text:
        target.replace_children([])
    else:
        target.replace_children([TextNode(str(text))])


def safe_create_element(
    tag: str,
    attrs: Mapping[str, Any] | None = None,
    content: str | Node | Iterable[Node | str] | None = None,
    *,
    config: ConfigLike = None,
    parse: Parser | None = None,
) -> ElementNode:
    """Build an element whose attributes pass the validator.

    ``class`` and ``id`` are accepted on any tag.  A mapping given for
    ``style`` is rendered as ``prop: value; ...`` and checked like any style
    string.  *content* may be markup (sanitized), a node, or a list of nodes
    and strings; strings in a list become text nodes.

    Raises:
        ValueError: *tag* is not a plain element name, or names an element
            that runs or embeds content on insertion.
    """
    name = str(tag).strip().lower()
    if not _TAG_NAME_RE.match(name) or name in _UNCREATABLE_TAGS:
        raise ValueError(f"Refusing to create element {tag!r}")

    resolved = _resolve_config(config)
    element = ElementNode(name)

    candidates: dict[str, str] = {}
    extra = set(_CREATE_EXTRA_ATTRIBUTES)
    for key, value in (attrs or {}).items():
        attr = str(key).strip().lower()
        if attr == "style" and isinstance(value, Mapping):
            value = "; ".join(f"{prop}: {val}" for prop, val in value.items())
            extra.add("style")
        value = "" if value is None else str(value)
        if attr in URL_ATTRIBUTES and not is_safe_url(value):
            warnings.warn(
                f"safe_create_element: dropping unsafe {attr} {value!r}",
                SanitizerWarning,
                stacklevel=2,
            )
            continue
        candidates[attr] = value
    element.attributes = clean_attributes(
        name, candidates, strict_css=resolved.strict_css, extra_allowed=extra
    )

    if content is None:
        return element
    if isinstance(content, str):
        element.replace_children(safe_create_fragment(content, config=resolved, parse=parse))
    elif isinstance(content, (TextNode, ElementNode)):
        element.append(content)
    else:
        for item in content:
            if isinstance(item, (TextNode, ElementNode)):
                element.append(item)
            elif isinstance(item, str):
                element.append(TextNode(item))
    return element


def _parse(markup: str, config: Config, parse: Parser | None) -> list[Node]:
    if parse is None:
        return parse_fragment(markup, max_depth=config.safety.max_depth)
    return parse(markup)


def _resolve_config(config: ConfigLike) -> Config:
    if config is None:
        return Config()
    if isinstance(config, Config):
        return config
    if isinstance(config, Mapping):
        return load_config_from_dict(config)
    if isinstance(config, (str, Path)):
        return load_config(Path(config))
    raise TypeError(
        "config must be None, Config, dict-like mapping, or a config file path."
    )

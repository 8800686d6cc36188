"""Generic HTML-shaped node tree consumed by the schedule parsers.

Provides:
- Node: a tagged element with optional attributes and optional children
- Child: ``str | Node`` -- text content is always a plain ``str``
- node_from_dict: build a tree from a scrape-service mapping
- node_from_html: build a tree from raw HTML (BeautifulSoup + lxml)
- tree_from_payload: unwrap the tree held under a payload's ``html`` key
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

from bs4 import BeautifulSoup, NavigableString, Tag

from footballtv.exceptions import PayloadError

logger = logging.getLogger(__name__)

# Top-level key the scrape service stores the root node under
PAYLOAD_ROOT_KEY = "html"


@dataclass
class Node:
    """A tagged tree element.

    ``children is None`` marks a leaf (e.g. ``<img>``). Parsers only read
    nodes; the provider that built the tree owns it.
    """

    tag: str
    attrs: dict[str, str] | None = None
    children: list["Child"] | None = None


Child = Union[str, Node]


def node_from_dict(data: Mapping) -> Node:
    """Build a Node tree from a ``{"tag", "attrs", "children"}`` mapping.

    Children may be strings (text) or nested mappings. Anything else in a
    children list is dropped.

    Raises:
        PayloadError: If a node mapping has no string ``tag``.
    """
    tag = data.get("tag")
    if not isinstance(tag, str) or not tag:
        raise PayloadError(f"Node mapping without a tag: {sorted(data)!r}")

    raw_attrs = data.get("attrs")
    attrs = None
    if isinstance(raw_attrs, Mapping):
        attrs = {str(k): str(v) for k, v in raw_attrs.items()}

    raw_children = data.get("children")
    children: list[Child] | None = None
    if isinstance(raw_children, list):
        children = []
        for child in raw_children:
            if isinstance(child, str):
                children.append(child)
            elif isinstance(child, Mapping):
                children.append(node_from_dict(child))
            else:
                logger.debug("Dropping non-node child of <%s>: %r", tag, child)

    return Node(tag=tag, attrs=attrs, children=children)


def tree_from_payload(payload: object) -> Node:
    """Return the root Node stored under the payload's ``html`` key.

    Raises:
        PayloadError: If the payload is not a mapping or lacks the key.
    """
    if not isinstance(payload, Mapping):
        raise PayloadError(
            f"Scrape payload must be an object, got {type(payload).__name__}"
        )
    root = payload.get(PAYLOAD_ROOT_KEY)
    if not isinstance(root, Mapping):
        raise PayloadError(f"Scrape payload has no {PAYLOAD_ROOT_KEY!r} tree")
    return node_from_dict(root)


def _convert_tag(tag: Tag) -> Node:
    attrs: dict[str, str] = {}
    for name, value in tag.attrs.items():
        # bs4 splits multi-valued attributes (class, rel) into lists
        if isinstance(value, list):
            value = " ".join(value)
        attrs[name] = value

    children: list[Child] = []
    for child in tag.children:
        if isinstance(child, Tag):
            children.append(_convert_tag(child))
        elif type(child) is NavigableString:
            # Comments, CDATA and doctypes are NavigableString subclasses
            text = child.strip()
            if text:
                children.append(text)

    return Node(
        tag=tag.name,
        attrs=attrs or None,
        children=children or None,
    )


def node_from_html(html: str) -> Node:
    """Parse raw HTML into a Node tree rooted at the ``<html>`` element.

    Text is stripped and whitespace-only text dropped, so a block's first
    child is its first element or real text, as the scrape service emits
    it. Elements with no remaining content become leaves.

    Raises:
        PayloadError: If the document contains no element at all.
    """
    soup = BeautifulSoup(html, "lxml")
    root = soup.find("html") or soup.find(True)
    if root is None:
        raise PayloadError("HTML document has no elements")
    return _convert_tag(root)

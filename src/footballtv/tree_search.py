"""Recursive search primitives over a Node tree.

Both searches are pre-order, collect matches in document order, and keep
descending into a matched node's children, so nested matches are returned
too. Text children are never descended into.
"""

from typing import Callable

from footballtv.tree import Node

# Children of a joined node are separated the way the scrape service
# historically joined text fragments.
TEXT_SEPARATOR = ","


def node_class(node: Node) -> str:
    """Return the node's whole ``class`` attribute, or ``""``."""
    if node.attrs is not None and node.attrs.get("class"):
        return node.attrs["class"]
    return ""


def node_attr(node: Node, name: str) -> str | None:
    """Return an attribute value.

    ``""`` for a node without any attributes, ``None`` when the node has
    attributes but not *name*.
    """
    if node.attrs is None:
        return ""
    return node.attrs.get(name)


def join_text(node: Node) -> str:
    """Join a node's direct text children with ``TEXT_SEPARATOR``."""
    if not node.children:
        return ""
    return TEXT_SEPARATOR.join(
        child for child in node.children if isinstance(child, str)
    )


def _walk(
    node: Node, predicate: Callable[[Node], bool], results: list[Node]
) -> list[Node]:
    if predicate(node):
        results.append(node)
    for child in node.children or ():
        if isinstance(child, Node):
            _walk(child, predicate, results)
    return results


def find_by_class(root: Node, class_name: str) -> list[Node]:
    """Find every node whose ``class`` contains *class_name*.

    A node qualifies when its class value equals *class_name* or, split on
    single spaces, contains it exactly. Nodes without a class never qualify.
    """

    def has_class(node: Node) -> bool:
        value = node_class(node)
        if not value:
            return False
        return value == class_name or class_name in value.split(" ")

    return _walk(root, has_class, [])


def find_by_tag(root: Node, tag_name: str) -> list[Node]:
    """Find every node with tag *tag_name* that also carries a class.

    Unclassed elements are not returned: ``<span>Foo</span>`` does not
    match, ``<span class="name">Foo</span>`` does. The schedule markup
    classes every element the parsers look up this way.
    """
    return _walk(
        root, lambda node: bool(node_class(node)) and node.tag == tag_name, []
    )

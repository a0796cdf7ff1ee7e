"""Bridge between wire trees and ElementTree elements.

Parsing and printing stay with :mod:`xml.etree.ElementTree`; these helpers
only move between its element model and :class:`rpcwire.types.Node`.

Example:
    >>> import xml.etree.ElementTree as ET
    >>> node = from_element(ET.fromstring("<value><int>7</int></value>"))
    >>> node
    Node(tag='value', children=[Node(tag='int', children=['7'])])
    >>> ET.tostring(to_element(node), encoding="unicode")
    '<value><int>7</int></value>'
"""

import xml.etree.ElementTree as ET

from rpcwire.types import Node


def from_element(element: ET.Element) -> Node:
    """Convert an ElementTree element to a Node.

    ``element.text`` and each child's ``tail`` become text tokens in
    document order. Comments and processing instructions are dropped,
    but their tails are kept.
    """
    node = Node(element.tag)
    if element.text:
        node.children.append(element.text)

    for child in element:
        if isinstance(child.tag, str):
            node.children.append(from_element(child))
        if child.tail:
            _append_text(node, child.tail)

    return node


def to_element(node: Node) -> ET.Element:
    """Convert a Node to an ElementTree element.

    Text tokens before the first child go to ``text``; tokens after a child
    go to that child's ``tail``.
    """
    element = ET.Element(node.tag)
    last = None

    for child in node.children:
        if isinstance(child, Node):
            last = to_element(child)
            element.append(last)
        elif last is None:
            element.text = (element.text or "") + child
        else:
            last.tail = (last.tail or "") + child

    return element


def _append_text(node: Node, text: str) -> None:
    # Merge with a preceding token so a dropped comment doesn't split text
    if node.children and isinstance(node.children[-1], str):
        node.children[-1] += text
    else:
        node.children.append(text)

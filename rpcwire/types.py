"""Core data types for rpcwire."""

from dataclasses import dataclass, field
from typing import Union


@dataclass
class Node:
    """A node of the generic XML-RPC wire tree.

    Attributes:
        tag: Element name, e.g. "value", "int", "struct"
        children: Ordered child nodes and raw text tokens
    """
    tag: str
    children: list[Union["Node", str]] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Concatenation of the node's direct text tokens."""
        return "".join(child for child in self.children if isinstance(child, str))

    def nodes(self) -> list["Node"]:
        """Return the nested child nodes, skipping text tokens."""
        return [child for child in self.children if isinstance(child, Node)]


@dataclass(frozen=True)
class Label:
    """A symbol-like atom.

    Labels serialise exactly like strings, so decoding a ``string`` node
    always yields ``str``; the Label/Text distinction does not survive
    the wire.

    Attributes:
        name: Textual form of the label
    """
    name: str

    def __str__(self) -> str:
        return self.name

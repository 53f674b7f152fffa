"""Markup tree model: Element and Text nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class Props:
    """Attributes of an element.

    Attributes:
        style: Computed style filled in by the cascade.
        classes: Class names in source order.
        id: The element id, if any.
        inline_style: Author-declared style parsed from the ``style`` attribute.
        attrs: Any other attribute, copied through as-is.
    """

    style: dict[str, str] = field(default_factory=dict)
    classes: list[str] = field(default_factory=list)
    id: str | None = None
    inline_style: dict[str, str] = field(default_factory=dict)
    attrs: dict[str, str] = field(default_factory=dict)

    def copy(self) -> Props:
        return Props(
            style=dict(self.style),
            classes=list(self.classes),
            id=self.id,
            inline_style=dict(self.inline_style),
            attrs=dict(self.attrs),
        )


@dataclass
class Text:
    """A run of raw text inside an element."""

    content: str
    index: int = 0  # 1-based position among siblings

    def to_dict(self) -> dict[str, Any]:
        return {"element": "text", "children": [{"innerText": self.content}], "childIndex": self.index}


@dataclass
class Element:
    """A markup element with props and ordered children."""

    tag: str
    props: Props = field(default_factory=Props)
    children: list[Node] = field(default_factory=list)
    index: int = 0  # 1-based position among siblings

    def append(self, child: Node) -> Node:
        """Append *child*, assigning it the next sibling index."""
        child.index = len(self.children) + 1
        self.children.append(child)
        return child

    def elements(self) -> list[Element]:
        """Return the element children, skipping text."""
        return [c for c in self.children if isinstance(c, Element)]

    def text(self) -> str:
        """Concatenate all descendant text, depth first."""
        parts: list[str] = []
        for child in self.children:
            parts.append(child.content if isinstance(child, Text) else child.text())
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        props: dict[str, Any] = {
            "style": dict(self.props.style),
            "class": list(self.props.classes),
            "id": self.props.id,
            "inlineStyle": dict(self.props.inline_style),
        }
        props.update(self.props.attrs)
        return {
            "element": self.tag,
            "props": props,
            "children": [c.to_dict() for c in self.children],
            "childIndex": self.index,
        }


Node = Union[Element, Text]


def tree_to_dicts(nodes: list[Node]) -> list[dict[str, Any]]:
    """Convert a list of nodes into JSON-ready dictionaries."""
    return [n.to_dict() for n in nodes]

"""
Document tree models

Defines the mdast-style node shapes that flow through the directive
transformer: directive nodes produced by an upstream directive parser,
and the JSX element nodes handed to a downstream MDX compiler.

All node kinds share a single ``Node`` dataclass discriminated by its
``type`` string, so a directive can be lowered to an element by rewriting
its fields in place (see ``Node.contents_replace``).
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Union


class NodeType(str, Enum):
    """
    Node type strings understood by the transformer

    Any other string is a legal ``Node.type``; such nodes are walked
    but never rewritten.
    """
    ROOT = "root"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    CONTAINER_DIRECTIVE = "containerDirective"   # :::name[label]{...}
    LEAF_DIRECTIVE = "leafDirective"             # ::name{...}
    TEXT_DIRECTIVE = "textDirective"             # :name[...]{...}
    JSX_FLOW_ELEMENT = "mdxJsxFlowElement"
    JSX_TEXT_ELEMENT = "mdxJsxTextElement"
    JSX_ATTRIBUTE = "mdxJsxAttribute"


DIRECTIVE_TYPES: FrozenSet[str] = frozenset({
    NodeType.CONTAINER_DIRECTIVE.value,
    NodeType.LEAF_DIRECTIVE.value,
    NodeType.TEXT_DIRECTIVE.value,
})


@dataclass
class NodeData:
    """
    Metadata bag shared between passes

    Attributes:
        hName: Element name assigned by a pass that already lowered this
               directive for HTML output. Not ``None`` means "already
               lowered".
        directiveLabel: Marks the first paragraph of a container directive
                        as that directive's label.
        explicitJsx: Marks an element as explicitly authored, as opposed
                     to one inferred by a later stage.
        extra: Metadata owned by other passes, carried through untouched.
    """
    hName: Optional[str] = None
    directiveLabel: bool = False
    explicitJsx: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class JsxAttribute:
    """
    A single ``name="value"`` attribute on a JSX element

    ``value`` of ``None`` renders as a bare attribute (``<x disabled />``).
    """
    name: str
    value: Optional[str] = None
    type: str = field(default=NodeType.JSX_ATTRIBUTE.value, init=False)


DirectiveAttributes = Dict[str, Optional[str]]


@dataclass
class Node:
    """
    A node in the document tree

    Attributes:
        type: Node kind (see NodeType)
        children: Ordered child nodes
        name: Directive or element name
        attributes: Directives carry a name -> value mapping (or ``None``);
                    JSX elements carry a list of JsxAttribute records
        value: Literal content (text nodes)
        data: Cross-pass metadata
        position: Source location, opaque to this package

    Example:
        Node(
            type="leafDirective",
            name="fancy-button",
            attributes={"disabled": None},
        )
    """
    type: str
    children: List['Node'] = field(default_factory=list)
    name: Optional[str] = None
    attributes: Optional[Union[DirectiveAttributes, List[JsxAttribute]]] = None
    value: Optional[str] = None
    data: Optional[NodeData] = None
    position: Optional[Dict[str, Any]] = None

    def contents_replace(self, other: 'Node') -> None:
        """
        Overwrite this node's structural fields with those of ``other``

        The node keeps its identity, so any parent holding it sees the new
        contents. ``value`` and ``position`` are left as they were.
        """
        self.type = other.type
        self.name = other.name
        self.attributes = other.attributes
        self.children = other.children
        self.data = other.data

    def directive_is(self) -> bool:
        """Check if this node is one of the three directive kinds"""
        return self.type in DIRECTIVE_TYPES

    def lowered_is(self) -> bool:
        """Check if another pass already lowered this node (``data.hName`` set)"""
        return self.data is not None and self.data.hName is not None

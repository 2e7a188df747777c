"""
Node builders

Constructors for the JSX element and attribute nodes the transformer
emits, plus node_make() for building arbitrary trees by hand.
"""

from typing import Any, Callable, List, Optional

from ..models.ast import (
    DirectiveAttributes,
    JsxAttribute,
    Node,
    NodeData,
    NodeType,
)


def attribute_make(name: str, value: Optional[str]) -> JsxAttribute:
    """Make a JSX attribute from a name and a literal value"""
    return JsxAttribute(name=name, value=value)


def flowElement_make(
    name: Optional[str], attrs: List[JsxAttribute], children: List[Node]
) -> Node:
    """
    Make a block-level (flow) JSX element

    The element is marked as explicitly authored so the MDX compiler does
    not treat it as one it inferred from markdown.
    """
    return Node(
        type=NodeType.JSX_FLOW_ELEMENT.value,
        name=name,
        attributes=attrs,
        children=children,
        data=NodeData(explicitJsx=True),
    )


def textElement_make(
    name: Optional[str], attrs: List[JsxAttribute], children: List[Node]
) -> Node:
    """Make an inline (text) JSX element, marked as explicitly authored"""
    return Node(
        type=NodeType.JSX_TEXT_ELEMENT.value,
        name=name,
        attributes=attrs,
        children=children,
        data=NodeData(explicitJsx=True),
    )


def attributes_build(
    tag: str,
    attributes: Optional[DirectiveAttributes],
    transform: Callable[[str, str], str],
) -> List[JsxAttribute]:
    """
    Convert a directive's attribute mapping to JSX attributes

    Args:
        tag: Element name, already transformed, passed to ``transform``
        attributes: Directive attributes in source order, or None
        transform: Attribute name transform ``(tag, attr) -> attr``

    Returns:
        JSX attributes in the mapping's insertion order
    """
    return [
        attribute_make(transform(tag, attr), value)
        for attr, value in (attributes or {}).items()
    ]


def node_make(
    type: str,
    children: Optional[List[Node]] = None,
    *,
    value: Optional[str] = None,
    **fields: Any,
) -> Node:
    """
    Make a node of any type

    Example:
        >>> node_make('paragraph', [node_make('text', value='Hi')])
        Node(type='paragraph', children=[Node(type='text', ..., value='Hi', ...)], ...)

        >>> node_make('leafDirective', name='fancy-button', attributes={'disabled': None})
    """
    return Node(
        type=type,
        children=children if children is not None else [],
        value=value,
        **fields,
    )

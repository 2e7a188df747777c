"""
Tree walker

Pre-order, depth-first traversal of a document tree in document order.

A node's children are read only after its visitor returns, so a visitor
that rewrites a node in place (including replacing or extending its
``children``) has the new children walked in the same pass.
"""

from enum import Enum
from typing import Any, Callable, Collection, List, Optional, Union

from ..models.ast import Node


class VisitAction(Enum):
    """What the walker does after a visitor returns"""
    CONTINUE = "continue"   # walk into children, then siblings
    SKIP = "skip"           # do not walk into this node's children
    EXIT = "exit"           # stop the whole walk


Visitor = Callable[[Node, Optional[int], Optional[Node]], Optional[VisitAction]]
NodeTest = Optional[Union[str, Collection[str]]]


def nodeType_matches(test: NodeTest, node: Node) -> bool:
    """
    Check a node against a type test

    ``None`` matches everything, a string matches that type, a collection
    matches any type it contains.
    """
    if test is None:
        return True
    if isinstance(test, str):
        return node.type == test
    return node.type in test


def tree_visit(tree: Node, test: NodeTest, visitor: Visitor) -> None:
    """
    Walk ``tree`` and call ``visitor(node, index, parent)`` on matching nodes

    Args:
        tree: Root node
        test: Node type filter (see nodeType_matches)
        visitor: Callback; returning None means VisitAction.CONTINUE

    Example:
        >>> tree_visit(root, 'text', lambda node, index, parent: print(node.value))
    """

    def node_enter(node: Node, index: Optional[int], parent: Optional[Node]) -> Optional[VisitAction]:
        if nodeType_matches(test, node):
            return visitor(node, index, parent)
        return None

    action = node_enter(tree, None, None)
    if action is VisitAction.EXIT or action is VisitAction.SKIP:
        return

    # Explicit stack so nesting depth is not bounded by the recursion limit.
    # Each frame is [parent, children read after the parent's visitor, next position].
    stack: List[List[Any]] = [[tree, tree.children, 0]]
    while stack:
        frame = stack[-1]
        parent, children, position = frame
        # Length re-read on each step: visitors may append to the list
        if position >= len(children):
            stack.pop()
            continue
        frame[2] = position + 1

        node = children[position]
        action = node_enter(node, position, parent)
        if action is VisitAction.EXIT:
            return
        if action is not VisitAction.SKIP:
            stack.append([node, node.children, 0])

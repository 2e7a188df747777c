"""
Directive to JSX transformer

Rewrites directive nodes into MDX JSX element nodes. Intended to run after
a directive parser (remark-directive style) and before an MDX compiler.

The directive name becomes the element name and directive attributes
become JSX attributes:

    :::Note{type="warning"}
    This is a :span[warning]{.red} note.
    :::

becomes

    <Note type="warning">
      This is a <span class="red">warning</span> note.
    </Note>

Attribute values are always literal strings, never expressions.

Nodes are rewritten in place during a single pre-order walk, so a
directive nested inside a transformed container is reached and rewritten
in the same pass, and parents never need rebuilding.
"""

import dataclasses
from typing import Any, Callable, Dict, Optional

from ..models.ast import DIRECTIVE_TYPES, Node, NodeType
from ..models.options import Options
from ..models.state import TransformStats
from .builder import attributes_build, flowElement_make, textElement_make
from .label import label_extract
from .log import LOG
from .visit import tree_visit


class DirectiveTransformer:
    """
    Tree transformer lowering directives to JSX elements

    Responsibilities:
    - Walk the tree and select container/leaf/text directives
    - Apply skip and filter policy
    - Build the matching JSX element and write it into the directive node
    - Extract container labels and pass them to the label hook

    Hook failures are not caught: an exception raised by a hook aborts the
    rest of the pass and propagates to the caller.
    """

    def __init__(self, options: Optional[Options] = None, **overrides: Any) -> None:
        """
        Initialize transformer

        Args:
            options: Transformer options; defaults to Options()
            **overrides: Individual option fields replacing those in
                         ``options`` (e.g. ``skip_transformed=False``)

        Raises:
            TypeError: if an override is not an Options field
        """
        if options is None:
            options = Options()
        if overrides:
            options = dataclasses.replace(options, **overrides)
        self.options = options
        self.stats = TransformStats()
        self.handlers: Dict[str, Callable[[Node], Node]] = {
            NodeType.CONTAINER_DIRECTIVE.value: self.containerDirective_transform,
            NodeType.LEAF_DIRECTIVE.value: self.leafDirective_transform,
            NodeType.TEXT_DIRECTIVE.value: self.textDirective_transform,
        }

    def __call__(self, tree: Node) -> None:
        self.tree_transform(tree)

    def tree_transform(self, tree: Node) -> TransformStats:
        """
        Transform every eligible directive in ``tree`` in place

        Args:
            tree: Root of the document tree

        Returns:
            Counters for this pass (also kept on ``self.stats``)
        """
        self.stats = TransformStats()
        LOG("Transforming directives...", level=2)

        tree_visit(tree, DIRECTIVE_TYPES, self.node_visit)

        LOG(self.stats.summary_make(), level=2)
        return self.stats

    def node_visit(self, node: Node, index: Optional[int], parent: Optional[Node]) -> None:
        """Apply skip/filter policy to one directive, then transform it"""
        self.stats.visited += 1

        if self.options.skip_transformed and node.lowered_is():
            LOG(f"Skipping lowered directive '{node.name}' (hName={node.data.hName})", level=3)
            self.stats.skipped += 1
            return

        if not self.options.filter(node):
            LOG(f"Filtered out directive '{node.name}'", level=3)
            self.stats.filtered += 1
            return

        self.node_transform(node)

    def node_transform(self, node: Node) -> None:
        """
        Rewrite a single directive node into a JSX element in place

        Args:
            node: Container, leaf or text directive
        """
        element = self.handlers[node.type](node)
        LOG(f"{node.type} '{node.name}' -> {element.type} '{element.name}'", level=3)
        node.contents_replace(element)
        self.stats.transformed += 1

    def containerDirective_transform(self, node: Node) -> Node:
        """
        Build a flow element from a container directive

        The label paragraph (if any) is left out of the children and passed
        to the label hook once the element exists.
        """
        tag = self.options.transform_tag(node.name)
        children, label = label_extract(node.children)
        element = flowElement_make(
            tag,
            attributes_build(tag, node.attributes, self.options.transform_attribute),
            children,
        )
        if label is not None:
            self.stats.labels += 1
            self.options.handle_label(element, label.children)
        return element

    def leafDirective_transform(self, node: Node) -> Node:
        """Build a flow element from a leaf directive"""
        tag = self.options.transform_tag(node.name)
        return flowElement_make(
            tag,
            attributes_build(tag, node.attributes, self.options.transform_attribute),
            node.children,
        )

    def textDirective_transform(self, node: Node) -> Node:
        """Build a text (inline) element from a text directive"""
        tag = self.options.transform_tag(node.name)
        return textElement_make(
            tag,
            attributes_build(tag, node.attributes, self.options.transform_attribute),
            node.children,
        )


def directive_mdx(options: Optional[Options] = None, **overrides: Any) -> DirectiveTransformer:
    """
    Create a directive-to-JSX tree transformer

    Args:
        options: Transformer options (defaults apply when omitted)
        **overrides: Individual option fields, e.g.
                     ``directive_mdx(handle_label=label_appendAsSlot)``

    Returns:
        Callable taking the tree root and rewriting it in place

    Example:
        >>> transform = directive_mdx(transform_tag=tag_normalize())
        >>> transform(tree)
    """
    return DirectiveTransformer(options, **overrides)

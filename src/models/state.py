"""
Per-pass statistics and pipeline helper

Defines TransformStats, the counters a DirectiveTransformer keeps for one
pass over a tree, and the pipeline() helper for composing tree
transformers.
"""

from functools import reduce
from typing import Callable, Optional
from dataclasses import dataclass, field

from .ast import Node


Transformer = Callable[[Node], Optional[Node]]


@dataclass
class TransformStats:
    """
    Counters for a single transformer pass

    Attributes:
        visited: Directive nodes reached by the walk
        transformed: Directives rewritten to JSX elements
        skipped: Directives left alone because another pass lowered them
        filtered: Directives rejected by the filter hook
        labels: Container labels handed to the label hook
    """
    visited: int = field(default=0)
    transformed: int = field(default=0)
    skipped: int = field(default=0)
    filtered: int = field(default=0)
    labels: int = field(default=0)

    def summary_make(self) -> str:
        """One-line summary for logging"""
        return (
            f"{self.transformed}/{self.visited} directives transformed "
            f"({self.skipped} skipped, {self.filtered} filtered, {self.labels} labels)"
        )


def pipeline(tree: Node, *stages: Transformer) -> Node:
    """
    Apply a sequence of tree transformers.

    Each stage receives the tree produced by the previous one. A stage that
    mutates in place and returns ``None`` keeps the current tree; a stage
    that returns a node replaces it.

    Args:
        tree: Root of the document tree
        *stages: Transformers to apply in order

    Returns:
        Final tree

    Example:
        tree = pipeline(tree, directive_mdx(), directive_mdx(filter=...))
    """
    def stage_apply(current: Node, stage: Transformer) -> Node:
        result = stage(current)
        return current if result is None else result

    return reduce(stage_apply, stages, tree)

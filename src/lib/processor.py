"""
Processor for chaining tree transformers

    processor = Processor().use(directive_mdx, handle_label=label_appendAsSlot)
    tree = processor.run(tree)
"""

from typing import Any, Callable, List, Optional

from ..config import appsettings
from ..models.ast import Node
from ..models.state import Transformer, pipeline
from .log import LOG, state_connectToLogger, state_disconnectFromLogger


class Processor:
    """
    Ordered set of tree transformers applied to a document tree

    Attributes:
        verbosity: Logging verbosity while running (0-3)
        transformers: Transformers in the order they are applied
    """

    def __init__(self, verbosity: Optional[int] = None) -> None:
        self.verbosity = appsettings.verbosity if verbosity is None else verbosity
        self.transformers: List[Transformer] = []

    def use(self, plugin: Callable[..., Transformer], *args: Any, **kwargs: Any) -> 'Processor':
        """
        Add a transformer built by ``plugin(*args, **kwargs)``

        Returns:
            This processor, for chaining
        """
        self.transformers.append(plugin(*args, **kwargs))
        return self

    def run(self, tree: Node) -> Node:
        """
        Apply all transformers to ``tree``

        Returns:
            The transformed tree (the same root unless a transformer
            returned a replacement)
        """
        token = state_connectToLogger(self)
        try:
            LOG(f"Running {len(self.transformers)} transformer(s)", level=2)
            return pipeline(tree, *self.transformers)
        finally:
            state_disconnectFromLogger(token)

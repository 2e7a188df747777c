"""
directive_mdx - Lower markdown directives to MDX JSX elements

Turns container, leaf and text directive nodes into JSX element nodes so
an MDX compiler emits component invocations.
"""

__version__ = "1.0.0"

from .lib import (
    DirectiveTransformer,
    directive_mdx,
    tag_normalize,
    attribute_normalize,
    label_appendAsSlot,
    label_discard,
    Processor,
    LOG,
    state_connectToLogger,
    state_disconnectFromLogger,
    logger_attachStderr,
)
from .models import Node, NodeData, NodeType, JsxAttribute, Casing, Options

__all__ = [
    "DirectiveTransformer",
    "directive_mdx",
    "tag_normalize",
    "attribute_normalize",
    "label_appendAsSlot",
    "label_discard",
    "Processor",
    "LOG",
    "state_connectToLogger",
    "state_disconnectFromLogger",
    "logger_attachStderr",
    "Node",
    "NodeData",
    "NodeType",
    "JsxAttribute",
    "Casing",
    "Options",
    "__version__",
]

"""
directive_mdx - Lower markdown directives to MDX JSX elements

Turns container, leaf and text directive nodes into JSX element nodes so
an MDX compiler emits component invocations.
"""

__version__ = "1.0.0"

from .transformer import DirectiveTransformer, directive_mdx
from .casing import tag_normalize, attribute_normalize
from .label import label_appendAsSlot, label_discard
from .processor import Processor
from .log import LOG, logger_attachStderr, state_connectToLogger, state_disconnectFromLogger

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
    "__version__",
]

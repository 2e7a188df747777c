"""
Models package for directive_mdx

Contains the document tree, casing and option structures used by the
transformer.
"""

from .ast import Node, NodeData, NodeType, JsxAttribute, DIRECTIVE_TYPES
from .casing import Casing, HTML_TAGS
from .options import Options
from .state import TransformStats, pipeline

__all__ = [
    "Node",
    "NodeData",
    "NodeType",
    "JsxAttribute",
    "DIRECTIVE_TYPES",
    "Casing",
    "HTML_TAGS",
    "Options",
    "TransformStats",
    "pipeline",
]

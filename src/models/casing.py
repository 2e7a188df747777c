"""
Casing modes and the standard HTML tag set

Shared constants for the name normalizers in ``lib.casing``.
"""

from enum import Enum
from typing import FrozenSet


class Casing(str, Enum):
    """
    Naming conventions a tag or attribute name can be normalized to
    """
    CAMEL = "camel"      # myComponent
    PASCAL = "pascal"    # MyComponent
    KEBAB = "kebab"      # my-component
    SNAKE = "snake"      # my_component
    NONE = "none"        # unchanged


# Standard HTML element names. These stay lowercase regardless of casing
# mode so the downstream compiler still treats them as intrinsic elements.
HTML_TAGS: FrozenSet[str] = frozenset({
    'a', 'abbr', 'address', 'area', 'article', 'aside', 'audio',
    'b', 'base', 'bdi', 'bdo', 'blockquote', 'body', 'br', 'button',
    'canvas', 'caption', 'cite', 'code', 'col', 'colgroup',
    'data', 'datalist', 'dd', 'del', 'details', 'dfn', 'dialog', 'div', 'dl', 'dt',
    'em', 'embed',
    'fieldset', 'figcaption', 'figure', 'footer', 'form',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'head', 'header', 'hgroup', 'hr', 'html',
    'i', 'iframe', 'img', 'input', 'ins',
    'kbd',
    'label', 'legend', 'li', 'link',
    'main', 'map', 'mark', 'math', 'menu', 'meta', 'meter',
    'nav', 'noscript',
    'object', 'ol', 'optgroup', 'option', 'output',
    'p', 'picture', 'pre', 'progress',
    'q',
    'rp', 'rt', 'ruby',
    's', 'samp', 'script', 'search', 'section', 'select', 'slot', 'small',
    'source', 'span', 'strong', 'style', 'sub', 'summary', 'sup', 'svg',
    'table', 'tbody', 'td', 'template', 'textarea', 'tfoot', 'th', 'thead',
    'time', 'title', 'tr', 'track',
    'u', 'ul',
    'var', 'video',
    'wbr',
})


def htmlTag_is(tag: str) -> bool:
    """Check if a name is a standard HTML element name (case-insensitive)"""
    return tag.lower() in HTML_TAGS

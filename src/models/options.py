"""
Transformer options

Function-valued configuration hooks for DirectiveTransformer, each with
a documented default.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, TYPE_CHECKING

from .ast import Node

if TYPE_CHECKING:
    from ..config.settings import AppSettings


FilterHook = Callable[[Node], bool]
LabelHook = Callable[[Node, List[Node]], None]
TagHook = Callable[[str], str]
AttributeHook = Callable[[str, str], str]


def filter_acceptAll(node: Node) -> bool:
    """Default filter: transform every directive"""
    return True


def label_discard(node: Node, label: List[Node]) -> None:
    """Default label handler: drop the label"""
    return None


def tag_identity(tag: str) -> str:
    """Default tag transform: keep the directive name"""
    return tag


def attribute_identity(tag: str, attr: str) -> str:
    """Default attribute transform: keep the attribute name"""
    return attr


@dataclass
class Options:
    """
    Options for DirectiveTransformer

    Attributes:
        skip_transformed: Leave directives alone whose ``data.hName`` was
                          already set by another pass (e.g. one lowering
                          directives for HTML output).
        filter: Predicate over a directive node; ``False`` leaves the node
                untouched.
        handle_label: Called as ``handle_label(element, label_children)``
                      with the new element built from a container directive
                      and the inline content of its label paragraph. Only
                      called when the directive has a label.
        transform_tag: Maps a directive name to the element name.
        transform_attribute: Maps ``(element_name, attribute_name)`` to the
                             output attribute name. ``remark-directive``
                             style parsers turn ``{.red}`` into
                             ``class="red"``, which JSX frameworks may want
                             as ``className``.

    Example:
        >>> from directive_mdx.lib.casing import tag_normalize
        >>> opts = Options(transform_tag=tag_normalize('pascal'))
        >>> opts.transform_tag('fancy-box')
        'FancyBox'
    """
    skip_transformed: bool = True
    filter: FilterHook = field(default=filter_acceptAll)
    handle_label: LabelHook = field(default=label_discard)
    transform_tag: TagHook = field(default=tag_identity)
    transform_attribute: AttributeHook = field(default=attribute_identity)

    @classmethod
    def options_createFromSettings(cls, settings: Optional['AppSettings'] = None) -> 'Options':
        """
        Build options from application settings

        Args:
            settings: Settings to read; defaults to the ``appsettings``
                      singleton

        Returns:
            Options with skip policy, label handler and (when
            ``normalize_names`` is on) casing normalizers taken from
            settings
        """
        from ..config import appsettings
        from ..lib.casing import tag_normalize, attribute_normalize
        from ..lib.label import label_appendAsSlot

        if settings is None:
            settings = appsettings

        options = cls(
            skip_transformed=settings.skip_transformed,
            handle_label=label_appendAsSlot if settings.label_slot else label_discard,
        )
        if settings.normalize_names:
            options.transform_tag = tag_normalize(settings.tag_casing)
            options.transform_attribute = attribute_normalize(
                settings.attribute_casing, className=settings.class_name
            )
        return options

"""
Container directive labels

A container directive may carry a label, ``:::Note[Important]``, which the
directive parser stores as a first child paragraph marked with
``data.directiveLabel``. JSX has no place for it, so the transformer pulls
it out of the children and hands its inline content to
``Options.handle_label``.
"""

from typing import List, Optional, Tuple

from ..models.ast import Node
from ..models.options import label_discard  # default handler, re-exported
from .builder import attribute_make, flowElement_make


def label_isMarked(node: Node) -> bool:
    """Check if a node is a directive label paragraph"""
    return node.data is not None and node.data.directiveLabel


def label_find(children: List[Node]) -> Optional[Node]:
    """Return the first label paragraph among children, or None"""
    for child in children:
        if label_isMarked(child):
            return child
    return None


def label_extract(children: List[Node]) -> Tuple[List[Node], Optional[Node]]:
    """
    Separate a container directive's label from its content

    Args:
        children: The directive's children

    Returns:
        (remaining, label) where ``remaining`` has every label paragraph
        removed and ``label`` is the first one. Without a label the
        original ``children`` list is returned as-is with ``None``.

    Example:
        For children [paragraph(label, "Important"), paragraph("Body")]:
        ([paragraph("Body")], paragraph(label, "Important"))
    """
    label = label_find(children)
    if label is None:
        return children, None
    remaining = [child for child in children if not label_isMarked(child)]
    return remaining, label


def label_appendAsSlot(node: Node, label: List[Node]) -> None:
    """
    Label handler for Astro MDX

    Wraps the label content in ``<Fragment slot="label">`` and appends it
    as the element's last child:

        :::Note[Important]
        This is an important note.
        :::

    becomes

        <Note>
          This is an important note.
          <Fragment slot="label">Important</Fragment>
        </Note>
    """
    node.children.append(
        flowElement_make('Fragment', [attribute_make('slot', 'label')], label)
    )

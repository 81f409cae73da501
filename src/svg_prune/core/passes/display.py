"""Remove elements hidden with `display="none"`."""

from loguru import logger

from svg_prune.core.tree.document import Document, Node
from svg_prune.models.names import NONE_KEYWORD, AttributeId


def _is_removable(node: Node) -> bool:
    if not node.has_attribute_with_value(AttributeId.DISPLAY, NONE_KEYWORD):
        return False
    # A hidden element may still be a definition referenced elsewhere, so
    # the node and everything below it must be unused.
    return not any(n.is_used() for n in node.descendants())


def remove_display_none(doc: Document) -> bool:
    """Remove hidden elements that neither are used nor contain used elements.

    A used element nested under a hidden ancestor is not lifted out: the whole
    chain stays as it is.

    Returns:
        True if anything was removed.
    """
    nodes: list[Node] = []

    cursor = doc.descendants()
    for node in cursor:
        if _is_removable(node):
            nodes.append(node)
            cursor.skip_children()

    for node in reversed(nodes):
        node.remove()

    if nodes:
        logger.debug("Removed {} element(s) with display:none", len(nodes))
    return bool(nodes)

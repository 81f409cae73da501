"""Remove paths without drawable data."""

from loguru import logger

from svg_prune.core.tree.document import Document, Node
from svg_prune.models.names import AttributeId, ElementId
from svg_prune.models.values import PathData


def is_empty_path(node: Node) -> bool:
    """A missing, mistyped or empty `d` draws nothing."""
    value = node.attribute_value(AttributeId.D)
    return not isinstance(value, PathData) or value.is_empty()


def remove_empty_paths(doc: Document) -> bool:
    """Remove every `path` with no drawable data, used or not.

    Returns:
        True if anything was removed.
    """
    paths = [n for n in doc.descendants() if n.is_tag(ElementId.PATH) and is_empty_path(n)]

    for node in reversed(paths):
        node.remove()

    if paths:
        logger.debug("Removed {} empty path(s)", len(paths))
    return bool(paths)

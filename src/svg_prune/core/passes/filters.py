"""Drop filters that define no effect."""

from loguru import logger

from svg_prune.core.passes.cascade import remove_cascade
from svg_prune.core.tree.document import Document
from svg_prune.models.names import ElementId


def process_filters(doc: Document) -> bool:
    """Remove childless `filter` elements along with every element using them.

    Returns:
        True if anything was removed.
    """
    filters = [n for n in doc.descendants() if n.is_tag(ElementId.FILTER) and not n.has_children()]

    removed = remove_cascade(filters)

    if filters:
        logger.debug("Removed {} empty filter(s), {} element(s) total", len(filters), removed)
    return bool(filters)

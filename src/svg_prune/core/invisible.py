"""Remove elements that can never produce visible output."""

from loguru import logger

from svg_prune.core.defs import remove_unused_defs
from svg_prune.core.passes.clip_paths import process_clip_paths
from svg_prune.core.passes.display import remove_display_none
from svg_prune.core.passes.filters import process_filters
from svg_prune.core.passes.paths import remove_empty_paths
from svg_prune.core.tree.document import Document
from svg_prune.protocols import DefsCleanerProtocol


def remove_invisible_elements(
    doc: Document,
    *,
    defs_cleaner: DefsCleanerProtocol = remove_unused_defs,
) -> None:
    """Run the invisible-element passes over `doc` in place.

    The passes run once, in a fixed order. A removal made by a later pass does
    not re-trigger an earlier one.

    Args:
        doc: Parsed document, modified in place.
        defs_cleaner: Called once at the end if anything was removed, to drop
            definitions left without users.
    """
    before = doc.element_count()

    is_any_removed = remove_display_none(doc)
    is_any_removed |= remove_empty_paths(doc)
    is_any_removed |= process_clip_paths(doc)
    is_any_removed |= process_filters(doc)

    if is_any_removed:
        defs_cleaner(doc)
        logger.debug(
            "Invisible elements: {} of {} element(s) removed",
            before - doc.element_count(), before,
        )
    else:
        logger.debug("Invisible elements: nothing to remove")

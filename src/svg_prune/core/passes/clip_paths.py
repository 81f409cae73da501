"""Strip invalid `clipPath` children and drop clip paths that end up empty."""

from loguru import logger

from svg_prune.core.passes.cascade import remove_cascade
from svg_prune.core.tree.document import Document, Node
from svg_prune.models.names import ElementId
from svg_prune.models.values import Link


def _is_valid_shape(node: Node) -> bool:
    return node.is_basic_shape() or node.is_tag(ElementId.PATH) or node.is_tag(ElementId.TEXT)


def is_valid_clip_path_child(node: Node) -> bool:
    """Only shapes, paths, text and `use` of those may build a clipping path.

    See https://www.w3.org/TR/SVG11/masking.html#EstablishingANewClippingPath
    """
    if node.is_tag(ElementId.USE):
        value = node.href_value()
        return isinstance(value, Link) and _is_valid_shape(value.target)
    return _is_valid_shape(node)


def process_clip_paths(doc: Document) -> bool:
    """Remove invalid children of every `clipPath`, then empty clip paths.

    An element clipped by an empty clip path renders nothing, so it goes
    together with the clip path.

    Returns:
        True if anything was removed.
    """
    clip_paths = [n for n in doc.descendants() if n.is_tag(ElementId.CLIP_PATH)]

    # Stripping a child can take the target of a `use` in another clip path
    # with it, so scan again until every remaining child is valid.
    children_removed = 0
    while True:
        invalid = [
            child
            for clip_path in clip_paths
            if not clip_path.removed
            for child in clip_path.children
            if not is_valid_clip_path_child(child)
        ]
        if not invalid:
            break
        for child in reversed(invalid):
            # May have been nested inside another invalid child.
            if not child.removed:
                child.remove()
                children_removed += 1

    empty = [c for c in clip_paths if not c.removed and not c.has_children()]

    # All child scans are finished before any clip path is destroyed.
    removed = remove_cascade(empty)

    if children_removed or removed:
        logger.debug(
            "Clip paths: removed {} invalid child(ren), {} empty clip path(s) "
            "with {} element(s) total",
            children_removed, len(empty), removed,
        )
    return bool(children_removed or empty)

"""Worklist-driven cascading removal over the reverse link index."""

from collections import deque
from collections.abc import Iterable

from svg_prune.core.tree.document import Node
from svg_prune.models.names import HREF_ATTRIBUTES, VACATING_ATTRIBUTES, ElementId
from svg_prune.models.values import link_target


def _renders_through(source: Node, target: Node) -> bool:
    """Check if `source` renders nothing once `target` is gone."""
    for name, value in source.attributes.items():
        if link_target(value) is not target:
            continue
        if name in VACATING_ATTRIBUTES:
            return True
        if source.is_tag(ElementId.USE) and name in HREF_ATTRIBUTES:
            return True
    return False


def _empties_clip_path(node: Node, doomed: dict[Node, None]) -> bool:
    """Check if every child of `node`'s parent `clipPath` is doomed."""
    parent = node.parent
    if parent is None or parent in doomed or not parent.is_tag(ElementId.CLIP_PATH):
        return False
    return all(child in doomed for child in parent.children)


def collect_cascade(seeds: Iterable[Node]) -> list[Node]:
    """Return the seeds plus every node that becomes invisible without them.

    Follows reverse links breadth-first. A referencer joins the list only when
    it links through an attribute that makes it render nothing on its own
    (`clip-path`, `filter`, `mask`, or the href of a `use`); referencers
    through paint attributes keep rendering and are left alone. A `clipPath`
    whose children are all doomed is empty afterwards, so it joins too.
    """
    doomed: dict[Node, None] = {}
    todo: deque[Node] = deque(seeds)
    while todo:
        node = todo.popleft()
        if node in doomed or node.removed:
            continue
        doomed[node] = None
        if _empties_clip_path(node, doomed):
            todo.append(node.parent)
        for source in node.linked_nodes():
            if source not in doomed and _renders_through(source, node):
                todo.append(source)
    return list(doomed)


def remove_cascade(seeds: Iterable[Node]) -> int:
    """Remove the cascade of `seeds`, referencers first.

    Returns:
        Number of nodes removed directly (nested ones are not counted).
    """
    removed = 0
    for node in reversed(collect_cascade(seeds)):
        # An earlier removal may already have taken this node along with its ancestor.
        if node.removed:
            continue
        node.remove()
        removed += 1
    return removed

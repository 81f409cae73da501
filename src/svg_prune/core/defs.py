"""Purge reusable definitions nothing refers to anymore."""

import re

from loguru import logger

from svg_prune.core.tree.document import Document, Node
from svg_prune.models.names import DEFINITION_ELEMENTS, GRAPHIC_ELEMENTS, ElementId
from svg_prune.models.values import Other

_URL_REF_RE = re.compile(r"url\(\s*['\"]?#([^'\")\s]+)")
_FRAGMENT_RE = re.compile(r"^\s*#(\S+?)\s*$")


def _untracked_references(doc: Document) -> set[str]:
    """Ids mentioned in `<style>` sheets and in values the usage index does not track."""
    ids: set[str] = set()
    for node in doc.descendants():
        if node.is_tag(ElementId.STYLE) and node.text:
            ids.update(_URL_REF_RE.findall(node.text))
        for value in node.attributes.values():
            if not isinstance(value, Other):
                continue
            ids.update(_URL_REF_RE.findall(value.raw))
            match = _FRAGMENT_RE.match(value.raw)
            if match:
                ids.add(match.group(1))
    return ids


def _is_unused_definition(node: Node, referenced: set[str]) -> bool:
    if not node.id:
        return False
    if any(n.is_used() or n.id in referenced for n in node.descendants()):
        return False
    if node.tag in DEFINITION_ELEMENTS:
        return True
    # Graphics inside `defs` only ever render through a reference.
    return (
        node.tag in GRAPHIC_ELEMENTS
        and node.parent is not None
        and node.parent.is_tag(ElementId.DEFS)
    )


def remove_unused_defs(doc: Document) -> bool:
    """Remove unused definitions until none is left, then empty `defs`.

    Only elements with an id are considered: an element that never had one
    was not meant to be referenced. An id mentioned by a stylesheet or by a
    value that was kept as raw text counts as used. Removing a definition can
    leave another one unused (a gradient inheriting from a template), hence
    the loop.

    Returns:
        True if anything was removed.
    """
    total = 0
    while True:
        referenced = _untracked_references(doc)
        unused = [n for n in doc.descendants() if _is_unused_definition(n, referenced)]
        if not unused:
            break
        for node in unused:
            # Nested definitions went with their unused ancestor.
            if not node.removed:
                node.remove()
                total += 1

    empty_defs = [
        n for n in doc.descendants() if n.is_tag(ElementId.DEFS) and not n.has_children()
    ]
    for node in reversed(empty_defs):
        node.remove()

    if total or empty_defs:
        logger.debug("Removed {} unused definition(s), {} empty defs", total, len(empty_defs))
    return bool(total or empty_defs)

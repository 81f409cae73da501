"""SVG document tree with a reverse usage index."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from svg_prune.core.tree.traversal import Descendants
from svg_prune.models.names import BASIC_SHAPES, HREF_ATTRIBUTES, NONE_KEYWORD, ElementId
from svg_prune.models.values import AttributeValue, Keyword, Other, PaintServerLink, link_target

DOCUMENT_TAG = "#document"


@dataclass(eq=False, repr=False)
class Node:
    """A single element in an SVG document tree.

    Nodes compare and hash by identity. Attribute writes must go through
    `set_attribute()`/`remove_attribute()` so the owning document can keep
    its usage index current.
    """

    document: Document
    tag: str
    id: str = ""
    attributes: dict[str, AttributeValue] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    parent: Node | None = None
    text: str | None = None
    tail: str | None = None
    removed: bool = False

    def __repr__(self) -> str:
        if self.id:
            return f"<Node {self.tag} id={self.id!r}>"
        return f"<Node {self.tag}>"

    def is_tag(self, tag: ElementId | str) -> bool:
        return self.tag == tag

    def is_basic_shape(self) -> bool:
        return self.tag in BASIC_SHAPES

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def attribute_value(self, name: str) -> AttributeValue | None:
        return self.attributes.get(name)

    def has_attribute_with_value(self, name: str, keyword: str) -> bool:
        """Check that an attribute holds exactly the given keyword."""
        value = self.attributes.get(name)
        return isinstance(value, Keyword) and value.value == keyword

    def href_value(self) -> AttributeValue | None:
        """Return `xlink:href`, falling back to the SVG 2 plain `href`."""
        for name in HREF_ATTRIBUTES:
            if name in self.attributes:
                return self.attributes[name]
        return None

    def set_attribute(self, name: str, value: AttributeValue) -> None:
        self._ensure_alive()
        self.document._link(self, value)
        self.document._unlink(self, self.attributes.get(name))
        self.attributes[name] = value

    def remove_attribute(self, name: str) -> None:
        self._ensure_alive()
        self.document._unlink(self, self.attributes.pop(name, None))

    def set_id(self, new_id: str) -> None:
        self._ensure_alive()
        self.document._register_id(self, new_id)

    def append(self, child: Node) -> None:
        """Attach a detached node as the last child."""
        self._ensure_alive()
        if child.document is not self.document:
            msg = f"Cannot append {child!r}: it belongs to another document"
            raise ValueError(msg)
        if child.parent is not None or child is self.document.root:
            msg = f"Cannot append {child!r}: it already has a parent"
            raise ValueError(msg)
        child.parent = self
        self.children.append(child)

    def has_children(self) -> bool:
        return bool(self.children)

    def descendants(self) -> Descendants:
        """Pre-order cursor over this node and everything below it."""
        return Descendants(self)

    def is_used(self) -> bool:
        return self.document.is_used(self)

    def linked_nodes(self) -> list[Node]:
        """Nodes whose attributes link to this one, in first-link order."""
        return self.document.linked_nodes(self)

    def remove(self) -> None:
        """Detach and destroy this node and its subtree."""
        self.document.remove_node(self)

    def _ensure_alive(self) -> None:
        if self.removed:
            msg = f"{self!r} was removed from its document"
            raise RuntimeError(msg)


class Document:
    """Owner of a node tree and of the reverse index of links between nodes.

    The tree hangs off a synthetic root node (tag `#document`) so that the
    `svg` element itself can be processed like any other element.
    """

    def __init__(self) -> None:
        self.root = Node(self, DOCUMENT_TAG)
        # Namespace map of the source document, reused when writing.
        self.namespaces: dict[str | None, str] = {}
        # target -> referencing node -> number of attributes linking to target
        self._usages: dict[Node, Counter[Node]] = {}
        self._ids: dict[str, Node] = {}

    def create_element(self, tag: ElementId | str, *, id: str = "") -> Node:
        """Create a detached node owned by this document."""
        node = Node(self, str(tag))
        if id:
            self._register_id(node, id)
        return node

    def svg_element(self) -> Node | None:
        return next((n for n in self.root.children if n.is_tag(ElementId.SVG)), None)

    def descendants(self) -> Descendants:
        return self.root.descendants()

    def element_by_id(self, element_id: str) -> Node | None:
        return self._ids.get(element_id)

    def element_count(self) -> int:
        """Number of elements in the tree, synthetic root excluded."""
        return sum(1 for _ in self.descendants()) - 1

    def is_used(self, node: Node) -> bool:
        return bool(self._usages.get(node))

    def linked_nodes(self, node: Node) -> list[Node]:
        return list(self._usages.get(node, ()))

    def remove_node(self, node: Node) -> None:
        """Detach and destroy `node` with its subtree.

        Every usage held by the subtree is dropped. Links from the rest of the
        tree into the subtree are resolved on the spot: paint links fall back
        to their fallback (or `none`), any other link attribute is removed.
        """
        node._ensure_alive()
        if node is self.root:
            msg = "Cannot remove the document root"
            raise RuntimeError(msg)

        subtree = list(node.descendants())
        for member in subtree:
            for value in member.attributes.values():
                self._unlink(member, value)

        # Whatever still links into the subtree lives outside of it.
        for member in subtree:
            for source in self.linked_nodes(member):
                _resolve_dangling(source, member)

        if node.parent is not None:
            node.parent.children.remove(node)
            node.parent = None

        for member in subtree:
            member.removed = True
            if member.id and self._ids.get(member.id) is member:
                del self._ids[member.id]
            self._usages.pop(member, None)

    def _register_id(self, node: Node, new_id: str) -> None:
        if node.id and self._ids.get(node.id) is node:
            del self._ids[node.id]
        node.id = new_id
        if new_id and new_id not in self._ids:
            self._ids[new_id] = node

    def _link(self, source: Node, value: AttributeValue | None) -> None:
        target = link_target(value)
        if target is None:
            return
        if target.document is not self or target.removed:
            msg = f"{source!r} cannot link to {target!r}: not a live node of this document"
            raise ValueError(msg)
        self._usages.setdefault(target, Counter())[source] += 1

    def _unlink(self, source: Node, value: AttributeValue | None) -> None:
        target = link_target(value)
        if target is None:
            return
        usages = self._usages.get(target)
        if not usages:
            return
        usages[source] -= 1
        if usages[source] <= 0:
            del usages[source]
        if not usages:
            del self._usages[target]


def _resolve_dangling(source: Node, target: Node) -> None:
    for name, value in list(source.attributes.items()):
        if link_target(value) is not target:
            continue
        if isinstance(value, PaintServerLink):
            fallback = value.fallback or NONE_KEYWORD
            source.set_attribute(
                name, Keyword(fallback) if fallback == NONE_KEYWORD else Other(fallback)
            )
        else:
            source.remove_attribute(name)

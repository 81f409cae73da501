"""Typed attribute values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svg_prune.core.tree.document import Node


@dataclass(frozen=True)
class Keyword:
    """A bare keyword such as `none` or `inline`."""

    value: str


@dataclass(frozen=True)
class PathSegment:
    """One path command with its numeric arguments."""

    command: str
    args: tuple[float, ...] = ()


@dataclass(frozen=True)
class PathData:
    """Parsed `d` attribute. May hold no segments at all."""

    segments: tuple[PathSegment, ...] = ()

    def is_empty(self) -> bool:
        return not self.segments


@dataclass(frozen=True)
class Link:
    """Non-owning reference to another node (`#id` or `url(#id)`)."""

    target: Node


@dataclass(frozen=True)
class PaintServerLink:
    """Paint value that points at a gradient or pattern, e.g. `url(#lg1) red`."""

    target: Node
    fallback: str | None = None


@dataclass(frozen=True)
class Other:
    """Any value the cleanup passes do not interpret."""

    raw: str


AttributeValue = Keyword | PathData | Link | PaintServerLink | Other


def link_target(value: AttributeValue | None) -> Node | None:
    """Return the node a value links to, if it is a link of either kind."""
    if isinstance(value, (Link, PaintServerLink)):
        return value.target
    return None

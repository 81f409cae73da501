"""Protocols for the collaborators of the cleanup passes."""

from typing import Protocol, runtime_checkable

from svg_prune.core.tree.document import Document


@runtime_checkable
class DefsCleanerProtocol(Protocol):
    """Protocol for the pass that purges unreferenced definitions."""

    def __call__(self, doc: Document) -> object:
        """Remove definitions no element refers to anymore."""
        ...

"""Fake collaborators for testing the cleanup passes."""

from svg_prune.core.tree.document import Document


class FakeDefsCleaner:
    """Records calls instead of purging definitions."""

    def __init__(self) -> None:
        self.calls: list[Document] = []

    def __call__(self, doc: Document) -> None:
        self.calls.append(doc)

"""Shared test fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from svg_prune.core.tree.document import Document, Node
from tests.unit.samples import MIXED_DRAWING


@pytest.fixture
def doc() -> Document:
    """Return an empty document with a bare `svg` element."""
    document = Document()
    document.root.append(document.create_element("svg"))
    return document


@pytest.fixture
def svg(doc: Document) -> Node:
    node = doc.svg_element()
    assert node is not None
    return node


@pytest.fixture
def drawing_file(tmp_path: Path) -> Path:
    """Write a drawing with one case of every kind of invisible element."""
    path = tmp_path / "drawing.svg"
    path.write_text(MIXED_DRAWING)
    return path


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages, debug level included."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)

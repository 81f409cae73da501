"""Tests for the empty-path pass."""

import pytest

from svg_prune.core.importer.svg_reader import parse_svg
from svg_prune.core.passes.paths import is_empty_path, remove_empty_paths
from svg_prune.models.names import AttributeId
from svg_prune.models.values import Other
from tests.unit.samples import svg_text, tags


@pytest.mark.parametrize(
    "markup",
    ["<path/>", '<path d=""/>', '<path d="   "/>', '<path d="L 10 10"/>', '<path d="M"/>'],
)
def test_removes_path_without_drawable_data(markup: str) -> None:
    doc = parse_svg(svg_text(markup))
    assert remove_empty_paths(doc) is True
    assert tags(doc) == ["svg"]


def test_keeps_path_with_data() -> None:
    doc = parse_svg(svg_text('<path d="M 10 10 L 20 20"/>'))
    assert remove_empty_paths(doc) is False
    assert tags(doc) == ["svg", "path"]


def test_wrong_value_kind_counts_as_empty() -> None:
    doc = parse_svg(svg_text('<path d="M 0 0 H 5"/>'))
    path = doc.svg_element().children[0]
    path.set_attribute(AttributeId.D, Other("M 0 0 H 5"))
    assert is_empty_path(path) is True


def test_removes_empty_path_even_when_used() -> None:
    doc = parse_svg(svg_text('<path id="p1" d=""/><use xlink:href="#p1"/>'))
    assert remove_empty_paths(doc) is True
    assert tags(doc) == ["svg", "use"]
    use = doc.svg_element().children[0]
    assert use.href_value() is None


def test_only_paths_are_checked() -> None:
    doc = parse_svg(svg_text("<rect/><polygon/>"))
    assert remove_empty_paths(doc) is False

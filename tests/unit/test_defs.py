"""Tests for purging unused definitions."""

from svg_prune.core.defs import remove_unused_defs
from svg_prune.core.importer.svg_reader import parse_svg
from tests.unit.samples import svg_text, tags


def test_removes_unused_gradient() -> None:
    doc = parse_svg(svg_text("<linearGradient id='lg1'/><rect/>"))
    assert remove_unused_defs(doc) is True
    assert tags(doc) == ["svg", "rect"]


def test_keeps_used_gradient() -> None:
    doc = parse_svg(svg_text("<linearGradient id='lg1'/><rect fill='url(#lg1)'/>"))
    assert remove_unused_defs(doc) is False
    assert tags(doc) == ["svg", "linearGradient", "rect"]


def test_removes_chain_of_templates() -> None:
    doc = parse_svg(
        svg_text(
            "<linearGradient id='lg1'><stop offset='0'/></linearGradient>"
            "<linearGradient id='lg2' xlink:href='#lg1'/>"
        )
    )
    assert remove_unused_defs(doc) is True
    assert tags(doc) == ["svg"]


def test_definitions_without_id_are_kept() -> None:
    doc = parse_svg(svg_text("<clipPath><rect/></clipPath>"))
    assert remove_unused_defs(doc) is False


def test_unused_graphics_inside_defs_are_removed() -> None:
    doc = parse_svg(
        svg_text(
            "<defs><rect id='r1'/><rect id='r2'/><style id='s1'>rect {}</style></defs>"
            "<use xlink:href='#r2'/>"
        )
    )
    assert remove_unused_defs(doc) is True
    assert tags(doc) == ["svg", "defs", "rect", "style", "use"]
    assert doc.element_by_id("r1") is None


def test_definition_with_used_descendant_is_kept() -> None:
    doc = parse_svg(
        svg_text("<defs><g id='g1'><rect id='r1'/></g></defs><use xlink:href='#r1'/>")
    )
    assert remove_unused_defs(doc) is False
    assert doc.element_by_id("g1") is not None


def test_empty_defs_are_removed() -> None:
    doc = parse_svg(svg_text("<defs><radialGradient id='rg1'/></defs><defs/><circle/>"))
    assert remove_unused_defs(doc) is True
    assert tags(doc) == ["svg", "circle"]


def test_gradient_used_from_stylesheet_is_kept() -> None:
    doc = parse_svg(
        svg_text(
            "<style>.a{fill:url(#g)}</style>"
            "<linearGradient id='g'><stop offset='0'/></linearGradient>"
            "<path class='a' d='M0 0 H1'/>"
        )
    )
    assert remove_unused_defs(doc) is False
    assert doc.element_by_id("g") is not None


def test_marker_shorthand_counts_as_use() -> None:
    doc = parse_svg(
        svg_text("<marker id='m'><path d='M0 0 H1'/></marker><path d='M0 0 H5' marker='url(#m)'/>")
    )
    assert remove_unused_defs(doc) is False
    assert doc.element_by_id("m") is not None


def test_ids_in_raw_values_count_as_use() -> None:
    doc = parse_svg(
        svg_text(
            "<linearGradient id='lg1'/>"
            "<linearGradient id='lg2'/>"
            "<linearGradient id='lg3'/>"
            "<rect data-paint='url(&quot;#lg1&quot;)' data-target='#lg2'/>"
        )
    )
    assert remove_unused_defs(doc) is True
    assert doc.element_by_id("lg1") is not None
    assert doc.element_by_id("lg2") is not None
    assert doc.element_by_id("lg3") is None


def test_nested_definitions_are_counted_once(log_messages: list[str]) -> None:
    doc = parse_svg(
        svg_text("<marker id='m1'><linearGradient id='lg1'/></marker><circle/>")
    )
    assert remove_unused_defs(doc) is True
    assert tags(doc) == ["svg", "circle"]
    assert "Removed 1 unused definition(s), 0 empty defs" in log_messages

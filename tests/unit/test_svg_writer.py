"""Tests for serializing a document tree back to markup."""

from pathlib import Path

from svg_prune.core.export.svg_writer import format_path_data, write_svg, write_svg_file
from svg_prune.core.importer.path_data import parse_path_data
from svg_prune.core.importer.svg_reader import parse_svg
from tests.unit.samples import svg_text


def test_format_path_data_is_compact() -> None:
    assert format_path_data(parse_path_data("M 10.0 20 L 0.5 -1 z")) == "M10 20 L0.5 -1 z"


def test_compact_arc_flags_are_kept() -> None:
    doc = parse_svg(svg_text("<path d='M0 0a5 5 0 105 5'/>"))
    assert 'd="M0 0 a5 5 0 1 0 5 5"' in write_svg(doc, pretty_print=False)


def test_writes_links_in_their_markup_form() -> None:
    doc = parse_svg(
        svg_text(
            "<linearGradient id='lg1'/>"
            "<clipPath id='cp1'><rect/></clipPath>"
            "<use xlink:href='#cp1' clip-path='url(#cp1)' fill='url(#lg1) red'/>"
        )
    )

    out = write_svg(doc, pretty_print=False)

    assert 'xmlns:xlink="http://www.w3.org/1999/xlink"' in out
    assert 'xlink:href="#cp1"' in out
    assert 'clip-path="url(#cp1)"' in out
    assert 'fill="url(#lg1) red"' in out


def test_unused_xlink_namespace_is_dropped() -> None:
    doc = parse_svg(svg_text("<rect id='r1' width='10'/>"))
    assert write_svg(doc) == (
        '<svg xmlns="http://www.w3.org/2000/svg">\n'
        '    <rect id="r1" width="10"/>\n'
        "</svg>\n"
    )


def test_text_content_survives() -> None:
    doc = parse_svg(svg_text("<text x='1'>Hello <tspan>world</tspan>!</text>"))
    out = write_svg(doc, pretty_print=False)
    assert "<text x=\"1\">Hello <tspan>world</tspan>!</text>" in out


def test_reparse_gives_same_markup() -> None:
    markup = svg_text("<g><path d='M0 0 H 10'/><use href='#p'/></g><path id='p' d='M1 1 V2'/>")
    first = write_svg(parse_svg(markup))
    assert write_svg(parse_svg(first)) == first


def test_write_svg_file(tmp_path: Path) -> None:
    path = tmp_path / "out.svg"
    write_svg_file(parse_svg(svg_text("<circle r='1'/>")), path)
    assert '<circle r="1"/>' in path.read_text()


def test_hidden_root_is_written_as_empty_svg() -> None:
    doc = parse_svg('<svg xmlns="http://www.w3.org/2000/svg" display="none"><rect/></svg>')
    doc.svg_element().remove()
    assert write_svg(doc) == '<svg xmlns="http://www.w3.org/2000/svg"/>\n'

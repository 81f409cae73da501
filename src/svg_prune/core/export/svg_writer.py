"""Serialize a document tree back to SVG markup."""

from pathlib import Path

from loguru import logger
from lxml import etree

from svg_prune.config import ATTRIBUTE_PREFIXES, PRETTY_PRINT, SVG_NS, XLINK_NS
from svg_prune.core.tree.document import Document, Node
from svg_prune.models.names import HREF_ATTRIBUTES, ElementId
from svg_prune.models.values import (
    AttributeValue,
    Keyword,
    Link,
    Other,
    PaintServerLink,
    PathData,
)

_PREFIX_NAMESPACES = {prefix: ns for ns, prefix in ATTRIBUTE_PREFIXES.items()}


def format_path_data(path: PathData) -> str:
    return " ".join(
        seg.command + " ".join(f"{n:.12g}" for n in seg.args) for seg in path.segments
    )


def format_value(name: str, value: AttributeValue) -> str:
    """Render a typed value the way it is spelled in markup."""
    if isinstance(value, Keyword):
        return value.value
    if isinstance(value, PathData):
        return format_path_data(value)
    if isinstance(value, Link):
        iri = f"#{value.target.id}"
        return iri if name in HREF_ATTRIBUTES else f"url({iri})"
    if isinstance(value, PaintServerLink):
        paint = f"url(#{value.target.id})"
        return f"{paint} {value.fallback}" if value.fallback else paint
    if isinstance(value, Other):
        return value.raw
    msg = f"Unexpected value for {name!r}: {value!r}"
    raise TypeError(msg)


def _qualified_tag(tag: str) -> str:
    return tag if tag.startswith("{") else f"{{{SVG_NS}}}{tag}"


def _qualified_attribute(name: str) -> str:
    prefix, sep, local = name.partition(":")
    if sep and prefix in _PREFIX_NAMESPACES:
        return f"{{{_PREFIX_NAMESPACES[prefix]}}}{local}"
    return name


def _whitespace_only(text: str | None) -> bool:
    return text is None or not text.strip()


def write_svg(doc: Document, *, pretty_print: bool = PRETTY_PRINT) -> str:
    """Serialize the document's `svg` element.

    With `pretty_print`, whitespace-only text is dropped and the tree is
    re-indented, since removals leave gaps in the original layout. A
    document whose `svg` element was removed as a whole (it was hidden)
    is written as an empty `svg` element.
    """
    svg = doc.svg_element()
    if svg is None:
        logger.warning("Nothing visible is left, writing an empty svg element")
        empty = etree.Element(_qualified_tag(ElementId.SVG), nsmap={None: SVG_NS})
        return etree.tostring(empty, encoding="unicode") + "\n"

    nsmap: dict[str | None, str] = {k: v for k, v in doc.namespaces.items() if k is not None}
    nsmap[None] = SVG_NS
    uses_xlink = any(
        name.startswith("xlink:") for n in svg.descendants() for name in n.attributes
    )
    if uses_xlink:
        nsmap["xlink"] = XLINK_NS
    elif nsmap.get("xlink") == XLINK_NS:
        del nsmap["xlink"]

    root = etree.Element(_qualified_tag(svg.tag), nsmap=nsmap)
    todo: list[tuple[Node, etree._Element]] = [(svg, root)]
    while todo:
        node, element = todo.pop()
        if node.id:
            element.set("id", node.id)
        for name, value in node.attributes.items():
            element.set(_qualified_attribute(name), format_value(name, value))

        text, tail = node.text, node.tail
        if pretty_print:
            text = None if _whitespace_only(text) else text
            tail = None if _whitespace_only(tail) else tail
        element.text = text
        if node is not svg:
            element.tail = tail

        children = [(c, etree.SubElement(element, _qualified_tag(c.tag))) for c in node.children]
        todo.extend(reversed(children))

    if pretty_print:
        etree.indent(root, space="    ")
    return etree.tostring(root, encoding="unicode") + "\n"


def write_svg_file(doc: Document, path: str | Path, *, pretty_print: bool = PRETTY_PRINT) -> None:
    Path(path).write_text(write_svg(doc, pretty_print=pretty_print), encoding="utf-8")

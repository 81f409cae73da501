"""Parse SVG markup into a document tree."""

import re
from pathlib import Path

from loguru import logger
from lxml import etree

from svg_prune.config import ATTRIBUTE_PREFIXES, SVG_NS
from svg_prune.core.importer.path_data import parse_path_data
from svg_prune.core.tree.document import Document, Node
from svg_prune.models.names import (
    FUNC_LINK_ATTRIBUTES,
    HREF_ATTRIBUTES,
    NONE_KEYWORD,
    PAINT_ATTRIBUTES,
    PRESENTATION_ATTRIBUTES,
    AttributeId,
    ElementId,
)
from svg_prune.models.values import AttributeValue, Keyword, Link, Other, PaintServerLink

# `url(#id)` optionally followed by a fallback, as in `fill="url(#lg1) red"`.
_FUNC_IRI_RE = re.compile(r"^\s*url\(\s*(['\"]?)#([^'\")\s]+)\1\s*\)\s*(.*?)\s*$")


def _tag_name(qname: str) -> str:
    """SVG elements lose their namespace, foreign ones keep Clark notation."""
    qn = etree.QName(qname)
    if qn.namespace in (SVG_NS, None):
        return qn.localname
    return qname


def _attribute_name(qname: str) -> str:
    qn = etree.QName(qname)
    if qn.namespace is None:
        return qn.localname
    prefix = ATTRIBUTE_PREFIXES.get(qn.namespace)
    if prefix is not None:
        return f"{prefix}:{qn.localname}"
    return qname


def _lift_style(attrs: dict[str, str]) -> None:
    """Move presentation properties out of `style`; they win over attributes."""
    style = attrs.pop(AttributeId.STYLE, None)
    if style is None:
        return
    kept: list[str] = []
    for declaration in style.split(";"):
        name, sep, value = declaration.partition(":")
        name, value = name.strip(), value.strip()
        if not sep or not name:
            continue
        if name in PRESENTATION_ATTRIBUTES:
            attrs[name] = value
        else:
            kept.append(f"{name}:{value}")
    if kept:
        attrs[AttributeId.STYLE] = ";".join(kept)


def _parse_value(doc: Document, name: str, raw: str) -> AttributeValue:
    """Type a raw attribute value. Links to unknown ids stay raw."""
    if name == AttributeId.DISPLAY:
        return Keyword(raw.strip())
    if name == AttributeId.D:
        return parse_path_data(raw)

    if name in HREF_ATTRIBUTES:
        target = doc.element_by_id(raw[1:]) if raw.startswith("#") else None
        return Link(target) if target is not None else Other(raw)

    if name in FUNC_LINK_ATTRIBUTES or name in PAINT_ATTRIBUTES:
        if raw.strip() == NONE_KEYWORD:
            return Keyword(NONE_KEYWORD)
        match = _FUNC_IRI_RE.match(raw)
        target = doc.element_by_id(match.group(2)) if match else None
        if match is None or target is None:
            return Other(raw)
        fallback = match.group(3) or None
        if name in PAINT_ATTRIBUTES:
            return PaintServerLink(target, fallback)
        if fallback is None:
            return Link(target)

    return Other(raw)


def parse_svg(data: str | bytes) -> Document:
    """Parse SVG markup into a `Document`.

    Comments and processing instructions are dropped. Attribute values are
    typed once the whole tree is built, so links may point forward.

    Raises:
        ValueError: If the markup is not well-formed or the root is not `svg`.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    parser = etree.XMLParser(remove_comments=True, remove_pis=True, resolve_entities=False)
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        msg = f"Malformed SVG: {e}"
        raise ValueError(msg) from e

    if _tag_name(root.tag) != ElementId.SVG:
        msg = f"Root element is {root.tag!r}, expected svg"
        raise ValueError(msg)

    doc = Document()
    doc.namespaces = dict(root.nsmap)

    pending: list[tuple[Node, dict[str, str]]] = []
    todo: list[tuple[Node, etree._Element]] = [(doc.root, root)]
    while todo:
        parent, element = todo.pop()
        attrs = {_attribute_name(k): v for k, v in element.attrib.items()}
        _lift_style(attrs)
        element_id = attrs.pop("id", "")
        if element_id and doc.element_by_id(element_id) is not None:
            logger.warning("Duplicate id {!r}, links resolve to the first one", element_id)

        node = doc.create_element(_tag_name(element.tag), id=element_id)
        node.text = element.text
        node.tail = element.tail if parent is not doc.root else None
        parent.append(node)
        pending.append((node, attrs))

        todo.extend((node, c) for c in reversed(element) if isinstance(c.tag, str))

    for node, attrs in pending:
        for name, raw in attrs.items():
            node.set_attribute(name, _parse_value(doc, name, raw))

    logger.debug("Parsed {} element(s)", len(pending))
    return doc


def read_svg_file(path: str | Path) -> Document:
    """Read and parse an SVG file."""
    return parse_svg(Path(path).read_bytes())

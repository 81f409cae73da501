"""Sample documents and helpers shared by the tests."""

from svg_prune.core.tree.document import Document

SVG_OPEN = (
    '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">'
)

MIXED_DRAWING = f"""{SVG_OPEN}
    <defs>
        <linearGradient id="lg1"/>
        <filter id="f1"/>
    </defs>
    <clipPath id="cp1">
        <g/>
    </clipPath>
    <g display="none">
        <rect id="hidden"/>
    </g>
    <path d=""/>
    <rect id="r1" clip-path="url(#cp1)" fill="url(#lg1)"/>
    <rect filter="url(#f1)"/>
    <circle r="5"/>
</svg>
"""


def svg_text(body: str) -> str:
    """Wrap markup in an `svg` element with the usual namespaces."""
    return f"{SVG_OPEN}{body}</svg>"


def tags(doc: Document) -> list[str]:
    """Tags of all elements in document order, synthetic root excluded."""
    return [n.tag for n in doc.descendants() if n is not doc.root]

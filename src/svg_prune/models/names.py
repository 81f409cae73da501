"""SVG element and attribute vocabulary."""

from enum import StrEnum


class ElementId(StrEnum):
    """Element kinds the cleanup passes know about.

    Unknown elements are kept with their raw tag name.
    """

    SVG = "svg"
    G = "g"
    DEFS = "defs"
    USE = "use"
    PATH = "path"
    TEXT = "text"
    RECT = "rect"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    LINE = "line"
    POLYLINE = "polyline"
    POLYGON = "polygon"
    IMAGE = "image"
    CLIP_PATH = "clipPath"
    FILTER = "filter"
    MASK = "mask"
    MARKER = "marker"
    STYLE = "style"
    SYMBOL = "symbol"
    PATTERN = "pattern"
    LINEAR_GRADIENT = "linearGradient"
    RADIAL_GRADIENT = "radialGradient"


class AttributeId(StrEnum):
    """Attribute names with typed values."""

    DISPLAY = "display"
    D = "d"
    XLINK_HREF = "xlink:href"
    HREF = "href"
    CLIP_PATH = "clip-path"
    FILTER = "filter"
    MASK = "mask"
    MARKER = "marker"
    MARKER_START = "marker-start"
    MARKER_MID = "marker-mid"
    MARKER_END = "marker-end"
    FILL = "fill"
    STROKE = "stroke"
    STYLE = "style"


BASIC_SHAPES = frozenset(
    {
        ElementId.RECT,
        ElementId.CIRCLE,
        ElementId.ELLIPSE,
        ElementId.LINE,
        ElementId.POLYLINE,
        ElementId.POLYGON,
    }
)

GRAPHIC_ELEMENTS = BASIC_SHAPES | {
    ElementId.PATH,
    ElementId.TEXT,
    ElementId.G,
    ElementId.USE,
    ElementId.IMAGE,
}

# Elements that never render by themselves and exist to be referenced.
DEFINITION_ELEMENTS = frozenset(
    {
        ElementId.LINEAR_GRADIENT,
        ElementId.RADIAL_GRADIENT,
        ElementId.PATTERN,
        ElementId.CLIP_PATH,
        ElementId.MASK,
        ElementId.FILTER,
        ElementId.MARKER,
        ElementId.SYMBOL,
    }
)

HREF_ATTRIBUTES = (AttributeId.XLINK_HREF, AttributeId.HREF)

# Attributes holding `url(#id)` or `none`.
FUNC_LINK_ATTRIBUTES = frozenset(
    {
        AttributeId.CLIP_PATH,
        AttributeId.FILTER,
        AttributeId.MASK,
        AttributeId.MARKER,
        AttributeId.MARKER_START,
        AttributeId.MARKER_MID,
        AttributeId.MARKER_END,
    }
)

PAINT_ATTRIBUTES = frozenset({AttributeId.FILL, AttributeId.STROKE})

# A referencer linked through one of these renders nothing once its target is gone.
VACATING_ATTRIBUTES = frozenset({AttributeId.CLIP_PATH, AttributeId.FILTER, AttributeId.MASK})

# Properties lifted out of `style` into plain attributes by the reader.
PRESENTATION_ATTRIBUTES = frozenset(
    {
        "clip-path",
        "clip-rule",
        "color",
        "display",
        "fill",
        "fill-opacity",
        "fill-rule",
        "filter",
        "marker",
        "marker-end",
        "marker-mid",
        "marker-start",
        "mask",
        "opacity",
        "stroke",
        "stroke-dasharray",
        "stroke-linecap",
        "stroke-linejoin",
        "stroke-opacity",
        "stroke-width",
        "visibility",
    }
)

NONE_KEYWORD = "none"

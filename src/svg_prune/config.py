"""Configuration constants for svg-prune."""

SVG_NS: str = "http://www.w3.org/2000/svg"
XLINK_NS: str = "http://www.w3.org/1999/xlink"
XML_NS: str = "http://www.w3.org/XML/1998/namespace"

# Prefixed attribute names used in the tree, by namespace.
ATTRIBUTE_PREFIXES: dict[str, str] = {
    XLINK_NS: "xlink",
    XML_NS: "xml",
}

# Appended to the input stem when `clean` is run without --output.
OUTPUT_SUFFIX: str = ".clean.svg"

PRETTY_PRINT: bool = True

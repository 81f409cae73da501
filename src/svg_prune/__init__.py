"""Remove invisible elements from SVG documents."""

from svg_prune.core.defs import remove_unused_defs
from svg_prune.core.export.svg_writer import write_svg, write_svg_file
from svg_prune.core.importer.svg_reader import parse_svg, read_svg_file
from svg_prune.core.invisible import remove_invisible_elements
from svg_prune.core.tree.document import Document, Node
from svg_prune.protocols import DefsCleanerProtocol

__all__ = [
    "DefsCleanerProtocol",
    "Document",
    "Node",
    "parse_svg",
    "read_svg_file",
    "remove_invisible_elements",
    "remove_unused_defs",
    "write_svg",
    "write_svg_file",
]

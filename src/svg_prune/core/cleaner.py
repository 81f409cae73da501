"""Orchestrate cleaning SVG files on disk."""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from svg_prune.config import OUTPUT_SUFFIX
from svg_prune.core.export.svg_writer import write_svg_file
from svg_prune.core.importer.svg_reader import read_svg_file
from svg_prune.core.invisible import remove_invisible_elements
from svg_prune.core.tree.document import Document


@dataclass(frozen=True)
class CleanStats:
    """Summary of a cleanup run."""

    elements_before: int
    elements_after: int

    @property
    def elements_removed(self) -> int:
        return self.elements_before - self.elements_after


def default_output_path(source: Path) -> Path:
    """`drawing.svg` -> `drawing.clean.svg`, next to the source."""
    return source.with_name(source.name.removesuffix(source.suffix) + OUTPUT_SUFFIX)


def clean_document(doc: Document) -> CleanStats:
    before = doc.element_count()
    remove_invisible_elements(doc)
    return CleanStats(elements_before=before, elements_after=doc.element_count())


def clean_file(source: Path, output: Path, *, dry_run: bool = False) -> CleanStats:
    """Read `source`, remove invisible elements and write the result to `output`.

    Args:
        source: SVG file to read.
        output: Destination file. Written even if nothing was removed.
        dry_run: If True, do not write anything.

    Returns:
        CleanStats with element counts before and after.
    """
    doc = read_svg_file(source)
    stats = clean_document(doc)

    if dry_run:
        logger.info("dry-run: would write {}", output)
    else:
        logger.debug("Writing {}", output)
        write_svg_file(doc, output)
    return stats

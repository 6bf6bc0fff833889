"""Parser for the user-curated curriculum vocabulary table."""

from __future__ import annotations

import csv
import logging
from types import MappingProxyType
from typing import Iterable

from hanzi_annotator.models import CurriculumEntry, CurriculumLexicon

logger = logging.getLogger(__name__)

COLUMN_SIMPLIFIED = "Simplified"
COLUMN_CHAPTER = "Chapter"
COLUMN_PINYIN = "Pinyin"
COLUMN_CATEGORY = "Category"
COLUMN_MEANING = "Meaning"

CURRICULUM_COLUMNS = (
    COLUMN_SIMPLIFIED,
    COLUMN_CHAPTER,
    COLUMN_PINYIN,
    COLUMN_CATEGORY,
    COLUMN_MEANING,
)


def _cell(cells: list[str], index: int | None) -> str:
    """Return a trimmed cell value, or an empty string when the column is absent."""

    if index is None or index >= len(cells):
        return ""
    return cells[index].strip()


def parse_curriculum_lines(lines: Iterable[str], delimiter: str = "\t") -> CurriculumLexicon:
    """Parse delimited curriculum rows into a read-only curriculum lexicon.

    The first non-blank, non-comment line is the header. Column names are
    matched case-sensitively against ``Simplified``, ``Chapter``, ``Pinyin``,
    ``Category`` and ``Meaning``; any column other than ``Simplified`` may be
    missing and then reads as an empty string.

    Rows without a ``Simplified`` value are skipped. Every field is trimmed.
    Repeated words accumulate entries in input order.

    Args:
        lines: Raw lines of the table, including the header.
        delimiter: Single-character field separator. Quotes are only
            honoured for non-tab delimiters such as CSV commas.

    Returns:
        Mapping from simplified word to its curriculum entries.
    """

    content = (line for line in lines if line.strip() and not line.lstrip().startswith("#"))
    # Quotes in TSV cells are literal text.
    quoting = csv.QUOTE_NONE if delimiter == "\t" else csv.QUOTE_MINIMAL
    reader = csv.reader(content, delimiter=delimiter, quoting=quoting)

    header = next(reader, None)
    if header is None:
        return MappingProxyType({})

    header_cells = [cell.strip() for cell in header]
    if COLUMN_SIMPLIFIED not in header_cells:
        logger.warning("Curriculum header has no %r column; no rows loaded", COLUMN_SIMPLIFIED)
        return MappingProxyType({})

    indexes = {
        name: header_cells.index(name) if name in header_cells else None
        for name in CURRICULUM_COLUMNS
    }

    mapping: dict[str, list[CurriculumEntry]] = {}
    skipped = 0
    for cells in reader:
        word = _cell(cells, indexes[COLUMN_SIMPLIFIED])
        if not word:
            skipped += 1
            continue
        mapping.setdefault(word, []).append(
            CurriculumEntry(
                chapter=_cell(cells, indexes[COLUMN_CHAPTER]),
                pinyin=_cell(cells, indexes[COLUMN_PINYIN]),
                category=_cell(cells, indexes[COLUMN_CATEGORY]),
                meaning=_cell(cells, indexes[COLUMN_MEANING]),
            )
        )

    if skipped:
        logger.debug("Skipped %d curriculum rows without a %r value", skipped, COLUMN_SIMPLIFIED)
    return MappingProxyType({word: tuple(items) for word, items in mapping.items()})

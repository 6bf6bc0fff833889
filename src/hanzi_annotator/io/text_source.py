"""Read the text to annotate from plain-text or PDF files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pdfplumber

logger = logging.getLogger(__name__)


def extract_pdf_pages(
    pdf_path: Path,
    page_start: int | None,
    page_end: int | None,
) -> Iterator[str]:
    """Yield the text of selected pages of a PDF.

    Page boundaries are inclusive and 1-based to match human page references
    used in CLI arguments. Pages without extractable text are skipped.

    Args:
        pdf_path: Path to the source PDF.
        page_start: 1-based start page, inclusive; ``None`` means first page.
        page_end: 1-based end page, inclusive; ``None`` means last page.

    Yields:
        Page text with trailing whitespace removed.
    """

    with pdfplumber.open(pdf_path) as pdf:
        total_pages = len(pdf.pages)
        start_idx = 0 if page_start is None else max(page_start - 1, 0)
        end_idx = total_pages - 1 if page_end is None else min(page_end - 1, total_pages - 1)

        for page_idx in range(start_idx, end_idx + 1):
            text = pdf.pages[page_idx].extract_text(x_tolerance=1, y_tolerance=1)
            if not text:
                logger.debug("No text on page %d of %s", page_idx + 1, pdf_path)
                continue
            yield text.rstrip()


def read_source_text(
    path: Path,
    page_start: int | None = None,
    page_end: int | None = None,
) -> str:
    """Load the text to annotate.

    ``.pdf`` files are extracted with ``pdfplumber`` and their pages joined by
    newlines; the page range is ignored for other files, which are read as
    UTF-8 (a leading byte-order mark is dropped).

    Args:
        path: Source file path.
        page_start: 1-based start page for PDFs.
        page_end: 1-based end page for PDFs.

    Returns:
        Full text with ``\\r\\n`` line endings normalized to ``\\n``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """

    if not path.exists():
        raise FileNotFoundError(f"Input text not found: {path}")

    if path.suffix.lower() == ".pdf":
        text = "\n".join(extract_pdf_pages(path, page_start=page_start, page_end=page_end))
    else:
        text = path.read_text(encoding="utf-8-sig")

    return text.replace("\r\n", "\n")

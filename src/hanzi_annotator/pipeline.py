"""Top-level orchestration from source files to annotated segments."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from hanzi_annotator.cedict.repository import LexiconRepository
from hanzi_annotator.curriculum.repository import CurriculumRepository
from hanzi_annotator.engine.segmenter import segment
from hanzi_annotator.engine.unknown_words import collect_unknown
from hanzi_annotator.io.text_source import read_source_text
from hanzi_annotator.models import CurriculumLexicon, Lexicon, Segment, UnknownWordRecord
from hanzi_annotator.validation import validate_segments, validate_unknown_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnnotationResult:
    """Result bundle returned by :func:`annotate_text` and :func:`run_annotation`.

    Attributes:
        text: The text that was segmented.
        segments: Segments in source order.
        unknown_words: Ranked words found only in the reference lexicon.
    """

    text: str
    segments: tuple[Segment, ...]
    unknown_words: tuple[UnknownWordRecord, ...]


def annotate_text(text: str, lexicon: Lexicon, curriculum: CurriculumLexicon) -> AnnotationResult:
    """Segment already-loaded text and collect its unknown words.

    Raises:
        DictionaryNotLoadedError: If ``lexicon`` is empty.
        ValueError: If the output breaks a coverage or ranking invariant.
    """

    segments = segment(text, lexicon, curriculum)
    validate_segments(text, segments)

    unknown_words = collect_unknown(segments)
    validate_unknown_words(unknown_words)

    logger.info(
        "Segmented %d characters into %d segments (%d unknown words)",
        len(text),
        len(segments),
        len(unknown_words),
    )
    return AnnotationResult(
        text=text,
        segments=tuple(segments),
        unknown_words=tuple(unknown_words),
    )


def run_annotation(
    text_path: Path,
    cedict_path: Path,
    curriculum_path: Path,
    page_start: int | None = None,
    page_end: int | None = None,
) -> AnnotationResult:
    """Load inputs from disk and annotate the text.

    Args:
        text_path: Text or PDF file to annotate.
        cedict_path: CC-CEDICT ``.u8`` or ``.u8.gz`` file.
        curriculum_path: Curriculum TSV/CSV path; may not exist.
        page_start: 1-based inclusive start page for PDF input.
        page_end: 1-based inclusive end page for PDF input.

    Returns:
        ``AnnotationResult`` for the loaded text.
    """

    text = read_source_text(text_path, page_start=page_start, page_end=page_end)
    lexicon = LexiconRepository(cedict_path).lexicon
    curriculum = CurriculumRepository(curriculum_path).load()
    return annotate_text(text, lexicon, curriculum)

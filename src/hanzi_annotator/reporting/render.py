"""Plain-text rendering of segmented text with inline readings."""

from __future__ import annotations

from typing import Sequence

from hanzi_annotator.engine.segmenter import LATIN_LETTERS
from hanzi_annotator.models import Segment, SegmentKind
from hanzi_annotator.pinyin import numbered_to_marked

UNMATCHED_FLAG = "*"


def render_segment(item: Segment, marked: bool = True) -> str:
    """Render one segment.

    Latin letters are emitted as written and structural segments as their
    raw text. Dictionary words get their first reading in brackets, and
    unmatched words are flagged so they stand out for study.
    """

    if item.kind is SegmentKind.UNKNOWN or item.text in LATIN_LETTERS:
        return item.text

    annotation = item.first_annotation
    if annotation is None:
        return item.text

    reading = numbered_to_marked(annotation.pinyin) if marked else annotation.pinyin
    flag = UNMATCHED_FLAG if item.kind is SegmentKind.UNMATCHED else ""
    return f"{item.text}[{reading}]{flag}"


def render_annotated_text(segments: Sequence[Segment], marked: bool = True) -> str:
    """Concatenate rendered segments back into annotated text.

    The segmenter skips spaces and tabs without emitting a segment, so they do
    not appear in the rendering: ``I am Li`` renders as ``IamLi``. Line breaks
    survive because newlines are emitted as structural segments.

    Args:
        segments: Segmenter output in source order.
        marked: Render pinyin with tone marks instead of tone numbers.

    Returns:
        Annotated text, one output line per source line.
    """

    return "".join(render_segment(item, marked=marked) for item in segments)

"""Validation helpers for segmenter output and unknown-word reports."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from hanzi_annotator.engine.segmenter import LATIN_LETTERS, NEWLINE
from hanzi_annotator.models import Segment, SegmentKind, UnknownWordRecord


def _raise_if_errors(label: str, errors: list[str]) -> None:
    """Raise ``ValueError`` listing at most 25 errors."""

    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:25])
        rest = len(errors) - min(25, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(f"{label} validation failed with {len(errors)} errors:\n{preview}{more}")


def validate_segments(text: str, segments: Sequence[Segment]) -> None:
    """Validate that segments cover ``text`` in order without overlap.

    Segments must appear in ``text`` left to right. Characters between them
    may only be ones the segmenter skips or drops, which never includes
    newlines or ASCII letters because those always produce a segment.

    Args:
        text: Original input text.
        segments: Segmenter output for ``text``.

    Raises:
        ValueError: If ordering, coverage, or annotation rules are violated.
    """

    errors: list[str] = []
    cursor = 0
    for idx, item in enumerate(segments, start=1):
        if not item.text:
            errors.append(f"Segment {idx}: empty text")
            continue
        if item.kind is SegmentKind.MATCHED and not item.annotations:
            errors.append(f"Segment {idx}: matched '{item.text}' has no annotations")
        if item.kind is SegmentKind.UNKNOWN and item.text != NEWLINE:
            errors.append(f"Segment {idx}: unexpected structural text {item.text!r}")

        position = text.find(item.text, cursor)
        if position < 0:
            errors.append(f"Segment {idx}: '{item.text}' not found after offset {cursor}")
            continue
        errors.extend(_gap_errors(text, cursor, position))
        cursor = position + len(item.text)

    errors.extend(_gap_errors(text, cursor, len(text)))
    _raise_if_errors("Segment", errors)


def _gap_errors(text: str, start: int, end: int) -> list[str]:
    return [
        f"Offset {offset}: character {text[offset]!r} missing from segments"
        for offset in range(start, end)
        if text[offset] == NEWLINE or text[offset] in LATIN_LETTERS
    ]


def validate_unknown_words(records: Sequence[UnknownWordRecord]) -> None:
    """Validate unknown-word records are unique and ranked ``1..N``.

    Args:
        records: Output of :func:`collect_unknown`.

    Raises:
        ValueError: If a word repeats or ranks are not contiguous.
    """

    errors: list[str] = []
    seen: set[str] = set()
    for idx, record in enumerate(records, start=1):
        if record.rank != idx:
            errors.append(f"Record {idx}: expected rank {idx}, got {record.rank}")
        if record.word in seen:
            errors.append(f"Record {idx}: duplicate word '{record.word}'")
        seen.add(record.word)

    _raise_if_errors("Unknown-word", errors)


def collect_kind_counts(segments: Sequence[Segment]) -> dict[str, int]:
    """Count segments by kind.

    Args:
        segments: Segmenter output.

    Returns:
        Dictionary of kind label to segment count.
    """

    counter: Counter[str] = Counter()
    for item in segments:
        counter[item.kind.value] += 1
    return dict(counter)

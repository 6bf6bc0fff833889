"""Collect words the reader has not studied yet from segmenter output."""

from __future__ import annotations

from typing import Iterable

from hanzi_annotator.models import Segment, SegmentKind, UnknownWordRecord


def collect_unknown(segments: Iterable[Segment]) -> list[UnknownWordRecord]:
    """Build the ranked unknown-word report.

    Only ``UNMATCHED`` segments are considered. Each word is reported once, at
    the rank of its first occurrence, with the pinyin and meaning of its first
    lexicon annotation (empty strings if it has none).

    Args:
        segments: Output of :func:`hanzi_annotator.engine.segmenter.segment`.

    Returns:
        Records ranked ``1..N`` in first-occurrence order.
    """

    records: list[UnknownWordRecord] = []
    seen: set[str] = set()
    for item in segments:
        if item.kind is not SegmentKind.UNMATCHED or item.text in seen:
            continue
        seen.add(item.text)
        annotation = item.first_annotation
        records.append(
            UnknownWordRecord(
                rank=len(records) + 1,
                word=item.text,
                pinyin=annotation.pinyin if annotation else "",
                meaning=annotation.meaning if annotation else "",
            )
        )
    return records

"""Markdown report generation for annotation run summaries."""

from __future__ import annotations

from typing import Iterable, Sequence

from hanzi_annotator.models import Segment, SegmentKind, UnknownWordRecord
from hanzi_annotator.pinyin import numbered_to_marked
from hanzi_annotator.validation import collect_kind_counts


def _escape_cell(value: str) -> str:
    """Escape pipe characters so dictionary glosses stay inside one cell."""

    return value.replace("|", "\\|")


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(_escape_cell(cell) for cell in row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def build_report_md(
    source_name: str,
    segments: Sequence[Segment],
    unknown_words: Sequence[UnknownWordRecord],
    marked: bool = True,
) -> str:
    """Build the markdown report for one annotation run.

    Args:
        source_name: Label for the annotated text, usually its file name.
        segments: Segmenter output.
        unknown_words: Ranked unknown-word records.
        marked: Render pinyin with tone marks instead of tone numbers.

    Returns:
        Full markdown content with summary and unknown-word tables.
    """

    kind_counts = collect_kind_counts(segments)
    summary_rows = [(kind.value, str(kind_counts.get(kind.value, 0))) for kind in SegmentKind]
    summary_rows.append(("unique_unknown_words", str(len(unknown_words))))

    unknown_rows = [
        (
            str(record.rank),
            record.word,
            numbered_to_marked(record.pinyin) if marked else record.pinyin,
            record.meaning,
        )
        for record in unknown_words
    ]

    sections = [
        f"# Annotation Report: {source_name}",
        "",
        "## Segment summary",
        _markdown_table(["kind", "count"], summary_rows),
        "",
        "## Unknown words",
        _markdown_table(["rank", "word", "pinyin", "meaning"], unknown_rows),
    ]

    return "\n".join(sections) + "\n"

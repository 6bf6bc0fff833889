"""TSV export of the unknown-word report."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from hanzi_annotator.models import UnknownWordRecord

TSV_HEADER = ["rank", "word", "pinyin", "meaning"]


def _clean(value: str) -> str:
    """Keep a field on one TSV line."""

    return " ".join(value.replace("\t", " ").split())


def write_unknown_tsv(
    records: Sequence[UnknownWordRecord],
    output_path: Path,
    include_header: bool = True,
) -> None:
    """Write unknown-word records to a TSV file in rank order.

    Args:
        records: Records from :func:`collect_unknown`.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        for record in records:
            handle.write(
                "\t".join(
                    [
                        str(record.rank),
                        record.word,
                        _clean(record.pinyin),
                        _clean(record.meaning),
                    ]
                )
            )
            handle.write("\n")

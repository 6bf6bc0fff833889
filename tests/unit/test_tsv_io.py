"""Unit tests for TSV serialization helpers."""

from __future__ import annotations

from pathlib import Path

from hanzi_annotator.io.tsv_io import TSV_HEADER, write_unknown_tsv
from hanzi_annotator.models import UnknownWordRecord


def test_write_unknown_tsv_writes_header_and_rank_order(tmp_path: Path) -> None:
    output = tmp_path / "unknown.tsv"
    records = [
        UnknownWordRecord(1, "学生", "xue2 sheng5", "student"),
        UnknownWordRecord(2, "老师", "lao3 shi1", "teacher;\tinstructor"),
    ]

    write_unknown_tsv(records, output_path=output, include_header=True)
    lines = output.read_text(encoding="utf-8").splitlines()

    assert TSV_HEADER == ["rank", "word", "pinyin", "meaning"]
    assert lines[0].split("\t") == TSV_HEADER
    assert lines[1].split("\t") == ["1", "学生", "xue2 sheng5", "student"]
    assert lines[2].split("\t") == ["2", "老师", "lao3 shi1", "teacher; instructor"]


def test_write_unknown_tsv_without_header(tmp_path: Path) -> None:
    output = tmp_path / "unknown.tsv"

    write_unknown_tsv([UnknownWordRecord(1, "书", "shu1", "book")], output, include_header=False)

    assert output.read_text(encoding="utf-8") == "1\t书\tshu1\tbook\n"

"""Unit tests for curriculum table parsing."""

from __future__ import annotations

from pathlib import Path

from hanzi_annotator.curriculum.parser import parse_curriculum_lines
from hanzi_annotator.curriculum.repository import CurriculumRepository
from hanzi_annotator.models import CurriculumEntry


def test_parse_curriculum_trims_fields_and_accumulates_repeated_words() -> None:
    lines = [
        "Simplified\tChapter\tPinyin\tCategory\tMeaning\n",
        " 你好 \t 1 \t nǐ hǎo \t greeting \t hello \n",
        "行\t2\txíng\tverb\tto walk\n",
        "行\t5\tháng\tnoun\trow\n",
    ]

    curriculum = parse_curriculum_lines(lines)

    assert curriculum["你好"] == (CurriculumEntry("1", "nǐ hǎo", "greeting", "hello"),)
    assert curriculum["行"] == (
        CurriculumEntry("2", "xíng", "verb", "to walk"),
        CurriculumEntry("5", "háng", "noun", "row"),
    )


def test_parse_curriculum_skips_rows_without_simplified_value() -> None:
    lines = [
        "Simplified\tChapter\tPinyin\tCategory\tMeaning",
        "\t2\tzài jiàn\tphrase\tgoodbye",
        "   \t3\tx\ty\tz",
        "谢谢\t2\txiè xie\tphrase\tthanks",
    ]

    curriculum = parse_curriculum_lines(lines)

    assert list(curriculum) == ["谢谢"]


def test_parse_curriculum_allows_reordered_and_missing_columns() -> None:
    lines = [
        "Meaning\tSimplified",
        "teacher\t老师",
        "student",
    ]

    curriculum = parse_curriculum_lines(lines)

    assert dict(curriculum) == {"老师": (CurriculumEntry("", "", "", "teacher"),)}


def test_parse_curriculum_column_names_are_case_sensitive() -> None:
    lines = ["simplified\tmeaning", "老师\tteacher"]

    assert dict(parse_curriculum_lines(lines)) == {}


def test_parse_curriculum_ignores_blank_and_comment_lines() -> None:
    lines = ["# my words", "", "Simplified\tMeaning", "", "# chapter 1", "书\tbook"]

    assert list(parse_curriculum_lines(lines)) == ["书"]


def test_repository_reads_csv_by_extension(tmp_path: Path) -> None:
    path = tmp_path / "curriculum.csv"
    path.write_text(
        "Simplified,Chapter,Pinyin,Category,Meaning\n"
        '书,3,shū,noun,"book, volume"\n',
        encoding="utf-8",
    )

    curriculum = CurriculumRepository(path).load()

    assert curriculum["书"] == (CurriculumEntry("3", "shū", "noun", "book, volume"),)


def test_repository_strips_byte_order_mark_from_header(tmp_path: Path) -> None:
    path = tmp_path / "curriculum.tsv"
    path.write_text("\ufeffSimplified\tMeaning\n书\tbook\n", encoding="utf-8")

    assert list(CurriculumRepository(path).load()) == ["书"]


def test_repository_returns_empty_curriculum_when_file_missing(tmp_path: Path) -> None:
    assert dict(CurriculumRepository(tmp_path / "missing.tsv").load()) == {}


def test_parse_curriculum_tsv_keeps_quotes_literal_and_rows_separate() -> None:
    lines = [
        "Simplified\tChapter\tPinyin\tCategory\tMeaning\n",
        '书\t3\tshū\tnoun\t"book" (volume)\n',
        '说\t2\tshuō\tverb\t"to say\n',
        "你\t1\tnǐ\tpronoun\tyou\n",
        "好\t1\thǎo\tadj\tgood\n",
    ]

    curriculum = parse_curriculum_lines(lines)

    assert set(curriculum) == {"书", "说", "你", "好"}
    assert curriculum["书"][0].meaning == '"book" (volume)'
    assert curriculum["说"][0].meaning == '"to say'
    assert curriculum["你"] == (CurriculumEntry("1", "nǐ", "pronoun", "you"),)


def test_repository_tsv_with_stray_quote_loads_every_row(tmp_path: Path) -> None:
    path = tmp_path / "curriculum.tsv"
    path.write_text(
        "Simplified\tMeaning\n"
        '说\t"to say\n'
        "好\tgood\n",
        encoding="utf-8",
    )

    assert list(CurriculumRepository(path).load()) == ["说", "好"]

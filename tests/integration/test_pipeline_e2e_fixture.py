"""Integration tests running the loaders, engine, and CLI on fixture files."""

from __future__ import annotations

from pathlib import Path

import pytest

from hanzi_annotator.cli import main
from hanzi_annotator.models import SegmentKind, UnknownWordRecord
from hanzi_annotator.pipeline import run_annotation


def _write_fixtures(tmp_path: Path) -> tuple[Path, Path, Path]:
    cedict = tmp_path / "cedict_ts.u8"
    cedict.write_text(
        "\n".join(
            [
                "# fixture",
                "你好嗎 你好吗 [ni3 hao3 ma5] /how are you?/",
                "你 你 [ni3] /you/",
                "學生 学生 [xue2 sheng5] /student/",
                "老師 老师 [lao3 shi1] /teacher/",
                "是 是 [shi4] /is; are/",
                "我 我 [wo3] /I; me/",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    curriculum = tmp_path / "curriculum.tsv"
    curriculum.write_text(
        "Simplified\tChapter\tPinyin\tCategory\tMeaning\n"
        "你好\t1\tnǐ hǎo\tgreeting\thello\n"
        "吗\t1\tma\tparticle\tquestion particle\n"
        "我\t1\twǒ\tpronoun\tI\n"
        "是\t2\tshì\tverb\tto be\n",
        encoding="utf-8",
    )
    text = tmp_path / "story.txt"
    text.write_text("你好吗？\n我是学生。\n老师是 Li 老师。学生！\n", encoding="utf-8")
    return text, cedict, curriculum


def test_run_annotation_segments_and_ranks_unknown_words(tmp_path: Path) -> None:
    text, cedict, curriculum = _write_fixtures(tmp_path)

    result = run_annotation(text_path=text, cedict_path=cedict, curriculum_path=curriculum)

    assert [item.text for item in result.segments][:6] == ["你好", "吗", "\n", "我", "是", "学生"]
    assert result.segments[0].kind is SegmentKind.MATCHED
    assert result.segments[5].kind is SegmentKind.UNMATCHED
    assert list(result.unknown_words) == [
        UnknownWordRecord(1, "学生", "xue2 sheng5", "student"),
        UnknownWordRecord(2, "老师", "lao3 shi1", "teacher"),
    ]


def test_cli_writes_tsv_report_and_annotated_text(tmp_path: Path, capsys) -> None:
    text, cedict, curriculum = _write_fixtures(tmp_path)
    output = tmp_path / "out" / "unknown.tsv"
    output.parent.mkdir()
    annotated = tmp_path / "annotated.txt"

    exit_code = main(
        [
            "--input",
            str(text),
            "--cedict",
            str(cedict),
            "--curriculum",
            str(curriculum),
            "--output",
            str(output),
            "--annotated",
            str(annotated),
        ]
    )

    assert exit_code == 0
    assert output.read_text(encoding="utf-8").splitlines() == [
        "rank\tword\tpinyin\tmeaning",
        "1\t学生\txue2 sheng5\tstudent",
        "2\t老师\tlao3 shi1\tteacher",
    ]
    report = (output.parent / "report.md").read_text(encoding="utf-8")
    assert "| 2 | 老师 | lǎo shī | teacher |" in report
    assert annotated.read_text(encoding="utf-8").splitlines()[1] == "我[wǒ]是[shì]学生[xué sheng]*"
    assert "Unknown words (2 total" in capsys.readouterr().out


def test_cli_exits_when_dictionary_has_no_entries(tmp_path: Path) -> None:
    text, _, curriculum = _write_fixtures(tmp_path)
    empty_cedict = tmp_path / "empty.u8"
    empty_cedict.write_text("# nothing here\n", encoding="utf-8")

    with pytest.raises(SystemExit, match="not loaded"):
        main(
            [
                "--input",
                str(text),
                "--cedict",
                str(empty_cedict),
                "--curriculum",
                str(curriculum),
                "--output",
                str(tmp_path / "unknown.tsv"),
            ]
        )

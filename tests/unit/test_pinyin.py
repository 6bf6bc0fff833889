"""Unit tests for numbered-to-tone-mark pinyin conversion."""

from __future__ import annotations

from hanzi_annotator.pinyin import numbered_to_marked, syllable_to_marked


def test_numbered_to_marked_converts_each_syllable() -> None:
    assert numbered_to_marked("ni3 hao3") == "nǐ hǎo"
    assert numbered_to_marked("zhong1 guo2") == "zhōng guó"


def test_neutral_tone_drops_number_without_mark() -> None:
    assert numbered_to_marked("xue2 sheng5") == "xué sheng"


def test_umlaut_vowel_gets_tone_mark() -> None:
    assert syllable_to_marked("lü4") == "lǜ"


def test_capitalized_syllable_keeps_capital() -> None:
    assert numbered_to_marked("Bei3 jing1") == "Běi jīng"


def test_non_numbered_tokens_are_unchanged() -> None:
    assert syllable_to_marked("a") == "a"
    assert syllable_to_marked("nǐ") == "nǐ"
    assert numbered_to_marked("") == ""

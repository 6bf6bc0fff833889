"""Conversion of CC-CEDICT numbered pinyin to tone-marked display form."""

from __future__ import annotations

import re

from pypinyin.contrib.tone_convert import to_tone

NUMBERED_SYLLABLE_RE = re.compile(r"([A-Za-züÜ]+|[A-Za-z]+:[A-Za-z]*)([1-5])")


def _normalize_base(base: str) -> str:
    """Lowercase a syllable base and spell the umlaut vowel as ``ü``."""

    return base.lower().replace("u:", "ü").replace("v", "ü")


def syllable_to_marked(token: str) -> str:
    """Convert one numbered syllable such as ``hao3`` to ``hǎo``.

    Neutral tone (``5``) drops the number without adding a mark. Capitalized
    syllables (proper nouns) keep their leading capital. Tokens that are not
    numbered syllables are returned unchanged.

    Args:
        token: One whitespace-delimited pinyin token.

    Returns:
        Tone-marked syllable or the original token.
    """

    match = NUMBERED_SYLLABLE_RE.fullmatch(token)
    if not match:
        return token

    base, tone = match.groups()
    normalized = _normalize_base(base)
    marked = normalized if tone == "5" else to_tone(f"{normalized}{tone}")
    if base[0].isupper():
        marked = marked[0].upper() + marked[1:]
    return marked


def numbered_to_marked(pinyin: str) -> str:
    """Convert a space-separated numbered pinyin string to tone marks.

    Args:
        pinyin: Pinyin such as ``ni3 hao3`` or a Latin pass-through letter.

    Returns:
        Display pinyin such as ``nǐ hǎo``.
    """

    return " ".join(syllable_to_marked(token) for token in pinyin.split())

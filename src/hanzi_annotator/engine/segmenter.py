"""Greedy longest-match segmentation of Chinese text against two lexicons.

The segmenter walks the text once from left to right. At each position it takes
the longest reference-lexicon word starting there, then decides whether the
curriculum already covers that word (directly or as two curriculum words) or
whether it is a study candidate. Characters neither lexicon knows are dropped.
"""

from __future__ import annotations

import logging
import string
from typing import Collection, Mapping

from hanzi_annotator.errors import DictionaryNotLoadedError
from hanzi_annotator.models import (
    Annotation,
    CurriculumLexicon,
    Lexicon,
    Segment,
    SegmentKind,
)

logger = logging.getLogger(__name__)

NEWLINE = "\n"
LATIN_LETTERS = frozenset(string.ascii_letters)


def key_lengths(keys: Collection[str]) -> tuple[int, ...]:
    """Return the distinct non-zero key lengths, longest first.

    Probing only these lengths at each position finds the same longest prefix
    as scanning every key, without touching the whole vocabulary.
    """

    return tuple(sorted({len(key) for key in keys if key}, reverse=True))


def longest_prefix(
    text: str,
    start: int,
    mapping: Mapping[str, object],
    lengths: tuple[int, ...],
) -> str | None:
    """Find the longest mapping key that is a prefix of ``text[start:]``.

    Two distinct keys of the same length cannot both match at one position, so
    the result does not depend on mapping order.

    Args:
        text: Full input text.
        start: Cursor position.
        mapping: Lexicon keyed by word.
        lengths: Output of :func:`key_lengths` for ``mapping``.

    Returns:
        Matching key, or ``None`` when no key starts at ``start``.
    """

    remaining = len(text) - start
    for length in lengths:
        if length > remaining:
            continue
        candidate = text[start : start + length]
        if candidate in mapping:
            return candidate
    return None


def _curriculum_segment(word: str, curriculum: CurriculumLexicon) -> Segment:
    annotations = tuple(Annotation.from_curriculum(entry) for entry in curriculum[word])
    return Segment(text=word, kind=SegmentKind.MATCHED, annotations=annotations)


def split_into_known_pair(word: str, curriculum: CurriculumLexicon) -> tuple[str, str] | None:
    """Split ``word`` into two curriculum words at the first valid point.

    Split points are tried left to right; the first one where both halves are
    curriculum keys wins, even if a later split would be more balanced.

    Returns:
        ``(left, right)`` or ``None`` when no single split works.
    """

    for k in range(1, len(word)):
        left, right = word[:k], word[k:]
        if left in curriculum and right in curriculum:
            return left, right
    return None


def segment(text: str, lexicon: Lexicon, curriculum: CurriculumLexicon) -> list[Segment]:
    """Segment ``text`` into annotated spans.

    Rules applied at each cursor position, in order:

    1. A newline becomes a structural ``UNKNOWN`` segment.
    2. An ASCII letter becomes a one-character ``MATCHED`` segment whose
       pinyin is the letter itself.
    3. Other whitespace is skipped.
    4. The longest reference-lexicon word starting here is emitted as a
       ``MATCHED`` curriculum word, as two ``MATCHED`` curriculum halves, or
       otherwise as an ``UNMATCHED`` study candidate with lexicon annotations.
       Without a lexicon match, the longest curriculum word starting here is
       emitted as ``MATCHED``. Failing both, the character is dropped.

    Args:
        text: Input text; may be empty and may mix scripts.
        lexicon: Reference lexicon; must not be empty.
        curriculum: Known-vocabulary lexicon; may be empty.

    Returns:
        Segments in source order.

    Raises:
        DictionaryNotLoadedError: If ``lexicon`` is empty.
    """

    if not lexicon:
        raise DictionaryNotLoadedError()

    lexicon_lengths = key_lengths(lexicon.keys())
    curriculum_lengths = key_lengths(curriculum.keys())

    segments: list[Segment] = []
    dropped = 0
    i = 0
    while i < len(text):
        char = text[i]

        if char == NEWLINE:
            segments.append(Segment(text=NEWLINE, kind=SegmentKind.UNKNOWN))
            i += 1
            continue

        if char in LATIN_LETTERS:
            segments.append(
                Segment(
                    text=char,
                    kind=SegmentKind.MATCHED,
                    annotations=(Annotation(pinyin=char, meaning=""),),
                )
            )
            i += 1
            continue

        if char.isspace():
            i += 1
            continue

        word = longest_prefix(text, i, lexicon, lexicon_lengths)
        if word is not None:
            if word in curriculum:
                segments.append(_curriculum_segment(word, curriculum))
            else:
                pair = split_into_known_pair(word, curriculum)
                if pair is not None:
                    segments.extend(_curriculum_segment(part, curriculum) for part in pair)
                else:
                    segments.append(
                        Segment(
                            text=word,
                            kind=SegmentKind.UNMATCHED,
                            annotations=tuple(
                                Annotation.from_lexicon(entry) for entry in lexicon[word]
                            ),
                        )
                    )
            i += len(word)
            continue

        known = longest_prefix(text, i, curriculum, curriculum_lengths)
        if known is not None:
            segments.append(_curriculum_segment(known, curriculum))
            i += len(known)
            continue

        dropped += 1
        i += 1

    if dropped:
        logger.debug("Dropped %d characters found in neither lexicon", dropped)
    return segments

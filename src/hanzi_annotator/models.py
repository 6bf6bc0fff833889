"""Data models shared by the dictionary loaders, engine, and reports.

Lexicons are plain read-only mappings from a word to an ordered tuple of
entries. They are built by the loaders in :mod:`hanzi_annotator.cedict` and
:mod:`hanzi_annotator.curriculum` and passed explicitly into the engine, so the
engine never reaches for shared dictionary state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping


@dataclass(frozen=True)
class LexiconEntry:
    """One reading/sense of a word in the general reference dictionary."""

    pinyin: str
    meaning: str


@dataclass(frozen=True)
class CurriculumEntry:
    """One row of the user-curated curriculum for a known word.

    Rows sharing the same ``Simplified`` value accumulate as separate entries
    in input order, so a word may carry several chapters or senses.
    """

    chapter: str
    pinyin: str
    category: str
    meaning: str


Lexicon = Mapping[str, tuple[LexiconEntry, ...]]
CurriculumLexicon = Mapping[str, tuple[CurriculumEntry, ...]]


class SegmentKind(str, Enum):
    """Label for a span of segmented text."""

    MATCHED = "matched"
    UNMATCHED = "unmatched"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Annotation:
    """Pronunciation/meaning detail attached to a segment.

    ``chapter`` and ``category`` are only set when the annotation comes from
    the curriculum lexicon.
    """

    pinyin: str
    meaning: str
    chapter: str | None = None
    category: str | None = None

    @classmethod
    def from_lexicon(cls, entry: LexiconEntry) -> Annotation:
        return cls(pinyin=entry.pinyin, meaning=entry.meaning)

    @classmethod
    def from_curriculum(cls, entry: CurriculumEntry) -> Annotation:
        return cls(
            pinyin=entry.pinyin,
            meaning=entry.meaning,
            chapter=entry.chapter,
            category=entry.category,
        )


@dataclass(frozen=True)
class Segment:
    """One contiguous labeled span of the source text.

    Segments are emitted strictly left to right. ``MATCHED`` segments always
    carry at least one annotation; ``UNKNOWN`` segments are structural markers
    (line breaks) and carry none.
    """

    text: str
    kind: SegmentKind
    annotations: tuple[Annotation, ...] = ()

    @property
    def first_annotation(self) -> Annotation | None:
        """Return the first annotation, or ``None`` for bare segments."""

        return self.annotations[0] if self.annotations else None


@dataclass(frozen=True)
class UnknownWordRecord:
    """Report item for a word found only in the general lexicon."""

    rank: int
    word: str
    pinyin: str
    meaning: str

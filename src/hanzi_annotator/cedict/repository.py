"""Repository utilities for loading CC-CEDICT into a read-only lexicon."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
import gzip
import logging
from pathlib import Path
from types import MappingProxyType
from typing import IO

from hanzi_annotator.cedict.parser import CedictEntry, parse_cedict_lines
from hanzi_annotator.models import Lexicon, LexiconEntry

logger = logging.getLogger(__name__)


def _open_text(path: Path) -> IO[str]:
    """Open a dictionary file as UTF-8 text, decompressing ``.gz`` files."""

    if path.suffix == ".gz":
        return gzip.open(path, "rt", encoding="utf-8")
    return path.open("r", encoding="utf-8")


@dataclass(frozen=True)
class LexiconRepository:
    """Read-only repository exposing the reference lexicon built from CC-CEDICT.

    The repository parses a CEDICT-compatible ``.u8`` file (optionally
    gzip-compressed) once and caches both the parsed entries and the
    word-indexed lexicon mapping handed to the segmenter. Instances are
    path-scoped and deterministic.
    """

    path: Path

    @cached_property
    def entries(self) -> tuple[CedictEntry, ...]:
        """Load and cache parsed entries from disk.

        Exact duplicate lines (same word, pinyin and meaning) are collapsed,
        keeping the first occurrence.

        Returns:
            Immutable tuple of parsed entries in file order.

        Raises:
            FileNotFoundError: If the configured CEDICT file path does not exist.
        """

        if not self.path.exists():
            raise FileNotFoundError(f"CC-CEDICT file not found: {self.path}")

        with _open_text(self.path) as handle:
            parsed = parse_cedict_lines(handle)

        deduped: dict[tuple[str, str, str], CedictEntry] = {}
        for entry in parsed:
            key = (entry.simplified, entry.pinyin, entry.meaning)
            deduped.setdefault(key, entry)

        logger.info("Loaded %d CC-CEDICT entries from %s", len(deduped), self.path)
        return tuple(deduped.values())

    @cached_property
    def lexicon(self) -> Lexicon:
        """Build and cache the simplified-word lexicon mapping.

        Returns:
            Read-only mapping from simplified words to reading/meaning tuples.
        """

        mapping: dict[str, list[LexiconEntry]] = {}
        for entry in self.entries:
            mapping.setdefault(entry.simplified, []).append(entry.to_lexicon_entry())
        return MappingProxyType({word: tuple(items) for word, items in mapping.items()})

    def entries_for_word(self, word: str) -> tuple[LexiconEntry, ...]:
        """Return lexicon entries for a word.

        Args:
            word: Simplified Hanzi word key.

        Returns:
            Tuple of entries for ``word``; empty tuple when absent.
        """

        return self.lexicon.get(word, ())

"""Parsing utilities for CC-CEDICT dictionary files."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Iterable

from hanzi_annotator.models import LexiconEntry

logger = logging.getLogger(__name__)

CEDICT_ENTRY_RE = re.compile(r"^(\S+)\s+(\S+)\s+\[([^]]*)]\s*/(.*)/\s*$")


@dataclass(frozen=True)
class CedictEntry:
    """One dictionary line normalized for lexicon lookup.

    Entries are keyed by the simplified form; the traditional form is kept for
    reference. Slash-delimited glosses are joined into a single ``; ``
    separated meaning string.
    """

    simplified: str
    traditional: str
    pinyin: str
    meaning: str

    def to_lexicon_entry(self) -> LexiconEntry:
        """Project the parsed line onto the engine's reading/meaning record."""

        return LexiconEntry(pinyin=self.pinyin, meaning=self.meaning)


def normalize_pinyin_field(payload: str) -> str:
    """Collapse whitespace in a bracketed pinyin payload.

    Args:
        payload: Raw text inside ``[...]`` such as ``ni3  hao3``.

    Returns:
        Space-separated syllables with ``u:`` rewritten to ``ü``.
    """

    payload = payload.replace("u:", "ü").replace("U:", "Ü")
    return " ".join(payload.split())


def parse_cedict_line(line: str) -> CedictEntry | None:
    """Parse one CC-CEDICT line.

    Args:
        line: Raw dictionary line.

    Returns:
        Parsed entry, or ``None`` for comments, blank and malformed lines.
    """

    line = line.strip()
    if not line or line.startswith("#"):
        return None
    match = CEDICT_ENTRY_RE.match(line)
    if not match:
        return None

    trad, simp, pinyin_field, definition_payload = match.groups()
    glosses = [part.strip() for part in definition_payload.split("/") if part.strip()]
    return CedictEntry(
        simplified=simp,
        traditional=trad,
        pinyin=normalize_pinyin_field(pinyin_field),
        meaning="; ".join(glosses),
    )


def parse_cedict_lines(lines: Iterable[str]) -> list[CedictEntry]:
    """Parse CC-CEDICT lines into normalized entries.

    The parser ignores comments and malformed lines, preserving file order for
    everything else.

    Args:
        lines: Iterable of raw dictionary lines.

    Returns:
        Flat list of parsed entries.
    """

    entries: list[CedictEntry] = []
    skipped = 0
    for line in lines:
        entry = parse_cedict_line(line)
        if entry is None:
            if line.strip() and not line.startswith("#"):
                skipped += 1
                logger.debug("Skipping malformed CC-CEDICT line: %r", line.rstrip("\n"))
            continue
        entries.append(entry)

    if skipped:
        logger.info("Skipped %d malformed CC-CEDICT lines", skipped)
    return entries

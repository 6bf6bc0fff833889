"""Repository for the optional curriculum vocabulary file."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from types import MappingProxyType

from hanzi_annotator.curriculum.parser import parse_curriculum_lines
from hanzi_annotator.models import CurriculumLexicon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurriculumRepository:
    """Lookup repository for the user's known vocabulary.

    The file is a delimited table with a header row. ``.csv`` files are read
    comma-separated; anything else is treated as TSV unless ``delimiter`` is
    given explicitly.
    """

    path: Path
    delimiter: str | None = None

    def resolved_delimiter(self) -> str:
        """Return the configured delimiter or infer one from the file suffix."""

        if self.delimiter:
            return self.delimiter
        return "," if self.path.suffix.lower() == ".csv" else "\t"

    def load(self) -> CurriculumLexicon:
        """Load the curriculum lexicon.

        Returns:
            Read-only curriculum mapping; empty when the file does not exist.
        """

        if not self.path.exists():
            logger.info("Curriculum file %s not found; treating every word as unknown", self.path)
            return MappingProxyType({})

        with self.path.open("r", encoding="utf-8-sig", newline="") as handle:
            curriculum = parse_curriculum_lines(handle, delimiter=self.resolved_delimiter())

        logger.info("Loaded %d curriculum words from %s", len(curriculum), self.path)
        return curriculum

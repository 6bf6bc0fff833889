"""Exception types raised by the annotation engine."""

from __future__ import annotations


class AnnotatorError(Exception):
    """Base class for annotation failures callers may want to recover from."""


class DictionaryNotLoadedError(AnnotatorError):
    """Raised when segmentation is requested against an empty lexicon.

    This is distinct from a run that finds no matches: the caller should block
    the action or tell the user the reference dictionary is missing.
    """

    def __init__(self, message: str = "Reference dictionary is not loaded (lexicon is empty).") -> None:
        super().__init__(message)

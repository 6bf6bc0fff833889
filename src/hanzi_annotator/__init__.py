"""Pinyin/meaning annotation of Chinese text against a known-vocabulary list."""

from .errors import AnnotatorError, DictionaryNotLoadedError
from .models import Annotation, Segment, SegmentKind, UnknownWordRecord

__all__ = [
    "Annotation",
    "Segment",
    "SegmentKind",
    "UnknownWordRecord",
    "AnnotatorError",
    "DictionaryNotLoadedError",
]

from __future__ import annotations
import re
from functools import lru_cache
from typing import FrozenSet

_whitespace_pattern = re.compile(r"\s+")


@lru_cache(maxsize=8192)
def normalize_text(s: str | None) -> str:
    """Lower-case, collapse whitespace runs to a single space and trim."""
    if not s:
        return ""
    return _whitespace_pattern.sub(" ", s.lower()).strip()


@lru_cache(maxsize=8192)
def char_ngrams(s: str | None, n: int = 2) -> FrozenSet[str]:
    """Character n-grams over the normalized text.

    Character windows work for scripts without spaces between words (Thai),
    where word tokens alone would miss partial overlaps.
    """
    text = normalize_text(s)
    if n <= 0 or len(text) < n:
        return frozenset()
    return frozenset(text[i:i + n] for i in range(len(text) - n + 1))


__all__ = ["normalize_text", "char_ngrams"]

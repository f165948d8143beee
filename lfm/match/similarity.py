"""Free-text similarity heuristics.

Combines exact, containment, character-bigram and word-overlap signals into a
single 0..1 score. All functions are pure and treat both arguments the same
way, so ``text_similarity(a, b) == text_similarity(b, a)``.
"""

from __future__ import annotations
from typing import AbstractSet, List

from ..utils.normalization import normalize_text, char_ngrams

# Containment scores start at this floor and scale up with the length ratio
CONTAINMENT_BASE = 0.7
CONTAINMENT_SPAN = 0.3
NGRAM_SIZE = 2
NGRAM_WEIGHT = 0.6
WORD_WEIGHT = 0.4


def jaccard_similarity(set1: AbstractSet[str], set2: AbstractSet[str]) -> float:
    """Intersection / union ratio (0.0 when both sets are empty)."""
    union = len(set1 | set2)
    if union == 0:
        return 0.0
    return len(set1 & set2) / union


def _count_common(words: List[str], others: List[str]) -> int:
    return sum(1 for w in words if any(o in w or w in o for o in others))


def word_overlap_score(s1: str, s2: str) -> float:
    """Share of words that appear in (or contain a word of) the other text.

    Common words are counted from both sides so the score stays symmetric and
    never exceeds 1 when several short words hit the same long one.
    """
    words1 = normalize_text(s1).split()
    words2 = normalize_text(s2).split()
    total = len(words1) + len(words2)
    if total == 0:
        return 0.0
    common = _count_common(words1, words2) + _count_common(words2, words1)
    return common / total


def text_similarity(s1: str | None, s2: str | None) -> float:
    """Similarity of two free-text strings in [0, 1].

    Order of checks:
      1. empty on either side -> 0.0
      2. identical after normalization -> 1.0
      3. one contains the other -> 0.7 + 0.3 * len(shorter) / len(longer)
      4. otherwise the best of bigram Jaccard, word overlap and their 60/40 blend
    """
    a = normalize_text(s1)
    b = normalize_text(s2)
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    if a in b or b in a:
        shorter, longer = (a, b) if len(a) <= len(b) else (b, a)
        return CONTAINMENT_BASE + CONTAINMENT_SPAN * len(shorter) / len(longer)

    ngram_score = jaccard_similarity(char_ngrams(a, NGRAM_SIZE), char_ngrams(b, NGRAM_SIZE))
    word_score = word_overlap_score(a, b)
    blended = NGRAM_WEIGHT * ngram_score + WORD_WEIGHT * word_score
    return max(blended, ngram_score, word_score)


__all__ = ["jaccard_similarity", "word_overlap_score", "text_similarity"]

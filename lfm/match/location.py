"""Location comparison using area keyword groups."""

from __future__ import annotations
from typing import Callable, Optional, Tuple

from ..utils.normalization import normalize_text
from .keywords import LOCATION_KEYWORDS, KeywordGroup
from .similarity import text_similarity

SAME_AREA_SCORE = 0.9


class LocationMatcher:
    """Decide whether two free-text locations describe the same general area.

    "โรงอาหาร ชั้น 1" and "ศูนย์อาหาร" share no words but both mention the
    canteen group, so they score SAME_AREA_SCORE. Pairs without a shared group
    fall back to plain text similarity.
    """

    def __init__(
        self,
        groups: Tuple[KeywordGroup, ...] = LOCATION_KEYWORDS,
        fallback: Callable[[str, str], float] = text_similarity,
        same_area_score: float = SAME_AREA_SCORE,
    ):
        self.groups = tuple(
            (area, tuple(normalize_text(k) for k in keywords if k))
            for area, keywords in groups
        )
        self.fallback = fallback
        self.same_area_score = same_area_score

    def shared_area(self, loc1: str | None, loc2: str | None) -> Optional[str]:
        l1 = normalize_text(loc1)
        l2 = normalize_text(loc2)
        if not l1 or not l2:
            return None
        for area, keywords in self.groups:
            if any(k in l1 for k in keywords) and any(k in l2 for k in keywords):
                return area
        return None

    def location_similarity(self, loc1: str | None, loc2: str | None) -> float:
        l1 = normalize_text(loc1)
        l2 = normalize_text(loc2)
        # Blank on both sides scores 0, not 1
        if not l1 or not l2:
            return 0.0
        if l1 == l2:
            return 1.0
        if self.shared_area(l1, l2) is not None:
            return self.same_area_score
        return self.fallback(l1, l2)


__all__ = ["LocationMatcher", "SAME_AREA_SCORE"]

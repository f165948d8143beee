"""Keyword-based item category inference."""

from __future__ import annotations
from typing import Optional, Tuple

from ..models import ItemCategory
from ..utils.normalization import normalize_text
from .keywords import CATEGORY_KEYWORDS


class CategoryClassifier:
    """Infer an item category from free text by keyword lookup.

    The first category (in table order) with a keyword occurring anywhere in
    the text wins. Keywords are plain substrings so they also hit inside Thai
    compounds, e.g. "พวงกุญแจสีแดง" -> keys.

    Example usage:
        classifier = CategoryClassifier()
        classifier.classify("iPhone 13 สีดำ")   # ItemCategory.PHONE
    """

    def __init__(self, table: Tuple[Tuple[ItemCategory, Tuple[str, ...]], ...] = CATEGORY_KEYWORDS):
        self.table = tuple(
            (category, tuple(normalize_text(k) for k in keywords if k))
            for category, keywords in table
        )

    def classify(self, text: str | None) -> Optional[ItemCategory]:
        """Return the first matching category, or None when no keyword hits."""
        normalized = normalize_text(text)
        if not normalized:
            return None
        for category, keywords in self.table:
            if any(k in normalized for k in keywords):
                return category
        return None


__all__ = ["CategoryClassifier"]

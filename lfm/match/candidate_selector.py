"""Candidate selection utilities for matching engine.

This module narrows the opposite-kind collection before scoring. Filters run
cheapest first so the expensive text comparisons only see plausible pairs.
"""

from __future__ import annotations
from typing import List, Sequence, TypeVar, Callable

from ..models import ItemCategory, LostItem, FoundItem, Item, days_between
from .classifier import CategoryClassifier

DEFAULT_TIME_WINDOW_DAYS = 30.0

T = TypeVar("T", LostItem, FoundItem)


class CandidateSelector:
    """Hierarchical candidate filtering for lost/found pairing.

    Steps, in order:

    1. Status filter (hard): drop candidates that are not open for matching or
       already carry a match.
    2. Category filter (soft): when the source has a usable category, keep
       candidates whose category is unknown or equal. If that would leave
       nothing, the step is skipped and the status-filtered set is kept.
    3. Time window (hard): drop candidates reported more than
       ``time_window_days`` away from the source.

    Example usage:
        selector = CandidateSelector(time_window_days=30)
        candidates = selector.select_for_lost(lost, found_items)
    """

    def __init__(
        self,
        classifier: CategoryClassifier | None = None,
        time_window_days: float | None = DEFAULT_TIME_WINDOW_DAYS,
    ):
        self.classifier = classifier or CategoryClassifier()
        self.time_window_days = time_window_days

    def status_filter(self, candidates: Sequence[T]) -> List[T]:
        return [c for c in candidates if c.is_eligible]

    @staticmethod
    def soft_filter(candidates: List[T], predicate: Callable[[T], bool]) -> List[T]:
        """Apply predicate unless it would remove every candidate."""
        narrowed = [c for c in candidates if predicate(c)]
        return narrowed if narrowed else candidates

    def time_window_filter(self, source: Item, candidates: Sequence[T]) -> List[T]:
        if self.time_window_days is None:
            return list(candidates)
        return [
            c for c in candidates
            if days_between(source.event_date, c.event_date) <= self.time_window_days
        ]

    def select_for_lost(self, lost: LostItem, found_items: Sequence[FoundItem]) -> List[FoundItem]:
        candidates = self.status_filter(found_items)

        category = lost.category
        if category is not None and category != ItemCategory.OTHER:
            def same_or_unknown(found: FoundItem) -> bool:
                found_category = self.classifier.classify(found.description)
                return found_category is None or found_category == category
            candidates = self.soft_filter(candidates, same_or_unknown)

        return self.time_window_filter(lost, candidates)

    def select_for_found(self, found: FoundItem, lost_items: Sequence[LostItem]) -> List[LostItem]:
        candidates = self.status_filter(lost_items)

        category = self.classifier.classify(found.description)
        if category is not None and category != ItemCategory.OTHER:
            def same_or_unknown(lost: LostItem) -> bool:
                return lost.category in (None, ItemCategory.OTHER, category)
            candidates = self.soft_filter(candidates, same_or_unknown)

        return self.time_window_filter(found, candidates)


__all__ = ["CandidateSelector", "DEFAULT_TIME_WINDOW_DAYS"]

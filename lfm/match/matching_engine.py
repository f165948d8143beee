"""Matching engine for lost-to-found report pairing.

This module provides the engine that coordinates candidate selection, pair
scoring and the validity gate. It borrows records from the caller and returns
fresh MatchResult lists; nothing is cached or persisted between calls.
"""

from __future__ import annotations
import time
import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Sequence, Tuple

from ..config_types import AppConfig, MatchingConfig
from ..models import ItemKind, LostItem, FoundItem, Item
from ..utils.logging_helpers import log_progress, format_confidence_summary
from .candidate_selector import CandidateSelector
from .classifier import CategoryClassifier
from .location import LocationMatcher
from .scoring import MatchResult, MatchScorer, ScoringConfig, is_valid_match

logger = logging.getLogger(__name__)


class MatchingEngine:
    """Core engine for lost/found report matching.

    This class orchestrates the matching process:
    1. Rejects sources that are not open for matching
    2. Narrows the opposite collection using CandidateSelector
    3. Scores each surviving pair with MatchScorer
    4. Keeps pairs passing the validity gate (min score + min reasons)
    5. Sorts descending by score; ties keep candidate order

    Example usage:
        engine = MatchingEngine(MatchingConfig(time_window_days=30))
        matches = engine.find_matches_for_lost(lost, found_items)
        everything = engine.auto_match(lost_items, found_items)
    """

    def __init__(
        self,
        matching_config: MatchingConfig | None = None,
        scoring_config: ScoringConfig | None = None,
        classifier: CategoryClassifier | None = None,
        location_matcher: LocationMatcher | None = None,
    ):
        """Initialize the matching engine.

        Args:
            matching_config: Candidate window, worker count and progress settings
            scoring_config: Weights, thresholds and bonuses for the scorer
            classifier: Category classifier shared by filter and scorer
            location_matcher: Location comparison (default keyword groups)
        """
        self.matching_config = matching_config or MatchingConfig()
        self.scoring_config = scoring_config or ScoringConfig()
        self.classifier = classifier or CategoryClassifier()
        self.scorer = MatchScorer(self.scoring_config, classifier=self.classifier, location_matcher=location_matcher)
        self.selector = CandidateSelector(self.classifier, time_window_days=self.matching_config.time_window_days)

        self.max_workers = max(1, int(self.matching_config.max_workers or 1))
        self.progress_enabled = self.matching_config.progress_enabled
        self.progress_interval = max(1, self.matching_config.progress_interval)

    @classmethod
    def from_config(cls, cfg: AppConfig) -> MatchingEngine:
        return cls(matching_config=cfg.matching, scoring_config=cfg.scoring)

    def find_matches_for_lost(self, lost: LostItem, found_items: Sequence[FoundItem]) -> List[MatchResult]:
        """Rank found reports that could be the given lost item."""
        if not lost.is_eligible:
            logger.debug(f"lost={lost.id} not open for matching (status={lost.status.value})")
            return []
        candidates = self.selector.select_for_lost(lost, found_items)
        return self._rank(self._score_pairs((lost, found) for found in candidates))

    def find_matches_for_found(self, found: FoundItem, lost_items: Sequence[LostItem]) -> List[MatchResult]:
        """Rank lost reports whose owner might be looking for the given found item."""
        if not found.is_eligible:
            logger.debug(f"found={found.id} not open for matching (status={found.status.value})")
            return []
        candidates = self.selector.select_for_found(found, lost_items)
        return self._rank(self._score_pairs((lost, found) for lost in candidates))

    def find_matches(self, item: Item, candidates: Sequence[Item]) -> List[MatchResult]:
        """Dispatch on the source record's kind."""
        if item.kind == ItemKind.LOST:
            return self.find_matches_for_lost(item, candidates)  # type: ignore[arg-type]
        return self.find_matches_for_found(item, candidates)  # type: ignore[arg-type]

    def auto_match(
        self,
        lost_items: Sequence[LostItem],
        found_items: Sequence[FoundItem],
        bidirectional: bool = False,
    ) -> List[MatchResult]:
        """Match every open lost report against the full found collection.

        Pairs are de-duplicated by (lost_id, found_id); the first occurrence
        wins. With ``bidirectional`` the found-side search is run as well so
        pairs only reachable through the found-side category filter surface too.

        Returns:
            De-duplicated results sorted by score (descending)
        """
        start = time.time()
        results: List[MatchResult] = []
        seen: set[Tuple[str, str]] = set()
        skipped = 0

        def collect(matches: Iterable[MatchResult]) -> None:
            for match in matches:
                if match.key not in seen:
                    seen.add(match.key)
                    results.append(match)

        sources: List[Item] = list(lost_items)
        if bidirectional:
            sources.extend(found_items)
        total = len(sources)

        for processed, source in enumerate(sources, start=1):
            if not source.is_eligible:
                skipped += 1
            elif source.kind == ItemKind.LOST:
                collect(self.find_matches_for_lost(source, found_items))  # type: ignore[arg-type]
            else:
                collect(self.find_matches_for_found(source, lost_items))  # type: ignore[arg-type]

            if self.progress_enabled and processed % self.progress_interval == 0:
                log_progress(
                    processed=processed,
                    total=total,
                    matched=len(results),
                    skipped=skipped,
                    elapsed_seconds=time.time() - start,
                    item_name="reports",
                )

        ranked = self._rank(results)

        duration = time.time() - start
        tiers = Counter(r.confidence.value for r in ranked)
        logger.info(f"✓ Found {len(ranked)} candidate pair(s) from {total - skipped} open report(s) in {duration:.2f}s")
        if ranked:
            logger.info(f"  Confidence: {format_confidence_summary(tiers)}")
        return ranked

    def _score_pair(self, pair: Tuple[LostItem, FoundItem]) -> MatchResult:
        lost, found = pair
        result = self.scorer.score(lost, found)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"lost={lost.id} vs found={found.id} "
                f"score={result.score:.3f} conf={result.confidence.value} "
                f"reasons={list(result.reasons)}"
            )
        return result

    def _score_pairs(self, pairs: Iterable[Tuple[LostItem, FoundItem]]) -> List[MatchResult]:
        """Score pairs (in parallel when configured) and apply the validity gate.

        Output order follows input order regardless of worker scheduling.
        """
        pair_list = list(pairs)
        if self.max_workers > 1 and len(pair_list) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                scored = list(pool.map(self._score_pair, pair_list))
        else:
            scored = [self._score_pair(p) for p in pair_list]
        return [r for r in scored if is_valid_match(r, self.scoring_config)]

    @staticmethod
    def _rank(results: List[MatchResult]) -> List[MatchResult]:
        # sorted() is stable with reverse=True, equal scores keep candidate order
        return sorted(results, key=lambda r: r.score, reverse=True)


__all__ = ["MatchingEngine"]

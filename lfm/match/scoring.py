from __future__ import annotations
"""Scoring engine for lost-to-found report matching.

This module defines dataclasses and a scorer that evaluates one lost report
against one found report. It does NOT fetch or persist records itself; callers
provide already-loaded items.

Design goals:
- Weighted composite of five criteria plus small keyword bonuses
- Human-readable reasons that double as a validity gate
- Map score to confidence tiers
- Transparent breakdown for diagnostics
- Keep pure / side-effect free for easy unit testing
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any, Sequence, Tuple

from ..models import ItemCategory, LostItem, FoundItem, days_between
from ..utils.normalization import normalize_text
from .classifier import CategoryClassifier
from .keywords import BRAND_KEYWORDS, COLOR_KEYWORDS, first_shared_keyword
from .location import LocationMatcher
from .similarity import text_similarity

# --- Confidence Enum -------------------------------------------------------

class MatchConfidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

# --- Scoring Configuration -------------------------------------------------

@dataclass
class ScoringConfig:
    """Weights, tiers, bonuses and thresholds for the scorer.

    The five criterion weights sum to 1.0, so a pair that agrees on every
    criterion scores 1.0 before bonuses. Bonuses are flat additions and the
    total is clamped to 1.0.

    Scoring scenarios:

    1. Same keys, same field, same day:
       category (0.20) + item name containment 0.89 * 0.35 (0.31)
       + location exact (0.20) + time (0.10) = 0.81 -> HIGH

    2. Same category and day, unrelated wording and place:
       category (0.20) + time (0.10) = 0.30 -> below min_accept_score

    3. Neutral category, similar wording, nearby area, within a week:
       0.5 * 0.20 + 0.7 * 0.35 + 0.9 * 0.20 + 0.5 * 0.10 = 0.575 -> MEDIUM
    """
    # criterion weights
    weight_category: float = 0.20
    weight_item_name: float = 0.35
    weight_location: float = 0.20
    weight_description: float = 0.15
    weight_time: float = 0.10
    # category sub-scores
    category_match_score: float = 1.0
    category_mismatch_score: float = 0.3
    category_unknown_score: float = 0.5
    # (max days apart, sub-score), checked in ascending order
    time_tiers: Tuple[Tuple[float, float], ...] = ((1, 1.0), (3, 0.8), (7, 0.5), (14, 0.2))
    # bonuses (first keyword hit only)
    bonus_brand: float = 0.10
    bonus_color: float = 0.05
    # reason thresholds (strictly greater than)
    reason_item_name_threshold: float = 0.6
    reason_location_threshold: float = 0.5
    reason_description_threshold: float = 0.4
    reason_time_max_days: float = 7
    # confidence thresholds
    confidence_high_threshold: float = 0.70
    confidence_medium_threshold: float = 0.55
    # acceptance
    min_accept_score: float = 0.40
    min_reasons: int = 1

    def __post_init__(self):
        # Lists arrive from env/JSON config; keep tiers sorted and immutable
        self.time_tiers = tuple(sorted((float(d), float(s)) for d, s in self.time_tiers))

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.__dict__)
        data["time_tiers"] = [list(t) for t in self.time_tiers]
        return data

# --- Dataclasses -----------------------------------------------------------

@dataclass(frozen=True)
class ScoreBreakdown:
    category: float
    item_name: float
    location: float
    description: float
    time: float
    days_apart: float
    found_category: Optional[ItemCategory] = None
    location_area: Optional[str] = None
    brand: Optional[str] = None
    color: Optional[str] = None
    bonus: float = 0.0

@dataclass(frozen=True)
class MatchResult:
    lost_item: LostItem
    found_item: FoundItem
    score: float
    reasons: Tuple[str, ...]
    confidence: MatchConfidence
    breakdown: Optional[ScoreBreakdown] = field(default=None, compare=False)

    @property
    def key(self) -> Tuple[str, str]:
        """Pair identity used for de-duplication."""
        return (self.lost_item.id, self.found_item.id)

    @property
    def score_percentage(self) -> int:
        return _percent(self.score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lostItem": self.lost_item.to_dict(),
            "foundItem": self.found_item.to_dict(),
            "score": self.score,
            "scorePercentage": self.score_percentage,
            "reasons": list(self.reasons),
            "confidence": self.confidence.value,
        }

# --- Helpers ---------------------------------------------------------------

def _percent(value: float) -> int:
    # Half-up rounding; round() would send 0.125 -> 12
    return int(math.floor(value * 100 + 0.5))


def _days_label(days: float) -> str:
    n = int(days) if float(days).is_integer() else days
    return f"{n} day" if n == 1 else f"{n} days"


def confidence_for(score: float, cfg: ScoringConfig | None = None) -> MatchConfidence:
    cfg = cfg or ScoringConfig()
    if score >= cfg.confidence_high_threshold:
        return MatchConfidence.HIGH
    if score >= cfg.confidence_medium_threshold:
        return MatchConfidence.MEDIUM
    return MatchConfidence.LOW


def is_valid_match(result: MatchResult, cfg: ScoringConfig | None = None) -> bool:
    """Score at or above the acceptance floor and at least min_reasons reasons."""
    cfg = cfg or ScoringConfig()
    return result.score >= cfg.min_accept_score and len(result.reasons) >= cfg.min_reasons


def format_match_score(score: float) -> str:
    """Format a 0..1 score for display, e.g. 0.8125 -> '81%'."""
    return f"{_percent(score)}%"


def top_matches(matches: Sequence[MatchResult], limit: int = 5) -> List[MatchResult]:
    return list(matches[:max(limit, 0)])

# --- Core Scoring Logic ----------------------------------------------------

class MatchScorer:
    """Score one lost report against one found report.

    Found reports carry no declared category, so the found side's category is
    inferred from its description with the CategoryClassifier. Keyword tables
    and the scoring policy are fixed at construction.

    Example usage:
        scorer = MatchScorer(ScoringConfig(min_accept_score=0.5))
        result = scorer.score(lost, found)
        result.confidence, result.reasons
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        classifier: CategoryClassifier | None = None,
        location_matcher: LocationMatcher | None = None,
        brands: Tuple[str, ...] = BRAND_KEYWORDS,
        colors: Tuple[str, ...] = COLOR_KEYWORDS,
    ):
        self.config = config or ScoringConfig()
        self.classifier = classifier or CategoryClassifier()
        self.location_matcher = location_matcher or LocationMatcher()
        self.brands = tuple(normalize_text(b) for b in brands if b)
        self.colors = tuple(normalize_text(c) for c in colors if c)

    def category_score(self, lost_category: Optional[ItemCategory], found_category: Optional[ItemCategory]) -> float:
        cfg = self.config
        if lost_category is None or found_category is None:
            return cfg.category_unknown_score
        if lost_category == found_category:
            return cfg.category_match_score
        return cfg.category_mismatch_score

    def time_score(self, days_apart: float) -> float:
        """Tiered time proximity; non-increasing as days_apart grows."""
        for max_days, tier_score in self.config.time_tiers:
            if days_apart <= max_days:
                return tier_score
        return 0.0

    def _time_reason(self, days_apart: float) -> Optional[str]:
        for max_days, _ in self.config.time_tiers:
            if max_days > self.config.reason_time_max_days:
                break
            if days_apart <= max_days:
                return f"Reported within {_days_label(max_days)}"
        return None

    def score(self, lost: LostItem, found: FoundItem) -> MatchResult:
        cfg = self.config
        reasons: List[str] = []

        # Category
        found_category = self.classifier.classify(found.description)
        category = self.category_score(lost.category, found_category)
        if lost.category is not None and found_category is not None and lost.category == found_category:
            reasons.append(f"Same category ({lost.category.value})")

        # Item name against the found description
        item_name = text_similarity(lost.item_name, found.description)
        if item_name > cfg.reason_item_name_threshold:
            reasons.append(f"Item name similar ({_percent(item_name)}%)")

        # Location
        location = self.location_matcher.location_similarity(lost.location_lost, found.location_found)
        if location > cfg.reason_location_threshold:
            reasons.append(f"Location nearby ({_percent(location)}%)")

        # Description
        description = 0.0
        if lost.description and found.description:
            description = text_similarity(lost.description, found.description)
        if description > cfg.reason_description_threshold:
            reasons.append(f"Description similar ({_percent(description)}%)")

        # Time proximity
        days_apart = days_between(lost.date_lost, found.date_found)
        time = self.time_score(days_apart)
        time_reason = self._time_reason(days_apart)
        if time_reason:
            reasons.append(time_reason)

        total = (
            category * cfg.weight_category
            + item_name * cfg.weight_item_name
            + location * cfg.weight_location
            + description * cfg.weight_description
            + time * cfg.weight_time
        )

        # Keyword bonuses, first hit only
        lost_text = normalize_text(f"{lost.item_name} {lost.description or ''}")
        found_text = normalize_text(found.description)
        bonus = 0.0
        brand = first_shared_keyword(self.brands, lost_text, found_text)
        if brand:
            bonus += cfg.bonus_brand
            reasons.append(f"Brand match ({brand})")
        color = first_shared_keyword(self.colors, lost_text, found_text)
        if color:
            bonus += cfg.bonus_color
            reasons.append(f"Color match ({color})")

        final_score = min(max(total + bonus, 0.0), 1.0)

        breakdown = ScoreBreakdown(
            category=category,
            item_name=item_name,
            location=location,
            description=description,
            time=time,
            days_apart=days_apart,
            found_category=found_category,
            location_area=self.location_matcher.shared_area(lost.location_lost, found.location_found),
            brand=brand,
            color=color,
            bonus=bonus,
        )

        return MatchResult(
            lost_item=lost,
            found_item=found,
            score=final_score,
            reasons=tuple(reasons),
            confidence=confidence_for(final_score, cfg),
            breakdown=breakdown,
        )


def evaluate_pair(lost: LostItem, found: FoundItem, cfg: ScoringConfig | None = None) -> MatchResult:
    """Score a single pair with the default keyword tables."""
    return MatchScorer(cfg).score(lost, found)


__all__ = [
    "MatchConfidence",
    "ScoringConfig",
    "ScoreBreakdown",
    "MatchResult",
    "MatchScorer",
    "evaluate_pair",
    "confidence_for",
    "is_valid_match",
    "format_match_score",
    "top_matches",
]

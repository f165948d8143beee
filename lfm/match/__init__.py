"""Matching package exposing scoring-based engine primitives.

The orchestrating engine is imported from :mod:`lfm.match.matching_engine`
directly; it depends on ``lfm.config_types``, which imports from this package.
"""

from .scoring import (
    MatchConfidence,
    ScoreBreakdown,
    MatchResult,
    ScoringConfig,
    MatchScorer,
    evaluate_pair,
    confidence_for,
    is_valid_match,
    format_match_score,
    top_matches,
)
from .similarity import text_similarity
from .classifier import CategoryClassifier
from .location import LocationMatcher
from .candidate_selector import CandidateSelector

__all__ = [
    "MatchConfidence",
    "ScoreBreakdown",
    "MatchResult",
    "ScoringConfig",
    "MatchScorer",
    "evaluate_pair",
    "confidence_for",
    "is_valid_match",
    "format_match_score",
    "top_matches",
    "text_similarity",
    "CategoryClassifier",
    "LocationMatcher",
    "CandidateSelector",
]

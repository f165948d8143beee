"""Typed configuration dataclasses for lostfound-matcher.

Provides strongly-typed configuration objects that can be used throughout
the application for better type safety and IDE support.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict, fields
from typing import Dict, Any

from .match.scoring import ScoringConfig


@dataclass
class MatchingConfig:
    """Candidate selection and engine execution settings (aligned with _DEFAULTS)."""
    time_window_days: float = 30.0  # hard cutoff between lost and found dates
    max_workers: int = 1  # >1 scores candidate pairs on a thread pool
    progress_enabled: bool = True
    progress_interval: int = 100  # log batch progress every N source reports

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


def _known_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary matching the config format."""
        return {
            "log_level": self.log_level,
            "matching": self.matching.to_dict(),
            "scoring": self.scoring.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Unknown keys inside a section are ignored so stray environment
        variables cannot break start-up.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            matching=MatchingConfig(**_known_fields(MatchingConfig, data.get("matching", {}))),
            scoring=ScoringConfig(**_known_fields(ScoringConfig, data.get("scoring", {}))),
        )


__all__ = [
    "AppConfig",
    "MatchingConfig",
    "ScoringConfig",
]

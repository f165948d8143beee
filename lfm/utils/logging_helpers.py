"""Logging helper utilities for consistent progress reporting."""

import logging
from typing import Mapping

import click

from .output import CONFIDENCE_COLORS

logger = logging.getLogger(__name__)


def log_progress(
    processed: int,
    total: int | None,
    matched: int = 0,
    skipped: int = 0,
    elapsed_seconds: float = 0.0,
    item_name: str = "items"
) -> None:
    """Log progress info with consistent formatting.

    Args:
        processed: Number of source reports processed so far
        total: Total number of source reports (None if unknown)
        matched: Count of candidate pairs surfaced so far
        skipped: Count of sources skipped as ineligible
        elapsed_seconds: Time elapsed since start
        item_name: Name of items being processed (e.g., "lost reports")
    """
    parts = [
        f"{click.style(f'{processed}', fg='cyan')} {item_name} processed"
    ]

    if total:
        pct = (processed / total * 100) if total > 0 else 0
        parts[0] = f"{click.style(f'{processed}/{total}', fg='cyan')} {item_name} ({pct:.0f}%)"

    if matched > 0:
        parts.append(f"{click.style(f'{matched} pairs', fg='green')}")
    if skipped > 0:
        parts.append(f"{click.style(f'{skipped} skipped', fg='yellow')}")

    if elapsed_seconds > 0:
        rate = processed / elapsed_seconds
        parts.append(f"{rate:.1f} {item_name}/s")

    logger.info(" | ".join(parts))


def format_confidence_summary(counts: Mapping[str, int]) -> str:
    """Format per-tier counts, e.g. '3 high, 1 low' ('none' when empty)."""
    parts = [
        click.style(f"{counts[tier]} {tier}", fg=color)
        for tier, color in CONFIDENCE_COLORS.items()
        if counts.get(tier, 0) > 0
    ]
    return ", ".join(parts) if parts else "none"


__all__ = ["log_progress", "format_confidence_summary"]

"""Output formatting utilities for consistent CLI reporting."""

import click

CONFIDENCE_COLORS = {"high": "green", "medium": "yellow", "low": "red"}


def section_header(text: str) -> str:
    """Format a section header with color."""
    return click.style(f"▶ {text}", fg='cyan', bold=True)


def success(text: str, prefix: str = "✓") -> str:
    return f"{click.style(prefix, fg='green')} {text}"


def warning(text: str, prefix: str = "⚠") -> str:
    return f"{click.style(prefix, fg='yellow')} {text}"


def info(text: str) -> str:
    """Format an indented bullet line."""
    return f"  {click.style('•', fg='blue')} {text}"


def confidence_badge(confidence: str) -> str:
    """Format a confidence tier, e.g. 'HIGH' in green.

    Args:
        confidence: Tier name (high, medium, low)

    Returns:
        Padded, colored tier label
    """
    color = CONFIDENCE_COLORS.get(confidence, 'white')
    return click.style(f"{confidence.upper():<6}", fg=color, bold=True)


def count_badge(count: int, label: str, color: str = 'cyan') -> str:
    return f"{click.style(str(count), fg=color, bold=True)} {label}"


__all__ = [
    "section_header",
    "success",
    "warning",
    "info",
    "confidence_badge",
    "count_badge",
]

from __future__ import annotations
import click

from ..config import load_typed_config
from ..version import __version__


@click.group()
@click.version_option(version=__version__, prog_name="lostfound-matcher")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Override configured log level')
@click.option('--workers', type=int, default=None, help='Score candidate pairs on N threads (overrides config)')
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, workers: int | None):
    """Lost-and-found matching engine.

    Reads lost and found reports from a JSON file shaped like
    {"lost": [...], "found": [...]} and proposes ranked, explained pairings.

    \b
    TYPICAL WORKFLOWS:

    \b
    Match one report:
      lfm match --type lost --item-id L-17 --items items.json
      lfm match --type found --item-id F-3 --items items.json --json

    \b
    Review everything that might match:
      lfm auto-match --items items.json --confidence high

    \b
    Configuration:
      lfm config                  # Effective settings (defaults <- .env <- LFM__ env vars)
      LFM__SCORING__MIN_ACCEPT_SCORE=0.5 lfm auto-match --items items.json
    """
    if isinstance(ctx.obj, dict):
        overrides = ctx.obj
    else:
        overrides = {}
    if log_level is not None:
        overrides['log_level'] = log_level.upper()
    if workers is not None:
        overrides.setdefault('matching', {})['max_workers'] = workers
    ctx.obj = load_typed_config(overrides)


__all__ = ["cli"]

"""Matching commands."""

from __future__ import annotations
import json
from typing import List, Sequence

import click

from .helpers import cli
from .shared import load_items
from ..config_types import AppConfig
from ..match.matching_engine import MatchingEngine
from ..match.scoring import MatchResult, format_match_score, top_matches
from ..utils.output import section_header, success, warning, info, confidence_badge, count_badge


def _emit(matches: Sequence[MatchResult], as_json: bool) -> None:
    if as_json:
        payload = {"matches": [m.to_dict() for m in matches], "total": len(matches)}
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    if not matches:
        click.echo(warning("No matches found"))
        return

    for m in matches:
        click.echo(
            f"{format_match_score(m.score):>5}  {confidence_badge(m.confidence.value)} "
            f"lost {m.lost_item.id} ({m.lost_item.item_name}) <-> "
            f"found {m.found_item.id} ({m.found_item.description})"
        )
        for reason in m.reasons:
            click.echo(info(reason))
    click.echo(success(count_badge(len(matches), "match(es)")))


@cli.command()
@click.option('--type', 'item_type', type=click.Choice(['lost', 'found']), required=True,
              help='Kind of the report to find matches for')
@click.option('--item-id', required=True, help='Identifier of the source report')
@click.option('--items', 'items_file', type=click.Path(exists=True, dir_okay=False), required=True,
              help='JSON file with "lost" and "found" record lists')
@click.option('--top', type=int, default=None, help='Only show the N best matches')
@click.option('--json', 'as_json', is_flag=True, help='Print matches as JSON')
@click.pass_context
def match(ctx: click.Context, item_type: str, item_id: str, items_file: str, top: int | None, as_json: bool):
    """Rank candidate pairings for a single lost or found report."""
    cfg: AppConfig = ctx.obj
    lost_items, found_items = load_items(items_file)
    engine = MatchingEngine.from_config(cfg)

    if item_type == 'lost':
        source = next((i for i in lost_items if i.id == item_id), None)
        if source is None:
            raise click.ClickException('Lost item not found')
        matches = engine.find_matches_for_lost(source, found_items)
    else:
        source = next((i for i in found_items if i.id == item_id), None)
        if source is None:
            raise click.ClickException('Found item not found')
        matches = engine.find_matches_for_found(source, lost_items)

    if top is not None:
        matches = top_matches(matches, top)

    if not as_json:
        click.echo(section_header(f"Matches for {item_type} report {item_id}"))
    _emit(matches, as_json)


@cli.command(name="auto-match")
@click.option('--items', 'items_file', type=click.Path(exists=True, dir_okay=False), required=True,
              help='JSON file with "lost" and "found" record lists')
@click.option('--confidence', type=click.Choice(['all', 'high', 'medium', 'low']), default='all',
              help='Only show pairs in this confidence tier')
@click.option('--bidirectional', is_flag=True, help='Also search from every open found report')
@click.option('--top', type=int, default=None, help='Only show the N best pairs')
@click.option('--json', 'as_json', is_flag=True, help='Print pairs as JSON')
@click.pass_context
def auto_match(ctx: click.Context, items_file: str, confidence: str, bidirectional: bool,
               top: int | None, as_json: bool):
    """Propose pairings across every open lost report (batch mode)."""
    cfg: AppConfig = ctx.obj
    lost_items, found_items = load_items(items_file)

    if not as_json:
        click.echo(section_header(
            f"Auto-matching {len(lost_items)} lost against {len(found_items)} found report(s)"
        ))

    matches: List[MatchResult] = MatchingEngine.from_config(cfg).auto_match(
        lost_items, found_items, bidirectional=bidirectional
    )
    if confidence != 'all':
        matches = [m for m in matches if m.confidence.value == confidence]
    if top is not None:
        matches = top_matches(matches, top)

    _emit(matches, as_json)


__all__ = ["match", "auto_match"]

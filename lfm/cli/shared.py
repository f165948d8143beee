"""Shared CLI utilities: reading record files."""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

import click

from ..models import LostItem, FoundItem

logger = logging.getLogger(__name__)


def _parse_records(raw: Any, section: str, factory) -> list:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise click.ClickException(f"'{section}' must be a list of records")
    items = []
    for index, record in enumerate(raw):
        if not isinstance(record, dict):
            raise click.ClickException(f"{section}[{index}] is not an object")
        try:
            items.append(factory(record))
        except ValueError as e:
            raise click.ClickException(f"{section}[{index}]: {e}") from e
    return items


def load_items(path: str | Path) -> Tuple[List[LostItem], List[FoundItem]]:
    """Load lost and found reports from a JSON export of the item store.

    Raises:
        click.ClickException: If the file is not valid JSON or a record is malformed
    """
    try:
        data: Dict[str, Any] = json.loads(Path(path).read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise click.ClickException(f"{path} must contain an object with 'lost' and 'found' lists")

    lost = _parse_records(data.get('lost'), 'lost', LostItem.from_dict)
    found = _parse_records(data.get('found'), 'found', FoundItem.from_dict)
    logger.debug(f"Loaded {len(lost)} lost and {len(found)} found report(s) from {path}")
    return lost, found


__all__ = ["load_items"]

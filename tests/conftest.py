"""Pytest fixtures shared across the suite.

Global test safety measures:
 - Strip LFM__* variables inherited from the developer shell so defaults are deterministic
 - Factories build lost/found reports around a fixed reference date
"""
import os
from datetime import datetime, timedelta
from typing import Any, Dict

import pytest

from lfm.models import FoundItem, ItemCategory, ItemStatus, LostItem

BASE_DATE = datetime(2025, 1, 15, 10, 0)


@pytest.fixture(autouse=True)
def _clean_lfm_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith('LFM__'):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv('LFM_ENABLE_DOTENV', raising=False)


@pytest.fixture
def base_date() -> datetime:
    return BASE_DATE


@pytest.fixture
def make_lost():
    """Factory for LostItem; defaults describe keys lost at the sports field.

    ``days`` shifts date_lost relative to BASE_DATE.
    """
    def _make(days: float = 0, **overrides: Any) -> LostItem:
        base: Dict[str, Any] = {
            'id': 'L1',
            'item_name': 'กุญแจ',
            'category': ItemCategory.KEYS,
            'description': None,
            'location_lost': 'สนามกีฬา',
            'date_lost': BASE_DATE + timedelta(days=days),
            'status': ItemStatus.SEARCHING,
        }
        base.update(overrides)
        return LostItem(**base)
    return _make


@pytest.fixture
def make_found():
    """Factory for FoundItem; defaults describe a key ring handed in at the sports field."""
    def _make(days: float = 0, **overrides: Any) -> FoundItem:
        base: Dict[str, Any] = {
            'id': 'F1',
            'description': 'พวงกุญแจ',
            'location_found': 'สนามกีฬา',
            'date_found': BASE_DATE + timedelta(days=days),
            'status': ItemStatus.FOUND,
        }
        base.update(overrides)
        return FoundItem(**base)
    return _make


@pytest.fixture
def items_payload() -> Dict[str, Any]:
    """Item-store export as consumed by the CLI (camelCase keys)."""
    return {
        'lost': [
            {
                'id': 'L1', 'itemName': 'กุญแจ', 'category': 'keys',
                'locationLost': 'สนามกีฬา', 'dateLost': '2025-01-15T10:00:00Z', 'status': 'searching',
            },
            {
                'id': 'L2', 'itemName': 'กระเป๋าสตางค์สีดำ', 'category': 'wallet',
                'locationLost': 'โรงอาหาร', 'dateLost': '2025-01-15T10:00:00Z', 'status': 'searching',
            },
        ],
        'found': [
            {
                'id': 'F1', 'description': 'พวงกุญแจ', 'locationFound': 'สนามกีฬา',
                'dateFound': '2025-01-15T12:00:00Z', 'status': 'found',
            },
            {
                'id': 'F2', 'description': 'กระเป๋าสตางค์สีดำ', 'locationFound': 'โรงอาหาร',
                'dateFound': '2025-01-15T12:00:00Z', 'status': 'found',
            },
        ],
    }

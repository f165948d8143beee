from __future__ import annotations
import os
import json
import logging
from typing import Any, Dict
from pathlib import Path
import copy

from .config_types import AppConfig

logger = logging.getLogger(__name__)

_DEFAULTS: Dict[str, Any] = {
    "log_level": "INFO",
    "matching": {
        "time_window_days": 30.0,
        "max_workers": 1,
        "progress_enabled": True,
        "progress_interval": 100,
    },
    "scoring": {
        "weight_category": 0.20,
        "weight_item_name": 0.35,
        "weight_location": 0.20,
        "weight_description": 0.15,
        "weight_time": 0.10,
        "bonus_brand": 0.10,
        "bonus_color": 0.05,
        "confidence_high_threshold": 0.70,
        "confidence_medium_threshold": 0.55,
        "min_accept_score": 0.40,
        "min_reasons": 1,
    },
}

ENV_PREFIX = "LFM__"


def deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Merge dict b into a (shallow copies) returning new dict.
    Nested dicts are merged recursively; other values override.
    """
    result = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)  # type: ignore[arg-type]
        else:
            result[k] = v
    return result


def _strip_inline_comment(val: str) -> str:
    in_single = False
    in_double = False
    result_chars = []
    for ch in val:
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        if ch == '#' and not in_single and not in_double:
            break
        result_chars.append(ch)
    return ''.join(result_chars).rstrip()


def _load_dotenv(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    if not path.exists():
        return values
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, val = line.split('=', 1)
        key = key.strip()
        val = val.strip()
        if '#' in val:
            val = _strip_inline_comment(val)
        # Remove wrapping quotes if present
        if len(val) >= 2 and val[0] == val[-1] and val[0] in ('"', "'"):
            val = val[1:-1]
        if key:
            values[key] = val
    return values


def load_config(overrides: Dict[str, Any] | None = None, dotenv_path: str | Path = '.env') -> Dict[str, Any]:
    """Load configuration merging defaults <- .env <- environment <- overrides.

    During test runs (detected via PYTEST_CURRENT_TEST) .env loading is skipped
    unless LFM_ENABLE_DOTENV=1 is set to allow deterministic defaults.

    Keys map to nested sections by double underscores, e.g.
    ``LFM__SCORING__MIN_ACCEPT_SCORE=0.5`` -> ``cfg['scoring']['min_accept_score']``.

    Args:
        overrides: Dict of values to deep-merge last (primarily for tests).
        dotenv_path: Location of the .env file.

    Returns:
        dict: Configuration dictionary (for typed access use load_typed_config()).
    """
    dotenv_values: Dict[str, str] = {}
    if os.environ.get('LFM_ENABLE_DOTENV') or not os.environ.get('PYTEST_CURRENT_TEST'):
        dotenv_values = _load_dotenv(Path(dotenv_path))
    # Deep copy defaults to avoid cross-call mutation of nested dicts
    cfg: Dict[str, Any] = copy.deepcopy(_DEFAULTS)

    # Merge .env and real environment (real env wins)
    combined = {**{k: v for k, v in dotenv_values.items() if k.startswith(ENV_PREFIX)},
                **{k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}}
    for raw_key, value in combined.items():
        path_parts = raw_key[len(ENV_PREFIX):].split("__")
        cursor: Dict[str, Any] = cfg
        for part in path_parts[:-1]:
            cursor = cursor.setdefault(part.lower(), {})  # type: ignore[assignment]
        cursor[path_parts[-1].lower()] = coerce_scalar(value)
    if overrides:
        cfg = deep_merge(cfg, overrides)

    _configure_logging(str(cfg.get('log_level', 'INFO')))

    return cfg


def load_typed_config(overrides: Dict[str, Any] | None = None, dotenv_path: str | Path = '.env') -> AppConfig:
    """Load configuration as typed AppConfig object.

    Args:
        overrides: Dictionary of override values
        dotenv_path: Location of the .env file

    Returns:
        AppConfig: Typed configuration object with .to_dict() for dict conversion
    """
    return AppConfig.from_dict(load_config(overrides, dotenv_path))


def _configure_logging(level_str: str) -> None:
    """Configure Python logging based on configured level."""
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL,
    }
    level = level_map.get(level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(message)s',
        force=True  # Reconfigure even if already configured
    )


def coerce_scalar(value: str) -> Any:
    txt = value.strip()
    # JSON object or array
    if (txt.startswith('[') and txt.endswith(']')) or (txt.startswith('{') and txt.endswith('}')):
        try:
            return json.loads(txt)
        except json.JSONDecodeError:
            logger.debug(f"Config value {txt!r} looks like JSON but does not parse; keeping as text")
    lower = txt.lower()
    if lower in {"true", "yes"}:
        return True
    if lower in {"false", "no"}:
        return False
    if txt.isdigit() or (txt.startswith("-") and txt[1:].isdigit()):
        return int(txt)
    try:
        return float(txt)
    except ValueError:
        return txt


__all__ = ["load_config", "load_typed_config", "deep_merge", "coerce_scalar"]

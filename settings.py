from __future__ import annotations

import json
from dataclasses import fields, replace
from pathlib import Path
from typing import Any

from pagescrape.models import ScrapeConfig


SETTINGS_PATH = Path(__file__).with_name("settings.json")


def _load_settings(path: Path) -> dict[str, Any]:
    try:
        with path.open("r") as f:
            return json.load(f)
    except FileNotFoundError:
        return {}


_SETTINGS = _load_settings(SETTINGS_PATH)


def get_setting(key: str, default: Any = None) -> Any:
    """Return the configured value for ``key`` or ``default`` if missing."""
    return _SETTINGS.get(key, default)


def load_config(**overrides: Any) -> ScrapeConfig:
    """Build a ScrapeConfig from defaults, settings.json, then non-None overrides."""
    config = ScrapeConfig()
    known = {f.name for f in fields(ScrapeConfig)}
    from_file = {k: v for k, v in _SETTINGS.items() if k in known}
    explicit = {k: v for k, v in overrides.items() if k in known and v is not None}
    return replace(config, **{**from_file, **explicit})

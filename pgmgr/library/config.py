"""
Persistence for the user-level AppConfig.

The config lives in ``config.json`` inside the app-data directory, which is
``$PGMGR_APP_DATA_DIR`` when set and ``~/.pgmgr`` otherwise.
"""
from __future__ import annotations

import json
import os
from pathlib import Path

from pgmgr.library.models import AppConfig
from pgmgr.utils.exceptions import LibraryError

CONFIG_FILE_NAME = "config.json"


def app_data_dir() -> Path:
    configured = os.environ.get("PGMGR_APP_DATA_DIR")
    if configured:
        return Path(configured)
    return Path.home() / ".pgmgr"


def config_path() -> Path:
    return app_data_dir() / CONFIG_FILE_NAME


def load_config() -> AppConfig:
    """Return the saved config, or the defaults when none can be read."""
    try:
        raw = config_path().read_text(encoding="utf-8")
        data = json.loads(raw)
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()
    return AppConfig.from_dict(data)


def save_config(config: AppConfig) -> None:
    path = config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    except OSError as e:
        raise LibraryError("config_write_failed", f"Error saving config: {e}") from e

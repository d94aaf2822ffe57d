from __future__ import annotations

import pytest

from pgmgr.commands import build_registry
from pgmgr.library import AppConfig, save_config


@pytest.fixture(autouse=True)
def _quiet_log_server(monkeypatch):
    # discard port; nothing listens there, so log() drops every message
    monkeypatch.setenv("PGMGR_LOG_URL", "http://127.0.0.1:9")


@pytest.fixture
def app_data(tmp_path, monkeypatch):
    path = tmp_path / "appdata"
    monkeypatch.setenv("PGMGR_APP_DATA_DIR", str(path))
    return path


@pytest.fixture
def local_path(tmp_path, app_data):
    path = tmp_path / "programs"
    save_config(AppConfig(local_path=str(path), mirror_path=""))
    return path


@pytest.fixture
def registry():
    return build_registry()

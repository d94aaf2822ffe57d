from __future__ import annotations

import os
import shutil
import tempfile
from dataclasses import dataclass

from pgmgr.commands import CommandRegistry, build_registry
from pgmgr.library import AppConfig, save_config


@dataclass
class TestEnv:
    registry: CommandRegistry
    tmp_dir: str
    local_path: str
    _previous_app_data_dir: str | None

    def cleanup(self) -> None:
        if self._previous_app_data_dir is None:
            os.environ.pop("PGMGR_APP_DATA_DIR", None)
        else:
            os.environ["PGMGR_APP_DATA_DIR"] = self._previous_app_data_dir
        shutil.rmtree(self.tmp_dir, ignore_errors=True)


def make_env(suffix: str) -> TestEnv:
    """Isolated tmp dir, app-data dir and local storage path for one command test."""
    tmp_dir = tempfile.mkdtemp(prefix=f"cmdtest_{suffix}_")
    app_data = os.path.join(tmp_dir, "appdata")
    local_path = os.path.join(tmp_dir, "programs")

    previous = os.environ.get("PGMGR_APP_DATA_DIR")
    os.environ["PGMGR_APP_DATA_DIR"] = app_data
    save_config(AppConfig(local_path=local_path, mirror_path=""))

    return TestEnv(
        registry=build_registry(),
        tmp_dir=tmp_dir,
        local_path=local_path,
        _previous_app_data_dir=previous,
    )

from pgmgr.library.config import app_data_dir, config_path, load_config, save_config
from pgmgr.library.models import AppConfig, FileNode, Program, ProgramVersion
from pgmgr.library.scanner import (
    create_program,
    create_version,
    find_program,
    load_programs,
    read_dir_tree,
    resolve_version_path,
)

__all__ = [
    "AppConfig",
    "FileNode",
    "Program",
    "ProgramVersion",
    "app_data_dir",
    "config_path",
    "create_program",
    "create_version",
    "find_program",
    "load_config",
    "load_programs",
    "read_dir_tree",
    "resolve_version_path",
    "save_config",
]

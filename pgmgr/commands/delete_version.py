from __future__ import annotations

from pgmgr.commands.remove_dir_all import remove_dir_all
from pgmgr.library import load_config, load_programs, resolve_version_path

DEFINITION: dict = {
    "type": "function",
    "function": {
        "name": "delete_version",
        "description": (
            "Look up a program version in the local storage path and recursively delete "
            "its directory. Irreversible. Returns the deleted path."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "program": {"type": "string", "description": "Program name."},
                "version": {"type": "string", "description": "Version label."},
            },
            "required": ["program", "version"],
            "additionalProperties": False,
        },
    },
}


def execute(args: dict) -> str:
    programs = load_programs(load_config().local_path)
    path = resolve_version_path(programs, args["program"], args["version"])
    remove_dir_all(path)
    return path

from __future__ import annotations

import shutil

from pgmgr.utils.exceptions import RemoveDirError

DEFINITION: dict = {
    "type": "function",
    "function": {
        "name": "remove_dir_all",
        "description": (
            "Recursively delete the directory at the given path and everything it contains "
            "(equivalent to rm -rf on a directory). Irreversible."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": (
                        "Path of the directory to remove. Passed to the filesystem unchanged; "
                        "relative paths resolve from the host process's cwd."
                    ),
                },
            },
            "required": ["path"],
            "additionalProperties": False,
        },
    },
}


def remove_dir_all(path: str) -> None:
    """Remove ``path`` and all of its descendants in a single attempt.

    Any failure is raised as RemoveDirError; a failure partway through may
    leave some entries already deleted.
    """
    try:
        shutil.rmtree(path)
    except (OSError, RecursionError) as e:
        raise RemoveDirError(path, e) from e


def execute(args: dict) -> None:
    remove_dir_all(args["path"])

from __future__ import annotations

from pgmgr.library import read_dir_tree

DEFINITION: dict = {
    "type": "function",
    "function": {
        "name": "read_dir_tree",
        "description": (
            "Recursively list a directory. Directories sort before files, then by name. "
            "An unreadable path yields an empty list."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Directory to list.",
                },
            },
            "required": ["path"],
            "additionalProperties": False,
        },
    },
}


def execute(args: dict) -> list[dict]:
    return [node.to_dict() for node in read_dir_tree(args["path"])]

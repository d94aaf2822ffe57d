from __future__ import annotations

from pgmgr.library import create_program, load_config

DEFINITION: dict = {
    "type": "function",
    "function": {
        "name": "create_program",
        "description": "Create a program directory under the local storage path. Returns its path.",
        "parameters": {
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Program name; used as the directory name.",
                },
            },
            "required": ["name"],
            "additionalProperties": False,
        },
    },
}


def execute(args: dict) -> str:
    return create_program(load_config().local_path, args["name"])

from __future__ import annotations

from pgmgr.library import create_version, load_config

DEFINITION: dict = {
    "type": "function",
    "function": {
        "name": "create_version",
        "description": (
            "Create a version directory under an existing or new program. Returns its path."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "program": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Program name.",
                },
                "version": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Version label, e.g. '1.2.0'; used as the directory name.",
                },
            },
            "required": ["program", "version"],
            "additionalProperties": False,
        },
    },
}


def execute(args: dict) -> str:
    return create_version(load_config().local_path, args["program"], args["version"])

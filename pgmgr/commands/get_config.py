from __future__ import annotations

from pgmgr.library import load_config

DEFINITION: dict = {
    "type": "function",
    "function": {
        "name": "get_config",
        "description": "Return the saved application config (local storage path and mirror path).",
        "parameters": {
            "type": "object",
            "properties": {},
            "additionalProperties": False,
        },
    },
}


def execute(args: dict) -> dict:
    return load_config().to_dict()

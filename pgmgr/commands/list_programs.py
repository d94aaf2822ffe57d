from __future__ import annotations

from pgmgr.library import load_config, load_programs

DEFINITION: dict = {
    "type": "function",
    "function": {
        "name": "list_programs",
        "description": (
            "Scan the local storage path and return every program with its versions "
            "and each version's module tree. Creates the storage path if it is missing."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "localPath": {
                    "type": "string",
                    "description": "Override the configured local storage path for this call.",
                },
            },
            "additionalProperties": False,
        },
    },
}


def execute(args: dict) -> list[dict]:
    local_path = args.get("localPath") or load_config().local_path
    return [p.to_dict() for p in load_programs(local_path)]

from __future__ import annotations

from pgmgr.library import AppConfig, load_config, save_config

DEFINITION: dict = {
    "type": "function",
    "function": {
        "name": "set_config",
        "description": (
            "Update and save the application config. Omitted fields keep their saved value. "
            "Returns the config as saved."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "localPath": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Directory holding one subdirectory per program.",
                },
                "mirrorPath": {
                    "type": "string",
                    "description": "Mirror drive path. Stored only; empty disables it.",
                },
            },
            "additionalProperties": False,
        },
    },
}


def execute(args: dict) -> dict:
    current = load_config()
    config = AppConfig(
        local_path=args.get("localPath", current.local_path),
        mirror_path=args.get("mirrorPath", current.mirror_path),
    )
    save_config(config)
    return config.to_dict()

from __future__ import annotations

from flask import Flask, jsonify, request

from pgmgr.commands import CommandRegistry, CommandResult


def register_routes(app: Flask, registry: CommandRegistry) -> None:

    @app.get("/commands")
    def list_commands():
        return jsonify({"commands": registry.definitions()})

    @app.post("/invoke/<name>")
    def invoke(name: str):
        if request.content_length:
            args = request.get_json(silent=True)
            if not isinstance(args, dict):
                result = CommandResult.failure(
                    "invalid_arguments", "request body must be a JSON object"
                )
                return jsonify(result.to_dict()), 400
        else:
            args = {}
        result = registry.execute(name, args)
        return jsonify(result.to_dict()), 200 if result.ok else 400

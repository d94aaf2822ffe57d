from __future__ import annotations

from flask import request
from flask_socketio import SocketIO, emit

from pgmgr.commands import CommandRegistry
from pgmgr.utils.log import log


def register_socket_handlers(socketio: SocketIO, registry: CommandRegistry) -> None:

    @socketio.on("connect")
    def handle_connect():
        log(f"[host] client connected: {request.sid}")

    @socketio.on("disconnect")
    def handle_disconnect(*_args):
        log(f"[host] client disconnected: {request.sid}")

    @socketio.on("list_commands")
    def handle_list_commands(_data=None):
        emit("commands", {"commands": registry.definitions()})

    @socketio.on("invoke")
    def handle_invoke(data):
        """
        Route one call from the front end to a command.

        Expects {"id": ..., "command": str, "args": dict}; replies to the
        calling client only with "invoke_result".
        """
        if not isinstance(data, dict):
            emit("invoke_result", {
                "id": None,
                "ok": False,
                "value": None,
                "error": "invoke payload must be an object",
                "kind": "invalid_arguments",
            })
            return

        call_id = data.get("id")
        name = data.get("command")
        args = data.get("args", {})
        if not isinstance(name, str):
            payload = {
                "ok": False,
                "value": None,
                "error": "invoke payload is missing 'command'",
                "kind": "invalid_arguments",
            }
        else:
            payload = registry.execute(name, args).to_dict()
        emit("invoke_result", {"id": call_id, **payload})

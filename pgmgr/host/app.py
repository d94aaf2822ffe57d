from __future__ import annotations

import os

from flask import Flask
from flask_socketio import SocketIO

from pgmgr.commands import CommandRegistry
from pgmgr.host.routes import register_routes
from pgmgr.host.socket_handlers import register_socket_handlers


def create_app(registry: CommandRegistry) -> tuple[Flask, SocketIO]:
    """
    Build the host bridge around an explicitly supplied command registry.

    The threading async mode gives every incoming call its own worker thread,
    so overlapping invocations run concurrently with no coordination.
    """
    app = Flask(__name__)
    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "dev-secret")

    cors_origin = os.environ.get("CORS_ORIGIN", "http://localhost:5173")
    socketio = SocketIO(app, cors_allowed_origins=cors_origin, async_mode="threading")

    register_routes(app, registry)
    register_socket_handlers(socketio, registry)
    return app, socketio

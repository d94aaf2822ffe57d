"""
Entry point for the host bridge server.

Loads .env from the project root, builds the command registry, and serves
the Flask/SocketIO app until interrupted.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from pgmgr/host/)
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

from pgmgr.commands import build_registry  # noqa: E402
from pgmgr.host.app import create_app  # noqa: E402
from pgmgr.utils.log import log  # noqa: E402


def main() -> None:
    registry = build_registry()
    app, socketio = create_app(registry)

    host = os.environ.get("PGMGR_HOST", "127.0.0.1")
    port = int(os.environ.get("PGMGR_PORT", 5000))
    print(f"[host] Starting on {host}:{port} with {len(registry.names())} commands", flush=True)
    log(f"[host] starting on {host}:{port}")
    socketio.run(app, host=host, port=port, allow_unsafe_werkzeug=True)


if __name__ == "__main__":
    main()

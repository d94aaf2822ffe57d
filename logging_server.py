#!/usr/bin/env python3
"""
Simple HTTP logging server. Receives POST requests and prints the body to
stdout. The host bridge and the CLI send one line per command dispatch here
so output from concurrent worker threads lands in a single ordered stream.

Listens on http://localhost:$PGMGR_LOG_PORT (default 8080)
"""

import os
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer


class _LogHandler(BaseHTTPRequestHandler):
    def do_POST(self):
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8", errors="replace")
        print(body, flush=True)
        self.send_response(200)
        self.end_headers()

    def log_message(self, format, *args):
        # Suppress the default per-request access log lines
        pass


if __name__ == "__main__":
    port = int(os.environ.get("PGMGR_LOG_PORT", 8080))
    server = ThreadingHTTPServer(("localhost", port), _LogHandler)
    print(f"[logging_server] Listening on http://localhost:{port}", flush=True)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass

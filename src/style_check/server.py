"""HTTP sidecar server for style-check.

Runs as a lightweight stdlib HTTP server on localhost so an editor front
end can request scans without embedding Python.  Requests are handled on
their own threads; settings updates swap in a freshly compiled matcher, so
scans already running finish against the pattern set they started with.

Endpoints:
    POST /scan            — Scan text: {"text": "...", "settings": {...}?}
    POST /settings        — Replace settings (same shape as the YAML block)
    GET  /settings        — Current settings
    GET  /patterns        — Active pattern set
    GET  /health          — Health check

All endpoints expect/return JSON.
"""

from __future__ import annotations
import json
import logging
import os
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

from .checker import StyleChecker
from .config import DEFAULT_CONFIG_PATH, load_config, load_from_yaml, settings_to_dict

logger = logging.getLogger(__name__)

DEFAULT_PORT = int(os.environ.get("STYLE_CHECK_PORT", "18792"))


class StyleCheckHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the style-check sidecar."""

    # Set by make_server()
    checker: StyleChecker

    def _read_json(self) -> dict[str, Any]:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8")
        data = json.loads(body) if body else {}
        if not isinstance(data, dict):
            raise ValueError("request body must be a JSON object")
        return data

    def _respond(self, status: int, data: Any) -> None:
        body = json.dumps(data, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)

    def do_GET(self) -> None:
        checker = self.checker
        if self.path == "/health":
            self._respond(200, {"status": "ok", "patterns": len(checker.patterns)})
        elif self.path == "/patterns":
            self._respond(200, {"patterns": [p.to_payload() for p in checker.patterns]})
        elif self.path == "/settings":
            self._respond(200, settings_to_dict(checker.settings))
        else:
            self._respond(404, {"error": "not found"})

    def do_POST(self) -> None:
        checker = self.checker
        try:
            body = self._read_json()

            if self.path == "/scan":
                text = body.get("text", "")
                if not isinstance(text, str):
                    raise ValueError("text must be a string")
                if body.get("settings") is not None:
                    settings = load_config(body["settings"])
                    if settings != checker.settings:
                        checker.update_settings(settings)
                matches = checker.scan(text)
                self._respond(200, {
                    "matches": [m.to_payload() for m in matches],
                    "count": len(matches),
                })

            elif self.path == "/settings":
                checker.update_settings(load_config(body))
                self._respond(200, settings_to_dict(checker.settings))

            else:
                self._respond(404, {"error": "not found"})

        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            self._respond(400, {"error": str(e)})
        except Exception as e:
            logger.exception("request to %s failed", self.path)
            self._respond(500, {"error": str(e)})


def make_server(port: int = DEFAULT_PORT, checker: StyleChecker | None = None) -> ThreadingHTTPServer:
    """Bind the sidecar on localhost.  port=0 picks a free port."""
    handler = type("BoundStyleCheckHandler", (StyleCheckHandler,), {"checker": checker or StyleChecker()})
    return ThreadingHTTPServer(("127.0.0.1", port), handler)


def serve(port: int = DEFAULT_PORT, config_path: str = DEFAULT_CONFIG_PATH) -> None:
    """Start the style-check HTTP sidecar."""
    settings = load_from_yaml(config_path) if config_path else None
    checker = StyleChecker(settings)
    server = make_server(port, checker)
    logger.info("style-check sidecar listening on http://127.0.0.1:%d", server.server_address[1])
    logger.info("  config: %s", config_path or "(defaults)")
    logger.info("  patterns: %d", len(checker.patterns))
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("shutting down")
    finally:
        server.server_close()


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="style-check HTTP sidecar")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    serve(port=args.port, config_path=args.config)

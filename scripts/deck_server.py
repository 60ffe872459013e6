#!/usr/bin/env python3
import argparse
import os
import sys
import time
import uuid
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import unquote, urlparse

ROOT = Path(__file__).resolve().parents[1]
ROOT = Path(os.getenv("SLIDE_DECK_ROOT", str(ROOT))).resolve()
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.errors import ConfigError
from core.telemetry import TelemetryClient
from scripts.deck_config import DeckConfig, load_config
from scripts.deck_page import render_slide_deck


PAGE_PATHS = {"/", "/index.html"}
HTML_TYPE = "text/html; charset=utf-8"
ALLOWED_METHODS = "GET, HEAD"

CONTENT_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "html": HTML_TYPE,
    "md": "text/markdown; charset=utf-8",
    "markdown": "text/markdown; charset=utf-8",
}


class APIError(Exception):
    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


def content_type(path: str) -> str:
    ext = path.lower().rsplit(".", 1)[-1] if "." in path else ""
    return CONTENT_TYPES.get(ext, "application/octet-stream")


def resolve_static(static_dir: Path, pathname: str) -> Path:
    root = static_dir.resolve()
    try:
        candidate = (root / pathname.lstrip("/")).resolve()
    except (OSError, ValueError) as exc:
        raise APIError(404, "Not found") from exc
    if not candidate.is_relative_to(root) or not candidate.is_file():
        raise APIError(404, "Not found")
    return candidate


def process_request(method: str, raw_path: str, config: DeckConfig):
    """Route one request; returns (status, content_type, body bytes)."""
    if method not in {"GET", "HEAD"}:
        raise APIError(405, "Method not allowed")

    pathname = unquote(urlparse(raw_path).path)
    if pathname in PAGE_PATHS:
        return 200, HTML_TYPE, render_slide_deck(config).encode("utf-8")

    fs_path = resolve_static(config.static_dir, pathname)
    try:
        body = fs_path.read_bytes()
    except OSError as exc:
        raise APIError(404, "Not found") from exc
    return 200, content_type(str(fs_path)), body


class Handler(BaseHTTPRequestHandler):
    deck_config = DeckConfig()
    telemetry = None

    def log_message(self, fmt, *args):
        return

    def _send(self, code: int, ctype: str, body: bytes, include_body: bool = True):
        self.send_response(code)
        self.send_header("Content-Type", ctype)
        self.send_header("Content-Length", str(len(body)))
        if code == 405:
            self.send_header("Allow", ALLOWED_METHODS)
        self.end_headers()
        if include_body:
            self.wfile.write(body)

    def _emit(self, pathname: str, code: int, started: float, error_message: str = ""):
        if self.telemetry is None:
            return
        try:
            self.telemetry.emit(
                module="deck_server",
                action="render" if pathname in PAGE_PATHS else "static",
                status="ok" if code < 400 else "failed",
                request_id=uuid.uuid4().hex[:12],
                latency_ms=int((time.time() - started) * 1000),
                error_code=str(code) if code >= 400 else "",
                error_message=error_message,
                meta={"method": self.command, "path": pathname, "status": code},
            )
        except OSError as exc:
            print(f"telemetry write failed: {type(exc).__name__}: {exc}", file=sys.stderr)

    def _handle(self):
        started = time.time()
        pathname = unquote(urlparse(self.path).path)
        include_body = self.command != "HEAD"
        error_message = ""
        try:
            code, ctype, body = process_request(self.command, self.path, self.deck_config)
        except APIError as exc:
            code, ctype, body = exc.status, "text/plain; charset=utf-8", exc.message.encode("utf-8")
            error_message = exc.message
        except Exception as exc:
            code, ctype, body = 500, "text/plain; charset=utf-8", b"Internal error"
            error_message = f"{type(exc).__name__}: {exc}"
        # event lands before the reply
        self._emit(pathname, code, started, error_message)
        self._send(code, ctype, body, include_body)

    def do_GET(self):
        self._handle()

    def do_HEAD(self):
        self._handle()

    def do_POST(self):
        self._handle()

    def do_PUT(self):
        self._handle()

    def do_DELETE(self):
        self._handle()


def main() -> int:
    parser = argparse.ArgumentParser(description="Serve the slide deck and its static assets")
    parser.add_argument("--config", default="")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=0)
    parser.add_argument("--base-dir", default="", help="directory holding table.md and risks.md")
    parser.add_argument("--static-dir", default="")
    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"slide deck config error: {exc}", file=sys.stderr)
        return 2
    if args.host:
        config.host = args.host
    if args.port:
        config.port = args.port
    if args.base_dir:
        config.base_dir = Path(args.base_dir).resolve()
    if args.static_dir:
        config.static_dir = Path(args.static_dir).resolve()

    Handler.deck_config = config
    Handler.telemetry = None
    if config.events_file:
        try:
            Handler.telemetry = TelemetryClient(events_file=config.events_file)
        except OSError as exc:
            print(f"telemetry disabled: {type(exc).__name__}: {exc}", file=sys.stderr)

    httpd = ThreadingHTTPServer((config.host, config.port), Handler)
    print(
        f"Slide deck running on http://{config.host}:{config.port} "
        f"(sources={config.base_dir}, static={config.static_dir}, telemetry={'on' if Handler.telemetry else 'off'})"
    )
    httpd.serve_forever()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

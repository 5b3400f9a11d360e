"""Web UI serving utilities for the perk chart."""

from __future__ import annotations

import json
import threading
import webbrowser
from functools import partial
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import urlparse

from perk_chart.engine.perk_counter import PerkCounter, level_range
from perk_chart.models.constants import DEFAULT_MAX_LEVEL_EXCLUSIVE
from perk_chart.models.perk_source import default_perk_sources
from perk_chart.webui.export_state import build_webui_state


REPO_ROOT = Path(__file__).resolve().parents[3]
WEBUI_DIR = REPO_ROOT / "webui"


class WebUiRuntime:
    """Counter and level bound backing web UI state requests."""

    def __init__(
        self,
        *,
        max_level_exclusive: int = DEFAULT_MAX_LEVEL_EXCLUSIVE,
        counter: PerkCounter | None = None,
    ) -> None:
        level_range(max_level_exclusive)
        self.max_level_exclusive = max_level_exclusive
        self.counter = counter or PerkCounter(default_perk_sources())
        self._lock = threading.RLock()

    def snapshot(self) -> dict:
        with self._lock:
            return build_webui_state(self.counter, self.max_level_exclusive)


class WebUiRequestHandler(SimpleHTTPRequestHandler):
    """Static-file handler with a read-only JSON state route."""

    def __init__(self, *args, runtime: WebUiRuntime, directory: str, **kwargs):
        self._runtime = runtime
        super().__init__(*args, directory=directory, **kwargs)

    def _send_json(self, payload: dict, status: int = HTTPStatus.OK) -> None:
        body = json.dumps(payload).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Cache-Control", "no-store")
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self) -> None:  # noqa: N802
        path = urlparse(self.path).path
        if path == "/api/state":
            self._send_json(self._runtime.snapshot())
            return
        if path.startswith("/api/"):
            self._send_json({"ok": False, "message": "Unknown endpoint"}, status=HTTPStatus.NOT_FOUND)
            return
        super().do_GET()

    def do_POST(self) -> None:  # noqa: N802
        self._send_json(
            {"ok": False, "message": "Chart state is read-only"},
            status=HTTPStatus.METHOD_NOT_ALLOWED,
        )


def make_server(
    host: str,
    port: int,
    directory: Path = WEBUI_DIR,
    *,
    runtime: WebUiRuntime | None = None,
) -> ThreadingHTTPServer:
    active_runtime = runtime or WebUiRuntime()
    handler = partial(
        WebUiRequestHandler,
        directory=str(directory),
        runtime=active_runtime,
    )
    server = ThreadingHTTPServer((host, port), handler)
    server.webui_runtime = active_runtime  # type: ignore[attr-defined]
    return server


def serve(
    *,
    host: str = "127.0.0.1",
    port: int = 4173,
    open_browser: bool = True,
    max_level_exclusive: int = DEFAULT_MAX_LEVEL_EXCLUSIVE,
) -> None:
    runtime = WebUiRuntime(max_level_exclusive=max_level_exclusive)
    server = make_server(host, port, WEBUI_DIR, runtime=runtime)
    url = f"http://{host}:{port}/index.html"
    print(f"Levels: 0..{runtime.max_level_exclusive - 1} | series: {len(runtime.counter.get_keys())}")
    print(f"Serving {WEBUI_DIR} at {url}")

    if open_browser:
        webbrowser.open(url)

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()

"""Development server for coursesite.

Serves the built site with live reload while the course pages are edited:
- Injects a reload script into HTML responses.
- Rejects directory listings and missing paths with a 404.
- Watches the content directory and triggers rebuilds plus client reloads.

Key classes:
- DevServer: Main class for running the development server.
- _ReloadHandler: HTTP request handler that injects the reload script.
- _ChangeHandler: File system event handler for triggering rebuilds.
"""

from __future__ import annotations

import asyncio
import functools
import json
import threading
import time
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import websockets
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .build import CONFIG_FILE, BuildError, build_site, load_config


class _ReloadHandler(SimpleHTTPRequestHandler):
    """HTTP request handler that injects live reload script into HTML pages.

    Attributes:
        reload_script: JavaScript code for WebSocket connection to trigger reloads.
    """

    reload_script_template = """
    <script>
    (() => {{
      const ws = new WebSocket('ws://' + location.hostname + ':{ws_port}');
      ws.onmessage = (event) => {{
        const data = JSON.parse(event.data || '{{}}');
        if (data.type === 'reload') location.reload();
      }};
    }})();
    </script>
    """
    reload_script = reload_script_template.format(ws_port=4001)

    def end_headers(self):
        self.send_header("Cache-Control", "no-cache, no-store, must-revalidate")
        super().end_headers()

    def list_directory(self, path):  # pragma: no cover - exercised via send_head
        return self._serve_404()

    def _inject(self, content: str) -> str:
        if "</body>" in content:
            return content.replace("</body>", f"{self.reload_script}</body>")
        return content + self.reload_script

    def _serve_404(self):
        self.send_error(404, "File not found")
        return None

    def send_head(self):
        path_obj = Path(self.translate_path(self.path))
        if path_obj.is_dir():
            path_obj = path_obj / "index.html"
        if not path_obj.is_file():
            return self._serve_404()

        if path_obj.suffix == ".html":
            encoded = self._inject(path_obj.read_text(encoding="utf-8")).encode("utf-8")
            self.send_response(200)
            self.send_header("Content-type", "text/html; charset=utf-8")
            self.send_header("Content-Length", str(len(encoded)))
            self.end_headers()
            self.wfile.write(encoded)
            return None
        return super().send_head()


class DevServer:
    """Development server with live reload functionality.

    Attributes:
        project_root: Root directory of the project.
        config: Site configuration.
        content_dir: Directory watched for changes.
        output_dir: Directory where built site is served.
        http_port: Port for HTTP server.
        ws_port: Port for WebSocket connections.
    """

    def __init__(
        self,
        project_root: Path,
        http_port: int | None = None,
        ws_port: int | None = None,
    ):
        """Initialize the development server.

        Args:
            project_root: Root directory of the project.
            http_port: Optional override for HTTP port.
            ws_port: Optional override for the WebSocket port.
        """
        self.project_root = project_root
        self.config = load_config(project_root)
        self.content_dir = project_root / self.config.get("content_dir", "content")
        self.output_dir = project_root / self.config.get("output_dir", "dest")
        self.http_port = int(http_port or self.config.get("port", 4000))
        if ws_port is not None:
            self.ws_port = ws_port
        elif http_port is not None:
            self.ws_port = self.http_port + 1
        else:
            self.ws_port = int(self.config.get("ws_port", self.http_port + 1))
        self._reload_script = _ReloadHandler.reload_script_template.format(
            ws_port=self.ws_port
        )
        self._observer: Observer | None = None
        self._ws_clients: set = set()
        self._loop = asyncio.new_event_loop()
        self._rebuilding = False
        self._last_rebuild_at = 0.0
        self._last_signature: tuple | None = None
        self._debounce_seconds = 0.05

    def start(self) -> None:  # pragma: no cover - integration path
        build_site(self.project_root)
        self._last_signature = self._compute_signature()
        threading.Thread(target=self._start_http, daemon=True).start()
        threading.Thread(target=self._start_ws, daemon=True).start()
        self._start_watcher()
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            self.stop()

    def stop(self) -> None:
        if self._observer:
            self._observer.stop()
            self._observer.join()
        self._loop.call_soon_threadsafe(self._loop.stop)

    def _start_http(self) -> None:  # pragma: no cover - integration path
        handler_cls = type(
            "_ReloadHandlerWithPort",
            (_ReloadHandler,),
            {"reload_script": self._reload_script},
        )
        handler = functools.partial(handler_cls, directory=str(self.output_dir))
        httpd = ThreadingHTTPServer(("", self.http_port), handler)
        print(f"Serving {self.output_dir} at http://localhost:{self.http_port}")
        httpd.serve_forever()

    def _start_ws(self) -> None:  # pragma: no cover - integration path
        asyncio.set_event_loop(self._loop)
        try:
            self._loop.run_until_complete(self._run_ws_server())
        except OSError as exc:
            print(f"WebSocket server failed to start (port {self.ws_port}): {exc}")

    async def _run_ws_server(self) -> None:  # pragma: no cover - integration path
        async with websockets.serve(self._ws_handler, "0.0.0.0", self.ws_port):
            await asyncio.Future()

    async def _ws_handler(self, websocket):
        self._ws_clients.add(websocket)
        try:
            await websocket.wait_closed()
        finally:
            self._ws_clients.discard(websocket)

    def _broadcast_reload(self):
        message = json.dumps({"type": "reload"})
        asyncio.run_coroutine_threadsafe(self._async_broadcast(message), self._loop)

    async def _async_broadcast(self, message: str):
        stale = set()
        for ws in self._ws_clients:
            try:
                await ws.send(message)
            except Exception:
                stale.add(ws)
        for ws in stale:
            self._ws_clients.discard(ws)

    def _start_watcher(self) -> None:  # pragma: no cover - integration path
        handler = _ChangeHandler(self)
        observer = Observer()
        if self.content_dir.exists():
            observer.schedule(handler, str(self.content_dir), recursive=True)
        # Root is watched for coursesite.yaml
        observer.schedule(handler, str(self.project_root), recursive=False)
        observer.start()
        self._observer = observer

    def rebuild(self) -> None:
        now = time.time()
        if self._rebuilding or (now - self._last_rebuild_at) < self._debounce_seconds:
            return
        signature = self._compute_signature()
        if signature is not None and signature == self._last_signature:
            return
        self._rebuilding = True
        try:
            print("Change detected; rebuilding...")
            try:
                build_site(self.project_root)
            except (BuildError, FileNotFoundError) as exc:
                print(f"Build failed: {exc}")
                return
            self._last_signature = signature
            self._broadcast_reload()
        finally:
            self._rebuilding = False
            self._last_rebuild_at = time.time()

    def _compute_signature(self) -> tuple | None:
        entries: list[tuple] = []
        paths = [self.project_root / CONFIG_FILE]
        if self.content_dir.exists():
            paths.extend(sorted(self.content_dir.rglob("*")))
        for path in paths:
            if not path.is_file():
                continue
            try:
                stat = path.stat()
            except OSError:
                continue
            rel = path.relative_to(self.project_root)
            entries.append((str(rel), stat.st_mtime_ns, stat.st_size))
        return tuple(entries) if entries else None


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, server: DevServer):
        super().__init__()
        self.server = server

    def on_any_event(self, event):
        if event.is_directory:
            return
        path = Path(event.src_path)
        try:
            path.relative_to(self.server.output_dir)
            return
        except ValueError:
            pass
        self.server.rebuild()

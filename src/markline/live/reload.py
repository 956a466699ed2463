"""WebSocket-based live reload for development mode.

Monitors source markdown files for changes and notifies connected clients
via WebSocket to trigger re-rendering.
"""

import asyncio
import contextlib
import json
import logging
import weakref
from pathlib import Path

from aiohttp import WSMsgType, web
from watchfiles import Change, awatch

from markline.core.renderer import PageRenderer

logger = logging.getLogger(__name__)


class LiveReloadManager:
    """Manages WebSocket connections and file watching for live reload.

    Coordinates between file system watcher and connected WebSocket clients
    to provide automatic refresh on source file changes.
    """

    def __init__(
        self,
        source_dir: Path,
        watch_patterns: list[str] | None = None,
        *,
        renderer: PageRenderer | None = None,
    ) -> None:
        """Initialize the live reload manager.

        Args:
            source_dir: Directory to watch for changes
            watch_patterns: Glob patterns to watch (default: ["**/*.md"])
            renderer: PageRenderer whose cache entries are dropped on change
        """
        self._source_dir = source_dir.absolute()
        self._watch_patterns = watch_patterns or ["**/*.md"]
        self._connections: weakref.WeakSet[web.WebSocketResponse] = weakref.WeakSet()
        self._watch_task: asyncio.Task[None] | None = None
        self._renderer = renderer

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def start(self) -> None:
        """Start the file watcher."""
        if self._watch_task is not None:
            return
        self._watch_task = asyncio.create_task(self._watch_files())
        logger.info(f"Watching {self._source_dir} for changes")

    async def stop(self) -> None:
        """Stop the file watcher and close all connections."""
        if self._watch_task is not None:
            self._watch_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._watch_task
            self._watch_task = None

        for ws in list(self._connections):
            await ws.close()

    async def handle_websocket(self, request: web.Request) -> web.WebSocketResponse:
        """Handle WebSocket connection for live reload."""
        ws = web.WebSocketResponse()
        await ws.prepare(request)

        self._connections.add(ws)

        try:
            async for msg in ws:
                if msg.type == WSMsgType.ERROR:
                    break
        finally:
            self._connections.discard(ws)

        return ws

    async def _watch_files(self) -> None:
        """Watch for file changes and broadcast reload events."""
        async for changes in awatch(self._source_dir):
            for change_type, path_str in changes:
                await self.handle_change(change_type, Path(path_str))

    async def handle_change(self, change_type: Change, path: Path) -> None:
        """Process a single file system change."""
        if change_type == Change.deleted:
            return
        if not self._matches_patterns(path):
            return

        doc_path = self._to_doc_path(path)
        logger.info(f"Source changed: {path}")

        if self._renderer is not None:
            self._renderer.invalidate(doc_path)
        await self._broadcast_reload(f"/{doc_path}")

    def _matches_patterns(self, path: Path) -> bool:
        try:
            relative = path.relative_to(self._source_dir)
        except ValueError:
            return False

        for pattern in self._watch_patterns:
            if relative.match(pattern):
                return True
            # PurePath.match treats a leading "**/" as exactly one directory
            if pattern.startswith("**/") and relative.match(pattern[3:]):
                return True
        return False

    def _to_doc_path(self, file_path: Path) -> str:
        """Convert a file system path to a document path.

        Args:
            file_path: Absolute file path

        Returns:
            Document path without extension (e.g., "guide/setup");
            index files map to their directory
        """
        relative = file_path.relative_to(self._source_dir)
        doc_path = relative.with_suffix("").as_posix()

        if doc_path.endswith("/index") or doc_path == "index":
            doc_path = doc_path.rsplit("index", 1)[0].rstrip("/")

        return doc_path

    async def _broadcast_reload(self, path: str) -> None:
        if not self._connections:
            return

        message = json.dumps({"type": "reload", "path": path})

        for ws in list(self._connections):
            if ws.closed:
                continue
            try:
                await ws.send_str(message)
            except ConnectionResetError:
                # Client disconnected mid-send, WeakSet drops it
                logger.debug("Client disconnected during reload broadcast")


def create_live_reload_routes(manager: LiveReloadManager) -> list[web.RouteDef]:
    """Create routes for live reload WebSocket."""
    return [web.get("/ws/live-reload", manager.handle_websocket)]

"""Live reload support."""

from markline.live.reload import LiveReloadManager, create_live_reload_routes

__all__ = ["LiveReloadManager", "create_live_reload_routes"]

"""aiohttp server for Markline.

Application factory and route registration for standalone server mode.
"""

from aiohttp import web

from markline.api.config import create_config_routes
from markline.api.convert import create_convert_routes
from markline.api.pages import create_pages_routes
from markline.app_keys import converter_key, live_reload_enabled_key, renderer_key, verbose_key
from markline.config import Config
from markline.core.cache import FileCache
from markline.core.converter import MarkdownConverter
from markline.core.renderer import PageRenderer
from markline.live import LiveReloadManager, create_live_reload_routes

live_reload_manager_key = web.AppKey("live_reload_manager", LiveReloadManager)


def create_app(config: Config, *, verbose: bool = False) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        verbose: Log every page render

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    converter = MarkdownConverter()
    cache = FileCache(config.docs.cache_dir) if config.docs.cache_enabled else None
    renderer = PageRenderer(config.docs.source_dir, cache, converter=converter)

    app[converter_key] = converter
    app[renderer_key] = renderer
    app[verbose_key] = verbose
    app[live_reload_enabled_key] = config.live_reload.enabled

    app.router.add_routes(create_convert_routes())
    app.router.add_routes(create_pages_routes())
    app.router.add_routes(create_config_routes())

    if config.live_reload.enabled:
        manager = LiveReloadManager(
            config.docs.source_dir,
            watch_patterns=config.live_reload.watch_patterns,
            renderer=renderer,
        )
        app[live_reload_manager_key] = manager
        app.router.add_routes(create_live_reload_routes(manager))
        app.on_startup.append(_start_live_reload)
        app.on_cleanup.append(_stop_live_reload)

    return app


async def _start_live_reload(app: web.Application) -> None:
    await app[live_reload_manager_key].start()


async def _stop_live_reload(app: web.Application) -> None:
    await app[live_reload_manager_key].stop()


def run_server(config: Config, *, verbose: bool = False) -> None:
    """Run the server.

    Args:
        config: Application configuration
        verbose: Log every page render
    """
    app = create_app(config, verbose=verbose)
    web.run_app(app, host=config.server.host, port=config.server.port)

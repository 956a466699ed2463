"""Client configuration endpoint.

Tells the host editor which optional server features are active.
"""

from aiohttp import web

from markline.app_keys import live_reload_enabled_key, renderer_key


def create_config_routes() -> list[web.RouteDef]:
    return [web.get("/api/config", get_config)]


async def get_config(request: web.Request) -> web.Response:
    renderer = request.app[renderer_key]
    return web.json_response(
        {
            "liveReloadEnabled": request.app[live_reload_enabled_key],
            "cacheEnabled": renderer.cache is not None,
        },
    )

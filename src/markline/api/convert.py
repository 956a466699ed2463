"""Convert API endpoint.

Accepts raw editor text and returns the rendered HTML. The body is either
plain text or a JSON object with a ``text`` field.
"""

import json
import logging

from aiohttp import web

from markline.app_keys import converter_key

logger = logging.getLogger(__name__)


def create_convert_routes() -> list[web.RouteDef]:
    return [web.post("/api/convert", post_convert)]


async def post_convert(request: web.Request) -> web.Response:
    converter = request.app[converter_key]

    try:
        body = (await request.read()).decode(request.charset or "utf-8")
    except (UnicodeDecodeError, LookupError):
        return web.json_response({"error": "Request body must be UTF-8"}, status=400)

    if request.content_type == "application/json":
        try:
            payload = json.loads(body)
        except json.JSONDecodeError:
            return web.json_response({"error": "Invalid JSON body"}, status=400)

        text = payload.get("text") if isinstance(payload, dict) else None
        if not isinstance(text, str):
            return web.json_response(
                {"error": "Field 'text' must be a string"},
                status=400,
            )
    else:
        text = body

    html = converter.convert(text)
    logger.debug(f"Converted {len(text)} characters from {request.remote}")
    return web.json_response({"html": html})

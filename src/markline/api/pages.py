"""Pages API endpoint.

Renders source documents and returns JSON responses with metadata and HTML content.
"""

import logging
from datetime import UTC, datetime
from email.utils import formatdate
from hashlib import md5

from aiohttp import web

from markline.app_keys import renderer_key, verbose_key

logger = logging.getLogger(__name__)


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/pages/{path:.*}", get_page),
    ]


async def get_page(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    renderer = request.app[renderer_key]

    try:
        result = renderer.render(path)
    except FileNotFoundError:
        return web.json_response(
            {"error": "Page not found", "path": path},
            status=404,
        )

    if request.app[verbose_key]:
        source = "cache" if result.from_cache else "source"
        logger.info(f"Rendered {path or '/'} from {source}")

    source_mtime = result.source_path.stat().st_mtime
    last_modified = datetime.fromtimestamp(source_mtime, tz=UTC)

    etag = _compute_etag(result.html)

    if_none_match = request.headers.get("If-None-Match")
    if if_none_match == etag:
        return web.Response(status=304)

    response_data = {
        "meta": {
            "path": f"/{path}" if path else "/",
            "source_file": str(result.source_path),
            "last_modified": last_modified.isoformat(),
        },
        "content": result.html,
    }

    return web.json_response(
        response_data,
        headers={
            "ETag": etag,
            "Last-Modified": formatdate(source_mtime, usegmt=True),
            "Cache-Control": "private, max-age=60",
        },
    )


def _compute_etag(content: str) -> str:
    # First 16 hex chars (64 bits) of the content hash
    content_hash = md5(content.encode("utf-8"), usedforsecurity=False).hexdigest()[:16]
    return f'"{content_hash}"'

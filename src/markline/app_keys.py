"""Application keys for type-safe app configuration access."""

from aiohttp import web

from markline.core.converter import MarkdownConverter
from markline.core.renderer import PageRenderer

converter_key = web.AppKey("converter", MarkdownConverter)
renderer_key = web.AppKey("renderer", PageRenderer)
verbose_key = web.AppKey("verbose", bool)
live_reload_enabled_key = web.AppKey("live_reload_enabled", bool)

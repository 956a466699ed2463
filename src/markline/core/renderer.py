"""Markdown file rendering with caching.

Wraps MarkdownConverter with source path resolution, file-based caching and
mtime tracking.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from markline.core.cache import FileCache
from markline.core.converter import MarkdownConverter

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Result of rendering a markdown document."""

    html: str
    source_path: Path
    from_cache: bool


class PageRenderer:
    """Renders markdown documents from a source directory.

    Cache invalidation is based on source file mtime. Without a cache every
    render reads and converts the source again.
    """

    def __init__(
        self,
        source_dir: Path,
        cache: FileCache | None = None,
        *,
        converter: MarkdownConverter | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            source_dir: Root directory containing markdown sources
            cache: FileCache instance, or None to disable caching
            converter: Converter to use (default: standard rules)
        """
        self._source_dir = source_dir
        self._cache = cache
        self._converter = converter or MarkdownConverter()

    @property
    def source_dir(self) -> Path:
        """Root directory containing markdown sources."""
        return self._source_dir

    @property
    def cache(self) -> FileCache | None:
        return self._cache

    def render(self, path: str) -> RenderResult:
        """Render a markdown document.

        Args:
            path: Document path relative to source_dir (without .md extension)
                  e.g., "domain-a/guide"

        Returns:
            RenderResult with HTML

        Raises:
            FileNotFoundError: If source markdown file doesn't exist or lies
                outside source_dir
        """
        source_path = self._resolve_source_path(path)
        if not source_path.exists():
            raise FileNotFoundError(f"Source file not found: {source_path}")

        source_mtime = source_path.stat().st_mtime

        if self._cache is not None:
            cached = self._cache.get(path, source_mtime)
            if cached is not None:
                logger.debug(f"Cache hit for {path}")
                return RenderResult(html=cached.html, source_path=source_path, from_cache=True)
            logger.debug(f"Cache miss for {path}")

        html = self._converter.convert_file(source_path)
        if self._cache is not None:
            self._cache.set(path, html, source_mtime)

        return RenderResult(html=html, source_path=source_path, from_cache=False)

    def invalidate(self, path: str) -> None:
        """Invalidate cached content for a path."""
        if self._cache is not None:
            self._cache.invalidate(path)

    def _resolve_source_path(self, path: str) -> Path:
        """Resolve document path to source file.

        Handles index.md convention for directories.
        """
        source_path = self._source_dir / f"{path}.md"

        # If path.md doesn't exist, check for path/index.md
        if not source_path.exists():
            index_path = self._source_dir / path / "index.md"
            if index_path.exists():
                source_path = index_path

        if not source_path.resolve().is_relative_to(self._source_dir.resolve()):
            raise FileNotFoundError(f"Source file outside source directory: {path}")

        return source_path

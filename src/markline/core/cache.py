"""Rendered page cache keyed by document path.

Each page is stored as one JSON record holding the HTML and the mtime of
the source it was rendered from:

    .cache/
    ├── .gitignore
    └── pages/
        └── domain-a/
            └── guide.json       # {"source_mtime": ..., "html": ...}
"""

import json
import shutil
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CacheEntry:
    """Rendered HTML together with the source mtime it is valid for."""

    html: str
    source_mtime: float

    def to_json(self) -> str:
        return json.dumps({"source_mtime": self.source_mtime, "html": self.html})

    @classmethod
    def from_json(cls, raw: str) -> "CacheEntry | None":
        """Parse a stored record, returning None for anything malformed."""
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            return None

        if not isinstance(data, dict):
            return None
        html = data.get("html")
        source_mtime = data.get("source_mtime")
        if not isinstance(html, str) or not isinstance(source_mtime, int | float):
            return None

        return cls(html=html, source_mtime=float(source_mtime))


class FileCache:
    """On-disk cache of rendered pages.

    A lookup only hits when the stored source mtime equals the current one,
    so edited sources are re-rendered without explicit invalidation.
    """

    _IGNORE_ALL = "# Ignore everything in this directory\n*\n"

    def __init__(self, cache_dir: Path) -> None:
        self._cache_dir = cache_dir
        self._pages_dir = cache_dir / "pages"

    @property
    def cache_dir(self) -> Path:
        """Root cache directory."""
        return self._cache_dir

    def _entry_path(self, path: str) -> Path:
        return self._pages_dir / f"{path}.json"

    def get(self, path: str, source_mtime: float) -> CacheEntry | None:
        """Look up a rendered page.

        Args:
            path: Document path (e.g., "domain-a/guide")
            source_mtime: Current mtime of the source file

        Returns:
            CacheEntry when present and rendered from the same mtime, else None
        """
        try:
            raw = self._entry_path(path).read_text(encoding="utf-8")
        except OSError:
            return None

        entry = CacheEntry.from_json(raw)
        if entry is None or entry.source_mtime != source_mtime:
            return None
        return entry

    def set(self, path: str, html: str, source_mtime: float) -> None:
        """Store a rendered page.

        Args:
            path: Document path (e.g., "domain-a/guide")
            html: Rendered HTML content
            source_mtime: Source file mtime the HTML was rendered from
        """
        if not self._cache_dir.exists():
            self._cache_dir.mkdir(parents=True, exist_ok=True)
            (self._cache_dir / ".gitignore").write_text(self._IGNORE_ALL, encoding="utf-8")

        entry_path = self._entry_path(path)
        entry_path.parent.mkdir(parents=True, exist_ok=True)
        entry = CacheEntry(html=html, source_mtime=source_mtime)
        entry_path.write_text(entry.to_json(), encoding="utf-8")

    def invalidate(self, path: str) -> None:
        """Drop the entry for one document path, if any."""
        self._entry_path(path).unlink(missing_ok=True)

    def clear(self) -> None:
        """Drop every cached page."""
        shutil.rmtree(self._pages_dir, ignore_errors=True)

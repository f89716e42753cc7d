"""Content-addressed analysis cache for Arroba.

Maps (content_hash, config_hash) -> HeaderAnalysis so an editor re-analyzing
an unchanged buffer (cursor moves, undo/redo) skips the re-scan. The config
half of the key keeps results computed under one line-length cap from being
served under another. The in-memory cache also remembers the most recently
stored analysis, which is the last buffer the editor applied.

Thread Safety:
    DictAnalysisCache is not thread-safe. For concurrent use, wrap get/put
    with a lock or use a thread-safe implementation.

Example:
    >>> from arroba import analyze, DictAnalysisCache
    >>> cache = DictAnalysisCache()
    >>> first = analyze("@option", cache=cache)
    >>> analyze("@option", cache=cache) is first  # Cache hit, no re-scan
    True
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from arroba.analysis import HeaderAnalysis
    from arroba.config import HeaderConfig


class AnalysisCache(Protocol):
    """Protocol for content-addressed analysis caches.

    Cache key is (content_hash, config_hash).
    HeaderAnalysis is immutable, safe to share across threads.
    """

    def get(self, content_hash: str, config_hash: str) -> HeaderAnalysis | None:
        """Return cached analysis if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, analysis: HeaderAnalysis) -> None:
        """Store analysis in cache."""
        ...


class DictAnalysisCache:
    """In-memory analysis cache using a dict.

    Bounded by ``max_entries``; the oldest entry is evicted first.
    """

    __slots__ = ("_data", "_last", "_max_entries")

    def __init__(self, max_entries: int = 64) -> None:
        self._data: dict[tuple[str, str], HeaderAnalysis] = {}
        self._last: tuple[str, HeaderAnalysis] | None = None
        self._max_entries = max_entries

    def get(self, content_hash: str, config_hash: str) -> HeaderAnalysis | None:
        """Return cached analysis if present, else None.

        A hit marks the entry as the last applied buffer.
        """
        analysis = self._data.get((content_hash, config_hash))
        if analysis is not None:
            self._last = (content_hash, analysis)
        return analysis

    def put(self, content_hash: str, config_hash: str, analysis: HeaderAnalysis) -> None:
        """Store analysis in cache and mark it as the last applied buffer."""
        key = (content_hash, config_hash)
        self._data.pop(key, None)
        self._data[key] = analysis
        while len(self._data) > self._max_entries:
            del self._data[next(iter(self._data))]
        self._last = (content_hash, analysis)

    def last(self) -> HeaderAnalysis | None:
        """Most recently stored analysis, or None if nothing was stored."""
        return self._last[1] if self._last is not None else None

    @property
    def last_hash(self) -> str | None:
        """Content hash of the most recently stored buffer."""
        return self._last[0] if self._last is not None else None

    def clear(self) -> None:
        self._data.clear()
        self._last = None

    def __len__(self) -> int:
        return len(self._data)


def hash_content(source: str) -> str:
    """Compute SHA256 hash of a buffer for cache key."""
    return hashlib.sha256(source.encode("utf-8")).hexdigest()


def hash_config(config: HeaderConfig) -> str:
    """Compute hash of the HeaderConfig fields that affect analysis.

    Only ``max_line_length`` changes what the parser and lexer return;
    ``directive_names`` is read by completion alone.
    """
    return hashlib.sha256(str(config.max_line_length).encode("utf-8")).hexdigest()


__all__ = [
    "AnalysisCache",
    "DictAnalysisCache",
    "hash_config",
    "hash_content",
]

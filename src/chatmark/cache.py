"""Content-addressed parse cache for chatmark.

A chat panel re-renders the same replies over and over (scrolling, theme
changes, new messages arriving). Documents are immutable, so a parsed reply
can be reused by content hash. The grammar has no options, so the content
hash alone is the key.

Thread Safety:
    DictParseCache is not thread-safe. For parallel parsing, use a cache
    implementation with internal locking.

Example:
    >>> from chatmark import parse, DictParseCache
    >>> cache = DictParseCache()
    >>> doc1 = parse("- a\\n- b", cache=cache)
    >>> doc2 = parse("- a\\n- b", cache=cache)  # cache hit
    >>> doc1 is doc2
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from chatmark.utils.hashing import hash_str

if TYPE_CHECKING:
    from chatmark.nodes import Document


class ParseCache(Protocol):
    """Protocol for content-addressed parse caches."""

    def get(self, content_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        ...

    def put(self, content_hash: str, doc: Document) -> None:
        """Store Document in cache."""
        ...


class DictParseCache:
    """In-memory parse cache backed by a dict."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[str, Document] = {}

    def get(self, content_hash: str) -> Document | None:
        return self._data.get(content_hash)

    def put(self, content_hash: str, doc: Document) -> None:
        self._data[content_hash] = doc

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


def hash_content(source: str, source_file: str | None = None) -> str:
    """Cache key for a reply.

    The source label is part of the key because it is stored in block
    locations.
    """
    if source_file:
        return hash_str(f"{source_file}\x00{source}")
    return hash_str(source)


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_content",
]

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class NewsItem:
    """
    Display-ready representation of one feed entry.

    WARNING: Do not change fields lightly. This is what consumers render.
    All fields are plain text and never None.
    """
    title: str = ""
    pub_date: str = ""
    content_snippet: str = ""

    def as_dict(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "pubDate": self.pub_date,
            "contentSnippet": self.content_snippet,
        }


@dataclass(frozen=True)
class RawEntry:
    """One <item> of the feed as extracted by the parser, before normalization."""
    title: Optional[str] = None
    published: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    guid: Optional[str] = None


@dataclass(frozen=True)
class FeedPayload:
    """Raw response body as received, before any charset decoding."""
    body: bytes = b""
    content_type: Optional[str] = None


@dataclass(frozen=True)
class FeedStructure:
    entries: Tuple[RawEntry, ...] = ()
    title: Optional[str] = None


@dataclass(frozen=True)
class FeedOk:
    items: Tuple[NewsItem, ...] = ()


@dataclass(frozen=True)
class FeedErr:
    # message is user-facing; cause is kept for diagnostics only
    message: str
    cause: Optional[BaseException] = field(default=None, compare=False)


FeedResult = Union[FeedOk, FeedErr]


@dataclass(frozen=True)
class PublishedState:
    """
    Immutable snapshot handed to consumers.

    Either loading, or finished with items and no error, or finished with an
    error and no items.
    """
    items: Tuple[NewsItem, ...] = ()
    error: Optional[str] = None
    loading: bool = True

    @classmethod
    def from_result(cls, result: FeedResult) -> "PublishedState":
        if isinstance(result, FeedOk):
            return cls(items=tuple(result.items), error=None, loading=False)
        if isinstance(result, FeedErr):
            return cls(items=(), error=result.message, loading=False)
        raise TypeError(f"Unsupported feed result: {result!r}")

    @property
    def failed(self) -> bool:
        return not self.loading and self.error is not None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.as_dict() for item in self.items],
            "error": self.error,
            "loading": self.loading,
        }

"""Configuration for a single feed pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

DEFAULT_TIMEOUT_SEC = 10.0
DEFAULT_USER_AGENT = "news-snapshot/0.1"
DEFAULT_ERROR_MESSAGE = "Failed to fetch and parse RSS feed"


@dataclass(frozen=True)
class FieldMapping:
    """Candidate feedparser keys for each NewsItem field, in priority order.

    feedparser exposes <pubDate> as ``published`` and <description> as
    ``summary``; the raw tag names are kept as fallbacks.
    """

    title_fields: Tuple[str, ...] = ("title",)
    date_fields: Tuple[str, ...] = ("published", "pubDate", "updated")
    summary_fields: Tuple[str, ...] = ("summary", "description")


@dataclass(frozen=True)
class FeedConfig:
    """Runtime configuration values for one fetch-parse-publish run.

    When the pipeline is given its own httpx client, timeout_sec is still
    applied to the request but user_agent is not: the client's headers win.
    """

    url: str
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    user_agent: str = DEFAULT_USER_AGENT
    error_message: str = DEFAULT_ERROR_MESSAGE
    strip_html: bool = True
    snippet_max_chars: Optional[int] = None
    mapping: FieldMapping = field(default_factory=FieldMapping)

    def __post_init__(self) -> None:
        if not isinstance(self.url, str) or not self.url.strip():
            raise ValueError("Feed URL must be a non-empty string")
        if self.timeout_sec <= 0:
            raise ValueError("timeout_sec must be positive")
        if self.snippet_max_chars is not None and self.snippet_max_chars <= 0:
            raise ValueError("snippet_max_chars must be positive when set")

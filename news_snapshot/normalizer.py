from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple

from bs4 import BeautifulSoup

from .models import NewsItem, RawEntry

_WHITESPACE_RE = re.compile(r"\s+")


def _plain_text(value: str) -> str:
    if "<" in value or "&" in value:
        value = BeautifulSoup(value, "html.parser").get_text(" ")
    return _WHITESPACE_RE.sub(" ", value).strip()


def _trim(value: str, limit: Optional[int]) -> str:
    if not limit or len(value) <= limit:
        return value
    return value[: limit - 1].rstrip() + "…"


def to_news_item(
    entry: RawEntry,
    *,
    strip_html: bool = True,
    snippet_max_chars: Optional[int] = None,
) -> NewsItem:
    """
    Convert a RawEntry into a NewsItem.

    Missing fields become empty strings. The publication date is kept as the
    feed wrote it; no date parsing happens here.

    With strip_html (the default) the snippet is not the description verbatim:
    markup is removed and runs of whitespace, newlines included, collapse to a
    single space. Pass strip_html=False to keep the description as-is.
    """
    snippet = entry.description or ""
    if strip_html:
        snippet = _plain_text(snippet)
    return NewsItem(
        title=entry.title or "",
        pub_date=entry.published or "",
        content_snippet=_trim(snippet, snippet_max_chars),
    )


def normalize(
    entries: Iterable[RawEntry],
    *,
    strip_html: bool = True,
    snippet_max_chars: Optional[int] = None,
) -> Tuple[NewsItem, ...]:
    """One NewsItem per entry, same order, nothing dropped."""
    return tuple(
        to_news_item(e, strip_html=strip_html, snippet_max_chars=snippet_max_chars)
        for e in entries
    )

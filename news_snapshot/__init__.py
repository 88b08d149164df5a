"""
news_snapshot

Fetches one RSS feed, normalizes its items and publishes them as an immutable
snapshot for display code.

Core ideas:
- Input: a single RSS feed URL
- Process: fetch → validate → parse → normalize → publish (once)
- Output: PublishedState(items, error, loading)

Example
-------
import asyncio

from news_snapshot import FeedConfig, FeedPipeline

async def main():
    pipeline = FeedPipeline(FeedConfig(url="https://example.com/rss/news.xml"))
    pipeline.publisher.subscribe(lambda state: print(state.error or len(state.items)))
    state = await pipeline.run()
    for item in state.items:
        print(item.pub_date, item.title)

asyncio.run(main())
"""
from .config import FeedConfig, FieldMapping
from .core import FeedPipeline, fetch_news
from .exceptions import (
    AlreadyPublishedError,
    EmptyPayloadError,
    FeedError,
    NetworkError,
    ParseError,
)
from .models import FeedErr, FeedOk, FeedPayload, FeedResult, NewsItem, PublishedState, RawEntry
from .publisher import FeedPublisher

__all__ = [
    "AlreadyPublishedError",
    "EmptyPayloadError",
    "FeedConfig",
    "FeedErr",
    "FeedError",
    "FeedOk",
    "FeedPayload",
    "FeedPipeline",
    "FeedPublisher",
    "FeedResult",
    "FieldMapping",
    "NetworkError",
    "NewsItem",
    "ParseError",
    "PublishedState",
    "RawEntry",
    "fetch_news",
]

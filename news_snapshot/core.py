from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import httpx

from .config import FeedConfig
from .exceptions import FeedError
from .fetcher import fetch_feed_body
from .models import FeedErr, FeedOk, FeedResult, PublishedState
from .normalizer import normalize
from .parser import parse_feed
from .publisher import FeedPublisher
from .validator import validate_payload

LOGGER = logging.getLogger(__name__)


class FeedPipeline:
    """
    High-level API: fetch one RSS feed once and publish its normalized items.

    Pipeline: fetch → validate → parse → normalize → publish
    """

    def __init__(
        self,
        config: FeedConfig,
        *,
        publisher: Optional[FeedPublisher] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config
        self.publisher = publisher or FeedPublisher()
        self._client = client
        self._task: Optional[asyncio.Task] = None

    async def load(self) -> FeedResult:
        """Run the chain and collapse any failure into a FeedErr."""
        cfg = self.config
        LOGGER.info("Loading feed %s", cfg.url)
        try:
            payload = await fetch_feed_body(
                cfg.url,
                client=self._client,
                timeout=cfg.timeout_sec,
                user_agent=cfg.user_agent,
            )
            body = validate_payload(payload.body)
            structure = parse_feed(body, content_type=payload.content_type, mapping=cfg.mapping)
            items = normalize(
                structure.entries,
                strip_html=cfg.strip_html,
                snippet_max_chars=cfg.snippet_max_chars,
            )
        except FeedError as e:
            LOGGER.warning("Feed %s failed with %s: %s", cfg.url, type(e).__name__, e)
            return FeedErr(cfg.error_message, cause=e)
        except Exception as e:
            LOGGER.exception("Unexpected error while loading feed %s", cfg.url)
            return FeedErr(cfg.error_message, cause=e)

        LOGGER.info("Loaded %d items from %s", len(items), cfg.url)
        return FeedOk(items)

    async def run(self) -> PublishedState:
        """Load and publish once; later or concurrent calls share that run."""
        if self.publisher.completed:
            return self.publisher.snapshot
        return await self.start()

    def start(self) -> asyncio.Task:
        """Launch the one-shot run; later calls return the same task."""
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._run_once())
        return self._task

    async def _run_once(self) -> PublishedState:
        if self.publisher.completed:
            return self.publisher.snapshot
        result = await self.load()
        # a shared publisher may have been completed while we were fetching
        if self.publisher.completed:
            LOGGER.warning("Feed state for %s was already published; dropping result", self.config.url)
            return self.publisher.snapshot
        return self.publisher.publish(result)


async def fetch_news(url: str, **options: Any) -> PublishedState:
    """Fetch and normalize a feed in one call; options are FeedConfig fields."""
    pipeline = FeedPipeline(FeedConfig(url=url, **options))
    return await pipeline.run()

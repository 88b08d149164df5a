"""Command-line consumer: fetch a feed once and print the published snapshot."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_TIMEOUT_SEC, FeedConfig
from .core import FeedPipeline
from .models import PublishedState


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch an RSS feed and print its news items")
    parser.add_argument("url", help="Feed URL")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT_SEC, help="Request timeout in seconds")
    parser.add_argument("--limit", type=int, default=None, help="Render at most N items")
    parser.add_argument("--snippet-chars", type=int, default=None, help="Trim snippets to N characters")
    parser.add_argument("--json", action="store_true", help="Print the snapshot as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def render(state: PublishedState, *, limit: Optional[int] = None) -> str:
    if state.loading:
        return "Loading..."
    if state.error:
        return state.error
    items = state.items[:limit] if limit and limit > 0 else state.items
    if not items:
        return "No news items."
    blocks = []
    for item in items:
        lines = [item.title]
        if item.pub_date:
            lines.append(f"  {item.pub_date}")
        if item.content_snippet:
            lines.append(f"  {item.content_snippet}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    config = FeedConfig(
        url=args.url,
        timeout_sec=args.timeout,
        snippet_max_chars=args.snippet_chars,
    )
    pipeline = FeedPipeline(config)

    def on_ready(state: PublishedState) -> None:
        if args.json:
            print(json.dumps(state.as_dict(), ensure_ascii=False, indent=2))
        else:
            print(render(state, limit=args.limit))

    pipeline.publisher.subscribe(on_ready)
    state = asyncio.run(pipeline.run())
    pipeline.publisher.close()
    return 1 if state.failed else 0


if __name__ == "__main__":
    sys.exit(main())

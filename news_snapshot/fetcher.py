from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import DEFAULT_TIMEOUT_SEC, DEFAULT_USER_AGENT
from .exceptions import NetworkError
from .models import FeedPayload

LOGGER = logging.getLogger(__name__)


async def fetch_feed_body(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT_SEC,
    user_agent: str = DEFAULT_USER_AGENT,
) -> FeedPayload:
    """
    Fetch a single feed URL and return the undecoded body with its content type.

    The body is left as bytes so the parser can honour the charset declared in
    the XML prolog. A caller-supplied client is used as-is and left open; the
    timeout still applies per request, but the client's own headers win over
    user_agent. Without a client, one is opened for this request only.

    Raises NetworkError on transport failures and non-2xx responses.
    """
    if not url or not url.strip():
        raise ValueError("Feed URL must be a non-empty string")

    if client is None:
        async with httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            follow_redirects=True,
        ) as own_client:
            return await _get_body(own_client, url, timeout)
    return await _get_body(client, url, timeout)


async def _get_body(client: httpx.AsyncClient, url: str, timeout: float) -> FeedPayload:
    try:
        response = await client.get(url, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise NetworkError(f"Failed to fetch feed: {url} ({e!r})") from e

    LOGGER.debug("Fetched %s: HTTP %d, %d bytes", url, response.status_code, len(response.content))
    return FeedPayload(body=response.content, content_type=response.headers.get("content-type"))

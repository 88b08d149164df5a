from __future__ import annotations

from typing import Callable

import httpx
import pytest


@pytest.fixture
def make_client() -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient whose requests are answered by a local handler."""

    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def serve_text(make_client):
    def _serve(
        text: str,
        status_code: int = 200,
        encoding: str = "utf-8",
        content_type: str = "application/rss+xml; charset=utf-8",
    ) -> httpx.AsyncClient:
        body = text.encode(encoding)
        headers = {"content-type": content_type}
        return make_client(lambda request: httpx.Response(status_code, content=body, headers=headers))

    return _serve

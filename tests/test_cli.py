from __future__ import annotations

import json

from news_snapshot import __main__ as cli
from news_snapshot import core
from news_snapshot.exceptions import NetworkError
from news_snapshot.models import FeedPayload, NewsItem, PublishedState

from .feeds import rss, rss_item

URL = "https://news.example.com/rss/home.xml"


def _serve(monkeypatch, text=None, error=None):
    async def fake_fetch(url, **kwargs):
        if error is not None:
            raise error
        return FeedPayload(text.encode("utf-8"), "application/rss+xml; charset=utf-8")

    monkeypatch.setattr(core, "fetch_feed_body", fake_fetch)


def test_prints_items(monkeypatch, capsys):
    _serve(monkeypatch, rss(rss_item(title="Hello", pub_date="Mon", description="World")))

    assert cli.main([URL]) == 0

    out = capsys.readouterr().out
    assert "Hello" in out
    assert "Mon" in out
    assert "World" in out


def test_prints_error_and_fails(monkeypatch, capsys):
    _serve(monkeypatch, error=NetworkError("down"))

    assert cli.main([URL]) == 1

    assert "Failed to fetch and parse RSS feed" in capsys.readouterr().out


def test_json_output(monkeypatch, capsys):
    _serve(monkeypatch, rss(rss_item(title="A"), rss_item(title="B")))

    assert cli.main([URL, "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [i["title"] for i in payload["items"]] == ["A", "B"]
    assert payload["error"] is None
    assert payload["loading"] is False


def test_render_limits_items():
    state = PublishedState(items=tuple(NewsItem(title=t) for t in "abc"), loading=False)

    assert cli.render(state, limit=2) == "a\n\nb"
    assert cli.render(PublishedState()) == "Loading..."
    assert cli.render(PublishedState(loading=False)) == "No news items."

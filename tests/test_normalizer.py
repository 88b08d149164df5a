from __future__ import annotations

from news_snapshot.models import NewsItem, RawEntry
from news_snapshot.normalizer import normalize, to_news_item


def test_fields_are_mapped():
    item = to_news_item(RawEntry(title="Hello", published="Mon", description="World"))

    assert item == NewsItem(title="Hello", pub_date="Mon", content_snippet="World")


def test_missing_fields_become_empty_strings():
    item = to_news_item(RawEntry())

    assert item.title == ""
    assert item.pub_date == ""
    assert item.content_snippet == ""


def test_missing_summary_gives_empty_snippet():
    item = to_news_item(RawEntry(title="t", published="p"))

    assert item.content_snippet == ""


def test_order_and_count_are_preserved():
    entries = [RawEntry(title=f"#{i}") for i in range(5)] + [RawEntry(title="#1")]

    items = normalize(entries)

    assert [i.title for i in items] == ["#0", "#1", "#2", "#3", "#4", "#1"]


def test_normalize_is_repeatable():
    entries = (
        RawEntry(title="a", published="x", description="<b>bold</b>"),
        RawEntry(title=None, published=None, description=None),
    )

    assert normalize(entries) == normalize(entries)


def test_dates_are_not_reformatted():
    item = to_news_item(RawEntry(published="Mon, 01 Jan 2024 10:00:00 GMT"))

    assert item.pub_date == "Mon, 01 Jan 2024 10:00:00 GMT"


def test_html_is_stripped_from_snippet():
    item = to_news_item(RawEntry(description="<p>Hello <b>world</b></p>\n\n<p>again</p>"))

    assert item.content_snippet == "Hello world again"


def test_html_kept_when_stripping_disabled():
    item = to_news_item(RawEntry(description="<p>Hello</p>"), strip_html=False)

    assert item.content_snippet == "<p>Hello</p>"


def test_snippet_is_trimmed():
    item = to_news_item(RawEntry(description="abcdefghij"), snippet_max_chars=5)

    assert item.content_snippet == "abcd…"
    assert to_news_item(RawEntry(description="abc"), snippet_max_chars=5).content_snippet == "abc"

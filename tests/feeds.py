"""Small builders for RSS test documents."""

from __future__ import annotations

from typing import Optional


def rss(*items: str) -> str:
    body = "".join(items)
    return f'<rss version="2.0"><channel><title>Example</title>{body}</channel></rss>'


def rss_item(
    title: Optional[str] = None,
    pub_date: Optional[str] = None,
    description: Optional[str] = None,
    link: Optional[str] = None,
) -> str:
    parts = []
    if title is not None:
        parts.append(f"<title>{title}</title>")
    if link is not None:
        parts.append(f"<link>{link}</link>")
    if pub_date is not None:
        parts.append(f"<pubDate>{pub_date}</pubDate>")
    if description is not None:
        parts.append(f"<description>{description}</description>")
    return "<item>" + "".join(parts) + "</item>"

from __future__ import annotations

import io
import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

import feedparser

from .config import FieldMapping
from .exceptions import ParseError
from .models import FeedStructure, RawEntry

LOGGER = logging.getLogger(__name__)

# Text that is already decoded is re-encoded as UTF-8; only then may the
# charset override an XML declaration.
_DECODED_TEXT_HEADERS = {"content-type": "application/xml; charset=utf-8"}

# bozo exceptions that flag an encoding/content-type notice, not broken XML
_BENIGN_BOZO = (
    feedparser.CharacterEncodingOverride,
    feedparser.NonXMLContentType,
)


def _first_text(entry: Mapping[str, Any], keys: Iterable[str]) -> Optional[str]:
    for key in keys:
        val = entry.get(key)
        if isinstance(val, str) and val.strip():
            return val.strip()
    return None


def parse_entry(entry: Mapping[str, Any], mapping: Optional[FieldMapping] = None) -> RawEntry:
    """
    Map a raw feed entry (from feedparser) to a RawEntry.

    Each field takes the first non-blank candidate key listed in the mapping;
    fields the feed does not carry stay None.
    """
    mapping = mapping or FieldMapping()
    return RawEntry(
        title=_first_text(entry, mapping.title_fields),
        published=_first_text(entry, mapping.date_fields),
        description=_first_text(entry, mapping.summary_fields),
        link=_first_text(entry, ("link",)),
        guid=_first_text(entry, ("id", "guid")),
    )


def _source(payload: Union[bytes, str], content_type: Optional[str]) -> Tuple[bytes, Dict[str, str]]:
    if isinstance(payload, str):
        return payload.encode("utf-8"), dict(_DECODED_TEXT_HEADERS)
    headers = {"content-type": content_type} if content_type else {}
    return payload, headers


def parse_feed(
    payload: Union[bytes, str],
    *,
    content_type: Optional[str] = None,
    mapping: Optional[FieldMapping] = None,
) -> FeedStructure:
    """
    Parse an RSS/Atom document into a FeedStructure, preserving document order.

    Bytes are decoded by feedparser from the content type and the XML prolog,
    so feeds declared as e.g. ISO-8859-1 keep their characters.

    Raises ParseError when the XML is malformed or is not a feed at all.
    """
    data, headers = _source(payload, content_type)
    try:
        # A stream keeps feedparser from treating the payload as a URL or path.
        feed = feedparser.parse(io.BytesIO(data), response_headers=headers)
    except Exception as e:  # pragma: no cover - feedparser normally reports via bozo
        raise ParseError(f"Feed parser failed ({e})") from e

    if getattr(feed, "bozo", 0):
        exc = getattr(feed, "bozo_exception", None)
        if not isinstance(exc, _BENIGN_BOZO):
            msg = "Invalid RSS/Atom feed"
            if exc:
                msg += f" ({exc})"
            raise ParseError(msg) from exc
        LOGGER.debug("Ignoring parser notice: %s", exc)

    entries = getattr(feed, "entries", None)
    if not isinstance(entries, list):
        raise ParseError("Feed has no entry list")
    if not getattr(feed, "version", "") and not entries:
        raise ParseError("Document is not an RSS/Atom feed")

    meta = getattr(feed, "feed", None) or {}
    title = _first_text(meta, ("title",))
    return FeedStructure(
        entries=tuple(parse_entry(e, mapping) for e in entries),
        title=title,
    )

from __future__ import annotations

from typing import Optional, Union

from .exceptions import EmptyPayloadError


def validate_payload(payload: Optional[Union[bytes, str]]) -> Union[bytes, str]:
    """Return the trimmed payload, or raise EmptyPayloadError if nothing is left."""
    trimmed = (payload or "").strip()
    if not trimmed:
        raise EmptyPayloadError("Empty or invalid XML")
    return trimmed

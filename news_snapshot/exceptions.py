class FeedError(Exception):
    """Base class for failures inside the fetch/parse pipeline."""


class NetworkError(FeedError):
    """Raised when the feed request fails or returns a non-success status."""


class EmptyPayloadError(FeedError):
    """Raised when the response body is empty or whitespace-only."""


class ParseError(FeedError):
    """Raised when the payload cannot be parsed as an RSS/Atom feed."""


class AlreadyPublishedError(RuntimeError):
    """Raised when a publisher is asked to leave the loading state twice."""

"""Single-writer, multi-reader holder for the published feed state."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional

from .exceptions import AlreadyPublishedError
from .models import FeedErr, FeedResult, PublishedState

LOGGER = logging.getLogger(__name__)

Subscriber = Callable[[PublishedState], None]


class FeedPublisher:
    """
    Owns the PublishedState and notifies subscribers when it leaves loading.

    The state moves exactly once: Loading -> Ready(items) or
    Loading -> Failed(message). Every subscriber sees that terminal snapshot
    exactly once, including subscribers that register after the fact.
    """

    def __init__(self) -> None:
        self._state = PublishedState()
        self._subscribers: List[Subscriber] = []
        self._done: Optional[asyncio.Event] = None

    @property
    def snapshot(self) -> PublishedState:
        return self._state

    @property
    def completed(self) -> bool:
        return not self._state.loading

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback; returns a function that unregisters it."""
        if self.completed:
            self._notify(callback, self._state)
        else:
            self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        try:
            self._subscribers.remove(callback)
        except ValueError:
            pass

    def publish(self, result: FeedResult) -> PublishedState:
        if self.completed:
            raise AlreadyPublishedError("Feed state has already been published")

        state = PublishedState.from_result(result)
        if isinstance(result, FeedErr) and result.cause is not None:
            LOGGER.debug("Publishing failure caused by %r", result.cause)
        self._state = state

        subscribers, self._subscribers = self._subscribers, []
        for callback in subscribers:
            self._notify(callback, state)
        if self._done is not None:
            self._done.set()
        return state

    async def wait(self) -> PublishedState:
        """Resolve with the terminal snapshot once it is published."""
        if self.completed:
            return self._state
        if self._done is None:
            self._done = asyncio.Event()
        await self._done.wait()
        return self._state

    def close(self) -> None:
        self._subscribers.clear()

    @staticmethod
    def _notify(callback: Subscriber, state: PublishedState) -> None:
        try:
            callback(state)
        except Exception:
            LOGGER.exception("Feed subscriber %r failed", callback)

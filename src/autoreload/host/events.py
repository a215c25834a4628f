"""Minimal synchronous event bus used to notify the host UI."""

import threading
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, DefaultDict, List, Type

from autoreload.utils.logging import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class DataChanged:
    """Posted after a data source's bytes were replaced from disk."""

    handle: Any


class EventBus:
    """
    Dispatch events to subscribers registered by event type.

    Callbacks run synchronously on the posting thread. A failing subscriber
    is logged and does not stop delivery to the others.
    """

    def __init__(self) -> None:
        self._subscribers: DefaultDict[type, List[Callable[[Any], None]]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, event_type: Type, callback: Callable[[Any], None]) -> None:
        with self._lock:
            self._subscribers[event_type].append(callback)

    def unsubscribe(self, event_type: Type, callback: Callable[[Any], None]) -> None:
        with self._lock:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    def post(self, event: Any) -> int:
        """
        Deliver an event to every subscriber of its type.

        Returns:
            Number of subscribers that handled the event without raising
        """
        with self._lock:
            callbacks = list(self._subscribers.get(type(event), ()))

        delivered = 0
        for callback in callbacks:
            try:
                callback(event)
                delivered += 1
            except Exception as e:
                logger.error(
                    "event_subscriber_failed",
                    event=type(event).__name__,
                    error=str(e),
                    exc_info=True,
                )
        return delivered

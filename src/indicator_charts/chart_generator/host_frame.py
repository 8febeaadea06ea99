from __future__ import annotations

"""Notifies the embedding page that the content height changed."""


import logging
from typing import Callable, List

logger = logging.getLogger(__name__)


class HostFrameNotifier:
    """Fan-out of payload-free "height changed" signals; the host measures for itself."""

    def __init__(self) -> None:
        self._subscribers: List[Callable[[], None]] = []
        self.notification_count = 0

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        self._subscribers.remove(callback)

    def resize(self) -> None:
        self.notification_count += 1
        logger.debug("Notifying %d host subscribers of a height change", len(self._subscribers))
        for callback in list(self._subscribers):
            callback()


__all__ = ["HostFrameNotifier"]

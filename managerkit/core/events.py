# -*- coding: utf-8 -*-
"""
events

Named manager events with synchronous or asynchronous handlers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from typing import Any, Callable, Mapping


logger = logging.getLogger(__name__)

EventHandler = Callable[[Mapping[str, Any]], Any]


class EventDispatcher:
    """Invoke handlers registered for an event name in registration order."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def register(self, event: str, handler: EventHandler) -> None:
        """Subscribe ``handler`` to ``event``."""
        if handler not in self._handlers[event]:
            self._handlers[event].append(handler)

    def unregister(self, event: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    async def invoke(self, event: str, params: Mapping[str, Any] | None = None) -> list[Any]:
        """Run every handler of ``event`` and collect their results.

        A failing handler is logged and does not stop the remaining ones.
        """
        payload = dict(params or {})
        results: list[Any] = []
        for handler in list(self._handlers.get(event, [])):
            try:
                result = handler(payload)
                if inspect.isawaitable(result):
                    result = await result
            except Exception:
                logger.exception("Handler %r failed for event %s", handler, event)
                continue
            results.append(result)
        return results


__all__ = ["EventDispatcher", "EventHandler"]


# The End

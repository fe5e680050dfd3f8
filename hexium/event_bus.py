"""A synchronous publish/subscribe bus keyed on event type."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, TypeVar

E = TypeVar("E")


class EventBus:
    """Delivers each published event to the listeners of its exact type."""

    def __init__(self) -> None:
        self._listeners: defaultdict[type, list[Callable[[Any], None]]] = defaultdict(list)

    def subscribe(
        self, event_type: type[E], listener: Callable[[E], None]
    ) -> Callable[[E], None]:
        """Register ``listener`` for events of exactly ``event_type``.

        Returns the listener unchanged.
        """
        self._listeners[event_type].append(listener)
        return listener

    def publish(self, event: object) -> None:
        """Call every listener of ``type(event)`` in subscription order."""
        for listener in list(self._listeners.get(type(event), ())):
            listener(event)
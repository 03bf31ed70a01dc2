"""Change notification types and observer registry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Any, Callable, Dict, Generic, TypeVar
import logging as log

from dataslots import with_slots

T = TypeVar('T')


class ItemAction(Enum):
    """Kind of structural change."""

    ADDED = 'Added'
    REMOVED = 'Removed'


@with_slots
@dataclass(frozen=True)
class ItemChangedEvent(Generic[T]):
    """Value, index and action of a structural change."""

    value: T
    index: int
    action: ItemAction


Observer = Callable[[ItemChangedEvent], Any]


class ChangeNotifier:
    """Registry of change observers.

    Observers are kept in a dict from subscription handle to callback and are
    called synchronously in registration order. An exception raised by an
    observer is not caught: it reaches the caller of the mutating operation
    and the remaining observers are not called.
    """

    __slots__ = '_handles', '_observers'

    _handles: count
    _observers: Dict[int, Observer]

    def __init__(self):
        self._handles = count()
        self._observers = {}

    def subscribe(self, callback: Observer) -> int:
        """Register callback and return its subscription handle."""
        if not callable(callback):
            raise TypeError('Observer must be callable.')
        handle = next(self._handles)
        self._observers[handle] = callback
        log.debug('[notifier] Subscribed %s as %d', callback, handle)
        return handle

    def unsubscribe(self, handle: int):
        """Remove the observer registered with `handle`.

        Raises KeyError if the handle is not subscribed.
        """
        try:
            del self._observers[handle]
        except KeyError:
            raise KeyError(f'No observer subscribed with handle {handle}.') \
                from None
        log.debug('[notifier] Unsubscribed %d', handle)

    def notify(self, event: ItemChangedEvent):
        """Call every observer with `event`."""
        for callback in tuple(self._observers.values()):
            callback(event)

    def __len__(self):
        return len(self._observers)

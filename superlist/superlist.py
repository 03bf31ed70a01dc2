"""Implementation of SuperList class."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import (Any, Callable, Generic, Iterable, Iterator, Optional,
                    TypeVar)
import logging as log
import operator

from superlist.combinators import CombinatorsMixin
from superlist.events import (ChangeNotifier, ItemAction, ItemChangedEvent,
                              Observer)
from superlist.node import Node

SEPARATOR = ' <-> '

T = TypeVar('T')


def default_eq(first: Any, second: Any) -> bool:
    """Compare by identity first, then by `==`."""
    return first is second or first == second


class SuperList(CombinatorsMixin, MutableSequence, Generic[T]):
    """Doubly linked list with change notifications.

    Implements the MutableSequence methods with index access by linear
    traversal, plus the functional operations of `CombinatorsMixin`.
    Negative indices and slices are not supported.

    Observers registered with `subscribe` are called synchronously with an
    `ItemChangedEvent`. With the default `notify_all=False`, only `append`
    (ADDED) and `remove_value`/`remove` (REMOVED) notify; `insert` and
    `remove_at` are silent. With `notify_all=True`, every single item
    insertion or removal notifies once. `clear` never notifies.

    Copies and pickles rebuild the chain from the items and keep `eq` and
    `notify_all`, but not the observers.

    The list is not thread safe. Mutating it while iterating, including
    from inside an observer, has undefined results.
    """

    __slots__ = '_head', '_tail', '_len', '_notifier', 'eq', 'notify_all'

    _head: Optional[Node[T]]
    _tail: Optional[Node[T]]
    _len: int
    _notifier: ChangeNotifier
    eq: Callable[[Any, Any], bool]
    notify_all: bool

    def __init__(self, values: Iterable[T] = None, *,
                 eq: Callable[[Any, Any], bool] = None,
                 notify_all: bool = False):
        self._head = self._tail = None
        self._len = 0
        self._notifier = ChangeNotifier()
        self.eq = default_eq if eq is None else eq
        self.notify_all = notify_all
        if values:
            self.extend(values)

    def subscribe(self, callback: Observer) -> int:
        """Register change observer and return its handle."""
        return self._notifier.subscribe(callback)

    def unsubscribe(self, handle: int):
        """Remove change observer with given handle."""
        self._notifier.unsubscribe(handle)

    def _notify(self, value: T, index: int, action: ItemAction):
        log.debug('[superlist] %s %r at %d', action.value, value, index)
        self._notifier.notify(ItemChangedEvent(value, index, action))

    def _check_index(self, index: int, upper: int) -> int:
        if isinstance(index, bool):
            raise TypeError('Indices must be integers, not bool.')
        index = operator.index(index)
        if not 0 <= index < upper:
            raise IndexError('Index out of range.')
        return index

    def _node(self, index: int) -> Node[T]:
        """Get the node in position `index`."""
        index = self._check_index(index, self._len)

        if index < self._len / 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._len - index - 1):
                node = node.previous

        return node

    def _link_last(self, node: Node[T]):
        if self._tail is None:
            self._head = node
        else:
            node.previous = self._tail
            self._tail.next = node
        self._tail = node
        self._len += 1

    def _link_first(self, node: Node[T]):
        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
            self._head.previous = node
        self._head = node
        self._len += 1

    def _link_before(self, node: Node[T], reference_node: Node[T]):
        previous = reference_node.previous
        node.next = reference_node
        node.previous = previous
        previous.next = node
        reference_node.previous = node
        self._len += 1

    def _unlink(self, node: Node[T]):
        previous, next_ = node.previous, node.next

        if previous is None:
            self._head = next_
        else:
            previous.next = next_

        if next_ is None:
            self._tail = previous
        else:
            next_.previous = previous

        node.detach()
        self._len -= 1

    def append(self, value: T):
        """Append value to the end of the list."""
        self._link_last(Node(value))
        self._notify(value, self._len - 1, ItemAction.ADDED)

    def appendleft(self, value: T):
        """Append value to the start of the list."""
        self.insert(0, value)

    def insert(self, index: int, value: T):
        """Insert value before index.

        Index may be equal to the length of the list, inserting at the end.
        """
        index = self._check_index(index, self._len + 1)

        node = Node(value)
        if index == 0:
            self._link_first(node)
        elif index == self._len:
            self._link_last(node)
        else:
            self._link_before(node, self._node(index))

        if self.notify_all:
            self._notify(value, index, ItemAction.ADDED)

    def _remove_index(self, index: int) -> T:
        index = self._check_index(index, self._len)
        node = self._node(index)
        value = node.value
        self._unlink(node)
        if self.notify_all:
            self._notify(value, index, ItemAction.REMOVED)
        return value

    def remove_at(self, index: int):
        """Remove item at index."""
        self._remove_index(index)

    def remove_value(self, value: T) -> bool:
        """Remove first occurrence of value.

        Return whether the value was found and removed.
        """
        index, node = self._find(value)
        if node is None:
            return False

        removed = node.value
        self._unlink(node)
        self._notify(removed, index, ItemAction.REMOVED)
        return True

    def remove(self, value: T):
        """Remove first occurrence of value.

        Raise ValueError if the value is not present.
        """
        if not self.remove_value(value):
            raise ValueError('Value not found.')

    def pop(self, index: int = None) -> T:
        """Remove and return item at index (default last).

        Raise IndexError if list is empty or index is out of range.
        """
        if index is None:
            index = self._len - 1
        return self._remove_index(index)

    def popleft(self) -> T:
        """Remove and return the first item.

        Raise IndexError if list is empty.
        """
        return self.pop(0)

    def clear(self):
        """Remove all items from the list."""
        self._head = self._tail = None
        self._len = 0
        log.debug('[superlist] Cleared')

    def extend(self, values: Iterable[T]):
        """Extend list by appending elements from the iterable."""
        if values is self:
            values = list(values)
        for value in values:
            self.append(value)

    def extendleft(self, values: Iterable[T]):
        """Extend the list start by appending elements from iterable.

        Note, the series of left appends results in reversing the order of
        elements in the `values` argument.
        """
        if values is self:
            values = list(values)
        for value in values:
            self.insert(0, value)

    def reverse(self):
        """Reverse list in place."""
        # Reversed part is held through `previous`, links to it are weak.
        previous, node = None, self._head
        self._tail = node
        while node is not None:
            next_ = node.next
            node.next = previous
            node.previous = next_
            previous, node = node, next_
        self._head = previous

    def _find(self, value: T, start: int = 0, stop: int = None):
        if stop is None or stop > self._len:
            stop = self._len

        node = self._head
        for _ in range(min(start, stop)):
            node = node.next

        for i in range(start, stop):
            if self.eq(node.value, value):
                return i, node
            node = node.next

        return -1, None

    def index_of(self, value: T) -> int:
        """Get first index of value, or -1 if not present."""
        return self._find(value)[0]

    def index(self, value: T, start: int = 0, stop: int = None) -> int:
        """Get first index of value.

        Raises ValueError if the value is not present.
        """
        if start < 0:
            start = max(self._len + start, 0)
        if stop is not None and stop < 0:
            stop = max(self._len + stop, 0)

        index, node = self._find(value, start, stop)
        if node is None:
            raise ValueError('Value not found.')
        return index

    def count(self, value: T) -> int:
        """Get number of occurrences of value."""
        return sum(1 for v in self if self.eq(v, value))

    def copy_to(self, array: MutableSequence, start: int = 0):
        """Copy all items into `array`, starting at position `start`."""
        if array is None:
            raise TypeError('Argument `array` must not be None.')
        if not 0 <= start <= len(array):
            raise IndexError('Start index out of range.')
        if len(array) - start < self._len:
            raise ValueError('Destination array is too small.')

        for i, value in enumerate(self, start):
            array[i] = value

    def __len__(self):
        return self._len

    def __contains__(self, value):
        return self.index_of(value) != -1

    def __getitem__(self, index):
        return self._node(index).value

    def __setitem__(self, index, value):
        self._node(index).value = value

    def __delitem__(self, index):
        self.remove_at(index)

    def __iter__(self):
        if self._head is not None:
            yield from self._head.iterate_forward()

    def __reversed__(self):
        if self._tail is not None:
            yield from self._tail.iterate_backward()

    def __repr__(self):
        return f'{SuperList.__name__}([{", ".join(repr(i) for i in self)}])'

    def __str__(self):
        return SEPARATOR.join(str(i) for i in self)

    def __getstate__(self):
        return list(self), self.eq, self.notify_all

    def __setstate__(self, state):
        values, eq, notify_all = state
        self.__init__(values, eq=eq, notify_all=notify_all)

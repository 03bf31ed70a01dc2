"""Implementation of Node class."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, Optional, TypeVar
from weakref import ReferenceType, ref

from dataslots import with_slots

T = TypeVar('T')


@with_slots(add_weakref=True)
@dataclass(eq=False)
class Node(Generic[T]):
    """Node of SuperList.

    The `next` link is a strong reference, so the chain of nodes is owned by
    the list through its head. The link to the previous node is kept as a
    weakref and exposed through the `previous` property.
    """

    value: T
    next: Optional[Node[T]] = field(default=None, repr=False)
    _previous: Optional[ReferenceType] = field(default=None, repr=False)

    @property
    def previous(self) -> Optional[Node[T]]:
        """Get the node before this one, or None."""
        return None if self._previous is None else self._previous()

    @previous.setter
    def previous(self, node: Optional[Node[T]]):
        self._previous = None if node is None else ref(node)

    def detach(self):
        """Clear both links of this node."""
        self.next = None
        self._previous = None

    def iterate_forward(self) -> Iterator[T]:
        """Get iterator for the values starting from this node."""
        node = self
        while node is not None:
            yield node.value
            node = node.next

    def iterate_backward(self) -> Iterator[T]:
        """Get backward iterator for the values starting from this node."""
        node = self
        while node is not None:
            yield node.value
            node = node.previous

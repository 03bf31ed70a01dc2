"""Functional operations over a SuperList.

Everything here is written against the public list interface (iteration,
indexing, `append` and the `eq` attribute), so it could be mixed into any
sequence class that provides them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

if TYPE_CHECKING:
    from superlist.superlist import SuperList

T = TypeVar('T')


def _require(callback: Optional[Callable], name: str):
    if callback is None:
        raise TypeError(f'Argument `{name}` must not be None.')


class CombinatorsMixin:
    """Apply, map, filter and for-each operations."""

    __slots__ = ()

    def _new_empty(self) -> SuperList:
        """Create an empty list with the same configuration as this one."""
        return type(self)(eq=self.eq, notify_all=self.notify_all)

    def apply_to(self, index: int, func: Callable[[T], Any]) -> Any:
        """Return `func` applied to the item at `index`.

        The list is not modified. When `func` is an action with no return
        value the result is None, and any change it makes is only visible if
        the item itself is mutable.
        """
        _require(func, 'func')
        return func(self[index])

    def apply_to_all(self, func: Callable[[T], T]) -> SuperList:
        """Get a new list with `func` applied to each item, in order."""
        _require(func, 'func')
        result = self._new_empty()
        for value in self:
            result.append(func(value))
        return result

    def for_each(self, action: Callable[[T], Any]):
        """Call `action` on each item, in order."""
        _require(action, 'action')
        for value in self:
            action(value)

    def filter(self, condition: Callable[[T], bool]) -> SuperList:
        """Get a new list with the items for which `condition` is true."""
        _require(condition, 'condition')
        result = self._new_empty()
        for value in self:
            if condition(value):
                result.append(value)
        return result

    def apply_where(self, condition: Callable[[T], bool],
                    func: Callable[[T], T]) -> SuperList:
        """Get a new list with `func` applied to the items matching."""
        _require(func, 'func')
        return self.filter(condition).apply_to_all(func)

    def for_each_where(self, condition: Callable[[T], bool],
                       action: Callable[[T], Any]):
        """Call `action` on each item for which `condition` is true."""
        _require(action, 'action')
        self.filter(condition).for_each(action)

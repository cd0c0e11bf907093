"""A list wrapper that keeps the full collection and a re-appliable filtered view."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class FilterableList(Generic[T]):
    """Sequence that exposes a filtered view over an underlying list.

    The original items are kept, so a filter can be re-applied at any time with
    different conditions. Any modification of the underlying list clears the filter.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._filtered: list[int] | None = None

    def clear(self) -> None:
        """Remove all values and the current filter."""
        self._items.clear()
        self._filtered = None

    def filter(self, predicate: Callable[[T], bool]) -> None:
        """Restrict the view to the items for which ``predicate`` is true."""
        self._filtered = [i for i, item in enumerate(self._items) if predicate(item)]

    def filter_reset(self) -> None:
        """Drop the current filter."""
        self._filtered = None

    def __len__(self) -> int:
        if self._filtered is not None:
            return len(self._filtered)
        return len(self._items)

    def is_empty(self) -> bool:
        """Return ``True`` if the filtered view holds no elements."""
        return len(self) == 0

    def insert(self, index: int, element: T) -> None:
        """Insert ``element`` into the underlying list; clears the filter."""
        self._items.insert(index, element)
        self.filter_reset()

    def append(self, value: T) -> None:
        """Append ``value`` to the underlying list; clears the filter."""
        self._items.append(value)
        self.filter_reset()

    def __iter__(self) -> Iterator[T]:
        if self._filtered is None:
            yield from self._items
        else:
            for index in self._filtered:
                yield self._items[index]

    def _real_index(self, index: int) -> int:
        return self._filtered[index] if self._filtered is not None else index

    def __getitem__(self, index: int) -> T:
        return self._items[self._real_index(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[self._real_index(index)] = value

    def full_len(self) -> int:
        """Return the number of elements in the underlying list."""
        return len(self._items)

    def full_sort_by(self, compare: Callable[[T, T], int]) -> None:
        """Stable-sort the underlying list with a three-way ``compare``; clears the filter."""
        self._items.sort(key=cmp_to_key(compare))
        self.filter_reset()

    def full_retain(self, predicate: Callable[[T], bool]) -> None:
        """Keep only the underlying items matching ``predicate``; clears the filter."""
        self._items[:] = [item for item in self._items if predicate(item)]
        self.filter_reset()

    def full_iter(self) -> Iterator[T]:
        """Iterate over the underlying list, ignoring the filter."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"FilterableList({list(self)!r})"
"""A scrollable, filterable and selectable UI list of rows."""

from __future__ import annotations

from enum import Enum, auto
from itertools import islice
from typing import Callable, Generic, Iterable, Iterator

from .filterable_list import FilterableList
from .item import Item, R


class Key(Enum):
    """Keys that a list can receive."""

    HOME = auto()
    UP = auto()
    PAGE_UP = auto()
    DOWN = auto()
    PAGE_DOWN = auto()
    END = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESC = auto()
    TAB = auto()
    BACKSPACE = auto()
    DELETE = auto()
    SPACE = auto()


class Response(Enum):
    """Outcome of processing a key."""

    HANDLED = auto()
    NOT_HANDLED = auto()


_TOP = -(2**31)
_BOTTOM = 2**31 - 1


def _compare(a: Item, b: Item, column: int) -> int:
    """Three-way comparison of two items by a column, treating fixed items as equal."""
    if a.is_fixed or b.is_fixed:
        return 0
    left = a.data.column_text(column)
    right = b.data.column_text(column)
    return (left > right) - (left < right)


class ScrollableList(Generic[R]):
    """List of items with paging, a highlighted item, selection and a name filter."""

    def __init__(self, items: Iterable[R] | None = None) -> None:
        self.items: FilterableList[Item[R]] | None = (
            FilterableList(Item(data) for data in items) if items is not None else None
        )
        self.highlighted: int | None = None
        self.page_start = 0
        self.page_height = 0
        self._filter: str | None = None

    @classmethod
    def fixed(cls, items: Iterable[R]) -> "ScrollableList[R]":
        """Create a list whose initial items are all fixed."""
        result = cls()
        result.items = FilterableList(Item.fixed(data) for data in items)
        return result

    def clear(self) -> None:
        """Remove all items."""
        if self.items is not None:
            self.items.clear()

    def __len__(self) -> int:
        return len(self.items) if self.items is not None else 0

    def is_empty(self) -> bool:
        """Return ``True`` if the (filtered) list holds no items."""
        return len(self) == 0

    def dirty(self, is_dirty: bool) -> None:
        """Set the dirty flag of every item."""
        if self.items is not None:
            for item in self.items.full_iter():
                item.is_dirty = is_dirty

    def sort(self, column_no: int, is_descending: bool) -> None:
        """Stable-sort items by the given column; fixed items compare as equal."""
        if self.items is None:
            self.highlighted = None
            return

        if is_descending:
            self.items.full_sort_by(lambda a, b: _compare(b, a, column_no))
        else:
            self.items.full_sort_by(lambda a, b: _compare(a, b, column_no))

        self._apply_filter()
        self.highlighted = self.recover_highlighted_item_index()

    def is_filtered(self) -> bool:
        """Return ``True`` if a filter is set."""
        return self._filter is not None

    def filter(self, text: str | None) -> None:
        """Filter items by name; ``None`` clears the filter."""
        self._filter = text
        if text is not None:
            self.deselect_all()
            self._apply_filter()
        elif self.items is not None:
            self.items.filter_reset()

        self.highlighted = self.recover_highlighted_item_index()
        if self.items is not None:
            for item in self.items.full_iter():
                item.is_active = False
            if self.highlighted is not None:
                self.items[self.highlighted].is_active = True

    def filter_text(self) -> str | None:
        """Return the currently applied filter."""
        return self._filter

    def process_key(self, key: Key) -> Response:
        """Move the highlight according to ``key``."""
        moves = {
            Key.HOME: _TOP,
            Key.UP: -1,
            Key.PAGE_UP: -self.page_height,
            Key.DOWN: 1,
            Key.PAGE_DOWN: self.page_height,
            Key.END: _BOTTOM,
        }
        if key not in moves:
            return Response.NOT_HANDLED
        self._move_highlighted(moves[key])
        return Response.HANDLED

    def update_page(self, new_height: int) -> None:
        """Adjust the page start for the new page height and the highlighted item."""
        self.page_height = new_height
        highlighted = self.highlighted or 0

        if self.page_start >= highlighted:
            self.page_start = highlighted
        elif self.page_start + self.page_height - 1 < highlighted:
            self.page_start = highlighted - self.page_height + 1

        if self.items is not None:
            length = len(self.items)
            if length < self.page_height:
                self.page_start = 0
            elif length < self.page_start + self.page_height:
                self.page_start = length - self.page_height

    def get_page(self) -> Iterator[Item[R]] | None:
        """Return an iterator over the items of the current page."""
        if self.items is None:
            return None
        return islice(iter(self.items), self.page_start, self.page_start + self.page_height)

    def remove_fixed(self) -> None:
        """Remove all fixed items."""
        if self.items is not None:
            self.items.full_retain(lambda item: not item.is_fixed)
            self._apply_filter()

    def deselect_all(self) -> None:
        """Clear the selection of visible items."""
        if self.items is not None:
            for item in self.items:
                item.is_selected = False

    def invert_selection(self) -> None:
        """Invert the selection of visible items."""
        if self.items is not None:
            for item in self.items:
                item.is_selected = not item.is_selected

    def select_highlighted_item(self) -> None:
        """Toggle the selection of the highlighted item."""
        if self.items is not None and self.highlighted is not None and self.highlighted < len(self.items):
            item = self.items[self.highlighted]
            item.is_selected = not item.is_selected

    def get_selected_items(self) -> dict[str, list[str]]:
        """Return the names of selected items grouped by their group."""
        result: dict[str, list[str]] = {}
        for item in self.items or ():
            if item.is_selected:
                result.setdefault(item.data.group(), []).append(item.data.name())
        return result

    def is_anything_selected(self) -> bool:
        """Return ``True`` if any visible item is selected."""
        return any(item.is_selected for item in self.items or ())

    def highlighted_name(self) -> str | None:
        """Return the name of the highlighted item."""
        if self.items is not None and self.highlighted is not None and self.highlighted < len(self.items):
            return self.items[self.highlighted].data.name()
        return None

    def recover_highlighted_item_index(self) -> int | None:
        """Return the index of the first active visible item."""
        if self.items is None:
            return None
        return next((i for i, item in enumerate(self.items) if item.is_active), None)

    def highlight_item_by_name(self, name: str) -> bool:
        """Highlight the first item with exactly this name."""
        return self._highlight_item_by(lambda item: item.data.is_equal(name))

    def highlight_item_by_name_start(self, text: str) -> bool:
        """Highlight the first item whose name starts with ``text``."""
        return self._highlight_item_by(lambda item: item.data.starts_with(text))

    def highlight_first_item(self) -> bool:
        """Highlight the first item; return ``True`` on success."""
        return self.items is not None and self._set_highlighted(0) if self.items else False

    def get_paged_names(self, width: int) -> list[tuple[str, bool]] | None:
        """Return names of the current page's items with their active flags."""
        page = self.get_page()
        if page is None:
            return None
        return [(item.data.get_name(width), item.is_active) for item in page]

    def _set_highlighted(self, index: int) -> bool:
        items = self.items
        assert items is not None
        if self.highlighted is not None and self.highlighted < len(items):
            items[self.highlighted].is_active = False
        items[index].is_active = True
        self.highlighted = index
        return True

    def _highlight_item_by(self, predicate: Callable[[Item[R]], bool]) -> bool:
        if self.items is None:
            return False
        index = next((i for i, item in enumerate(self.items) if predicate(item)), None)
        if index is None:
            return False
        return self._set_highlighted(index)

    def _move_highlighted(self, rows_to_move: int) -> None:
        items = self.items
        if items is None or items.is_empty() or rows_to_move == 0:
            return

        if self.highlighted is None and rows_to_move == 1:
            items[0].is_active = True
            self.highlighted = 0
            return

        highlighted = self.highlighted or 0
        new_highlighted = min(max(highlighted + rows_to_move, 0), len(items) - 1)
        if highlighted < len(items):
            items[highlighted].is_active = False
        items[new_highlighted].is_active = True
        self.highlighted = new_highlighted

    def _apply_filter(self) -> None:
        if self.items is not None and self._filter is not None:
            text = self._filter
            self.items.filter(lambda item: item.data.contains(text))
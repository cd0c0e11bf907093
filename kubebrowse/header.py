"""Header of a resources list: column texts and width calculations."""

from __future__ import annotations

from enum import Enum, auto
from typing import Sequence

from .column import NAME, Column

_NA_LENGTH = 3  # length of "n/a"
_AGE_AND_SPACES = 9


class ViewType(Enum):
    """How much of a list row is displayed."""

    NAME = auto()
    COMPACT = auto()
    FULL = auto()


def _pad(text: str, width: int, to_right: bool) -> str:
    return text.rjust(width) if to_right else text.ljust(width)


def _extra_columns_text(columns: Sequence[Column] | None) -> str:
    if not columns:
        return ""
    return " ".join(
        _pad(c.name, min(max(c.data_len, c.min_len), c.max_len), c.to_right) for c in columns
    )


def _extra_space(columns: Sequence[Column] | None) -> int:
    """Spare space before data starts in the first extra column, if it is right aligned."""
    if columns and columns[0].to_right and columns[0].min_len > columns[0].data_len:
        return columns[0].min_len - columns[0].data_len
    return 0


class Header:
    """List header: group column, name column, optional extra columns and age column."""

    def __init__(self, group_column: Column | None = None, extra_columns: Sequence[Column] | None = None) -> None:
        self._group = group_column if group_column is not None else Column("N/A")
        self._name = NAME.copy()
        self._age = Column.fixed("AGE", 6, True)
        self._extra_columns = list(extra_columns) if extra_columns is not None else None
        self._extra_text = ""
        self._all_extra_width = 0
        self._extra_space = 0
        self.recalculate_extra_columns()

    def column_count(self) -> int:
        """Return the number of columns in the header."""
        return 3 + (len(self._extra_columns) if self._extra_columns is not None else 0)

    def recalculate_extra_columns(self) -> None:
        """Recompute the extra columns text and widths."""
        self._extra_text = _extra_columns_text(self._extra_columns)
        self._all_extra_width = len(self._extra_text) + _AGE_AND_SPACES
        self._extra_space = _extra_space(self._extra_columns)

    def reset_data_lengths(self) -> None:
        """Reset ``data_len`` of every column that is not fixed."""
        self._group.data_len = 0
        self._name.data_len = 0
        for column in self._extra_columns or ():
            if not column.is_fixed:
                column.data_len = 0

    def _column(self, column: int) -> Column | None:
        extras = self._extra_columns or []
        if column == 0:
            return self._group
        if column == 1:
            return self._name
        if 2 <= column <= len(extras) + 1:
            return extras[column - 2]
        if column == len(extras) + 2:
            return self._age
        return None

    def get_data_length(self, column: int) -> int:
        """Return the current data length of the given column."""
        found = self._column(column)
        return found.data_len if found is not None else _NA_LENGTH

    def set_data_length(self, column: int, length: int) -> None:
        """Set the data length of the given column; fixed and age columns are left alone."""
        found = self._column(column)
        if found is None or found is self._age or found.is_fixed and column > 1:
            return
        found.data_len = length

    def extra_columns(self) -> list[Column] | None:
        """Return the extra columns, if any."""
        return self._extra_columns

    def get_text(self, view: ViewType, group_width: int, name_width: int, force_width: int) -> str:
        """Return the header text; truncated to ``force_width`` when that is above zero."""
        if view is ViewType.NAME:
            header = f" {self._name.name} "
        elif view is ViewType.COMPACT:
            header = (
                f" {self._name.name.ljust(name_width - 1)} {self._extra_text} "
                f"{self._age.name.rjust(6)} "
            )
        else:
            header = (
                f" {self._group.name.ljust(group_width - 1)} {self._name.name.ljust(name_width)} "
                f"{self._extra_text} {self._age.name.rjust(6)} "
            )

        if force_width > 0 and len(header) > force_width:
            return header[:force_width]
        return header

    def get_widths(self, terminal_width: int) -> tuple[int, int, int]:
        """Return (group width, name width, name extra space) for the compact view."""
        if terminal_width <= self._name.min_len + self._all_extra_width:
            return 0, self._name.min_len, self._extra_space
        return 0, terminal_width - self._all_extra_width, self._extra_space

    def get_full_widths(self, terminal_width: int) -> tuple[int, int, int]:
        """Return (group width, name width, name extra space) for the full view."""
        group, name, extra = self._group, self._name, self._all_extra_width
        min_width_for_all = group.min_len + 1 + name.min_len + extra

        if terminal_width <= min_width_for_all:
            return group.min_len, name.min_len, self._extra_space

        max_group_width = max(group.data_len, group.min_len)
        min_width_for_full_size = max_group_width + 1 + name.data_len

        if terminal_width >= min_width_for_full_size + extra:
            avail_width = terminal_width - min_width_for_full_size - extra
            return max_group_width, name.data_len + avail_width, self._extra_space

        avail_width = terminal_width - min_width_for_all
        group_width = min(group.min_len + avail_width // 2, max_group_width)
        name_width = terminal_width - group_width - extra
        return group_width, name_width, self._extra_space
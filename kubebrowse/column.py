"""Columns of a list header."""

from __future__ import annotations


class Column:
    """A list header column with its length bounds and current data length."""

    __slots__ = ("name", "is_fixed", "to_right", "min_len", "max_len", "data_len")

    def __init__(self, name: str) -> None:
        self.name = name
        self.is_fixed = False
        self.to_right = False
        self.min_len = len(name)
        self.max_len = len(name)
        self.data_len = len(name)

    @classmethod
    def bound(cls, name: str, min_len: int, max_len: int, to_right: bool) -> "Column":
        """Create a column whose width is bounded by the given lengths."""
        column = cls(name)
        column.to_right = to_right
        column.min_len = max(len(name), min_len)
        column.max_len = max(len(name), max_len)
        return column

    @classmethod
    def fixed(cls, name: str, length: int, to_right: bool) -> "Column":
        """Create a fixed size column."""
        column = cls(name)
        column.is_fixed = True
        column.to_right = to_right
        column.min_len = max(len(name), length)
        column.max_len = max(len(name), length)
        column.data_len = length
        return column

    def copy(self) -> "Column":
        """Return an independent copy of this column."""
        column = Column(self.name)
        for attr in self.__slots__:
            setattr(column, attr, getattr(self, attr))
        return column

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Column):
            return NotImplemented
        return all(getattr(self, a) == getattr(other, a) for a in self.__slots__)

    def __repr__(self) -> str:
        fields = ", ".join(f"{a}={getattr(self, a)!r}" for a in self.__slots__)
        return f"Column({fields})"


def _preset(name: str, length: int) -> Column:
    column = Column(name)
    column.min_len = length
    column.max_len = length
    column.data_len = length
    return column


NAMESPACE = _preset("NAMESPACE", 11)
"""Default ``NAMESPACE`` column."""

NAME = _preset("NAME", 6)
"""Default ``NAME`` column."""
"""List items and the row contract their data follows."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar


class Row(ABC):
    """Contract for data shown as a row with columns."""

    @abstractmethod
    def uid(self) -> str | None:
        """Return the unique id of the row, if any."""

    @abstractmethod
    def group(self) -> str:
        """Return the group of the row."""

    @abstractmethod
    def name(self) -> str:
        """Return the name of the row."""

    @abstractmethod
    def get_name(self, width: int) -> str:
        """Return the name of the row fitted to ``width``."""

    @abstractmethod
    def column_text(self, column: int) -> str:
        """Return the text for the given column number."""

    def contains(self, pattern: str) -> bool:
        """Return ``True`` if ``pattern`` is found in the row's name."""
        return pattern in self.name()

    def starts_with(self, pattern: str) -> bool:
        """Return ``True`` if the row's name starts with ``pattern``."""
        return self.name().startswith(pattern)

    def is_equal(self, pattern: str) -> bool:
        """Return ``True`` if the row's name equals ``pattern``."""
        return self.name() == pattern


R = TypeVar("R", bound=Row)


@dataclass
class Item(Generic[R]):
    """A list item wrapping row data with its display state."""

    data: R
    is_active: bool = False
    is_selected: bool = False
    is_dirty: bool = False
    is_fixed: bool = False

    @classmethod
    def dirty(cls, data: R) -> "Item[R]":
        """Create an item already marked as dirty."""
        return cls(data, is_dirty=True)

    @classmethod
    def fixed(cls, data: R) -> "Item[R]":
        """Create an item that is fixed in the list."""
        return cls(data, is_fixed=True)
"""Selector part categories and their ordering ranks."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """Kind of simple-selector part within a compound selector.

    The value is the category rank: parts must be added in non-decreasing
    rank order (element < id < class < attribute < pseudo-class <
    pseudo-element).
    """

    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTR = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def rank(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return self.name.lower().replace("_", "-")

    @property
    def is_singleton(self) -> bool:
        """True for categories that may occur at most once per selector."""
        return self in _SINGLETONS

    def render(self, value: str) -> str:
        """Wrap *value* in this category's prefix and suffix."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_SINGLETONS = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTR: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}

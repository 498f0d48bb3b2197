"""Error hierarchy for the selector builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector.category import Category


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""


class DuplicateCategoryError(SelectorError):
    """A singleton part (element, id, pseudo-element) was added twice."""

    def __init__(self, category: Category) -> None:
        self.category = category
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            f"time inside the selector (got a second {category.label})"
        )


class OutOfOrderError(SelectorError):
    """A part was added after a part of a higher-ranked category."""

    def __init__(self, category: Category, last_category: Category) -> None:
        self.category = category
        self.last_category = last_category
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element "
            f"(got {category.label} after {last_category.label})"
        )

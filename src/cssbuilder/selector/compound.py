"""Compound selector: element#id.class[attr]:pseudo-class::pseudo-element."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cssbuilder.errors import DuplicateCategoryError, OutOfOrderError
from cssbuilder.selector.category import Category

logger = logging.getLogger(__name__)

# Attribute holding each category's parts; singletons hold ``str | None``.
_FIELDS: dict[Category, str] = {
    Category.ELEMENT: "element_part",
    Category.ID: "id_part",
    Category.CLASS: "class_parts",
    Category.ATTR: "attr_parts",
    Category.PSEUDO_CLASS: "pseudo_class_parts",
    Category.PSEUDO_ELEMENT: "pseudo_element_part",
}


@dataclass(eq=False)
class Selector:
    """A single compound selector built up by fluent calls.

    Each call adds one part and returns the same instance::

        Selector().element("a").attr('href$=".png"').pseudo_class("focus")

    Element, id and pseudo-element may occur once; class, attribute and
    pseudo-class parts may repeat.  Parts must be added in category order,
    see :class:`Category`.  A rejected call raises and leaves the selector
    unchanged.  Selectors compare by identity.
    """

    element_part: str | None = None
    id_part: str | None = None
    class_parts: list[str] = field(default_factory=list)
    attr_parts: list[str] = field(default_factory=list)
    pseudo_class_parts: list[str] = field(default_factory=list)
    pseudo_element_part: str | None = None
    last_category: Category = Category.NONE

    # --- fragment operations --------------------------------------------------

    def element(self, value: str) -> Selector:
        return self.add(Category.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.add(Category.ID, value)

    def class_(self, value: str) -> Selector:
        return self.add(Category.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.add(Category.ATTR, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.add(Category.PSEUDO_ELEMENT, value)

    def add(self, category: Category, value: str) -> Selector:
        """Add a part by category; used where the category is data."""
        try:
            name = _FIELDS[category]
        except KeyError:
            raise ValueError(f"Cannot add a part of category {category.name}") from None
        if category.is_singleton and getattr(self, name) is not None:
            logger.debug("Rejected duplicate %s part", category.label)
            raise DuplicateCategoryError(category)
        self._advance(category)
        if category.is_singleton:
            setattr(self, name, value)
        else:
            getattr(self, name).append(value)
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector; parts appear in category order, unseparated."""
        parts: list[str] = []
        for category, name in _FIELDS.items():
            current = getattr(self, name)
            if category.is_singleton:
                if current is not None:
                    parts.append(category.render(current))
            else:
                parts.extend(category.render(v) for v in current)
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()

    # --- validation -----------------------------------------------------------

    def _advance(self, category: Category) -> None:
        # Equal rank is allowed so repeatable parts can follow each other.
        if category.rank < self.last_category.rank:
            logger.debug(
                "Rejected %s part after %s part",
                category.label,
                self.last_category.label,
            )
            raise OutOfOrderError(category, self.last_category)
        self.last_category = category

"""Stateless builder facade: entry points that start a new selector.

    >>> from cssbuilder import builder
    >>> builder.id("main").class_("container").class_("editable").stringify()
    '#main.container.editable'
    >>> builder.combine(builder.element("div"), ">", builder.element("span")).stringify()
    'div > span'
"""

from __future__ import annotations

from types import SimpleNamespace

from cssbuilder.selector.combination import Combination, Combinator, SelectorLike
from cssbuilder.selector.compound import Selector

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "builder",
]


def element(value: str) -> Selector:
    return Selector().element(value)


def id(value: str) -> Selector:  # noqa: A001
    return Selector().id(value)


def class_(value: str) -> Selector:
    return Selector().class_(value)


def attr(value: str) -> Selector:
    return Selector().attr(value)


def pseudo_class(value: str) -> Selector:
    return Selector().pseudo_class(value)


def pseudo_element(value: str) -> Selector:
    return Selector().pseudo_element(value)


def combine(
    left: SelectorLike, combinator: str | Combinator, right: SelectorLike
) -> Combination:
    """Join two selectors or combinations into one flat Combination."""
    return Combination.of(left, combinator, right)


# Single object exposing every entry point, for ``builder.element(...)`` style.
builder = SimpleNamespace(
    element=element,
    id=id,
    class_=class_,
    attr=attr,
    pseudo_class=pseudo_class,
    pseudo_element=pseudo_element,
    combine=combine,
)

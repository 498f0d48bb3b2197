"""cssbuilder: fluent construction of CSS selectors and combinator chains."""

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import (
    DuplicateCategoryError,
    OutOfOrderError,
    SelectorError,
)
from cssbuilder.facade import (
    attr,
    builder,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from cssbuilder.selector import Category, Combination, Combinator, Selector
from cssbuilder.serialization import from_json, to_json
from cssbuilder.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    # facade
    "builder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    # model
    "Category",
    "Selector",
    "Combinator",
    "Combination",
    # errors
    "SelectorError",
    "DuplicateCategoryError",
    "OutOfOrderError",
    # helpers
    "Rectangle",
    "to_json",
    "from_json",
    "BuilderConfig",
]

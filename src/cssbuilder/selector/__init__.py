from cssbuilder.selector.category import Category
from cssbuilder.selector.combination import Combination, Combinator, SelectorLike
from cssbuilder.selector.compound import Selector

__all__ = ["Category", "Combination", "Combinator", "Selector", "SelectorLike"]

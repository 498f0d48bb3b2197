"""Combinator chains: compound selectors joined by ' ', '>', '+' or '~'."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from cssbuilder.selector.compound import Selector


class Combinator(Enum):
    """Relationship between two adjacent compound selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def symbol(cls, combinator: str | Combinator) -> str:
        """Return the text for *combinator*; unknown strings pass through."""
        if isinstance(combinator, Combinator):
            return combinator.value
        return combinator


@dataclass(frozen=True)
class Combination:
    """A flat chain of compound selectors with a combinator between each pair.

    ``combinators[i]`` sits between ``chain[i]`` and ``chain[i + 1]``.
    Combining a Combination splices its whole chain in, so the result is
    never nested.  Combinator symbols are opaque text.
    """

    chain: tuple[Selector, ...]
    combinators: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.chain:
            raise ValueError("Combination chain must not be empty")
        if len(self.combinators) != len(self.chain) - 1:
            raise ValueError("Combination needs exactly one combinator per adjacent pair")

    @classmethod
    def of(
        cls,
        left: SelectorLike,
        combinator: str | Combinator,
        right: SelectorLike,
    ) -> Combination:
        """Join *left* and *right* with *combinator*, flattening either side."""
        left_chain, left_combinators = _flatten(left)
        right_chain, right_combinators = _flatten(right)
        return cls(
            chain=left_chain + right_chain,
            combinators=left_combinators + (Combinator.symbol(combinator),) + right_combinators,
        )

    def stringify(self) -> str:
        """Render the chain, surrounding every combinator with single spaces.

        The descendant combinator is itself a space, so it renders as three.
        """
        pieces = [self.chain[0].stringify()]
        for combinator, selector in zip(self.combinators, self.chain[1:]):
            pieces.append(f" {combinator} {selector.stringify()}")
        return "".join(pieces)

    def __str__(self) -> str:
        return self.stringify()


SelectorLike = Union[Selector, Combination]


def _flatten(node: SelectorLike) -> tuple[tuple[Selector, ...], tuple[str, ...]]:
    """Return (chain, combinators) contributed by *node*."""
    if isinstance(node, Combination):
        return node.chain, node.combinators
    return (node,), ()

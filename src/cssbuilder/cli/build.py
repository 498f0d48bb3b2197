"""CLI command: cssbuilder build -- assemble a selector from tokens."""

from __future__ import annotations

import logging
import sys

import click

from cssbuilder.errors import SelectorError
from cssbuilder.facade import combine
from cssbuilder.selector import Category, Combination, Combinator, Selector

logger = logging.getLogger(__name__)

_KINDS: dict[str, Category] = {
    "element": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTR,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
}

_COMBINATOR_TOKENS: dict[str, Combinator] = {
    ">": Combinator.CHILD,
    "+": Combinator.ADJACENT_SIBLING,
    "~": Combinator.GENERAL_SIBLING,
    " ": Combinator.DESCENDANT,
    "descendant": Combinator.DESCENDANT,
}


def build_from_tokens(tokens: list[str]) -> Selector | Combination:
    """Apply fragment tokens in order, combining left to right at combinators.

    Raises SelectorError for rejected fragments and ValueError for tokens
    that are neither ``KIND=VALUE`` nor a combinator.
    """
    result: Selector | Combination | None = None
    pending: Combinator | None = None
    current: Selector | None = None

    def flush() -> None:
        nonlocal result, pending, current
        if current is None:
            raise ValueError("Expected a selector before and after each combinator")
        if result is None:
            result = current
        else:
            assert pending is not None
            result = combine(result, pending, current)
        current = None
        pending = None

    for token in tokens:
        if token in _COMBINATOR_TOKENS:
            flush()
            pending = _COMBINATOR_TOKENS[token]
            continue
        kind, sep, value = token.partition("=")
        if not sep or kind not in _KINDS:
            raise ValueError(f"Invalid fragment: {token!r} (expected KIND=VALUE)")
        if current is None:
            current = Selector()
        current.add(_KINDS[kind], value)
        logger.debug("Added %s part %r", kind, value)

    flush()
    assert result is not None
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE fragments and combinators.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Combinators are '>', '+', '~' or 'descendant'.  Fragments are applied
    in the order given, so out-of-order or duplicate parts are reported.
    """
    try:
        selector = build_from_tokens(list(tokens))
    except (SelectorError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())

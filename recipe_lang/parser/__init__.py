"""
Recipe markup is split into a list of tokens (see
:py:mod:`recipe_lang.parser.tokens`) using :py:func:`recipe_lang.parser.parse`:

.. autofunction:: recipe_lang.parser.parse

.. autofunction:: recipe_lang.parser.render
"""

import logging

from typing import Iterable, List, cast

from peggie import Parser, ParseError

from recipe_lang.parser.grammar import grammar, prettify_parse_error

from recipe_lang.parser.errors import (
    RecipeSyntaxError,
    NoTokenError,
    UnclosedBraceError,
    UnclosedParenError,
)

from recipe_lang.parser.tokens import Token, TokenTransformer

__all__ = [
    "parse",
    "render",
    "RecipeSyntaxError",
    "NoTokenError",
    "UnclosedBraceError",
    "UnclosedParenError",
]

logger = logging.getLogger(__name__)


def parse(source: str) -> List[Token]:
    """
    Split a recipe into a list of :py:class:`~recipe_lang.parser.tokens.Token`
    objects, in source order.

    Raises
    ======
    recipe_lang.parser.errors.RecipeSyntaxError
        Or one of its subclasses :py:exc:`UnclosedBraceError`,
        :py:exc:`UnclosedParenError` and :py:exc:`NoTokenError`.
    """
    parser = Parser(grammar)
    try:
        parse_tree = parser.parse(source)
    except ParseError as e:
        raise NoTokenError.from_parse_error(source, prettify_parse_error(e)) from e

    tokens = cast(List[Token], TokenTransformer(source).transform(parse_tree))
    logger.debug("Split %d chars of recipe into %d tokens", len(source), len(tokens))
    return tokens


def render(tokens: Iterable[Token]) -> str:
    """
    Concatenate the rendered form of the tokens: the recipe prose with
    markup replaced by its contents and metadata and comments removed.
    """
    return "".join(str(token) for token in tokens)

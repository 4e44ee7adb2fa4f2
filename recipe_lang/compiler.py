"""
Recipe markup is compiled into the :py:class:`~recipe_lang.recipe.Recipe`
summary by the following function:

.. autofunction:: recipe_lang.compiler.compile

Syntax errors are reported as
:py:exc:`~recipe_lang.parser.errors.RecipeSyntaxError` (see
:py:mod:`recipe_lang.parser.errors`).
"""

from recipe_lang.parser import parse

from recipe_lang.recipe import Recipe

__all__ = ["compile"]


def compile(source: str) -> Recipe:
    """
    Parse a recipe and collect its metadata, ingredients, materials, timers,
    instructions and backstory.

    May throw :py:exc:`~recipe_lang.parser.errors.RecipeSyntaxError` during
    parsing.
    """
    return Recipe.from_tokens(parse(source))

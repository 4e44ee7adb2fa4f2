"""
A collection of (fairly basic) linting functions for sanity checking recipe
markup.

The following function will lint the tokens of a recipe (as produced by
:py:func:`recipe_lang.parser.parse`).

.. autofunction:: check

Linting errors are described by :py:class:`Lint` objects:

.. autoclass:: Lint
    :members:
    :undoc-members:

Different categories of linting errors are identified by members of the
following enumeration. Further details, however, are only given as
human-readable strings.

.. autoclass:: LintKind
    :members:
    :undoc-members:

"""

from typing import Iterable, Sequence, Set

from dataclasses import dataclass

from enum import Enum, auto

from recipe_lang.parser.tokens import (
    Token,
    Metadata,
    Ingredient,
    Timer,
    Material,
    Word,
    Space,
    Comment,
)


class LintKind(Enum):
    """Kinds of lint."""

    metadata_after_content = auto()
    duplicate_metadata_key = auto()
    empty_name = auto()
    unattached_amount = auto()


@dataclass(frozen=True)
class Lint:
    """
    A description a piece of lint found in a recipe.
    """

    kind: LintKind
    description: str

    offset: int
    """Source offset (in chars) of the offending token."""


def check_metadata_placement(tokens: Sequence[Token]) -> Iterable[Lint]:
    """
    Check that all metadata appears in a block at the start of the recipe.

    For example, in the following recipe::

        >> tags: vegan
        Boil the {quinoa}.
        >> servings: 2

    The 'servings' metadata is accepted but is probably better placed at the
    top.
    """
    seen_content = False
    for token in tokens:
        if isinstance(token, Metadata):
            if seen_content:
                yield Lint(
                    kind=LintKind.metadata_after_content,
                    description=(
                        f"Metadata '{token.key}' appears after the start of "
                        f"the recipe text."
                    ),
                    offset=token.offset,
                )
        elif not isinstance(token, (Space, Comment)):
            seen_content = True


def check_duplicate_metadata(tokens: Sequence[Token]) -> Iterable[Lint]:
    """
    Check for metadata keys which are given more than once (only the last
    value is kept by :py:class:`~recipe_lang.recipe.Recipe`).
    """
    keys: Set[str] = set()
    for token in tokens:
        if isinstance(token, Metadata):
            if token.key in keys:
                yield Lint(
                    kind=LintKind.duplicate_metadata_key,
                    description=f"Metadata '{token.key}' was given more than once.",
                    offset=token.offset,
                )
            keys.add(token.key)


def check_empty_names(tokens: Sequence[Token]) -> Iterable[Lint]:
    """
    Check for ingredients, materials or timers containing only whitespace,
    e.g. ``{ }``.
    """
    for token in tokens:
        if isinstance(token, Ingredient) and not token.name:
            what = "ingredient"
        elif isinstance(token, Material) and not token.name:
            what = "material"
        elif isinstance(token, Timer) and not token.duration:
            what = "timer"
        else:
            continue
        yield Lint(
            kind=LintKind.empty_name,
            description=f"An empty {what} was given.",
            offset=token.offset,
        )


def check_unattached_amounts(tokens: Sequence[Token]) -> Iterable[Lint]:
    """
    Check for amounts separated from their ingredient by whitespace.

    For example, in ``{quinoa} (200gr)`` the amount is not attached to the
    quinoa and will be rendered as part of the text.
    """
    for ingredient, space, word in zip(tokens, tokens[1:], tokens[2:]):
        if (
            isinstance(ingredient, Ingredient)
            and ingredient.amount is None
            and isinstance(space, Space)
            and isinstance(word, Word)
            and word.text.startswith("(")
        ):
            yield Lint(
                kind=LintKind.unattached_amount,
                description=(
                    f"The amount {word.text} follows '{ingredient.name}' "
                    f"after some whitespace and so is not attached to it."
                ),
                offset=word.offset,
            )


def check(tokens: Iterable[Token]) -> Iterable[Lint]:
    """
    Run all linting checks against the tokens of a recipe.
    """
    token_list = list(tokens)
    yield from check_metadata_placement(token_list)
    yield from check_duplicate_metadata(token_list)
    yield from check_empty_names(token_list)
    yield from check_unattached_amounts(token_list)

"""
The :py:mod:`recipe_lang.recipe` module defines a structured summary of a
recipe, as extracted from its tokens.

.. autoclass:: Recipe
    :members:
"""

from dataclasses import dataclass, field

from typing import Dict, Iterable, List, Optional

from recipe_lang.parser import render
from recipe_lang.parser.tokens import (
    Token,
    Metadata,
    Ingredient,
    Timer,
    Material,
    Backstory,
)


@dataclass
class Recipe:
    """
    The structured contents of a recipe.
    """

    metadata: Dict[str, str] = field(default_factory=dict)
    """
    The metadata key/value pairs in the order they first appear. Where a key is
    given more than once, the last value is used.
    """

    ingredients: List[Ingredient] = field(default_factory=list)
    """Every ingredient mentioned, in order of appearance (repeats included)."""

    materials: List[str] = field(default_factory=list)
    timers: List[str] = field(default_factory=list)

    instructions: str = ""
    """
    The rendered recipe prose (excluding the backstory) with leading and
    trailing whitespace removed.
    """

    backstory: Optional[str] = None

    @classmethod
    def from_tokens(cls, tokens: Iterable[Token]) -> "Recipe":
        recipe = cls()
        prose: List[Token] = []

        for token in tokens:
            if isinstance(token, Metadata):
                recipe.metadata[token.key] = token.value
            elif isinstance(token, Backstory):
                recipe.backstory = token.text
                continue
            elif isinstance(token, Ingredient):
                recipe.ingredients.append(token)
            elif isinstance(token, Material):
                recipe.materials.append(token.name)
            elif isinstance(token, Timer):
                recipe.timers.append(token.duration)
            prose.append(token)

        recipe.instructions = render(prose).strip()
        return recipe

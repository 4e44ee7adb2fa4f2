"""
Tokens produced by the recipe markup tokenizer.

Every token records the span of source it consumed (:py:attr:`Token.offset`
to :py:attr:`Token.end`) so that concatenating the spans of all tokens in
order reproduces the original source exactly.

When cast to :py:class:`str`, a token gives the text it contributes to the
recipe's prose (with markup stripped). :py:class:`Metadata` and
:py:class:`Comment` contribute nothing.
"""

from dataclasses import dataclass, field

from typing import Any, List, Optional, Tuple

import peggie

from recipe_lang.parser.errors import (
    RecipeSyntaxError,
    UnclosedBraceError,
    UnclosedParenError,
)

__all__ = [
    "Token",
    "Metadata",
    "Ingredient",
    "Timer",
    "Material",
    "Word",
    "Space",
    "Comment",
    "Backstory",
    "TokenTransformer",
]


@dataclass
class Token:
    """
    Base class for all tokens.
    """

    offset: int = field(compare=False)
    """Source offset (in chars) of the first character consumed by the token."""

    end: int = field(compare=False)
    """Source offset (in chars) just after the last character consumed."""

    def __str__(self) -> str:
        return ""


@dataclass
class Metadata(Token):
    """A ``>> key: value`` line."""

    key: str
    value: str


@dataclass
class Ingredient(Token):
    """An ingredient, e.g. ``{quinoa}(200gr)``."""

    name: str

    amount: Optional[str] = None
    """
    The (free-form) amount given in brackets immediately after the name, or
    None if no amount was given.
    """

    def __str__(self) -> str:
        return self.name


@dataclass
class Timer(Token):
    """A timer, e.g. ``t{5 minutes}``."""

    duration: str

    def __str__(self) -> str:
        return self.duration


@dataclass
class Material(Token):
    """A piece of equipment, e.g. ``m{pot}``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Word(Token):
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass
class Space(Token):
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass
class Comment(Token):
    """A ``/* comment */``. Not rendered."""

    text: str


@dataclass
class Backstory(Token):
    """
    Everything following a ``---`` line. Always the last token when present.
    """

    text: str

    def __str__(self) -> str:
        return self.text


def _end(regex: peggie.Regex) -> int:
    return regex.start + len(regex.string)


class TokenTransformer(peggie.ParseTreeTransformer):
    """
    Transformer which transforms a raw :py:mod:`peggie` parse tree into a list
    of :py:class:`Token` objects.

    Raises a :py:exc:`RecipeSyntaxError` (or subclass) for the first
    malformed delimited payload in the source.
    """

    def __init__(self, source: str) -> None:
        super().__init__()
        self.source = source

    def _transform_regex(self, regex: peggie.Regex) -> peggie.Regex:
        return regex

    def missing_name(self, _pt: peggie.ParseTree, children: Any) -> None:
        raise RecipeSyntaxError.from_offset(self.source, children.start, "<name>")

    def missing_amount(self, _pt: peggie.ParseTree, children: Any) -> None:
        raise RecipeSyntaxError.from_offset(self.source, children.start, "<amount>")

    def missing_closing_brace(self, _pt: peggie.ParseTree, children: Any) -> None:
        raise UnclosedBraceError.from_offset(self.source, children.start, "}")

    def missing_closing_paren(self, _pt: peggie.ParseTree, children: Any) -> None:
        raise UnclosedParenError.from_offset(self.source, children.start, ")")

    def curly(self, _pt: peggie.ParseTree, children: Any) -> Tuple[int, int, str]:
        open_brace, payload, close_brace = children
        return open_brace.start, _end(close_brace), payload.string.strip()

    def amount(self, _pt: peggie.ParseTree, children: Any) -> Tuple[int, int, str]:
        open_paren, payload, close_paren = children
        return open_paren.start, _end(close_paren), payload.string

    def metadata(self, _pt: peggie.ParseTree, children: Any) -> Metadata:
        marker, _sp1, key, _colon, _sp2, value = children
        return Metadata(
            marker.start, _end(value), key.string.strip(), value.string.strip()
        )

    def material(self, _pt: peggie.ParseTree, children: Any) -> Material:
        prefix, (_start, end, name) = children
        return Material(prefix.start, end, name)

    def timer(self, _pt: peggie.ParseTree, children: Any) -> Timer:
        prefix, (_start, end, duration) = children
        return Timer(prefix.start, end, duration)

    def ingredient(self, _pt: peggie.ParseTree, children: Any) -> Ingredient:
        (start, end, name), maybe_amount = children

        amount = None
        if maybe_amount is not None:
            _start, end, amount = maybe_amount

        return Ingredient(start, end, name, amount)

    def backstory(self, _pt: peggie.ParseTree, children: Any) -> Backstory:
        eol1, _sp1, _dashes, _eol2, _sp2, text = children
        return Backstory(eol1.start, _end(text), text.string)

    def comment(self, _pt: peggie.ParseTree, children: Any) -> Comment:
        open_marker, text, _close_marker, trailing_sp = children
        return Comment(open_marker.start, _end(trailing_sp), text.string.strip())

    def word(self, _pt: peggie.ParseTree, children: Any) -> Word:
        return Word(children.start, _end(children), children.string)

    def space(self, _pt: peggie.ParseTree, children: Any) -> Space:
        return Space(children.start, _end(children), children.string)

    def token(self, _pt: peggie.Alt, children: Any) -> Token:
        return children

    def document(self, _pt: peggie.ParseTree, children: Any) -> List[Token]:
        tokens, _eof = children
        return list(tokens)

"""
Parse failures. In all cases, when cast to :py:class:`str`, the string
representation takes the form similar to:

.. code:: text

    At line 1 column 27:
        this is an {invalid recipe
                                  ^
    missing closing }

.. autoexception:: RecipeSyntaxError
    :members:

.. autoexception:: UnclosedBraceError

.. autoexception:: UnclosedParenError

.. autoexception:: NoTokenError
"""

from dataclasses import dataclass, field

from peggie import ParseError
from peggie.error_message_generation import (
    offset_to_line_and_column,
    extract_line,
    format_error_message,
)

__all__ = [
    "RecipeSyntaxError",
    "NoTokenError",
    "UnclosedBraceError",
    "UnclosedParenError",
]


@dataclass
class RecipeSyntaxError(ValueError):
    """
    Base class for parse failures. Thrown as-is when a delimited payload is
    empty or invalid.
    """

    line: int
    column: int
    snippet: str
    """The source code location and snippet of the cause of the problem."""

    offset: int
    """Offset (in chars) of the failure in the source."""

    remaining: str = field(repr=False)
    """The unconsumed input from the failure point onward."""

    expected: str
    """A human-readable description of what was expected."""

    @property
    def explanation(self) -> str:
        return f"Expected {self.expected}"

    def __str__(self) -> str:
        return format_error_message(
            self.line, self.column, self.snippet, self.explanation
        )

    @classmethod
    def from_offset(
        cls, source: str, offset: int, expected: str
    ) -> "RecipeSyntaxError":
        line, column = offset_to_line_and_column(source, offset)
        snippet = extract_line(source, line)
        return cls(line, column, snippet, offset, source[offset:], expected)


@dataclass
class UnclosedBraceError(RecipeSyntaxError):
    """Thrown when a ``{`` and its payload are not followed by ``}``."""

    @property
    def explanation(self) -> str:
        return "missing closing }"


@dataclass
class UnclosedParenError(RecipeSyntaxError):
    """Thrown when a ``(`` and its payload are not followed by ``)``."""

    @property
    def explanation(self) -> str:
        return "missing closing )"


@dataclass
class NoTokenError(RecipeSyntaxError):
    """
    Thrown when no token matches at all. As 'word' and 'space' between them
    match every character, this only happens for an empty source.
    """

    @property
    def explanation(self) -> str:
        return self.expected

    @classmethod
    def from_parse_error(cls, source: str, parse_error: ParseError) -> "NoTokenError":
        """
        Convert a :py:exc:`peggie.ParseError` into a :py:exc:`NoTokenError`.
        """
        return cls(
            parse_error.line,
            parse_error.column,
            extract_line(source, parse_error.line),
            0,
            source,
            parse_error.explain(),
        )

"""
The :py:mod:`peggie` grammar for the recipe markup (read from
``grammar.peg``).

.. autodata:: grammar

.. autodata:: grammar_source

"""

import os

from peggie import compile_grammar, ParseError, RuleExpr

__all__ = [
    "grammar",
    "grammar_source",
    "prettify_parse_error",
]

grammar_source_path = os.path.join(os.path.dirname(__file__), "grammar.peg")

with open(grammar_source_path) as f:
    grammar_source = f.read()
    """
    The recipe markup :py:mod:`peggie` grammar source in a string.
    """

grammar = compile_grammar(grammar_source)
"""
The compiled :py:class:`peggie.Grammar` for the recipe markup.
"""


def prettify_parse_error(parse_error: ParseError) -> ParseError:
    # Only an empty source fails to parse
    parse_error.expr_explanations = {
        RuleExpr("document"): "<recipe text>",
        RuleExpr("token"): "<recipe text>",
        RuleExpr("eof"): "<end of file>",
    }
    parse_error.last_resort_exprs = {
        RuleExpr("eof"),
    }
    return parse_error

"""Restricted arithmetic/string expression evaluator for ``[[...]]`` placeholders.

Grammar:
    Sum     = Product ( ('+' | '-') Product )*
    Product = Unary ( ('*' | '/' | '%') Unary )*
    Unary   = ('-' | '+') Unary | Atom
    Atom    = NUMBER | STRING | NAME | '(' Sum ')'
"""

from chatstyle.expressions.nodes import Binary, Expr, Name, Number, String, Unary
from chatstyle.expressions.interpreter import evaluate, evaluate_expression, format_value
from chatstyle.expressions.parser import parse_expression

__all__ = [
    "Binary",
    "Expr",
    "Name",
    "Number",
    "String",
    "Unary",
    "evaluate",
    "evaluate_expression",
    "format_value",
    "parse_expression",
]

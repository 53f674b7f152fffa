"""Lark grammar and transformer that turn expression source into a tagged AST."""

from __future__ import annotations

from functools import lru_cache

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from chatstyle.errors import ExpressionError
from chatstyle.expressions.nodes import Binary, Expr, Name, Number, String, Unary

GRAMMAR = r"""
?start: sum

?sum: product
    | sum "+" product       -> add
    | sum "-" product       -> sub

?product: unary
    | product "*" unary     -> mul
    | product "/" unary     -> div
    | product "%" unary     -> mod

?unary: atom
    | "-" unary             -> neg
    | "+" unary             -> pos

?atom: NUMBER               -> number
    | STRING                -> string
    | NAME                  -> name
    | "(" sum ")"

STRING: /"(\\.|[^"\\])*"/ | /'(\\.|[^'\\])*'/

%import common.CNAME -> NAME
%import common.NUMBER
%import common.WS
%ignore WS
"""

_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\", '"': '"', "'": "'"}


def _unescape(body: str) -> str:
    out: list[str] = []
    chars = iter(body)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, "")
            out.append(_ESCAPES.get(nxt, nxt))
        else:
            out.append(ch)
    return "".join(out)


class AstBuilder(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into tagged AST nodes."""

    # ---- leaves ----

    def number(self, items: list[Token]) -> Number:
        raw = str(items[0])
        if any(c in raw for c in ".eE"):
            return Number(float(raw))
        return Number(int(raw))

    def string(self, items: list[Token]) -> String:
        raw = str(items[0])
        return String(_unescape(raw[1:-1]))

    def name(self, items: list[Token]) -> Name:
        return Name(str(items[0]))

    # ---- operators ----

    def neg(self, items: list[Expr]) -> Unary:
        return Unary("-", items[0])

    def pos(self, items: list[Expr]) -> Unary:
        return Unary("+", items[0])

    def add(self, items: list[Expr]) -> Binary:
        return Binary("+", items[0], items[1])

    def sub(self, items: list[Expr]) -> Binary:
        return Binary("-", items[0], items[1])

    def mul(self, items: list[Expr]) -> Binary:
        return Binary("*", items[0], items[1])

    def div(self, items: list[Expr]) -> Binary:
        return Binary("/", items[0], items[1])

    def mod(self, items: list[Expr]) -> Binary:
        return Binary("%", items[0], items[1])


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR, parser="lalr", start="start")


def parse_expression(source: str) -> Expr:
    """Parse *source* into an expression AST.

    Raises:
        ExpressionError: if the source is not a valid expression.
    """
    try:
        return AstBuilder().transform(_parser().parse(source))
    except (VisitError, LarkError, RecursionError) as exc:
        raise ExpressionError(f"Invalid expression: {source[:80]!r}", expression=source) from exc

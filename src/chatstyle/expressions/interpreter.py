"""Evaluate expression ASTs against a token scope."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from chatstyle.errors import ExpressionError
from chatstyle.expressions.nodes import Binary, Expr, Name, Number, String, Unary
from chatstyle.expressions.parser import parse_expression


def format_value(value: Any) -> str:
    """Render an evaluated value the way it appears in substituted text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    if value is None:
        return ""
    return str(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float))


def _numeric(op: str, left: Any, right: Any) -> int | float:
    if not (_is_number(left) and _is_number(right)):
        raise ExpressionError(
            f"Unsupported operands for {op!r}: {type(left).__name__} and {type(right).__name__}"
        )
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if right == 0:
        raise ExpressionError(f"Division by zero in {op!r}")
    if op == "/":
        return left / right
    # Remainder keeps the sign of the dividend.
    result = math.fmod(left, right)
    if isinstance(left, int) and isinstance(right, int):
        return int(result)
    return result


def evaluate(node: Expr, scope: Mapping[str, Any]) -> Any:
    """Evaluate *node* with *scope* providing variable values."""
    if isinstance(node, Number):
        return node.value
    if isinstance(node, String):
        return node.value
    if isinstance(node, Name):
        if node.ident not in scope:
            raise ExpressionError(f"Unknown name: {node.ident!r}", expression=node.ident)
        return scope[node.ident]
    if isinstance(node, Unary):
        operand = evaluate(node.operand, scope)
        if not _is_number(operand):
            raise ExpressionError(f"Unsupported operand for unary {node.op!r}")
        return -operand if node.op == "-" else +operand
    if isinstance(node, Binary):
        left = evaluate(node.left, scope)
        right = evaluate(node.right, scope)
        if node.op == "+":
            if isinstance(left, str) or isinstance(right, str):
                return format_value(left) + format_value(right)
            if _is_number(left) and _is_number(right):
                return left + right
            raise ExpressionError("Unsupported operands for '+'")
        return _numeric(node.op, left, right)
    raise ExpressionError(f"Unknown expression node: {node!r}")


def evaluate_expression(source: str, scope: Mapping[str, Any]) -> Any:
    """Parse and evaluate *source*.

    Raises:
        ExpressionError: on syntax errors, unknown names, unsupported operand
            types or division by zero.
    """
    return evaluate(parse_expression(source.strip()), scope)

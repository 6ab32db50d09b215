# boolexps/serialization.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Encoding and decoding of expressions in the JSON interchange format

"""Conversion between expression trees and their JSON encoding.

The encoding is LISP-like JSON:

    true / false              Boolean constants
    "name"                    Variable
    ["NOT", e]                Negation
    ["OR", e1, e2]            Disjunction
    ["AND", e1, e2]           Conjunction

Decoding accepts operator tokens in any letter case and treats a one-element
array as its sole element. Encoding never produces such wrapping arrays and
always writes operators in upper case, so ``deserialize(serialize(e)) == e``
for every expression.

Decoding comes in two flavours: :func:`parse` raises
:class:`DeserializationError`, while :func:`deserialize` and
:func:`from_json_value` are total and report failure as ``None``.
"""

from __future__ import annotations
import json
from typing import Any, Optional, Union

from . import ast_nodes as ast
from .exceptions import DeserializationError
from .grammar import _BoolExpParser
from utils.logger import get_logger

JSONValue = Union[bool, str, list]


def to_json_value(expr: ast.Expr) -> JSONValue:
    """Encode ``expr`` as a native JSON value (bool, str or nested lists).

    Args:
        expr: Expression to encode

    Returns:
        Value that ``json.dumps`` renders as the expression's encoding
    """
    if isinstance(expr, ast.Const):
        return expr.value
    if isinstance(expr, ast.Variable):
        return expr.name
    if isinstance(expr, ast.Not):
        return ["NOT", to_json_value(expr.operand)]
    if isinstance(expr, ast.Or):
        return ["OR", to_json_value(expr.left), to_json_value(expr.right)]
    if isinstance(expr, ast.And):
        return ["AND", to_json_value(expr.left), to_json_value(expr.right)]
    raise TypeError(f"Unsupported expression node: {type(expr).__name__}")


def serialize(expr: ast.Expr) -> str:
    """Encode ``expr`` as JSON text.

    Example:
        >>> serialize(Or(Variable("x"), Not(Variable("y"))))
        '["OR", "x", ["NOT", "y"]]'
    """
    return json.dumps(to_json_value(expr), ensure_ascii=False)


def parse(text: str) -> ast.Expr:
    """Decode JSON text into an expression.

    Uses a fresh parser instance for each invocation so that concurrent
    callers never share parser state.

    Args:
        text: JSON text encoding an expression

    Returns:
        Root node of the decoded expression

    Raises:
        DeserializationError: The text is not valid JSON or does not follow
            the expression grammar
    """
    return _BoolExpParser().parse(text)


def deserialize(text: str) -> Optional[ast.Expr]:
    """Decode JSON text into an expression, or None if it is malformed.

    Args:
        text: JSON text encoding an expression

    Returns:
        The decoded expression, or None on any lexical, syntactic or
        grammatical error
    """
    try:
        return parse(text)
    except DeserializationError as exc:
        get_logger().deserialization_failed(str(exc))
        return None


def from_json_value(value: Any) -> Optional[ast.Expr]:
    """Decode an already-parsed JSON value into an expression.

    Args:
        value: Result of ``json.loads`` (or an equivalent decoder)

    Returns:
        The decoded expression, or None if the value does not follow the
        expression grammar or is nested too deeply to decode
    """
    try:
        return _decode_value(value)
    except DeserializationError as exc:
        get_logger().deserialization_failed(str(exc))
        return None
    except RecursionError:
        get_logger().deserialization_failed("value is nested too deeply")
        return None


def _decode_value(value: Any) -> ast.Expr:
    # bool before anything numeric-looking: bool is an int subclass
    if isinstance(value, bool):
        return ast.TRUE if value else ast.FALSE

    if isinstance(value, str):
        if ast.is_reserved_name(value):
            raise DeserializationError(f"Reserved word used as a variable: {value!r}")
        return ast.Variable(value)

    if isinstance(value, list):
        return _decode_array(value)

    raise DeserializationError(f"Unsupported JSON value: {value!r}")


def _decode_array(items: list) -> ast.Expr:
    if len(items) == 1:
        return _decode_value(items[0])

    if not items or not isinstance(items[0], str):
        raise DeserializationError(f"Array does not start with an operator: {items!r}")

    operator = items[0].upper()
    operands = items[1:]

    if operator == "NOT" and len(operands) == 1:
        return ast.Not(_decode_value(operands[0]))

    if operator in ("OR", "AND") and len(operands) == 2:
        left = _decode_value(operands[0])
        right = _decode_value(operands[1])
        return ast.Or(left, right) if operator == "OR" else ast.And(left, right)

    raise DeserializationError(
        f"Operator {items[0]!r} cannot take {len(operands)} operand(s)"
    )

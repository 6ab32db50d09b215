# boolexps/transformations.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Named transformations and the text-in/text-out transformation service

"""Registry of named transformations and a text-level service function.

This is the contract a network front end needs: take a request body, decode
it, apply one of the named transformations and encode the result. Any
decoding failure produces the fixed JSON payload ``"Malformed JSON"``,
whichever transformation was requested.

Registered transformations (names are case-insensitive):
    DNF: disjunctive normal form
    NNF: negation normal form
    simplify: single-pass equational simplification
"""

from __future__ import annotations
from typing import Callable, Dict

from . import ast_nodes as ast
from .exceptions import ExpressionDepthError, UnknownTransformationError
from .normal_forms import to_dnf, to_nnf
from .serialization import deserialize, serialize
from .simplifier import simplify
from utils.logger import get_logger

Transformation = Callable[[ast.Expr], ast.Expr]

TRANSFORMATIONS: Dict[str, Transformation] = {
    "DNF": to_dnf,
    "NNF": to_nnf,
    "simplify": simplify,
}

MALFORMED_JSON_RESPONSE = '"Malformed JSON"'


def get_transformation(name: str) -> Transformation:
    """Look up a transformation by name, ignoring letter case.

    Raises:
        UnknownTransformationError: If no transformation has that name
    """
    for registered, transformation in TRANSFORMATIONS.items():
        if registered.lower() == name.lower():
            return transformation
    raise UnknownTransformationError(name)


def transform_json(text: str, name: str) -> str:
    """Decode ``text``, apply the named transformation and encode the result.

    Decoding is iterative and accepts any nesting depth, but transformations
    recurse once per tree level and so are bounded by the recursion limit.

    Args:
        text: JSON text encoding an expression
        name: Transformation name, e.g. ``"DNF"``

    Returns:
        The encoded result, or ``MALFORMED_JSON_RESPONSE`` if ``text`` does not
        encode an expression

    Raises:
        UnknownTransformationError: If ``name`` is not registered
        ExpressionDepthError: If the expression is nested too deeply to
            transform
    """
    transformation = get_transformation(name)

    expr = deserialize(text)
    if expr is None:
        get_logger().debug(f"{name} request rejected as malformed")
        return MALFORMED_JSON_RESPONSE

    try:
        return serialize(transformation(expr))
    except RecursionError as exc:
        get_logger().warning(f"{name} request rejected: expression nested too deeply")
        raise ExpressionDepthError(
            f"Expression is nested too deeply for {name}"
        ) from exc

# boolexps/evaluation.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Evaluation of expression trees under variable interpretations

"""Evaluation of expressions under interpretations.

An interpretation maps variable names to truth values. Evaluation is total:
it never raises for a missing variable but reports "no result" as ``None``.
Both operands of ``And``/``Or`` are always evaluated, so an expression only
yields a value when every variable it mentions is assigned, even if one
operand alone would decide the outcome.
"""

from __future__ import annotations
from itertools import product
from typing import Dict, Iterable, Iterator, Mapping, Optional
from . import ast_nodes as ast

Interpretation = Mapping[str, bool]


class Evaluator(ast.Visitor):
    """Computes the truth value of an expression under one interpretation.

    Attributes:
        interpretation: Truth values for the variables of the expression
    """

    def __init__(self, interpretation: Interpretation):
        self.interpretation = interpretation

    def visit_const(self, n: ast.Const) -> Optional[bool]:
        return n.value

    def visit_variable(self, n: ast.Variable) -> Optional[bool]:
        return self.interpretation.get(n.name)

    def visit_not(self, n: ast.Not) -> Optional[bool]:
        value = n.operand.accept(self)
        if value is None:
            return None
        return not value

    def visit_and(self, n: ast.And) -> Optional[bool]:
        left = n.left.accept(self)
        right = n.right.accept(self)
        if left is None or right is None:
            return None
        return left and right

    def visit_or(self, n: ast.Or) -> Optional[bool]:
        left = n.left.accept(self)
        right = n.right.accept(self)
        if left is None or right is None:
            return None
        return left or right


def evaluate(expr: ast.Expr, interpretation: Interpretation) -> Optional[bool]:
    """Evaluate ``expr`` under ``interpretation``.

    Args:
        expr: Expression to evaluate
        interpretation: Mapping from variable name to truth value

    Returns:
        The truth value, or None if some variable of ``expr`` is unassigned
    """
    return expr.accept(Evaluator(interpretation))


def interpretations(names: Iterable[str]) -> Iterator[Dict[str, bool]]:
    """Enumerate every interpretation over a set of variable names.

    Yields 2^k dictionaries for k distinct names. Variables are ordered by
    name and each row counts upward from all-false, so the enumeration order
    is deterministic.

    Args:
        names: Variable names to assign

    Yields:
        Complete interpretations over ``names``
    """
    ordered = sorted(set(names))
    for values in product((False, True), repeat=len(ordered)):
        yield dict(zip(ordered, values))

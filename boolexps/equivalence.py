# boolexps/equivalence.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Semantic equivalence checking by truth-table comparison

"""Logical equivalence of expressions.

Two expressions are equivalent when they evaluate to the same truth value
under every interpretation of their combined variables. The check enumerates
all 2^k interpretations for k variables and is therefore meant for
expressions over a handful of variables only.

Both sides are simplified before comparison. Simplification itself asks for
equivalence of sub-expressions (idempotence and complement rules), so the two
modules call each other; the recursion is always on strictly smaller trees.
"""

from __future__ import annotations
from typing import Dict, List, Tuple
from . import ast_nodes as ast
from . import simplifier
from .analysis import all_vars
from .evaluation import evaluate, interpretations
from utils.logger import get_logger


def is_equivalent_to(a: ast.Expr, b: ast.Expr) -> bool:
    """Decide whether two expressions are logically equivalent.

    The decision proceeds in three steps:
    1. If neither simplified side mentions a variable, both have reduced to a
       constant and are compared structurally.
    2. If both sides mention variables but share none, they are reported as
       not equivalent without enumeration.
    3. Otherwise every interpretation over the union of their variables is
       checked.

    Args:
        a: First expression
        b: Second expression

    Returns:
        True if ``a`` and ``b`` agree under every interpretation
    """
    logger = get_logger()

    left = simplifier.simplify(a)
    right = simplifier.simplify(b)
    left_vars = all_vars(left)
    right_vars = all_vars(right)

    if not left_vars and not right_vars:
        result = left == right
        logger.equivalence_result(left, right, result, "constants")
        return result

    if left_vars and right_vars and left_vars.isdisjoint(right_vars):
        logger.equivalence_result(left, right, False, "disjoint variables")
        return False

    names = left_vars | right_vars
    logger.debug(f"Enumerating {2 ** len(names)} interpretations over {sorted(names)}")

    for interpretation in interpretations(names):
        if evaluate(left, interpretation) != evaluate(right, interpretation):
            logger.equivalence_result(
                left, right, False, f"counterexample {interpretation}"
            )
            return False

    logger.equivalence_result(left, right, True)
    return True


def truth_table(expr: ast.Expr) -> List[Tuple[Dict[str, bool], bool]]:
    """Tabulate ``expr`` over all interpretations of its variables.

    Args:
        expr: Expression to tabulate

    Returns:
        List of ``(interpretation, value)`` rows in enumeration order; a
        variable-free expression yields a single row with an empty
        interpretation
    """
    return [
        (interpretation, evaluate(expr, interpretation))
        for interpretation in interpretations(all_vars(expr))
    ]

# boolexps/analysis.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Structural queries over expression trees

"""Structural queries and De Morgan negation for expression trees.

All functions here look only at the shape of a tree; none of them consults
truth values. They are used by the normal-form transformer to recognise
literals and clauses, and by the equivalence checker to collect the variables
that an interpretation must assign.

Terminology:
    literal: ``true``, ``false``, a variable, or the negation of a variable
    clause:  literals combined by a single operator kind used consistently
             (only ``Or`` nodes, or only ``And`` nodes, never both)
"""

from __future__ import annotations
from typing import FrozenSet, Type, Union
from . import ast_nodes as ast


def all_vars(expr: ast.Expr) -> FrozenSet[str]:
    """Collect the names of all variables appearing anywhere in the tree.

    Args:
        expr: Expression to inspect

    Returns:
        Set of variable names, empty for variable-free expressions
    """
    if isinstance(expr, ast.Variable):
        return frozenset((expr.name,))
    if isinstance(expr, ast.Not):
        return all_vars(expr.operand)
    if isinstance(expr, (ast.And, ast.Or)):
        return all_vars(expr.left) | all_vars(expr.right)
    return frozenset()


def is_literal(expr: ast.Expr) -> bool:
    """Return True for constants, variables and negated variables."""
    if isinstance(expr, (ast.Const, ast.Variable)):
        return True
    return isinstance(expr, ast.Not) and isinstance(expr.operand, ast.Variable)


def is_clause(expr: ast.Expr) -> bool:
    """Return True if ``expr`` is a literal or a single-operator clause.

    An ``Or`` node is a clause when each child is a literal or itself an
    ``Or`` clause; likewise for ``And``. Mixing the two operators anywhere in
    the tree disqualifies it.

    Args:
        expr: Expression to classify

    Returns:
        True if the expression is a clause
    """
    if is_literal(expr):
        return True
    if isinstance(expr, (ast.And, ast.Or)):
        return _is_clause_of(expr.left, type(expr)) and _is_clause_of(
            expr.right, type(expr)
        )
    return False


def _is_clause_of(expr: ast.Expr, kind: Type[Union[ast.And, ast.Or]]) -> bool:
    if is_literal(expr):
        return True
    return isinstance(expr, kind) and is_clause(expr)


def is_dnf(expr: ast.Expr) -> bool:
    """Return True if ``expr`` is in disjunctive normal form.

    Constants and variables are in DNF. A negation is in DNF iff its operand
    is a literal. A disjunction is in DNF iff both operands are. A conjunction
    is in DNF iff it is a clause.
    """
    if isinstance(expr, (ast.Const, ast.Variable)):
        return True
    if isinstance(expr, ast.Not):
        return is_literal(expr.operand)
    if isinstance(expr, ast.Or):
        return is_dnf(expr.left) and is_dnf(expr.right)
    if isinstance(expr, ast.And):
        return is_clause(expr)
    return False


def is_nnf(expr: ast.Expr) -> bool:
    """Return True if every negation sits directly above a variable."""
    if isinstance(expr, ast.Not):
        return isinstance(expr.operand, ast.Variable)
    if isinstance(expr, (ast.And, ast.Or)):
        return is_nnf(expr.left) and is_nnf(expr.right)
    return True


def negate(expr: ast.Expr) -> ast.Expr:
    """Negate an expression by De Morgan's laws.

    The result is logically equivalent to ``Not(expr)`` but pushes the
    negation through ``And``/``Or`` nodes and cancels double negations.

    Args:
        expr: Expression to negate

    Returns:
        A new expression equivalent to the negation of ``expr``
    """
    if isinstance(expr, ast.Const):
        return ast.FALSE if expr.value else ast.TRUE
    if isinstance(expr, ast.Variable):
        return ast.Not(expr)
    if isinstance(expr, ast.Not):
        return expr.operand
    if isinstance(expr, ast.Or):
        return ast.And(negate(expr.left), negate(expr.right))
    if isinstance(expr, ast.And):
        return ast.Or(negate(expr.left), negate(expr.right))
    raise TypeError(f"Unsupported expression node: {type(expr).__name__}")


def size(expr: ast.Expr) -> int:
    """Count the nodes of the tree."""
    if isinstance(expr, ast.Not):
        return 1 + size(expr.operand)
    if isinstance(expr, (ast.And, ast.Or)):
        return 1 + size(expr.left) + size(expr.right)
    return 1


def depth(expr: ast.Expr) -> int:
    """Length of the longest root-to-leaf path, counting nodes."""
    if isinstance(expr, ast.Not):
        return 1 + depth(expr.operand)
    if isinstance(expr, (ast.And, ast.Or)):
        return 1 + max(depth(expr.left), depth(expr.right))
    return 1

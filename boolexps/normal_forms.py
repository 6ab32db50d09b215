# boolexps/normal_forms.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Expression transformers for negation and disjunctive normal forms

"""Transforms expression trees into Negation and Disjunctive Normal Form.

NNF pushes every negation down until it sits directly above a variable,
using De Morgan's laws and double-negation elimination. DNF is then reached
by distributing conjunction over disjunction:

    (x | y) & z  ->  (x & z) | (y & z)
    x & (y | z)  ->  (x & y) | (x & z)

The full pipeline is ``to_dnf = nnf_to_dnf ∘ simplify ∘ to_nnf``. Simplifying
before distributing removes redundant terms that would otherwise be copied
into every distributed clause.
"""

from __future__ import annotations
from typing import Dict
from . import ast_nodes as ast
from .analysis import depth, is_clause, is_literal, size
from .simplifier import simplify
from utils.logger import get_logger


class NNFTransformer(ast.Visitor):
    """Pushes negations to the leaves of an expression tree.

    Uses the visitor pattern to rebuild the tree with memoization. Negated
    constants fold to the opposite constant and negated variables are kept.

    Attributes:
        _memo: Cache for transformed subexpressions to avoid redundant computation
    """

    def __init__(self):
        """Initialize transformer with empty memoization cache."""
        self._memo: Dict[ast.Expr, ast.Expr] = {}

    def transform(self, root: ast.Expr) -> ast.Expr:
        """Transform ``root`` into negation normal form."""
        logger = get_logger()
        if logger.is_debug_enabled():
            logger.debug(
                f"Starting NNF transformation of {size(root)} nodes, depth {depth(root)}"
            )

        self._memo.clear()
        result = self._visit(root)

        logger.transformation_result("NNF", root, result)
        return result

    def _visit(self, node: ast.Expr) -> ast.Expr:
        if node in self._memo:
            return self._memo[node]

        result = node.accept(self)
        self._memo[node] = result
        return result

    def visit_const(self, n: ast.Const) -> ast.Expr:
        return n

    def visit_variable(self, n: ast.Variable) -> ast.Expr:
        return n

    def visit_and(self, n: ast.And) -> ast.Expr:
        return ast.And(self._visit(n.left), self._visit(n.right))

    def visit_or(self, n: ast.Or) -> ast.Expr:
        return ast.Or(self._visit(n.left), self._visit(n.right))

    def visit_not(self, n: ast.Not) -> ast.Expr:
        """Push a negation one level down and continue below it.

        Args:
            n: Negation node

        Returns:
            Negation-free expression or a negated variable
        """
        inner = n.operand

        if isinstance(inner, ast.Const):
            return ast.FALSE if inner.value else ast.TRUE

        if isinstance(inner, ast.Variable):
            return n

        # Double negation: !!A -> A
        if isinstance(inner, ast.Not):
            return self._visit(inner.operand)

        # De Morgan: !(A | B) -> !A & !B
        if isinstance(inner, ast.Or):
            return ast.And(
                self._visit(ast.Not(inner.left)), self._visit(ast.Not(inner.right))
            )

        # De Morgan: !(A & B) -> !A | !B
        if isinstance(inner, ast.And):
            return ast.Or(
                self._visit(ast.Not(inner.left)), self._visit(ast.Not(inner.right))
            )

        raise TypeError(f"Unsupported expression node: {type(inner).__name__}")


def to_nnf(expr: ast.Expr) -> ast.Expr:
    """Convert ``expr`` to negation normal form."""
    return NNFTransformer().transform(expr)


def nnf_to_dnf(expr: ast.Expr) -> ast.Expr:
    """Convert an expression already in NNF to disjunctive normal form.

    Literals and clauses are returned unchanged. Disjunctions convert each
    side. Conjunctions distribute over a disjunction found on either side;
    when neither side is a disjunction, the sides are converted first and the
    conjunction of the results is distributed again.

    Args:
        expr: Expression in negation normal form

    Returns:
        An equivalent expression in disjunctive normal form
    """
    if is_literal(expr) or is_clause(expr):
        return expr

    if isinstance(expr, ast.Or):
        return ast.Or(nnf_to_dnf(expr.left), nnf_to_dnf(expr.right))

    if isinstance(expr, ast.And):
        left, right = expr.left, expr.right

        # (x | y) & z -> (x & z) | (y & z)
        if isinstance(left, ast.Or):
            return ast.Or(
                nnf_to_dnf(ast.And(left.left, right)),
                nnf_to_dnf(ast.And(left.right, right)),
            )

        # x & (y | z) -> (x & y) | (x & z)
        if isinstance(right, ast.Or):
            return ast.Or(
                nnf_to_dnf(ast.And(left, right.left)),
                nnf_to_dnf(ast.And(left, right.right)),
            )

        # Only the non-clause conjunction needs converting
        if is_literal(left) and isinstance(right, ast.And):
            return nnf_to_dnf(ast.And(left, nnf_to_dnf(right)))
        if is_literal(right) and isinstance(left, ast.And):
            return nnf_to_dnf(ast.And(nnf_to_dnf(left), right))

        return nnf_to_dnf(ast.And(nnf_to_dnf(left), nnf_to_dnf(right)))

    # Negations in NNF only wrap variables, which are literals
    raise ValueError(f"Expression is not in negation normal form: {expr}")


def to_dnf(expr: ast.Expr) -> ast.Expr:
    """Convert ``expr`` to disjunctive normal form.

    Args:
        expr: Arbitrary expression

    Returns:
        An equivalent expression satisfying :func:`boolexps.analysis.is_dnf`
    """
    result = nnf_to_dnf(simplify(to_nnf(expr)))
    get_logger().transformation_result("DNF", expr, result)
    return result

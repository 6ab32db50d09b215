# boolexps/simplifier.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Single-pass equational simplification of expression trees

"""Bottom-up simplification by the equational laws of Boolean algebra.

For every binary node the children are simplified first, then the first
matching rule is applied:

    Or                          And
    x | false  ->  x            x & true   ->  x
    false | x  ->  x            true & x   ->  x
    x | true   ->  true         x & false  ->  false
    true | x   ->  true         false & x  ->  false
    x | y      ->  x            x & y      ->  x       when x ≡ y
    x | y      ->  true         x & y      ->  false   when !x ≡ y

Identity and annihilation are checked before the equivalence-based rules
because the latter enumerate truth tables. Negations of constants fold and
double negations cancel. Variables and constants are never rewritten.

The pass is not iterated to a fixed point: the result is equivalent to the
input but need not be the simplest equivalent expression.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Dict
from . import ast_nodes as ast
from . import equivalence
from .analysis import negate
from utils.logger import get_logger


class Simplifier(ast.Visitor):
    """Rewrites an expression bottom-up with the rules listed above.

    Attributes:
        _memo: Cache for simplified subexpressions to avoid redundant computation
    """

    def __init__(self):
        """Initialize simplifier with empty memoization cache."""
        self._memo: Dict[ast.Expr, ast.Expr] = {}

    def transform(self, root: ast.Expr) -> ast.Expr:
        """Simplify ``root`` in a single bottom-up pass."""
        self._memo.clear()
        result = self._visit(root)
        get_logger().transformation_result("simplify", root, result)
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

    def visit_not(self, n: ast.Not) -> ast.Expr:
        if isinstance(n.operand, ast.Variable):
            return n

        operand = self._visit(n.operand)

        if isinstance(operand, ast.Const):
            return ast.FALSE if operand.value else ast.TRUE

        # !!A -> A
        if isinstance(operand, ast.Not):
            return operand.operand

        return ast.Not(operand)

    def visit_or(self, n: ast.Or) -> ast.Expr:
        left = self._visit(n.left)
        right = self._visit(n.right)

        # Identity
        if right == ast.FALSE:
            return left
        if left == ast.FALSE:
            return right

        # Annihilation
        if left == ast.TRUE or right == ast.TRUE:
            return ast.TRUE

        # Idempotence
        if equivalence.is_equivalent_to(left, right):
            return left

        # Complement
        if equivalence.is_equivalent_to(negate(left), right):
            return ast.TRUE

        return ast.Or(left, right)

    def visit_and(self, n: ast.And) -> ast.Expr:
        left = self._visit(n.left)
        right = self._visit(n.right)

        # Identity
        if right == ast.TRUE:
            return left
        if left == ast.TRUE:
            return right

        # Annihilation
        if left == ast.FALSE or right == ast.FALSE:
            return ast.FALSE

        # Idempotence
        if equivalence.is_equivalent_to(left, right):
            return left

        # Complement
        if equivalence.is_equivalent_to(negate(left), right):
            return ast.FALSE

        return ast.And(left, right)


@lru_cache(maxsize=4096)
def simplify(expr: ast.Expr) -> ast.Expr:
    """Simplify ``expr`` with a fresh :class:`Simplifier`.

    Results are cached per tree, since the equivalence checker simplifies
    the same subexpressions repeatedly.

    Args:
        expr: Expression to simplify

    Returns:
        An equivalent, usually smaller, expression
    """
    return Simplifier().transform(expr)

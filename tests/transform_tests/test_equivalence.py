# tests/transform_tests/test_equivalence.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Test suite for truth-table equivalence checking

"""Test suite for logical equivalence checking.

Structural equality and logical equivalence are different relations; these
tests exercise the constant comparison, the disjoint-variable short-circuit
and full truth-table enumeration.
"""

import pytest
from hypothesis import given

from boolexps import (
    And,
    FALSE,
    Not,
    Or,
    TRUE,
    Variable,
    is_equivalent_to,
)
from expression_strategies import expressions

p, q, r, s = Variable("p"), Variable("q"), Variable("r"), Variable("s")


class TestEquivalence:
    """Test cases for concrete equivalence verdicts."""

    EQUIVALENT_PAIRS = [
        (p, p),
        (TRUE, Not(FALSE)),
        (Or(FALSE, FALSE), And(TRUE, FALSE)),
        (Or(p, q), Or(q, p)),
        (Or(p, Not(p)), TRUE),
        (TRUE, Or(p, Not(p))),
        (And(p, Not(p)), FALSE),
        (Not(And(p, q)), Or(Not(p), Not(q))),
        (Or(p, And(p, q)), p),
        # Tautology the simplifier leaves in place, compared with a constant
        (Or(Or(p, q), Not(p)), TRUE),
        (And(Or(p, q), Or(p, r)), Or(p, And(q, r))),
    ]

    @pytest.mark.parametrize("left, right", EQUIVALENT_PAIRS)
    def test_equivalent(self, left, right):
        assert is_equivalent_to(left, right)
        assert is_equivalent_to(right, left)

    INEQUIVALENT_PAIRS = [
        (TRUE, FALSE),
        (p, Not(p)),
        (And(p, q), p),
        (Or(p, q), And(p, q)),
        (p, TRUE),
        (Or(p, Not(q)), Or(Not(p), q)),
    ]

    @pytest.mark.parametrize("left, right", INEQUIVALENT_PAIRS)
    def test_not_equivalent(self, left, right):
        assert not is_equivalent_to(left, right)
        assert not is_equivalent_to(right, left)

    def test_disjoint_variable_sets_are_never_equivalent(self):
        # Both sides are tautologies the simplifier cannot reduce, but they
        # mention no common variable, so the check answers without enumeration
        left = Or(Or(p, q), Not(p))
        right = Or(Or(r, s), Not(r))

        assert is_equivalent_to(left, TRUE)
        assert is_equivalent_to(right, TRUE)
        assert not is_equivalent_to(left, right)

    def test_variables_eliminated_by_simplification_do_not_count(self):
        # q disappears from the left side once simplified
        assert is_equivalent_to(Or(p, And(q, Not(q))), p)

    def test_structural_equality_differs_from_equivalence(self):
        assert Or(p, q) != Or(q, p)
        assert is_equivalent_to(Or(p, q), Or(q, p))


class TestEquivalenceProperties:
    """Property tests for the equivalence relation."""

    @given(expressions())
    def test_reflexive(self, expr):
        assert is_equivalent_to(expr, expr)

    @given(expressions(), expressions())
    def test_symmetric(self, a, b):
        assert is_equivalent_to(a, b) == is_equivalent_to(b, a)

    @given(expressions(names=()))
    def test_variable_free_expressions_reduce_to_constants(self, expr):
        assert is_equivalent_to(expr, TRUE) != is_equivalent_to(expr, FALSE)

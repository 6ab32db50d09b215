# tests/model_tests/test_expression_model.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Test suite for expression nodes and structural queries

"""Test suite for the expression data model.

Verifies structural equality and hashing of nodes, reserved-name checks,
the infix string form, and the structural queries: variable collection,
literal and clause classification, DNF/NNF recognition and De Morgan
negation.
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
    all_vars,
    is_clause,
    is_dnf,
    is_equivalent_to,
    is_literal,
    is_nnf,
    negate,
)
from boolexps.analysis import depth, size
from expression_strategies import expressions

p, q, r, s = Variable("p"), Variable("q"), Variable("r"), Variable("s")


class TestExpressionNodes:
    """Test cases for node construction, equality and rendering."""

    def test_structural_equality(self):
        assert Or(p, And(q, Not(r))) == Or(Variable("p"), And(Variable("q"), Not(Variable("r"))))
        assert Or(p, q) != Or(q, p)
        assert And(p, q) != Or(p, q)
        assert TRUE != FALSE

    def test_nodes_are_hashable(self):
        assert len({Or(p, q), Or(p, q), And(p, q)}) == 2

    def test_nodes_are_immutable(self):
        with pytest.raises(AttributeError):
            p.name = "changed"

    @pytest.mark.parametrize("name", ["NOT", "not", "Or", "aNd"])
    def test_reserved_names_are_rejected(self, name):
        with pytest.raises(ValueError):
            Variable(name)

    @pytest.mark.parametrize("name", ["NOTE", "ORANGE", "band", "x", ""])
    def test_names_containing_keywords_are_allowed(self, name):
        assert Variable(name).name == name

    STRING_CASES = [
        (TRUE, "true"),
        (FALSE, "false"),
        (p, "p"),
        (Not(p), "!p"),
        (And(p, q), "(p & q)"),
        (Or(Not(p), And(q, TRUE)), "(!p | (q & true))"),
    ]

    @pytest.mark.parametrize("expr, expected", STRING_CASES)
    def test_infix_rendering(self, expr, expected):
        assert str(expr) == expected

    def test_size_and_depth(self):
        expr = Or(Not(p), And(q, r))
        assert size(expr) == 6
        assert depth(expr) == 3
        assert size(p) == depth(p) == 1


class TestAllVars:
    """Test cases for variable collection."""

    def test_constants_have_no_variables(self):
        assert all_vars(TRUE) == frozenset()
        assert all_vars(Or(TRUE, Not(FALSE))) == frozenset()

    def test_variables_are_collected_once(self):
        expr = And(Or(p, Not(q)), Or(q, And(p, r)))
        assert all_vars(expr) == {"p", "q", "r"}

    def test_names_are_case_sensitive(self):
        assert all_vars(Or(Variable("a"), Variable("A"))) == {"a", "A"}


class TestClassification:
    """Test cases for literal, clause, NNF and DNF recognition."""

    LITERAL_CASES = [
        (TRUE, True),
        (FALSE, True),
        (p, True),
        (Not(p), True),
        (Not(TRUE), False),
        (Not(Not(p)), False),
        (Or(p, q), False),
        (And(p, q), False),
    ]

    @pytest.mark.parametrize("expr, expected", LITERAL_CASES)
    def test_is_literal(self, expr, expected):
        assert is_literal(expr) is expected

    CLAUSE_CASES = [
        (p, True),
        (Or(p, Not(q)), True),
        (And(p, Not(q)), True),
        (Or(Or(p, q), Or(r, TRUE)), True),
        (And(p, And(q, And(r, s))), True),
        (Or(p, And(q, r)), False),
        (And(Or(p, q), r), False),
        (And(p, Not(And(q, r))), False),
        (Or(p, Not(Not(q))), False),
        (Not(Or(p, q)), False),
    ]

    @pytest.mark.parametrize("expr, expected", CLAUSE_CASES)
    def test_is_clause(self, expr, expected):
        assert is_clause(expr) is expected

    DNF_CASES = [
        (TRUE, True),
        (p, True),
        (Not(p), True),
        (Not(Not(p)), True),
        (Not(Or(p, q)), False),
        (Or(p, q), True),
        (Or(And(p, q), And(Not(p), r)), True),
        (Or(p, Or(And(q, r), s)), True),
        (And(p, And(q, Not(r))), True),
        (And(Or(p, q), r), False),
        (Or(p, And(q, Or(r, s))), False),
        (And(p, Or(q, r)), False),
    ]

    @pytest.mark.parametrize("expr, expected", DNF_CASES)
    def test_is_dnf(self, expr, expected):
        assert is_dnf(expr) is expected

    NNF_CASES = [
        (Not(p), True),
        (And(Not(p), Or(q, Not(r))), True),
        (Not(TRUE), False),
        (Not(Not(p)), False),
        (Or(p, Not(And(q, r))), False),
    ]

    @pytest.mark.parametrize("expr, expected", NNF_CASES)
    def test_is_nnf(self, expr, expected):
        assert is_nnf(expr) is expected


class TestNegate:
    """Test cases for De Morgan negation."""

    NEGATION_CASES = [
        (TRUE, FALSE),
        (FALSE, TRUE),
        (p, Not(p)),
        (Not(p), p),
        (Not(Or(p, q)), Or(p, q)),
        (Or(p, q), And(Not(p), Not(q))),
        (And(p, Not(q)), Or(Not(p), q)),
        (Or(And(p, q), TRUE), And(Or(Not(p), Not(q)), FALSE)),
    ]

    @pytest.mark.parametrize("expr, expected", NEGATION_CASES)
    def test_negation_structure(self, expr, expected):
        assert negate(expr) == expected

    @given(expressions())
    def test_negation_is_equivalent_to_not(self, expr):
        assert is_equivalent_to(negate(expr), Not(expr))

    @given(expressions())
    def test_negation_preserves_variables(self, expr):
        assert all_vars(negate(expr)) == all_vars(expr)

# tests/model_tests/test_evaluation.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Test suite for expression evaluation and interpretation enumeration

"""Test suite for evaluating expressions under interpretations."""

import pytest

from boolexps import (
    And,
    FALSE,
    Not,
    Or,
    TRUE,
    Variable,
    evaluate,
    interpretations,
    truth_table,
)

p, q, r = Variable("p"), Variable("q"), Variable("r")


class TestEvaluate:
    """Test cases for total evaluation."""

    EVALUATION_CASES = [
        (TRUE, {}, True),
        (FALSE, {}, False),
        (p, {"p": True}, True),
        (Not(p), {"p": True}, False),
        (And(p, q), {"p": True, "q": False}, False),
        (Or(p, q), {"p": False, "q": True}, True),
        (Or(And(p, Not(q)), r), {"p": True, "q": False, "r": False}, True),
        # Extra assignments are ignored
        (Not(TRUE), {"unused": True}, False),
    ]

    @pytest.mark.parametrize("expr, interpretation, expected", EVALUATION_CASES)
    def test_evaluation(self, expr, interpretation, expected):
        assert evaluate(expr, interpretation) is expected

    @pytest.mark.parametrize(
        "expr",
        [
            p,
            Not(p),
            # Both operands are evaluated even when one decides the result
            Or(TRUE, p),
            And(FALSE, p),
            Or(p, TRUE),
            And(Not(q), FALSE),
        ],
    )
    def test_missing_variable_gives_no_result(self, expr):
        assert evaluate(expr, {"r": True}) is None

    def test_evaluation_does_not_modify_interpretation(self):
        interpretation = {"p": True}
        evaluate(Or(p, q), interpretation)
        assert interpretation == {"p": True}


class TestInterpretations:
    """Test cases for exhaustive interpretation enumeration."""

    def test_empty_set_has_one_interpretation(self):
        assert list(interpretations([])) == [{}]

    def test_count_is_exponential(self):
        assert len(list(interpretations(["a", "b", "c", "d"]))) == 16

    def test_interpretations_are_distinct_and_complete(self):
        rows = list(interpretations({"q", "p"}))

        assert rows == [
            {"p": False, "q": False},
            {"p": False, "q": True},
            {"p": True, "q": False},
            {"p": True, "q": True},
        ]

    def test_duplicate_names_are_merged(self):
        assert len(list(interpretations(["p", "p", "q"]))) == 4

    def test_truth_table(self):
        table = truth_table(And(p, Not(q)))

        assert [value for _, value in table] == [False, False, True, False]

    def test_truth_table_of_constant(self):
        assert truth_table(Or(FALSE, TRUE)) == [({}, True)]

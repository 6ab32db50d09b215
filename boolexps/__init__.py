# boolexps/__init__.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Propositional expression engine: model, normal forms and JSON encoding

"""Propositional logic expressions: decoding, evaluation and normal forms.

This package reads Boolean expressions from a LISP-like JSON encoding,
evaluates them under variable interpretations, decides logical equivalence
and rewrites them into negation normal form (NNF), disjunctive normal form
(DNF) or a simplified equivalent.

Core Functions:
    deserialize / parse: JSON text to expression tree
    serialize: expression tree to JSON text
    to_nnf, to_dnf, simplify: pure transformations returning new trees
    is_equivalent_to: truth-table equivalence check
    transform_json: text-in/text-out transformation service

Example:
    >>> from boolexps import deserialize, serialize, to_dnf
    >>> expr = deserialize('["AND", ["OR", "p", "q"], "r"]')
    >>> serialize(to_dnf(expr))
    '["OR", ["AND", "p", "r"], ["AND", "q", "r"]]'
"""

from .ast_nodes import Expr, Const, Variable, Not, And, Or, TRUE, FALSE
from .exceptions import (
    DeserializationError,
    ExpressionDepthError,
    UnknownTransformationError,
)
from .analysis import all_vars, is_literal, is_clause, is_dnf, is_nnf, negate
from .evaluation import Interpretation, evaluate, interpretations
from .simplifier import simplify
from .equivalence import is_equivalent_to, truth_table
from .normal_forms import to_nnf, nnf_to_dnf, to_dnf
from .serialization import (
    serialize,
    deserialize,
    parse,
    to_json_value,
    from_json_value,
)
from .transformations import (
    TRANSFORMATIONS,
    MALFORMED_JSON_RESPONSE,
    get_transformation,
    transform_json,
)

__all__ = [
    "Expr",
    "Const",
    "Variable",
    "Not",
    "And",
    "Or",
    "TRUE",
    "FALSE",
    "DeserializationError",
    "ExpressionDepthError",
    "UnknownTransformationError",
    "all_vars",
    "is_literal",
    "is_clause",
    "is_dnf",
    "is_nnf",
    "negate",
    "Interpretation",
    "evaluate",
    "interpretations",
    "simplify",
    "is_equivalent_to",
    "truth_table",
    "to_nnf",
    "nnf_to_dnf",
    "to_dnf",
    "serialize",
    "deserialize",
    "parse",
    "to_json_value",
    "from_json_value",
    "TRANSFORMATIONS",
    "MALFORMED_JSON_RESPONSE",
    "get_transformation",
    "transform_json",
]

__version__ = "1.0.0"
__description__ = "Propositional expression parsing, simplification and normal forms"

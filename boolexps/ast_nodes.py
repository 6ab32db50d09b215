# boolexps/ast_nodes.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Expression tree node classes for propositional logic

"""Expression tree node classes for propositional logic.

This module defines immutable and hashable node classes used to build tree
representations of propositional formulas. Equality between nodes is
structural: two trees are equal iff they have identical shape and identical
constants and variable names. Logical equivalence is a different relation and
lives in :mod:`boolexps.equivalence`.

Node Types:
    Const: Boolean constants ``true`` and ``false``
    Variable: Named propositional atoms
    Not, And, Or: Standard Boolean connectives

All nodes support the visitor design pattern for traversal and transformation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol

# Operator tokens of the JSON encoding; never valid as variable names
RESERVED_NAMES = frozenset({"NOT", "OR", "AND"})


def is_reserved_name(name: str) -> bool:
    """Return True if ``name`` case-insensitively equals an operator token."""
    return name.upper() in RESERVED_NAMES


class Visitor(Protocol):
    """Interface for expression visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_const(self, n: Const): ...

    def visit_variable(self, n: Variable): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all expression tree nodes.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch and __str__ for string representation.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        """Return the infix representation of the node.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Const(Expr):
    """Boolean constant ``true`` or ``false``.

    Attributes:
        value: The truth value of the constant
    """

    value: bool

    def accept(self, v: Visitor):
        return v.visit_const(self)

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Named propositional atom.

    Names are case-sensitive. A name that case-insensitively equals one of the
    operator tokens ``NOT``, ``OR`` or ``AND`` is rejected, since it could not
    be told apart from an operator in the JSON encoding.

    Attributes:
        name: The identifier of this variable

    Raises:
        ValueError: If ``name`` is a reserved operator token
    """

    name: str

    def __post_init__(self):
        if is_reserved_name(self.name):
            raise ValueError(f"Reserved word cannot be a variable name: {self.name!r}")

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"!{self.operand}"


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction of two operands.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return f"({self.left} & {self.right})"


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction of two operands.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return f"({self.left} | {self.right})"


TRUE = Const(True)
FALSE = Const(False)

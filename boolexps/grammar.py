# boolexps/grammar.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# LALR(1) grammar and parser for the JSON expression encoding using SLY

"""Grammar for JSON-encoded Boolean expressions.

This module defines the grammar rules that turn the token stream of
:class:`BoolExpLexer` into expression trees:

    expr := true | false | STRING
          | "[" expr "]"
          | "[" STRING "," expr "]"
          | "[" STRING "," expr "," expr "]"

A lone string is a variable unless it is an operator token. The operator
string of a unary array must be ``NOT`` and that of a binary array ``OR`` or
``AND``; operator tokens are matched case-insensitively. A one-element array
is transparent and decodes to its sole element.
"""

from sly import Parser
from .lexer import BoolExpLexer
from .ast_nodes import Expr, And, Not, Or, Variable, TRUE, FALSE, is_reserved_name
from .exceptions import DeserializationError
from utils.logger import get_logger


class _BoolExpParser(Parser):
    """SLY-based LALR(1) parser for the JSON expression encoding.

    Syntax errors come from SLY; grammar violations that need to look at
    string values (reserved words, unknown operators) are raised from the
    rule actions.

    Attributes:
        tokens: Token types from BoolExpLexer
    """

    tokens = BoolExpLexer.tokens

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: the whole document is a single expression."""
        return p.expr

    @_("TRUE")
    def expr(self, p) -> Expr:
        """Boolean constant true."""
        return TRUE

    @_("FALSE")
    def expr(self, p) -> Expr:
        """Boolean constant false."""
        return FALSE

    @_("STRING")
    def expr(self, p) -> Expr:
        """String as propositional variable."""
        if is_reserved_name(p.STRING):
            raise DeserializationError(
                f"Reserved word used as a variable: {p.STRING!r}"
            )
        return Variable(p.STRING)

    @_("LBRACKET expr RBRACKET")
    def expr(self, p) -> Expr:
        """Single-element array wrapping an expression."""
        return p.expr

    @_("LBRACKET STRING COMMA expr RBRACKET")
    def expr(self, p) -> Expr:
        """Unary operator application."""
        operator = p.STRING.upper()
        if operator != "NOT":
            raise DeserializationError(f"Unknown unary operator: {p.STRING!r}")
        return Not(p.expr)

    @_("LBRACKET STRING COMMA expr COMMA expr RBRACKET")
    def expr(self, p) -> Expr:
        """Binary operator application."""
        operator = p.STRING.upper()
        if operator == "OR":
            return Or(p.expr0, p.expr1)
        if operator == "AND":
            return And(p.expr0, p.expr1)
        raise DeserializationError(f"Unknown binary operator: {p.STRING!r}")

    def parse(self, text: str) -> Expr:
        """Parse JSON text into an expression tree.

        Args:
            text: JSON document encoding an expression

        Returns:
            Root node of the decoded expression

        Raises:
            DeserializationError: If the text is empty, is not valid JSON of
                the supported subset, or violates the expression grammar
        """
        logger = get_logger()
        logger.debug(f"Parsing expression: {text}")

        try:
            if text.strip() == "":
                raise DeserializationError("Input is empty.")

            result = super().parse(BoolExpLexer().tokenize(text))

            if result is None:
                raise DeserializationError("Failed to parse expression (syntax error).")

            logger.debug(f"Successfully parsed expression into {type(result).__name__}")
            return result

        except DeserializationError:
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise DeserializationError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            DeserializationError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near {token.value!r} "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of input"

        raise DeserializationError(error_msg)

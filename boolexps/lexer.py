# boolexps/lexer.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Lexical analyzer for the JSON expression encoding using SLY

"""Lexical analyzer for JSON-encoded Boolean expressions.

The encoding only ever uses a small subset of JSON: arrays, strings and the
two boolean literals. Anything else (objects, numbers, ``null``, stray
characters) cannot encode an expression and is rejected here already.

Supported Tokens:
- Punctuation: [, ], ,
- Keywords: true, false
- Strings: RFC 8259 string literals, decoded to their Python value
- Whitespace: space, tab, carriage return and line feed are ignored
"""

import json

from sly import Lexer
from .exceptions import DeserializationError
from utils.logger import get_logger


class BoolExpLexer(Lexer):
    """SLY-based lexer for the JSON expression encoding.

    String tokens carry their decoded value, so escape sequences such as
    ``"\\u004eOT"`` are seen by the parser exactly as JSON defines them.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "LBRACKET",
        "RBRACKET",
        "COMMA",
        "STRING",
        "TRUE",
        "FALSE",
    }

    # JSON insignificant whitespace
    ignore = " \t\r\n"

    LBRACKET = r"\["
    RBRACKET = r"\]"
    COMMA = r","
    TRUE = r"true"
    FALSE = r"false"

    @_(r'"(?:[^"\\\x00-\x1f]|\\.)*"')
    def STRING(self, t):
        """Decode a string literal, validating its escape sequences.

        The decoded value must be encodable as UTF-8, so escapes that
        produce an unpaired surrogate are rejected.
        """
        try:
            t.value = json.loads(t.value)
            t.value.encode("utf-8")
        except ValueError as exc:
            raise DeserializationError(
                f"Invalid string literal at position {t.index}: {exc}"
            ) from exc
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            DeserializationError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise DeserializationError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )

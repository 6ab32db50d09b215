# utils/__init__.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Utility module exports

from .expression_reader import (
    read_expression,
    read_expression_text,
    ExpressionFileError,
)

__all__ = [
    "read_expression",
    "read_expression_text",
    "ExpressionFileError",
]

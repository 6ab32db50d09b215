# boolexps/exceptions.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Custom exceptions for expression decoding and transformation lookup

"""Domain-specific exceptions for Boolean expression processing.

This module defines the exceptions raised while decoding the JSON expression
encoding and while looking up named transformations. Callers that need a total
function (the transformation service, the CLI) catch these and turn them into
explicit "no value" outcomes.
"""


class DeserializationError(RuntimeError):
    """Exception raised when JSON text does not encode a Boolean expression.

    Covers lexical errors (characters that are not part of the JSON subset),
    syntax errors (unbalanced brackets, missing commas) and grammar violations
    (unknown operator token, wrong arity, reserved word used as a variable).
    """

    pass


class UnknownTransformationError(KeyError):
    """Exception raised when a transformation name is not registered."""

    pass


class ExpressionDepthError(RuntimeError):
    """Exception raised when an expression is nested too deeply to transform.

    Transformations recurse once per tree level, so the usable depth is bounded
    by the interpreter's recursion limit (``sys.getrecursionlimit()``).
    """

    pass

# utils/expression_reader.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Reader for JSON expression files

from pathlib import Path
from typing import Union

from boolexps.ast_nodes import Expr
from boolexps.exceptions import DeserializationError
from boolexps.serialization import parse
from utils.logger import get_logger


class ExpressionFileError(Exception):
    """Exception raised when an expression file cannot be read or decoded."""

    pass


def read_expression_text(filepath: Union[str, Path]) -> str:
    """Read the raw JSON text of an expression file.

    Args:
        filepath: Path to the expression file

    Returns:
        File content with surrounding whitespace removed

    Raises:
        ExpressionFileError: If the file is missing, unreadable or empty
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise ExpressionFileError(f"Expression file not found: {filepath}")

    logger.debug(f"Reading expression file: {filepath}")

    try:
        content = path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise ExpressionFileError(f"Error reading expression file: {e}") from e

    if not content:
        raise ExpressionFileError(f"Expression file is empty: {filepath}")

    return content


def read_expression(filepath: Union[str, Path]) -> Expr:
    """Read and decode an expression file.

    Expected content is one JSON-encoded expression, e.g.:

        ["AND", ["OR", "p", "q"], ["NOT", "r"]]

    Args:
        filepath: Path to the expression file

    Returns:
        The decoded expression

    Raises:
        ExpressionFileError: If the file cannot be read or does not encode an
            expression
    """
    text = read_expression_text(filepath)

    try:
        return parse(text)
    except DeserializationError as e:
        raise ExpressionFileError(f"Malformed expression in {filepath}: {e}") from e

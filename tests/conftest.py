# tests/conftest.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Boolexps tests.

The configuration handles:
- Python path setup for project and shared test helper imports
- Hypothesis settings profiles
- Common fixtures for expressions and expression files
"""

import sys
import pytest
from pathlib import Path

from hypothesis import HealthCheck, settings

# Ensure project modules and shared test helpers can be imported
project_root = Path(__file__).parent.parent
tests_root = Path(__file__).parent
for path in (project_root, tests_root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from boolexps import And, Not, Or, Variable  # noqa: E402

# Truth-table checks are exponential; keep example counts moderate and
# disable deadlines, which are noisy for enumeration-heavy properties.
settings.register_profile(
    "default",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("default")


@pytest.fixture
def p():
    return Variable("p")


@pytest.fixture
def q():
    return Variable("q")


@pytest.fixture
def r():
    return Variable("r")


@pytest.fixture
def distributable(p, q, r):
    """Conjunction over a disjunction: (p | q) & r."""
    return And(Or(p, q), r)


@pytest.fixture
def expression_file(tmp_path):
    """Factory writing JSON text into a temporary expression file.

    Returns:
        Callable[[str, str], Path]: writes ``content`` to ``name`` and
        returns the path
    """

    def write(content: str, name: str = "expr.json") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def negated_conjunction(p, q):
    """!(p & q)"""
    return Not(And(p, q))

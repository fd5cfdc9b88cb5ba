"""Shared test fixtures for gen_alg tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- DIMACS CNF texts and parsed formulas
- A small binary population
"""

import numpy as np
import pytest

from gen_alg import Binary, Formula, Population, parse_dimacs_string

SMALL_CNF = """p cnf 3 2
1 -3 0
2 3 0
%"""

THREE_CLAUSE_CNF = """p cnf 3 3
1 -3 0
2 3 0
1 2 0
%"""


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_formula() -> Formula:
    """Two-clause formula (x1 or not x3) and (x2 or x3)."""
    return parse_dimacs_string(SMALL_CNF)


@pytest.fixture
def three_clause_formula() -> Formula:
    """Formula (x1 or not x3) and (x2 or x3) and (x1 or x2)."""
    return parse_dimacs_string(THREE_CLAUSE_CNF)


@pytest.fixture
def binary_population() -> Population:
    """Four binary individuals of dimension 3.

    Against three_clause_formula these falsify 0, 1, 2 and 0 clauses.
    """
    return Population.from_individuals(
        Binary(dim=3),
        [
            [True, True, False],
            [True, False, False],
            [False, False, False],
            [True, True, True],
        ],
    )

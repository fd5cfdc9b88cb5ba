"""gen_alg: populations, encodings and objectives for evolutionary computation.

A numpy toolkit that generates candidate-solution populations under one of
four genotype encodings (binary, integer, integer permutation, real) and
scores them against an objective. It ships one concrete objective, boolean
satisfiability, backed by a DIMACS CNF parser and a vectorised formula
evaluator.

Example (score random assignments against a CNF formula):
    >>> import numpy as np
    >>> from gen_alg import BinaryPopGenerator, SATObjective, parse_dimacs_string
    >>> formula = parse_dimacs_string("p cnf 3 3\\n1 -3 0\\n2 3 0\\n1 2 0\\n")
    >>> pop = BinaryPopGenerator(dim=3, pop_size=8).generate(np.random.default_rng(42))
    >>> scores = SATObjective(formula).eval(pop)
    >>> len(scores)
    8

Example (from a run configuration):
    >>> import io
    >>> from gen_alg import Problem, RunConfig
    >>> doc = '{"encoding": {"type": "Binary", "dim": 3}, "pop_size": 4, "runs": 1, "generations": 1}'
    >>> problem = Problem.from_config(RunConfig.from_json(io.StringIO(doc)), SATObjective(formula))
    >>> problem.evaluate(problem.populate()).shape
    (4,)
"""

from gen_alg.config import RunConfig, encoding_from_dict
from gen_alg.encoding import Binary, Encoding, Integer, IntegerPermutation, Real
from gen_alg.errors import (
    ConfigError,
    EmptyClauseError,
    FormulaIOError,
    FormulaParsingError,
    InconsistentNumOfClausesError,
    InconsistentNumOfVarsError,
    InvalidHeaderError,
    NoHeaderError,
    TokenParseError,
    VarOutOfBoundsError,
)
from gen_alg.generators import (
    BinaryPopGenerator,
    IntegerPopGenerator,
    IntPermPopGenerator,
    RealPopGenerator,
    make_generator,
)
from gen_alg.objectives import SATObjective, lift
from gen_alg.population import IndividualView, Population
from gen_alg.problem import Problem
from gen_alg.protocols import Objective, PopGenerator
from gen_alg.registry import GeneratorRegistry, ObjectiveRegistry, list_generators, list_objectives
from gen_alg.sat import Clause, Formula, FormulaEvaluation, Literal, parse_dimacs, parse_dimacs_string

__all__ = [
    # Encodings
    "Binary",
    "IntegerPermutation",
    "Integer",
    "Real",
    "Encoding",
    # Data structures
    "Population",
    "IndividualView",
    # Generators
    "BinaryPopGenerator",
    "IntegerPopGenerator",
    "IntPermPopGenerator",
    "RealPopGenerator",
    "make_generator",
    # Objectives
    "lift",
    "SATObjective",
    # SAT
    "Literal",
    "Clause",
    "Formula",
    "FormulaEvaluation",
    "parse_dimacs",
    "parse_dimacs_string",
    # Composition and configuration
    "Problem",
    "RunConfig",
    "encoding_from_dict",
    # Protocols
    "PopGenerator",
    "Objective",
    # Registry system
    "GeneratorRegistry",
    "ObjectiveRegistry",
    "list_generators",
    "list_objectives",
    # Errors
    "ConfigError",
    "FormulaParsingError",
    "FormulaIOError",
    "TokenParseError",
    "NoHeaderError",
    "InvalidHeaderError",
    "EmptyClauseError",
    "InconsistentNumOfVarsError",
    "InconsistentNumOfClausesError",
    "VarOutOfBoundsError",
]

"""Composition of a population generator with an objective.

A Problem fixes which encoding flows from the generator into the objective.
The pairing is checked once, when the Problem is built: a generator whose
encoding is not the one the objective accepts is rejected immediately
instead of failing on the first evaluation.

Example:
    >>> formula = parse_dimacs_string("p cnf 3 2\\n1 -3 0\\n2 3 0\\n")
    >>> problem = Problem(BinaryPopGenerator(dim=3, pop_size=10), SATObjective(formula))
    >>> scores = problem.evaluate(problem.populate(np.random.default_rng(0)))
    >>> scores.shape
    (10,)
"""

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np

from gen_alg.config import RunConfig
from gen_alg.errors import ConfigError
from gen_alg.generators import make_generator
from gen_alg.objectives.sat import SATObjective
from gen_alg.population import Population
from gen_alg.protocols import Objective, PopGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Problem:
    """A generator bound to an objective that accepts its encoding.

    Attributes:
        generator: Produces populations.
        objective: Scores populations produced by ``generator``.

    Raises:
        ConfigError: If the generator's encoding is not the objective's
            ``encoding_type``.
    """

    generator: PopGenerator
    objective: Objective

    def __post_init__(self) -> None:
        encoding = self.generator.encoding
        accepted = self.objective.encoding_type
        if not isinstance(encoding, accepted):
            raise ConfigError(
                f"{type(self.objective).__name__} accepts {accepted.__name__} populations, "
                f"but the generator produces {type(encoding).__name__}"
            )

        if isinstance(self.objective, SATObjective) and encoding.dim != self.objective.formula.num_vars:
            logger.warning(
                "generator dim %d differs from formula num_vars %d; every evaluation will be empty",
                encoding.dim,
                self.objective.formula.num_vars,
            )

    @classmethod
    def from_config(cls, config: RunConfig, objective: Objective) -> "Problem":
        """Build the generator described by a run configuration and bind it.

        Args:
            config: Decoded run configuration; its encoding and pop_size are used.
            objective: Objective to bind.

        Returns:
            A validated Problem.
        """
        return cls(generator=make_generator(config.encoding, config.pop_size), objective=objective)

    def populate(self, rng: np.random.Generator | None = None) -> Population:
        """Generate a fresh population."""
        return self.generator.generate(rng)

    def evaluate(self, pop: Population) -> Any:
        """Score a population with the bound objective."""
        return self.objective.eval(pop)

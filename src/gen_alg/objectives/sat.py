"""Satisfiability objective for binary-encoded populations."""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from gen_alg.encoding import Binary
from gen_alg.population import Population
from gen_alg.sat.formula import Formula


@dataclass(frozen=True)
class SATObjective:
    """Score binary individuals by the number of clauses they falsify.

    Each individual's genes are read as a valuation of the formula
    (gene i is variable i + 1). Lower is better; 0 means the individual
    satisfies the formula.

    Attributes:
        formula: The CNF formula to satisfy. Shared read-only.

    Example:
        >>> objective = SATObjective(parse_dimacs_string("p cnf 2 1\\n1 -2 0\\n"))
        >>> pop = Population.from_individuals(Binary(dim=2), [[False, True], [True, True]])
        >>> objective.eval(pop)
        array([1, 0])
    """

    encoding_type: ClassVar[type] = Binary

    formula: Formula

    def eval(self, pop: Population) -> np.ndarray | None:
        """Count falsified clauses for every individual.

        Args:
            pop: Binary-encoded population.

        Returns:
            Integer array of shape (len(pop),) in population order, or None
            if a non-empty population's dimension differs from the formula's
            number of variables. Scores are never partial.

        Raises:
            TypeError: If the population is not binary-encoded.
        """
        if not isinstance(pop.encoding, self.encoding_type):
            raise TypeError(f"SATObjective requires a Binary population, got {type(pop.encoding).__name__}")
        return self.formula.count_unsatisfied(pop.genes)

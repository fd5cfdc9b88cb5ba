"""Base objective helpers.

This module provides the lift helper that turns a per-individual scoring
function into a population-level objective function.
"""

from collections.abc import Callable

import numpy as np

from gen_alg.population import Population


def lift(fn: Callable[[np.ndarray], float | None]) -> Callable[[Population], np.ndarray | None]:
    """Lift a per-individual scorer to work on a population.

    The lifted function is all-or-nothing: if ``fn`` returns None for any
    individual, the whole call returns None and no partial scores are
    produced.

    Args:
        fn: Function scoring one individual's genes.
            Signature: (dim,) -> scalar | None

    Returns:
        A function scoring a population in order.
        Signature: Population -> (n,) | None

    Example:
        >>> count_ones = lift(lambda genes: int(genes.sum()))
        >>> pop = Population.from_individuals(Binary(dim=3), [[True, False, True], [False, False, False]])
        >>> count_ones(pop)
        array([2, 0])
    """

    def lifted(pop: Population) -> np.ndarray | None:
        scores = []
        for individual in pop:
            score = fn(individual.genes)
            if score is None:
                return None
            scores.append(score)
        return np.array(scores)

    return lifted

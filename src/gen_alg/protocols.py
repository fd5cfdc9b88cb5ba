"""Protocol definitions for population generators and objectives.

Two contracts connect the pieces of the toolkit:

1. **PopGenerator**: builds a Population for one fixed encoding. There is one
   generator class per encoding variant (binary, integer, integer
   permutation, real).

2. **Objective**: maps a Population of one encoding to an output value. An
   objective declares the single encoding descriptor class it accepts via
   ``encoding_type``; the pairing of generator and objective is checked when
   they are composed (see gen_alg.problem.Problem), not on every call.

Example usage:
    ```python
    def run_once(generator: PopGenerator, objective: Objective, rng):
        pop = generator.generate(rng)
        return objective.eval(pop)
    ```
"""

from typing import Any, Protocol, runtime_checkable

import numpy as np

from gen_alg.encoding import Encoding
from gen_alg.population import Population


@runtime_checkable
class PopGenerator(Protocol):
    """Protocol for population generators.

    Parameters:
        encoding: Encoding descriptor of the populations this generator builds.
        pop_size: Number of individuals per generated population.

    Example:
        ```python
        gen = BinaryPopGenerator(dim=10, pop_size=50)
        pop = gen.generate(np.random.default_rng(0))
        assert len(pop) == 50 and pop.dim == 10
        ```
    """

    pop_size: int

    @property
    def encoding(self) -> Encoding: ...

    def generate(self, rng: np.random.Generator | None = None) -> Population:
        """Build a new random population.

        Args:
            rng: NumPy random number generator. If None, a fresh
                system-seeded generator is used.

        Returns:
            Population of pop_size individuals matching the encoding.
        """
        ...


@runtime_checkable
class Objective(Protocol):
    """Protocol for objectives.

    An objective scores a whole population at once. It accepts exactly one
    encoding, named by the ``encoding_type`` class attribute. The shape of
    the output is up to the objective; SATObjective returns one integer
    score per individual, or None when the population cannot be scored.

    Example:
        ```python
        class OnesCount:
            encoding_type = Binary

            def eval(self, pop: Population) -> np.ndarray:
                return pop.genes.sum(axis=1)
        ```
    """

    encoding_type: type

    def eval(self, pop: Population) -> Any:
        """Score a population.

        Args:
            pop: Population whose encoding is an instance of encoding_type.

        Returns:
            Objective-specific output.
        """
        ...

"""Random population generators, one per encoding.

Each generator is an immutable dataclass holding the dimension, population
size and (for bounded encodings) the bounds. ``generate`` draws a fresh
population from a numpy random generator:

- BinaryPopGenerator: each gene an independent fair coin flip
- IntegerPopGenerator: uniform integers, both bounds inclusive
- IntPermPopGenerator: independent uniform permutations of 0..dim-1
- RealPopGenerator: uniform floats in [lower, upper]

Example:
    >>> gen = IntegerPopGenerator(dim=4, bounds=(1, 10), pop_size=3)
    >>> pop = gen.generate(np.random.default_rng(42))
    >>> pop.genes.shape
    (3, 4)
"""

import logging
from dataclasses import dataclass

import numpy as np

from gen_alg.encoding import Binary, Encoding, Integer, IntegerPermutation, Real
from gen_alg.errors import ConfigError
from gen_alg.population import Population
from gen_alg.protocols import PopGenerator
from gen_alg.registry import GeneratorRegistry

logger = logging.getLogger(__name__)


def _check_pop_size(pop_size: object) -> None:
    if not isinstance(pop_size, (int, np.integer)) or isinstance(pop_size, bool):
        raise ConfigError(f"pop_size must be an integer, got {type(pop_size).__name__}")
    if pop_size < 0:
        raise ConfigError(f"pop_size must be non-negative, got {pop_size}")


def _finish(encoding: Encoding, genes: np.ndarray) -> Population:
    logger.debug("generated %d %s individuals of dim %d", genes.shape[0], encoding.kind, encoding.dim)
    return Population(encoding=encoding, genes=genes)


@dataclass(frozen=True)
class BinaryPopGenerator:
    """Generator of binary populations.

    Attributes:
        dim: Genes per individual.
        pop_size: Individuals per population.
    """

    dim: int
    pop_size: int

    def __post_init__(self) -> None:
        _check_pop_size(self.pop_size)
        # Building the descriptor validates dim.
        object.__setattr__(self, "_encoding", Binary(dim=self.dim))

    @property
    def encoding(self) -> Binary:
        return self._encoding

    def generate(self, rng: np.random.Generator | None = None) -> Population:
        """Draw a population where every gene is True with probability 0.5."""
        if rng is None:
            rng = np.random.default_rng()
        genes = rng.random((self.pop_size, self.dim)) < 0.5
        return _finish(self.encoding, genes)


@dataclass(frozen=True)
class IntegerPopGenerator:
    """Generator of integer populations with inclusive bounds.

    Attributes:
        dim: Genes per individual.
        bounds: (lower, upper) non-negative integers, lower <= upper.
        pop_size: Individuals per population.
    """

    dim: int
    bounds: tuple[int, int]
    pop_size: int

    def __post_init__(self) -> None:
        _check_pop_size(self.pop_size)
        encoding = Integer(dim=self.dim, bounds=self.bounds)
        object.__setattr__(self, "bounds", encoding.bounds)
        object.__setattr__(self, "_encoding", encoding)

    @property
    def encoding(self) -> Integer:
        return self._encoding

    def generate(self, rng: np.random.Generator | None = None) -> Population:
        """Draw a population of uniform integers in [lower, upper]."""
        if rng is None:
            rng = np.random.default_rng()
        lower, upper = self.bounds
        genes = rng.integers(lower, upper, size=(self.pop_size, self.dim), endpoint=True, dtype=np.int64)
        return _finish(self.encoding, genes)


@dataclass(frozen=True)
class IntPermPopGenerator:
    """Generator of integer-permutation populations.

    Attributes:
        dim: Length of each permutation.
        pop_size: Individuals per population.
    """

    dim: int
    pop_size: int

    def __post_init__(self) -> None:
        _check_pop_size(self.pop_size)
        object.__setattr__(self, "_encoding", IntegerPermutation(dim=self.dim))

    @property
    def encoding(self) -> IntegerPermutation:
        return self._encoding

    def generate(self, rng: np.random.Generator | None = None) -> Population:
        """Draw a population of independent uniform permutations of 0..dim-1."""
        if rng is None:
            rng = np.random.default_rng()
        genes = np.empty((self.pop_size, self.dim), dtype=np.int64)
        for i in range(self.pop_size):
            genes[i] = rng.permutation(self.dim)
        return _finish(self.encoding, genes)


@dataclass(frozen=True)
class RealPopGenerator:
    """Generator of real-valued populations.

    Attributes:
        dim: Genes per individual.
        bounds: (lower, upper) finite floats, lower <= upper.
        pop_size: Individuals per population.
    """

    dim: int
    bounds: tuple[float, float]
    pop_size: int

    def __post_init__(self) -> None:
        _check_pop_size(self.pop_size)
        encoding = Real(dim=self.dim, bounds=self.bounds)
        object.__setattr__(self, "bounds", encoding.bounds)
        object.__setattr__(self, "_encoding", encoding)

    @property
    def encoding(self) -> Real:
        return self._encoding

    def generate(self, rng: np.random.Generator | None = None) -> Population:
        """Draw a population of uniform floats in [lower, upper]."""
        if rng is None:
            rng = np.random.default_rng()
        lower, upper = self.bounds
        genes = rng.uniform(lower, upper, size=(self.pop_size, self.dim))
        # Closed interval, even under float rounding.
        genes = np.clip(genes, lower, upper)
        return _finish(self.encoding, genes)


def make_generator(encoding: Encoding, pop_size: int) -> PopGenerator:
    """Build the generator registered for an encoding descriptor.

    Args:
        encoding: Encoding descriptor (Binary, Integer, IntegerPermutation or Real).
        pop_size: Number of individuals per generated population.

    Returns:
        A configured PopGenerator whose encoding equals ``encoding``.

    Raises:
        KeyError: If no generator is registered for the encoding kind.
        ConfigError: If pop_size is invalid.

    Example:
        >>> gen = make_generator(Real(dim=5, bounds=(0.0, 1.0)), pop_size=20)
        >>> type(gen).__name__
        'RealPopGenerator'
    """
    return GeneratorRegistry.get(encoding.kind, encoding=encoding, pop_size=pop_size)


GeneratorRegistry.register("binary", lambda encoding, pop_size: BinaryPopGenerator(encoding.dim, pop_size))
GeneratorRegistry.register(
    "integer", lambda encoding, pop_size: IntegerPopGenerator(encoding.dim, encoding.bounds, pop_size)
)
GeneratorRegistry.register(
    "integer_permutation", lambda encoding, pop_size: IntPermPopGenerator(encoding.dim, pop_size)
)
GeneratorRegistry.register("real", lambda encoding, pop_size: RealPopGenerator(encoding.dim, encoding.bounds, pop_size))

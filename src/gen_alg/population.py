"""Population data structures.

This module provides the core data structures for representing populations
of individuals under one genotype encoding:

- Population: A struct-of-arrays representation of multiple individuals
- IndividualView: A read-only view of a single individual

Both classes are immutable (frozen dataclasses). The gene matrix is copied
on construction and flagged read-only, so an individual cannot change once
its population exists.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from gen_alg.encoding import ENCODING_TYPES, Encoding, Integer, IntegerPermutation, Real


@dataclass(frozen=True)
class IndividualView:
    """Read-only view of a single individual in a population.

    Attributes:
        index: Position of the individual in its population.
        genes: Gene values for this individual, shape (dim,). Read-only.

    Example:
        >>> pop = Population(encoding=Binary(dim=2), genes=np.array([[True, False]]))
        >>> pop[0].genes
        array([ True, False])
    """

    index: int
    genes: np.ndarray


@dataclass(frozen=True)
class Population:
    """Immutable, ordered collection of individuals sharing one encoding.

    Individuals are rows of ``genes``. Row order is insertion order and
    carries no ranking.

    Attributes:
        encoding: Encoding descriptor shared by every individual.
        genes: Gene matrix, shape (n, encoding.dim).

    Example:
        >>> enc = Integer(dim=3, bounds=(0, 9))
        >>> pop = Population(encoding=enc, genes=np.array([[1, 2, 3], [4, 5, 6]]))
        >>> len(pop)
        2
        >>> pop.dim
        3
    """

    encoding: Encoding
    genes: np.ndarray

    def __post_init__(self) -> None:
        """Validate genes against the encoding and freeze a private copy.

        Raises:
            TypeError: If encoding is not an encoding descriptor, genes is not
                a numpy array, or its dtype does not fit the encoding.
            ValueError: If genes has the wrong shape or a gene lies outside
                the encoding domain.
        """
        if not isinstance(self.encoding, ENCODING_TYPES):
            raise TypeError(f"encoding must be an encoding descriptor, got {type(self.encoding).__name__}")
        if not isinstance(self.genes, np.ndarray):
            raise TypeError(f"genes must be a numpy array, got {type(self.genes).__name__}")
        if self.genes.ndim != 2:
            raise ValueError(f"genes must be 2D, got shape {self.genes.shape}")
        if self.genes.shape[1] != self.encoding.dim:
            raise ValueError(f"genes has {self.genes.shape[1]} columns, expected dim {self.encoding.dim}")

        genes = self._coerce_dtype(self.genes)
        self._check_domain(genes)

        genes.flags.writeable = False
        object.__setattr__(self, "genes", genes)

    def _coerce_dtype(self, genes: np.ndarray) -> np.ndarray:
        # Empty arrays default to float64; accept them under any encoding.
        if genes.size == 0:
            return np.empty(genes.shape, dtype=self.encoding.dtype)

        kind = genes.dtype.kind
        if self.encoding.dtype == np.bool_:
            ok = kind == "b"
        elif self.encoding.dtype == np.int64:
            ok = kind in "iu"
        else:
            ok = kind in "iuf"
        if not ok:
            raise TypeError(f"genes dtype {genes.dtype} does not match {type(self.encoding).__name__} encoding")
        return genes.astype(self.encoding.dtype, copy=True)

    def _check_domain(self, genes: np.ndarray) -> None:
        if genes.size == 0:
            return

        if isinstance(self.encoding, (Integer, Real)):
            lower, upper = self.encoding.bounds
            if genes.min() < lower or genes.max() > upper:
                raise ValueError(f"genes must lie within bounds [{lower}, {upper}]")
        elif isinstance(self.encoding, IntegerPermutation):
            expected = np.arange(self.encoding.dim)
            if not np.all(np.sort(genes, axis=1) == expected):
                raise ValueError(f"every individual must be a permutation of 0..{self.encoding.dim - 1}")

    @classmethod
    def from_individuals(cls, encoding: Encoding, individuals: Sequence[Sequence]) -> "Population":
        """Build a population from a sequence of gene sequences.

        Args:
            encoding: Encoding descriptor of the individuals.
            individuals: One gene sequence per individual, each of length encoding.dim.

        Returns:
            A new Population in the given order.

        Example:
            >>> pop = Population.from_individuals(Binary(dim=2), [[True, True], [False, True]])
            >>> len(pop)
            2
        """
        if len(individuals) == 0:
            genes = np.empty((0, encoding.dim), dtype=encoding.dtype)
        else:
            genes = np.array(individuals)
        return cls(encoding=encoding, genes=genes)

    def __len__(self) -> int:
        """Return the number of individuals in the population."""
        return self.genes.shape[0]

    def __iter__(self) -> Iterator[IndividualView]:
        for i in range(len(self)):
            yield IndividualView(index=i, genes=self.genes[i])

    def __getitem__(self, idx: int) -> IndividualView:
        """Get a read-only view of a single individual.

        Args:
            idx: Index of the individual (supports negative indexing).

        Returns:
            IndividualView for the specified individual.

        Raises:
            TypeError: If idx is not an integer.
            IndexError: If idx is out of bounds.
        """
        if not isinstance(idx, (int, np.integer)):
            raise TypeError(f"indices must be integers, got {type(idx).__name__}")

        n = len(self)
        original_idx = idx
        if idx < 0:
            idx = n + idx
        if idx < 0 or idx >= n:
            raise IndexError(f"index {original_idx} is out of bounds for population with {n} individuals")

        return IndividualView(index=int(idx), genes=self.genes[idx])

    @property
    def n_individuals(self) -> int:
        """Number of individuals (same as len(self))."""
        return self.genes.shape[0]

    @property
    def dim(self) -> int:
        """Number of genes per individual."""
        return self.encoding.dim

"""Genotype encoding descriptors.

The set of encodings is closed: a candidate solution is a fixed-length
sequence of genes drawn from exactly one of four representations.

- Binary: booleans
- IntegerPermutation: a permutation of 0..dim-1
- Integer: unsigned integers within inclusive bounds
- Real: floats within inclusive bounds

Each descriptor is an immutable dataclass validated on construction, so an
existing descriptor always describes a non-empty sampling domain.

Example:
    >>> enc = Integer(dim=12, bounds=(0, 10))
    >>> enc.kind
    'integer'
    >>> Real(dim=3, bounds=(1.0, 0.0))
    Traceback (most recent call last):
        ...
    gen_alg.errors.ConfigError: Real bounds must satisfy lower <= upper, got (1.0, 0.0)
"""

import math
from dataclasses import dataclass

import numpy as np

from gen_alg.errors import ConfigError

_INT64_MAX = int(np.iinfo(np.int64).max)


def _is_int(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _check_dim(name: str, dim: object) -> None:
    if not _is_int(dim):
        raise ConfigError(f"{name} dim must be an integer, got {type(dim).__name__}")
    if dim < 0:
        raise ConfigError(f"{name} dim must be non-negative, got {dim}")


def _check_bounds(name: str, bounds: tuple) -> tuple:
    lower, upper = bounds
    if lower > upper:
        raise ConfigError(f"{name} bounds must satisfy lower <= upper, got ({lower}, {upper})")
    return lower, upper


@dataclass(frozen=True)
class Binary:
    """Boolean genes, each an independent bit."""

    dim: int

    kind = "binary"
    dtype = np.dtype(np.bool_)

    def __post_init__(self) -> None:
        _check_dim("Binary", self.dim)


@dataclass(frozen=True)
class IntegerPermutation:
    """Genes form a permutation of 0..dim-1; no value repeats within an individual."""

    dim: int

    kind = "integer_permutation"
    dtype = np.dtype(np.int64)

    def __post_init__(self) -> None:
        _check_dim("IntegerPermutation", self.dim)


@dataclass(frozen=True)
class Integer:
    """Unsigned integer genes in [lower, upper], both bounds inclusive.

    Attributes:
        dim: Number of genes per individual.
        bounds: (lower, upper) pair of non-negative integers, lower <= upper.
    """

    dim: int
    bounds: tuple[int, int]

    kind = "integer"
    dtype = np.dtype(np.int64)

    def __post_init__(self) -> None:
        _check_dim("Integer", self.dim)
        if not isinstance(self.bounds, (tuple, list)) or len(self.bounds) != 2:
            raise ConfigError(f"Integer bounds must be a (lower, upper) pair, got {self.bounds!r}")
        if not all(_is_int(b) for b in self.bounds):
            raise ConfigError(f"Integer bounds must be integers, got {self.bounds!r}")
        lower, upper = _check_bounds("Integer", self.bounds)
        if lower < 0:
            raise ConfigError(f"Integer bounds must be non-negative, got ({lower}, {upper})")
        if upper > _INT64_MAX:
            raise ConfigError(f"Integer upper bound must not exceed {_INT64_MAX}, got {upper}")
        object.__setattr__(self, "bounds", (int(lower), int(upper)))


@dataclass(frozen=True)
class Real:
    """Floating-point genes in [lower, upper].

    Attributes:
        dim: Number of genes per individual.
        bounds: (lower, upper) pair of finite numbers, lower <= upper.
    """

    dim: int
    bounds: tuple[float, float]

    kind = "real"
    dtype = np.dtype(np.float64)

    def __post_init__(self) -> None:
        _check_dim("Real", self.dim)
        if not isinstance(self.bounds, (tuple, list)) or len(self.bounds) != 2:
            raise ConfigError(f"Real bounds must be a (lower, upper) pair, got {self.bounds!r}")
        for b in self.bounds:
            if isinstance(b, (bool, np.bool_)) or not isinstance(b, (int, float, np.integer, np.floating)):
                raise ConfigError(f"Real bounds must be numbers, got {self.bounds!r}")
            if not math.isfinite(b):
                raise ConfigError(f"Real bounds must be finite, got {self.bounds!r}")
        lower, upper = _check_bounds("Real", self.bounds)
        if not math.isfinite(float(upper) - float(lower)):
            raise ConfigError(f"Real bounds span must be finite, got {self.bounds!r}")
        object.__setattr__(self, "bounds", (float(lower), float(upper)))


Encoding = Binary | IntegerPermutation | Integer | Real
"""Any of the four encoding descriptors."""

ENCODING_TYPES: tuple[type, ...] = (Binary, IntegerPermutation, Integer, Real)

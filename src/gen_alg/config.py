"""Run configuration.

A run configuration names the encoding, the population size, and the number
of runs and generations of the evolutionary loop. It is decoded from a JSON
document of this shape::

    {
        "encoding": {"type": "Integer", "dim": 12, "bounds": [0, 10]},
        "pop_size": 30,
        "runs": 10,
        "generations": 200
    }

``encoding.type`` is one of Binary, IntegerPermutation, Integer, Real; only
Integer and Real take ``bounds``.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TextIO

from gen_alg.encoding import Binary, Encoding, Integer, IntegerPermutation, Real
from gen_alg.errors import ConfigError

ENCODING_NAMES: dict[str, type] = {
    "Binary": Binary,
    "IntegerPermutation": IntegerPermutation,
    "Integer": Integer,
    "Real": Real,
}

_BOUNDED = (Integer, Real)


def _require(data: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise ConfigError(f"{where} is missing required key '{key}'")
    return data[key]


def encoding_from_dict(data: Mapping[str, Any]) -> Encoding:
    """Decode an encoding descriptor from its tagged mapping form.

    Args:
        data: Mapping with a ``type`` tag, a ``dim`` and, for Integer and
            Real, a two-element ``bounds`` list.

    Returns:
        The matching encoding descriptor.

    Raises:
        ConfigError: If the tag is unknown, a key is missing or unexpected,
            or the descriptor violates its invariants.

    Example:
        >>> encoding_from_dict({"type": "Real", "dim": 2, "bounds": [0.0, 1.5]})
        Real(dim=2, bounds=(0.0, 1.5))
    """
    if not isinstance(data, Mapping):
        raise ConfigError(f"encoding must be an object, got {type(data).__name__}")

    tag = _require(data, "type", "encoding")
    if tag not in ENCODING_NAMES:
        available = ", ".join(ENCODING_NAMES)
        raise ConfigError(f"unknown encoding type {tag!r}. Available types: {available}")
    cls = ENCODING_NAMES[tag]

    allowed = {"type", "dim", "bounds"} if cls in _BOUNDED else {"type", "dim"}
    unexpected = sorted(set(data) - allowed)
    if unexpected:
        raise ConfigError(f"unexpected keys for {tag} encoding: {', '.join(unexpected)}")

    dim = _require(data, "dim", f"{tag} encoding")
    if cls in _BOUNDED:
        bounds = _require(data, "bounds", f"{tag} encoding")
        if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
            raise ConfigError(f"{tag} bounds must be a two-element list, got {bounds!r}")
        return cls(dim=dim, bounds=tuple(bounds))
    return cls(dim=dim)


@dataclass(frozen=True)
class RunConfig:
    """Decoded run configuration.

    Attributes:
        encoding: Encoding descriptor of the individuals.
        pop_size: Number of individuals per population.
        runs: Number of independent runs of the evolutionary loop.
        generations: Number of generations per run.
    """

    encoding: Encoding
    pop_size: int
    runs: int
    generations: int

    def __post_init__(self) -> None:
        if not isinstance(self.encoding, (Binary, IntegerPermutation, Integer, Real)):
            raise ConfigError(f"encoding must be an encoding descriptor, got {type(self.encoding).__name__}")
        for name in ("pop_size", "runs", "generations"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"{name} must be an integer, got {type(value).__name__}")
            if value < 0:
                raise ConfigError(f"{name} must be non-negative, got {value}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RunConfig":
        """Decode a configuration from an already-parsed JSON object.

        Raises:
            ConfigError: If a key is missing or any value is invalid.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"configuration must be an object, got {type(data).__name__}")
        return cls(
            encoding=encoding_from_dict(_require(data, "encoding", "configuration")),
            pop_size=_require(data, "pop_size", "configuration"),
            runs=_require(data, "runs", "configuration"),
            generations=_require(data, "generations", "configuration"),
        )

    @classmethod
    def from_json(cls, reader: TextIO) -> "RunConfig":
        """Read and decode a JSON configuration from a text stream.

        Raises:
            ConfigError: If the text is not valid JSON or the document is invalid.

        Example:
            >>> import io
            >>> doc = '{"encoding": {"type": "Binary", "dim": 8}, "pop_size": 4, "runs": 1, "generations": 10}'
            >>> RunConfig.from_json(io.StringIO(doc)).encoding
            Binary(dim=8)
        """
        try:
            data = json.load(reader)
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid JSON configuration: {e}") from e
        return cls.from_dict(data)

"""Registry system for population generators and objectives.

Generators and objectives are registered as factories under a string name
and retrieved with configuration keyword arguments. This lets a decoded run
configuration pick its generator by encoding kind, and lets callers pick an
objective by name.

There are two independent registries:
1. **GeneratorRegistry**: encoding kind ("binary", "integer",
   "integer_permutation", "real") -> PopGenerator factory
2. **ObjectiveRegistry**: objective name (e.g. "sat") -> Objective factory

Basic usage:
    ```python
    from gen_alg.registry import GeneratorRegistry, ObjectiveRegistry

    gen = GeneratorRegistry.get("binary", encoding=Binary(dim=20), pop_size=50)
    objective = ObjectiveRegistry.get("sat", formula=formula)
    ```
"""

from collections.abc import Callable

from gen_alg.protocols import Objective, PopGenerator


class GeneratorRegistry:
    """Registry for population generator factories.

    Factories are called as ``factory(encoding=..., pop_size=...)`` and must
    return a PopGenerator for that encoding.

    Class Attributes:
        _registry: Dictionary mapping encoding kinds to factory functions.
    """

    _registry: dict[str, Callable[..., PopGenerator]] = {}

    @classmethod
    def register(cls, kind: str, factory: Callable[..., PopGenerator]) -> None:
        """Register a generator factory for an encoding kind.

        Args:
            kind: Encoding kind the factory handles. Overwrites any existing entry.
            factory: Callable accepting ``encoding`` and ``pop_size`` keyword
                arguments and returning a PopGenerator.
        """
        cls._registry[kind] = factory

    @classmethod
    def get(cls, kind: str, **kwargs) -> PopGenerator:
        """Get a configured generator for an encoding kind.

        Args:
            kind: Registered encoding kind.
            **kwargs: Configuration passed to the factory (encoding, pop_size).

        Returns:
            A configured PopGenerator.

        Raises:
            KeyError: If the kind is not registered. The message lists the
                available kinds.
        """
        if kind not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Generator for encoding '{kind}' not found. Available encodings: {available}")
        factory = cls._registry[kind]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return sorted list of encoding kinds with a registered generator."""
        return sorted(cls._registry.keys())


class ObjectiveRegistry:
    """Registry for objective factories.

    Class Attributes:
        _registry: Dictionary mapping objective names to factory functions.

    Example:
        ```python
        ObjectiveRegistry.register("ones", lambda: OnesCount())
        objective = ObjectiveRegistry.get("ones")
        ```
    """

    _registry: dict[str, Callable[..., Objective]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., Objective]) -> None:
        """Register an objective factory.

        Args:
            name: Unique name for the objective. Will overwrite if already exists.
            factory: Callable returning an Objective; keyword arguments given
                to ``get`` are forwarded to it.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> Objective:
        """Get a configured objective by name.

        Raises:
            KeyError: If the name is not registered. The message lists the
                available objectives.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Objective '{name}' not found. Available objectives: {available}")
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return sorted list of registered objective names."""
        return sorted(cls._registry.keys())


def list_generators() -> list[str]:
    """List all encoding kinds with a registered generator.

    Convenience function that returns GeneratorRegistry.list().
    """
    return GeneratorRegistry.list()


def list_objectives() -> list[str]:
    """List all registered objectives.

    Convenience function that returns ObjectiveRegistry.list().
    """
    return ObjectiveRegistry.list()

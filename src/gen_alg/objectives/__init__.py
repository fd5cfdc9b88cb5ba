"""Objectives for scoring populations."""

from gen_alg.objectives.base import lift
from gen_alg.objectives.sat import SATObjective
from gen_alg.registry import ObjectiveRegistry

# Register built-in objectives
ObjectiveRegistry.register("sat", SATObjective)

__all__ = ["lift", "SATObjective"]

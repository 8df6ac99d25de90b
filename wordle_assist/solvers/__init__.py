from __future__ import annotations
import random
from typing import List
from wordle_assist.config import SolverConfig
from .base import BaseStrategy, REGISTRY, register

from . import entropy_sample  # noqa: F401
from . import positional_freq  # noqa: F401
from . import selector  # noqa: F401
from .selector import GuessSelector

DEFAULT_SOLVER = GuessSelector.id


def create_solver(solver_id: str = DEFAULT_SOLVER, config: SolverConfig | None = None,
                  rng: random.Random | None = None) -> BaseStrategy:
    """
    Factory: instantiate a registered strategy by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(config, rng)


def get_solver_ids() -> List[str]:
    """
    Return all registered strategy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseStrategy", "GuessSelector", "REGISTRY", "register",
           "create_solver", "get_solver_ids", "DEFAULT_SOLVER"]

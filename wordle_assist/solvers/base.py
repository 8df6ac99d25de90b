from __future__ import annotations
import random
from typing import Dict, Sequence, Tuple, Type

from wordle_assist.config import SolverConfig
from wordle_assist.engine.errors import CorpusEmptyError, NoCandidatesError

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["BaseStrategy"]] = {}


def register(cls: Type["BaseStrategy"]) -> Type["BaseStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that strategies inherit ----
class BaseStrategy:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, config: SolverConfig | None = None, rng: random.Random | None = None):
        self.config = config or SolverConfig()
        self.rng = rng or random.Random()
        self.corpus: Tuple[str, ...] = ()

    def reset(self, *, corpus: Sequence[str], seed: int | None = None) -> None:
        """Bind the full corpus for this session and optionally reseed."""
        if not corpus:
            raise CorpusEmptyError("the word corpus contains no valid words")
        self.corpus = tuple(corpus)
        self.reseed(seed)

    def reseed(self, seed: int | None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def select_guess(self, pool: Sequence[str], is_first_move: bool = False) -> str:
        raise NotImplementedError("Override in subclass")

    @staticmethod
    def _require(pool: Sequence[str]) -> None:
        if not pool:
            raise NoCandidatesError()

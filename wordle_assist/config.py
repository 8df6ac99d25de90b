"""
Solver configuration.

Defaults reproduce the reference game: six attempts, a sample of 100 guesses
once the pool holds more than 100 words, and the four classic openers.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from .engine.feedback import WORD_LENGTH

DEFAULT_OPENERS: Tuple[str, ...] = ("salet", "crate", "raise", "roate")


@dataclass(frozen=True)
class SolverConfig:
    word_length: int = WORD_LENGTH
    max_attempts: int = 6              # Wordle turn budget
    sample_size: int = 100             # guesses drawn (with replacement) per entropy pass
    sample_threshold: int = 100        # pools larger than this use entropy sampling
    opening_shortlist: Tuple[str, ...] = DEFAULT_OPENERS
    display_cap: int = 20              # list remaining words only at or below this count
    require_opener_in_corpus: bool = True
    use_opening_cache: bool = True

    def __post_init__(self):
        if self.word_length != WORD_LENGTH:
            raise ValueError(f"word_length must be {WORD_LENGTH}; got {self.word_length}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1; got {self.max_attempts}")
        if self.sample_size < 1:
            raise ValueError(f"sample_size must be >= 1; got {self.sample_size}")
        if self.sample_threshold < 0:
            raise ValueError(f"sample_threshold must be >= 0; got {self.sample_threshold}")
        if self.display_cap < 0:
            raise ValueError(f"display_cap must be >= 0; got {self.display_cap}")
        object.__setattr__(self, "opening_shortlist",
                           tuple(w.strip().lower() for w in self.opening_shortlist))

    def with_overrides(self, **overrides) -> "SolverConfig":
        """Copy with every non-None override applied (handy for argparse namespaces)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

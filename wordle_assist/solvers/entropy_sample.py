"""
Entropy Sampling.

Exhaustive entropy search over a pool is O(n^2). Instead draw a fixed number
of guesses uniformly at random WITH replacement from the pool, score each by
its entropy against the ENTIRE pool, and keep the best. Quality is traded for
a bounded O(sample_size * n) cost.

Tie-break: the first sample reaching the running maximum is kept.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence, Tuple

from .base import BaseStrategy, register
from .partition import entropy

log = logging.getLogger(__name__)


def sample_best(pool: Sequence[str], sample_size: int, rng: random.Random) -> Tuple[str, float]:
    """Return (word, entropy) of the best of `sample_size` random draws."""
    n = len(pool)
    best_word = pool[0]
    best_H = -1.0
    for _ in range(sample_size):
        g = pool[rng.randrange(n)]
        H = entropy(g, pool)
        if H > best_H:
            best_word, best_H = g, H
    return best_word, best_H


@register
class EntropySampleStrategy(BaseStrategy):
    id = "entropy_sample"
    name = "Entropy (random sample)"
    version = "1.0.0"

    def select_guess(self, pool: Sequence[str], is_first_move: bool = False) -> str:
        self._require(pool)
        word, H = sample_best(pool, self.config.sample_size, self.rng)
        log.debug("entropy sample over %d words: %s (%.3f bits)", len(pool), word, H)
        return word

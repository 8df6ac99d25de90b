"""
Guess Selector: picks the next suggestion with one of three policies.

  1) Opening cache   - first move only, when the cache holds at least one
                       opener: the opener with the highest cached entropy.
  2) Entropy sample  - pool larger than `sample_threshold`: best of
                       `sample_size` random draws by entropy over the pool.
  3) Positional freq - otherwise: the pool word with the highest positional
                       letter-frequency score.

The selector never tracks whether the first move has happened; the caller
passes `is_first_move` and owns that flag.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .base import BaseStrategy, register
from .entropy_sample import sample_best
from .opening import OpeningCache
from .positional_freq import best_positional

log = logging.getLogger(__name__)


@register
class GuessSelector(BaseStrategy):
    id = "adaptive"
    name = "Opening cache + entropy sampling + positional frequency"
    version = "1.0.0"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.opening = OpeningCache()

    def reset(self, *, corpus: Sequence[str], seed: int | None = None) -> None:
        """Bind the corpus and build the opening cache against it (once)."""
        super().reset(corpus=corpus, seed=seed)
        if self.config.use_opening_cache:
            self.opening = OpeningCache.build(
                self.corpus, self.config.opening_shortlist,
                require_in_corpus=self.config.require_opener_in_corpus,
            )
        else:
            self.opening = OpeningCache()

    def select_guess(self, pool: Sequence[str], is_first_move: bool = False) -> str:
        self._require(pool)

        if is_first_move and self.opening.populated:
            entry = self.opening.best()
            log.debug("opening cache: %s (%.3f bits vs corpus)", entry.word, entry.entropy)
            return entry.word

        if len(pool) > self.config.sample_threshold:
            word, H = sample_best(pool, self.config.sample_size, self.rng)
            log.debug("entropy sample over %d words: %s (%.3f bits)", len(pool), word, H)
            return word

        word, score = best_positional(pool)
        log.debug("positional frequency over %d words: %s (score %d)", len(pool), word, score)
        return word

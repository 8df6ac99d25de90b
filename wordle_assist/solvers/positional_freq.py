"""
Positional Letter Frequency (PLF).

Idea:
  Build per-position letter histograms from the CURRENT pool.
  Score each word by sum(counts[pos][word[pos]]) across positions.
  The first word in pool order with the top score wins.

Fast: O(|pool|*N) to build + O(|pool|*N) to score.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Sequence, Tuple

from .base import BaseStrategy, register


def build_pos_counts(pool: Sequence[str]) -> List[Counter]:
    counts: List[Counter] = [Counter() for _ in range(len(pool[0]))] if pool else []
    for w in pool:
        for i, ch in enumerate(w):
            counts[i][ch] += 1
    return counts


def score_word(w: str, pos_counts: List[Counter]) -> int:
    return sum(pos_counts[i][ch] for i, ch in enumerate(w))


def best_positional(pool: Sequence[str]) -> Tuple[str, int]:
    pos_counts = build_pos_counts(pool)
    best_word, best_score = pool[0], -1
    for w in pool:
        s = score_word(w, pos_counts)
        if s > best_score:
            best_word, best_score = w, s
    return best_word, best_score


@register
class PositionalFreqStrategy(BaseStrategy):
    id = "positional_freq"
    name = "Positional Letter Frequency"
    version = "1.0.0"

    def select_guess(self, pool: Sequence[str], is_first_move: bool = False) -> str:
        self._require(pool)
        return best_positional(pool)[0]

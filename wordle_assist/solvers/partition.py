"""
Outcome Partitioner.

For a guess g, bucket every word of a pool by the pattern g would produce
against it, then take the Shannon entropy (bits) of the bucket distribution:

    H = -sum(p_i * log2(p_i)),  p_i = count_i / |pool|, over non-empty buckets

Higher H means g is expected to split the pool into more, and more even,
groups. Cost is O(|pool|) per evaluated guess.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from wordle_assist.engine.feedback import NUM_PATTERNS, feedback_code


def partition_counts(guess: str, pool: Sequence[str]) -> np.ndarray:
    """243-bucket histogram of pattern codes for `guess` over `pool`."""
    _code = feedback_code
    codes = np.fromiter((_code(guess, w) for w in pool), dtype=np.int64, count=len(pool))
    return np.bincount(codes, minlength=NUM_PATTERNS)


def entropy_from_counts(counts: np.ndarray) -> float:
    """Entropy in bits of a bucket histogram; 0.0 for an empty or single-bucket one."""
    total = counts.sum()
    if total == 0:
        return 0.0
    p = counts[counts > 0] / total
    # p * log2(1/p) keeps a single full bucket at +0.0
    return float(np.sum(p * np.log2(1.0 / p)))


def entropy(guess: str, pool: Sequence[str]) -> float:
    if not pool:
        return 0.0
    return entropy_from_counts(partition_counts(guess, pool))

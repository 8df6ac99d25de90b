"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the corpus)
  - a history of (guess, pattern) pairs

Return:
  - words that are consistent with ALL feedback seen so far.

A word is consistent with a round iff scoring the old guess against it
reproduces exactly the pattern that was observed.
"""

from typing import Iterable, List, Sequence, Tuple

from .feedback import Pattern, compute_feedback

# History is a sequence of (guess, pattern) tuples as observed by the player.
History = Iterable[Tuple[str, Pattern]]


def is_consistent(word: str, history: History) -> bool:
    """True if `word` would have produced every recorded pattern."""
    for guess, patt in history:
        if compute_feedback(guess, word) != tuple(patt):
            return False
    return True


def filter_candidates(words: Iterable[str], history: Sequence[Tuple[str, Pattern]]) -> List[str]:
    """
    Keep only words that would produce exactly the recorded patterns for every
    (guess, pattern) in `history`. Order is preserved as in `words`.
    """
    return [w for w in words if is_consistent(w, history)]

"""
Candidate Store: the live set of words still consistent with all feedback.

The store only ever narrows. Each filter replaces the held words with the
subset that reproduces the observed pattern; words themselves are never
touched and there is no undo.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Tuple

from .feedback import Pattern, compute_feedback, is_solved, validate_pattern

log = logging.getLogger(__name__)


class CandidateStore:
    def __init__(self, words: Iterable[str]):
        self._words: Tuple[str, ...] = tuple(words)
        self.history: List[Tuple[str, Pattern]] = []

    @property
    def words(self) -> Tuple[str, ...]:
        """Read-only view of the current candidates, in corpus order."""
        return self._words

    def filter(self, guess: str, observed: Iterable[int]) -> Tuple[str, ...]:
        """
        Keep the candidates for which compute_feedback(guess, candidate)
        equals `observed`, and return them.
        """
        patt = validate_pattern(observed, len(guess))
        before = len(self._words)
        self._words = tuple(w for w in self._words if compute_feedback(guess, w) == patt)
        self.history.append((guess, patt))
        log.debug("filter %s %s: %d -> %d candidates",
                  guess, "".join(map(str, patt)), before, len(self._words))
        return self._words

    def count(self) -> int:
        return len(self._words)

    def is_empty(self) -> bool:
        return not self._words

    @staticmethod
    def is_solved(pattern: Iterable[int]) -> bool:
        """Solved iff every digit is green, whatever the candidate count."""
        return is_solved(pattern)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

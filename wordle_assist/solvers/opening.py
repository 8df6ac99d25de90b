"""
Opening-move cache.

The first guess is chosen from a short list of known strong openers. Their
entropy is computed once against the full, unfiltered corpus and reused for
every game played with that corpus, so the expensive first evaluation is paid
once per session rather than once per game.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from wordle_assist.engine.validation import is_valid_word
from .partition import entropy

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntropyCacheEntry:
    word: str
    entropy: float


class OpeningCache:
    def __init__(self, entries: Iterable[EntropyCacheEntry] = ()):
        self.entries: List[EntropyCacheEntry] = list(entries)

    @classmethod
    def build(cls, corpus: Sequence[str], shortlist: Iterable[str], *,
              require_in_corpus: bool = True) -> "OpeningCache":
        """
        Score every shortlist word against the whole corpus.

        Shortlist words that are malformed, or absent from the corpus when
        `require_in_corpus` is set, are skipped.
        """
        known = set(corpus) if require_in_corpus else None
        entries: List[EntropyCacheEntry] = []
        for word in shortlist:
            if not is_valid_word(word):
                log.warning("skipping malformed opener %r", word)
                continue
            if known is not None and word not in known:
                log.debug("opener %s not in corpus; skipped", word)
                continue
            entries.append(EntropyCacheEntry(word, entropy(word, corpus)))
        log.info("opening cache: %s",
                 ", ".join(f"{e.word}={e.entropy:.3f}" for e in entries) or "empty")
        return cls(entries)

    @property
    def populated(self) -> bool:
        return bool(self.entries)

    def best(self) -> EntropyCacheEntry:
        """Highest cached entropy; the earliest shortlist word wins ties."""
        if not self.entries:
            raise LookupError("opening cache is empty")
        best = self.entries[0]
        for e in self.entries[1:]:
            if e.entropy > best.entropy:
                best = e
        return best

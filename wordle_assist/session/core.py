"""
Solve loop primitives.

- SolveSession: the suggest -> feedback -> filter state machine for one game.
- play:         drive a session with a feedback source until it finishes.
- run_case:     self-play one game against a known hidden word.
- run_batch:    run many self-play games with one prepared selector.

These are UI-agnostic so the interactive CLI, the simulation CLI and tests
share the same loop.
"""

from __future__ import annotations

import enum
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from wordle_assist.config import SolverConfig
from wordle_assist.engine.errors import (
    CorpusEmptyError,
    InvalidFeedbackError,
    NoCandidatesError,
    SessionStateError,
)
from wordle_assist.engine.feedback import Pattern, compute_feedback, validate_pattern
from wordle_assist.engine.store import CandidateStore
from wordle_assist.solvers import BaseStrategy, create_solver

log = logging.getLogger(__name__)


class SessionState(enum.Enum):
    AWAITING_GUESS = "awaiting_guess"
    AWAITING_FEEDBACK = "awaiting_feedback"
    FILTERING = "filtering"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class TerminalReason(enum.Enum):
    SOLVED = "solved"
    NO_CANDIDATES = "no candidate words remain"
    CONTRADICTION = "feedback contradicts every remaining word"
    OUT_OF_ATTEMPTS = "attempt budget spent"


@dataclass
class RoundResult:
    """What the display collaborator receives after each round."""
    attempt: int
    guess: str
    pattern: Pattern
    remaining: int
    candidates: List[str] = field(default_factory=list)  # empty unless remaining <= display cap


class SolveSession:
    """
    One game: the Candidate Store, the attempt counter and the first-move flag.

    Usage:
        session = SolveSession(corpus)
        guess = session.suggest()              # None once exhausted
        result = session.submit_feedback((2, 0, 0, 1, 2))
    """

    def __init__(self, corpus: Sequence[str], selector: BaseStrategy | None = None, *,
                 config: SolverConfig | None = None, seed: int | None = None):
        if not corpus:
            raise CorpusEmptyError("the word corpus contains no valid words")

        if selector is None:
            selector = create_solver(config=config)
            selector.reset(corpus=corpus, seed=seed)
        else:
            if config is not None and config != selector.config:
                raise ValueError("session config differs from the selector's config")
            selector.reseed(seed)
        self.selector = selector
        self.config = selector.config

        self.store = CandidateStore(corpus)
        self.state = SessionState.AWAITING_GUESS
        self.attempt = 0
        self.first_move = True
        self.current_guess: Optional[str] = None
        self.rounds: List[RoundResult] = []
        self.reason: Optional[TerminalReason] = None

    # ---- queries ----

    @property
    def is_finished(self) -> bool:
        return self.state in (SessionState.SOLVED, SessionState.EXHAUSTED)

    @property
    def solved(self) -> bool:
        return self.state is SessionState.SOLVED

    @property
    def history(self) -> List[Tuple[str, Pattern]]:
        return [(r.guess, r.pattern) for r in self.rounds]

    def remaining_preview(self) -> List[str]:
        """Remaining candidates when there are few enough to show, else []."""
        if self.store.count() > self.config.display_cap:
            return []
        return list(self.store.words)

    # ---- transitions ----

    def suggest(self) -> Optional[str]:
        """
        Ask the selector for the next guess.

        Returns None (and moves to EXHAUSTED) when the pool is empty.
        """
        if self.state is not SessionState.AWAITING_GUESS:
            raise SessionStateError(f"cannot suggest a guess while {self.state.value}")
        try:
            guess = self.selector.select_guess(self.store.words, is_first_move=self.first_move)
        except NoCandidatesError:
            self._finish(SessionState.EXHAUSTED, TerminalReason.NO_CANDIDATES)
            return None

        self.first_move = False
        self.current_guess = guess
        self.state = SessionState.AWAITING_FEEDBACK
        return guess

    def submit_feedback(self, pattern: Iterable[int]) -> RoundResult:
        """
        Apply feedback for the current guess and advance the state machine.

        Raises:
          InvalidFeedbackError if a digit is outside {0,1,2} or the length is
          wrong; the session is left untouched so the caller can re-ask.
        """
        if self.state is not SessionState.AWAITING_FEEDBACK:
            raise SessionStateError(f"cannot accept feedback while {self.state.value}")
        patt = validate_pattern(pattern, self.config.word_length)

        self.state = SessionState.FILTERING
        self.store.filter(self.current_guess, patt)
        self.attempt += 1

        result = RoundResult(
            attempt=self.attempt,
            guess=self.current_guess,
            pattern=patt,
            remaining=self.store.count(),
            candidates=self.remaining_preview(),
        )
        self.rounds.append(result)

        if self.store.is_solved(patt):
            self._finish(SessionState.SOLVED, TerminalReason.SOLVED)
        elif self.store.is_empty():
            self._finish(SessionState.EXHAUSTED, TerminalReason.CONTRADICTION)
        elif self.attempt >= self.config.max_attempts:
            self._finish(SessionState.EXHAUSTED, TerminalReason.OUT_OF_ATTEMPTS)
        else:
            self.state = SessionState.AWAITING_GUESS
        return result

    def _finish(self, state: SessionState, reason: TerminalReason) -> None:
        self.state = state
        self.reason = reason
        log.debug("session finished after %d attempt(s): %s", self.attempt, reason.value)


def play(
        session: SolveSession,
        read_feedback: Callable[[str], Iterable[int]],
        *,
        on_suggest: Callable[[SolveSession, str], None] | None = None,
        on_round: Callable[[SolveSession, RoundResult], None] | None = None,
        on_invalid: Callable[[InvalidFeedbackError], None] | None = None,
) -> SolveSession:
    """
    Run `session` to a terminal state.

    `read_feedback(guess)` supplies the observed pattern; a pattern rejected
    with InvalidFeedbackError is reported through `on_invalid` and asked for
    again.
    """
    while not session.is_finished:
        guess = session.suggest()
        if guess is None:
            break
        if on_suggest is not None:
            on_suggest(session, guess)

        while True:
            try:
                result = session.submit_feedback(read_feedback(guess))
                break
            except InvalidFeedbackError as e:
                log.debug("rejected feedback for %s: %s", guess, e)
                if on_invalid is not None:
                    on_invalid(e)

        if on_round is not None:
            on_round(session, result)
    return session


@dataclass
class CaseResult:
    """One self-play game, as written to simulation reports."""
    answer: str
    solver_id: str
    reason: TerminalReason
    rounds: List[RoundResult]
    remaining: int
    time_ms: float

    @property
    def success(self) -> bool:
        return self.reason is TerminalReason.SOLVED

    @property
    def guesses(self) -> int:
        return len(self.rounds)

    @property
    def history(self) -> List[Tuple[str, Pattern]]:
        return [(r.guess, r.pattern) for r in self.rounds]


def run_case(selector: BaseStrategy, answer: str, *, corpus: Sequence[str],
             seed: int | None = None) -> CaseResult:
    """
    Self-play one game: the selector's guesses are scored against `answer`.

    `selector` must already be reset() against `corpus` so its opening cache
    is built; only the RNG is reseeded here.
    """
    session = SolveSession(corpus, selector, seed=seed)

    t0 = time.perf_counter()
    play(session, lambda guess: compute_feedback(guess, answer))
    dt = (time.perf_counter() - t0) * 1000.0

    return CaseResult(
        answer=answer,
        solver_id=selector.id,
        reason=session.reason,
        rounds=list(session.rounds),
        remaining=session.store.count(),
        time_ms=dt,
    )


def run_batch(
        selector: BaseStrategy,
        answers: Iterable[str],
        *,
        corpus: Sequence[str],
        seed: int | None = None,
        sample: int | None = None,
        on_case: Callable[[int, CaseResult], None] | None = None,
) -> List[CaseResult]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used. `answers` is consumed lazily, so a progress-bar
    iterator can be passed straight in; `on_case(index, result)` fires after
    each game.

    The opening cache is built once for the whole batch. Each case's seed is
    derived from the base seed (seed + index) so runs are reproducible but
    not identical across cases.
    """
    selector.reset(corpus=corpus)

    cases = itertools.islice(answers, sample) if sample is not None else answers
    out: List[CaseResult] = []
    for idx, ans in enumerate(cases, start=1):
        case_seed = None if seed is None else (seed + idx)
        result = run_case(selector, ans, corpus=corpus, seed=case_seed)
        out.append(result)
        if on_case is not None:
            on_case(idx, result)
    return out

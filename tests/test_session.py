import pytest
from wordle_assist.config import SolverConfig
from wordle_assist.engine import CandidateStore, compute_feedback, is_consistent
from wordle_assist.engine.errors import CorpusEmptyError, InvalidFeedbackError, SessionStateError
from wordle_assist.session import SessionState, SolveSession, TerminalReason, play, run_batch, run_case
from wordle_assist.solvers import create_solver

SMALL = ["apple", "angle", "apply"]
CORPUS = ["crate", "raise", "slate", "trace", "crane", "stare"]
NO_CACHE = SolverConfig(use_opening_cache=False)


def _session(corpus, config=NO_CACHE, seed=1):
    selector = create_solver(config=config)
    selector.reset(corpus=corpus, seed=seed)
    return SolveSession(corpus, selector, config=config)


def test_initial_state():
    s = _session(SMALL)
    assert s.state is SessionState.AWAITING_GUESS
    assert s.attempt == 0 and s.first_move
    assert s.store.count() == 3


def test_empty_corpus_is_fatal():
    with pytest.raises(CorpusEmptyError):
        SolveSession([])


def test_all_green_solves_immediately():
    s = _session(CORPUS)
    guess = s.suggest()
    assert s.state is SessionState.AWAITING_FEEDBACK
    result = s.submit_feedback((2, 2, 2, 2, 2))
    assert s.state is SessionState.SOLVED and s.solved
    assert s.reason is TerminalReason.SOLVED
    assert result.attempt == 1 and result.guess == guess


def test_contradiction_exhausts_session():
    s = _session(SMALL)
    assert s.suggest() == "apple"
    result = s.submit_feedback((0, 0, 0, 0, 0))
    assert result.remaining == 0
    assert s.state is SessionState.EXHAUSTED
    assert s.reason is TerminalReason.CONTRADICTION
    with pytest.raises(SessionStateError):
        s.suggest()


def test_empty_pool_at_selection_reports_no_candidates():
    s = _session(SMALL)
    s.store = CandidateStore([])
    assert s.suggest() is None
    assert s.state is SessionState.EXHAUSTED
    assert s.reason is TerminalReason.NO_CANDIDATES


def test_invalid_feedback_leaves_state_untouched():
    s = _session(SMALL)
    s.suggest()
    with pytest.raises(InvalidFeedbackError):
        s.submit_feedback((3, 0, 0, 0, 0))
    with pytest.raises(InvalidFeedbackError):
        s.submit_feedback((2, 2))
    assert s.state is SessionState.AWAITING_FEEDBACK
    assert s.attempt == 0 and s.store.count() == 3


def test_feedback_before_suggestion_is_rejected():
    s = _session(SMALL)
    with pytest.raises(SessionStateError):
        s.submit_feedback((2, 2, 2, 2, 2))


def test_attempt_budget_exhausts():
    config = SolverConfig(max_attempts=1, use_opening_cache=False)
    s = _session(SMALL, config)
    assert s.suggest() == "apple"
    result = s.submit_feedback((2, 0, 0, 2, 2))
    assert result.candidates == ["angle"]
    assert s.state is SessionState.EXHAUSTED
    assert s.reason is TerminalReason.OUT_OF_ATTEMPTS
    assert s.remaining_preview() == ["angle"]


def test_first_move_flag_consumed():
    config = SolverConfig(opening_shortlist=("crate",))
    s = _session(CORPUS, config)
    assert s.suggest() == "crate"
    assert not s.first_move
    s.submit_feedback(compute_feedback("crate", "stare"))
    assert s.suggest() in s.store.words


def test_display_preview_is_capped():
    config = SolverConfig(display_cap=2, use_opening_cache=False)
    s = _session(CORPUS, config)
    guess = s.suggest()
    result = s.submit_feedback(compute_feedback(guess, "stare"))
    expected = list(s.store.words) if result.remaining <= 2 else []
    assert result.candidates == expected


def test_play_reasks_on_invalid_feedback():
    s = _session(CORPUS)
    answers = iter([(9, 9, 9, 9, 9), (2, 2, 2, 2, 2)])
    errors = []
    rounds = []
    play(s, lambda guess: next(answers), on_invalid=errors.append,
         on_round=lambda session, r: rounds.append(r))
    assert s.solved
    assert len(errors) == 1 and len(rounds) == 1


@pytest.mark.parametrize("answer", CORPUS)
def test_run_case_solves_small_corpus(answer):
    selector = create_solver()
    selector.reset(corpus=CORPUS)
    r = run_case(selector, answer, corpus=CORPUS, seed=5)
    assert r.success is True
    assert r.reason is TerminalReason.SOLVED
    assert 1 <= r.guesses <= 6
    assert r.history[-1] == (answer, (2, 2, 2, 2, 2))
    assert r.solver_id == "adaptive"
    assert is_consistent(answer, r.history)


def test_run_case_unknown_answer_exhausts():
    selector = create_solver()
    selector.reset(corpus=CORPUS)
    r = run_case(selector, "zzzzz", corpus=CORPUS, seed=5)
    assert r.success is False
    assert r.reason is TerminalReason.CONTRADICTION
    assert r.remaining == 0


def test_run_batch_sample_and_callback():
    selector = create_solver()
    seen = []
    results = run_batch(selector, iter(CORPUS), corpus=CORPUS, seed=7, sample=4,
                        on_case=lambda idx, case: seen.append((idx, case.answer)))
    assert [r.answer for r in results] == CORPUS[:4]
    assert seen == list(enumerate(CORPUS[:4], start=1))
    assert all(r.success for r in results)


def test_run_batch_empty_corpus_is_fatal():
    with pytest.raises(CorpusEmptyError):
        run_batch(create_solver(), ["crate"], corpus=[])


def test_session_rejects_mismatched_config():
    selector = create_solver(config=NO_CACHE)
    selector.reset(corpus=CORPUS)
    with pytest.raises(ValueError):
        SolveSession(CORPUS, selector, config=SolverConfig(max_attempts=3, use_opening_cache=False))
    # an equal config, or none at all, is accepted and shared
    assert SolveSession(CORPUS, selector, config=SolverConfig(use_opening_cache=False)).config \
        is selector.config
    assert SolveSession(CORPUS, selector).config is selector.config

import random

import pytest
from wordle_assist.config import SolverConfig
from wordle_assist.engine.errors import CorpusEmptyError, NoCandidatesError
from wordle_assist.solvers import GuessSelector, create_solver, get_solver_ids, register
from wordle_assist.solvers.base import BaseStrategy
from wordle_assist.solvers.opening import EntropyCacheEntry, OpeningCache
from wordle_assist.solvers.partition import entropy
from wordle_assist.solvers.positional_freq import best_positional, build_pos_counts, score_word

CORPUS = ["crate", "raise", "slate", "trace", "crane", "apple", "angle"]


def test_registry_ids():
    assert get_solver_ids() == ["adaptive", "entropy_sample", "positional_freq"]
    assert isinstance(create_solver(), GuessSelector)
    with pytest.raises(ValueError):
        create_solver("nope")


def test_register_rejects_duplicates():
    class Dup(BaseStrategy):
        id = "adaptive"

    with pytest.raises(ValueError):
        register(Dup)


# --- positional frequency ---
def test_positional_scores_and_earliest_tie():
    pool = ["crane", "crate", "trace"]
    counts = build_pos_counts(pool)
    assert score_word("crane", counts) == 12
    assert score_word("trace", counts) == 11
    # crane and crate tie at 12; the earlier one wins
    assert best_positional(pool) == ("crane", 12)
    assert create_solver("positional_freq").select_guess(pool) == "crane"


# --- opening cache ---
def test_opening_cache_prefers_first_on_ties():
    cache = OpeningCache([EntropyCacheEntry("salet", 5.0), EntropyCacheEntry("crate", 5.0),
                          EntropyCacheEntry("raise", 4.0)])
    assert cache.best().word == "salet"
    cache = OpeningCache([EntropyCacheEntry("salet", 5.0), EntropyCacheEntry("crate", 6.0)])
    assert cache.best().word == "crate"
    with pytest.raises(LookupError):
        OpeningCache().best()


def test_opening_cache_skips_words_missing_from_corpus():
    cache = OpeningCache.build(CORPUS, ["salet", "crate", "raise", "roate", "sal3t"])
    assert [e.word for e in cache.entries] == ["crate", "raise"]
    assert cache.entries[0].entropy == pytest.approx(entropy("crate", CORPUS))

    cache = OpeningCache.build(CORPUS, ["salet"], require_in_corpus=False)
    assert cache.populated and cache.best().word == "salet"


def test_first_move_uses_opening_cache():
    selector = create_solver()
    selector.reset(corpus=CORPUS, seed=1)
    e_crate, e_raise = entropy("crate", CORPUS), entropy("raise", CORPUS)
    expected = "crate" if e_crate >= e_raise else "raise"

    assert selector.select_guess(CORPUS, is_first_move=True) == expected
    # later moves fall through to the pool-size policies
    assert selector.select_guess(CORPUS, is_first_move=False) == best_positional(CORPUS)[0]


def test_first_move_without_cache_falls_through():
    selector = create_solver(config=SolverConfig(use_opening_cache=False))
    selector.reset(corpus=CORPUS)
    assert not selector.opening.populated
    assert selector.select_guess(CORPUS, is_first_move=True) == best_positional(CORPUS)[0]


# --- entropy sampling ---
def _replay_sampling(pool, sample_size, seed):
    rng = random.Random(seed)
    best, best_h = None, -1.0
    for _ in range(sample_size):
        g = pool[rng.randrange(len(pool))]
        h = entropy(g, pool)
        if h > best_h:
            best, best_h = g, h
    return best


def test_large_pool_uses_seeded_entropy_sampling():
    config = SolverConfig(sample_threshold=3, sample_size=10, use_opening_cache=False)
    a = create_solver(config=config, rng=random.Random(42))
    b = create_solver(config=config, rng=random.Random(42))
    guess = a.select_guess(CORPUS)

    assert guess == b.select_guess(CORPUS)
    assert guess == _replay_sampling(CORPUS, 10, 42)


def test_entropy_sample_strategy_reseed():
    config = SolverConfig(sample_size=5)
    s = create_solver("entropy_sample", config)
    s.reset(corpus=CORPUS, seed=9)
    assert s.select_guess(CORPUS) == _replay_sampling(CORPUS, 5, 9)


@pytest.mark.parametrize("solver_id", ["adaptive", "entropy_sample", "positional_freq"])
def test_empty_pool_signals_no_candidates(solver_id):
    s = create_solver(solver_id)
    s.reset(corpus=CORPUS)
    with pytest.raises(NoCandidatesError):
        s.select_guess([], is_first_move=True)


def test_config_validation_and_overrides():
    with pytest.raises(ValueError):
        SolverConfig(max_attempts=0)
    with pytest.raises(ValueError):
        SolverConfig(sample_size=0)
    cfg = SolverConfig().with_overrides(max_attempts=4, sample_size=None,
                                        opening_shortlist=("CRATE",))
    assert cfg.max_attempts == 4 and cfg.sample_size == 100
    assert cfg.opening_shortlist == ("crate",)


@pytest.mark.parametrize("solver_id", ["adaptive", "entropy_sample", "positional_freq"])
def test_reset_rejects_empty_corpus(solver_id):
    with pytest.raises(CorpusEmptyError):
        create_solver(solver_id).reset(corpus=[])

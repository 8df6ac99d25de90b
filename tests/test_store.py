from wordle_assist.engine import CandidateStore, compute_feedback, is_consistent

CORPUS = ["crane", "crate", "trace", "slate", "apple", "angle", "apply", "stare", "raise"]


def test_filter_keeps_only_consistent_words():
    store = CandidateStore(CORPUS)
    before = store.count()
    patt = compute_feedback("crate", "trace")
    remaining = store.filter("crate", patt)

    assert "trace" in remaining
    assert store.count() <= before
    assert remaining == store.words
    assert all(compute_feedback("crate", w) == patt for w in remaining)


def test_filter_is_idempotent():
    store = CandidateStore(CORPUS)
    patt = compute_feedback("slate", "stare")
    first = store.filter("slate", patt)
    second = store.filter("slate", patt)
    assert first == second


def test_count_is_monotone_and_history_holds():
    store = CandidateStore(CORPUS)
    counts = [store.count()]
    for guess in ["raise", "crane", "trace"]:
        store.filter(guess, compute_feedback(guess, "trace"))
        counts.append(store.count())
    assert counts == sorted(counts, reverse=True)
    assert store.words == ("trace",)
    assert all(is_consistent(w, store.history) for w in store)


def test_contradictory_feedback_empties_store():
    store = CandidateStore(["apple", "angle", "apply"])
    store.filter("apple", (0, 0, 0, 0, 0))
    assert store.is_empty()
    assert len(store) == 0


def test_is_solved_ignores_candidate_count():
    store = CandidateStore(CORPUS)
    assert store.is_solved((2, 2, 2, 2, 2))
    assert not store.is_solved((2, 2, 2, 2, 0))
    assert "crane" in store

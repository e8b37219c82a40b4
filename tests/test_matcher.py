from __future__ import annotations

import pytest

from typedefender.core.matcher import resolve


def test_duplicate_words_are_all_matched_at_once(make_state, place) -> None:
    state = make_state(["spare"])
    a = place(state, "dog", lane=3)
    b = place(state, "dog", lane=17)

    assert resolve(state, "dog") is True

    assert a.found and b.found
    assert state.lanes[3] is None
    assert state.lanes[17] is None
    assert state.scorer.matches == 2


def test_match_is_case_insensitive_but_exact(make_state, place) -> None:
    state = make_state(["spare"])
    word = place(state, "cat", lane=0)

    assert resolve(state, "ca") is False
    assert resolve(state, "cats") is False
    assert resolve(state, " cat") is False
    assert not word.found

    assert resolve(state, "CAT") is True
    assert word.found


def test_empty_candidate_is_never_checked(make_state, place) -> None:
    state = make_state(["spare"])
    place(state, "cat", lane=0)
    assert resolve(state, "") is False
    assert state.score == 0.0


def test_matched_word_is_never_matched_twice(make_state, place) -> None:
    state = make_state(["spare"])
    place(state, "cat", lane=0)

    assert resolve(state, "cat") is True
    score = state.score
    assert resolve(state, "cat") is False
    assert state.score == score
    assert state.scorer.matches == 1


def test_other_words_untouched(make_state, place) -> None:
    state = make_state(["spare"])
    cat = place(state, "cat", lane=0)
    dog = place(state, "dog", lane=1)

    resolve(state, "cat")

    assert cat.found
    assert not dog.found
    assert state.lanes[1] is dog


def test_early_kills_score_more(make_state, place) -> None:
    state = make_state(["spare"])
    place(state, "early", lane=0, speed=0.1, x=0.0)
    place(state, "late", lane=1, speed=0.1, x=90.0)

    resolve(state, "early")
    early = state.score
    resolve(state, "late")
    late = state.score - early

    assert early == pytest.approx(50.0)
    assert late == pytest.approx(500.0 * 0.1**3 * 0.1)
    assert early > late


def test_case_only_not_full_case_folding(make_state, place) -> None:
    state = make_state(["spare"])
    word = place(state, "straße", lane=0)

    assert resolve(state, "strasse") is False
    assert not word.found

    assert resolve(state, "STRAßE") is True
    assert word.found

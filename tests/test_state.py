"""Tests for the per-position AnimationState machine."""

import pytest

from tick_boxchain import AnimationState, Outcome


def _run_to_settle(state: AnimationState, limit: int = 100) -> tuple[int, int]:
    """Advance until settled; return (ticks taken, settle callbacks fired)."""
    settled = []
    for tick in range(1, limit + 1):
        outcome = state.advance(lambda: settled.append(tick))
        if outcome is Outcome.SETTLED:
            return tick, len(settled)
    raise AssertionError("state never settled")


def test_initial_state_is_idle():
    state = AnimationState()
    assert state.progress == 0.0
    assert state.direction == 0
    assert state.committed == 0.0
    assert not state.animating


def test_begin_from_zero_moves_forward():
    state = AnimationState()
    started = []
    assert state.begin(lambda: started.append(True)) is Outcome.STARTED
    assert state.direction == 1
    assert started == [True]


def test_begin_from_one_moves_backward():
    state = AnimationState(progress=1.0, committed=1.0)
    assert state.begin() is Outcome.STARTED
    assert state.direction == -1


def test_begin_while_animating_is_ignored():
    state = AnimationState()
    state.begin()
    state.advance()
    before = (state.progress, state.direction, state.committed)
    started = []

    assert state.begin(lambda: started.append(True)) is Outcome.IGNORED
    assert (state.progress, state.direction, state.committed) == before
    assert started == []


def test_advance_on_idle_state_is_noop():
    state = AnimationState()
    assert state.advance(lambda: pytest.fail("must not settle")) is Outcome.IDLE
    assert state.progress == 0.0


def test_forward_transition_settles_once():
    state = AnimationState()
    state.begin()
    ticks, fired = _run_to_settle(state)

    assert fired == 1
    assert ticks in (20, 21)
    assert state.progress == 1.0
    assert state.committed == 1.0
    assert state.direction == 0


def test_backward_transition_settles_once():
    state = AnimationState(progress=1.0, committed=1.0)
    state.begin()
    _, fired = _run_to_settle(state)

    assert fired == 1
    assert state.progress == 0.0
    assert state.committed == 0.0
    assert state.direction == 0


def test_progress_climbs_monotonically_while_animating():
    state = AnimationState()
    state.begin()
    last = state.progress
    while state.advance() is Outcome.CONTINUING:
        assert state.progress > last
        last = state.progress


def test_advance_after_settle_is_idle():
    state = AnimationState()
    state.begin()
    _run_to_settle(state)
    assert state.advance() is Outcome.IDLE
    assert state.committed == 1.0


def test_custom_gap_settles_faster():
    state = AnimationState(gap=0.25)
    state.begin()
    ticks, _ = _run_to_settle(state)
    assert ticks == 5

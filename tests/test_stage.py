"""Integration tests for Stage tap handling, ticking, and rendering."""

import pytest

from tick_boxchain import ChainConfig, Stage


@pytest.fixture
def redraws():
    return []


@pytest.fixture
def stage(timers, redraws):
    return Stage(timers, lambda: redraws.append(timers.now_ms), ChainConfig(nodes=5))


def test_stage_starts_idle(stage):
    assert not stage.animating
    assert not stage.ticker.active
    assert stage.cursor.current is stage.chain.head
    assert len(stage.chain) == 5


def test_tap_begins_and_redraws_immediately(stage, timers, redraws):
    assert stage.handle_tap()
    assert stage.animating
    assert stage.ticker.active
    assert redraws == [0]
    assert timers.pending == 1


def test_tap_runs_one_position_to_settlement(stage, timers, redraws):
    stage.handle_tap()
    ticks = timers.run_until_idle()

    assert not stage.ticker.active
    assert not stage.animating
    assert stage.chain[0].state.committed == 1.0
    assert stage.chain[1].state.committed == 0.0
    assert stage.cursor.current is stage.chain[1]
    # one on tap, one per tick, one final on settlement
    assert len(redraws) == ticks + 2


def test_tap_while_animating_is_ignored(stage, timers):
    stage.handle_tap()
    timers.advance(stage.config.period_ms * 3)
    head = stage.chain.head
    before = (head.state.progress, head.state.direction, head.state.committed)

    assert not stage.handle_tap()
    assert (head.state.progress, head.state.direction, head.state.committed) == before
    assert timers.pending == 1


def test_stray_ticks_after_settlement_do_nothing(stage, timers):
    stage.handle_tap()
    timers.run_until_idle()
    snapshot = [(p.state.progress, p.state.direction) for p in stage.chain]
    stage._on_tick()
    assert [(p.state.progress, p.state.direction) for p in stage.chain] == snapshot
    assert stage.cursor.current is stage.chain[1]
    assert not stage.ticker.active


def test_repeated_taps_sweep_forward_then_back(stage, timers):
    order = []
    for _ in range(10):
        order.append(stage.cursor.current.index)
        stage.handle_tap()
        timers.run_until_idle()
    assert order == [0, 1, 2, 3, 4, 4, 3, 2, 1, 0]
    assert all(p.state.committed == 0.0 for p in stage.chain)
    assert stage.cursor.traversal_direction == 1


def test_render_fills_background_then_draws_chain(stage, recording_surface):
    stage.render(recording_surface)
    config = stage.config
    assert recording_surface.calls[0] == ("fill_rect", 0, 0, config.width, config.height)
    assert recording_surface.fill_color == config.back_color
    assert recording_surface.stroke_color == config.fore_color
    assert len(recording_surface.named("stroke_rect")) == config.nodes


def test_default_config_used_when_omitted(timers):
    stage = Stage(timers, lambda: None)
    assert stage.config == ChainConfig()
    assert stage.ticker.clock.period_ms == 50

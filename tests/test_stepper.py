from __future__ import annotations

import pytest

from algotrace import Recorder
from algotrace.engine import SPEED_PRESETS, Stepper, StepperState
from algotrace.algorithms.step import StepKind
from algotrace.engine.stepper import MAX_SPEED, MIN_SPEED


@pytest.fixture
def steps():
    return Recorder("bubble-sort", array=[3, 1, 2]).generate_steps()


def test_new_stepper_is_idle() -> None:
    s = Stepper()

    assert s.state is StepperState.IDLE
    assert s.current_step is None
    assert s.total_steps == 0
    assert not s.next_step()
    assert not s.prev_step()
    assert not s.rewind()
    assert not s.jump_to_end()


def test_load_shows_first_step(steps) -> None:
    s = Stepper()
    s.load(steps)

    assert s.state is StepperState.PAUSED
    assert s.current_idx == 0
    assert s.current_step is steps[0]
    assert s.total_steps == len(steps)


def test_load_clamps_position(steps) -> None:
    s = Stepper()

    s.load(steps, position=-5)
    assert s.current_idx == 0

    s.load(steps, position=10_000)
    assert s.current_idx == len(steps) - 1
    assert s.is_finished


def test_load_empty_trace_stays_idle() -> None:
    s = Stepper()
    s.load([])

    assert s.state is StepperState.IDLE
    assert s.current_idx == -1


def test_next_and_prev_walk_the_trace(steps) -> None:
    s = Stepper()
    s.load(steps)

    assert not s.prev_step()
    assert s.next_step()
    assert s.current_idx == 1
    assert s.prev_step()
    assert s.current_idx == 0


def test_next_at_end_returns_false_and_finishes(steps) -> None:
    s = Stepper()
    s.load(steps)
    while s.next_step():
        pass

    assert s.current_idx == len(steps) - 1
    assert s.is_finished
    assert s.current_step.kind.value == "complete"
    assert not s.next_step()


def test_prev_from_end_leaves_finished_state(steps) -> None:
    s = Stepper()
    s.load(steps)
    s.jump_to_end()

    assert s.prev_step()
    assert s.state is StepperState.PAUSED


def test_goto_step(steps) -> None:
    s = Stepper()
    s.load(steps)

    assert s.goto_step(2)
    assert s.current_idx == 2
    assert not s.goto_step(len(steps))
    assert not s.goto_step(-1)
    assert s.current_idx == 2

    assert s.goto_step(len(steps) - 1)
    assert s.is_finished
    assert s.goto_step(0)
    assert s.state is StepperState.PAUSED


def test_rewind_and_end_do_not_regenerate(steps) -> None:
    s = Stepper()
    s.load(steps)
    s.jump_to_end()
    s.rewind()

    assert s.current_idx == 0
    assert s.steps == steps
    assert s.current_step is steps[0]


def test_on_step_fires_on_every_move(steps) -> None:
    seen = []
    s = Stepper(on_step=seen.append)
    s.load(steps)
    s.next_step()
    s.prev_step()
    s.next_step()

    assert [step.id for step in seen] == [0, 1, 0, 1]


def test_play_and_tick_advance_on_interval(steps) -> None:
    s = Stepper()
    s.load(steps)
    s.play()
    start = s._last_advance

    assert s.is_playing
    assert s.interval_ms == 400
    assert not s.tick(start + 0.1)
    assert s.tick(start + 0.45)
    assert s.current_idx == 1
    assert not s.tick(start + 0.5)
    assert s.tick(start + 0.9)
    assert s.current_idx == 2


def test_tick_does_nothing_when_paused(steps) -> None:
    s = Stepper()
    s.load(steps)
    s.play()
    s.pause()

    assert s.state is StepperState.PAUSED
    assert not s.tick(s._last_advance + 100)
    assert s.current_idx == 0


def test_play_runs_to_the_end_and_stops(steps) -> None:
    s = Stepper()
    s.load(steps)
    s.set_speed("turbo")
    s.play()
    now = s._last_advance
    for _ in range(len(steps) + 5):
        now += 1
        s.tick(now)

    assert s.is_finished
    assert not s.is_playing
    assert s.current_idx == len(steps) - 1


def test_play_is_ignored_when_finished(steps) -> None:
    s = Stepper()
    s.load(steps)
    s.jump_to_end()
    s.play()

    assert s.state is StepperState.FINISHED


def test_toggle_play(steps) -> None:
    s = Stepper()
    s.load(steps)

    s.toggle_play()
    assert s.is_playing
    s.toggle_play()
    assert s.state is StepperState.PAUSED


def test_reset_returns_to_idle(steps) -> None:
    s = Stepper()
    s.load(steps)
    s.reset()

    assert s.state is StepperState.IDLE
    assert s.steps == []
    assert s.current_step is None


@pytest.mark.parametrize("preset", list(SPEED_PRESETS))
def test_speed_presets_set_interval(preset) -> None:
    s = Stepper()
    s.set_speed(preset)

    assert s.speed == SPEED_PRESETS[preset]
    assert s.interval_ms == pytest.approx(1000 / SPEED_PRESETS[preset])


def test_unknown_preset_falls_back_to_medium() -> None:
    s = Stepper()
    s.set_speed("ludicrous")

    assert s.speed == SPEED_PRESETS["medium"]


def test_speed_value_is_clamped() -> None:
    s = Stepper()

    s.set_speed_value(0.0)
    assert s.speed == MIN_SPEED
    s.set_speed_value(1e6)
    assert s.speed == MAX_SPEED
    s.set_speed_value(4)
    assert s.interval_ms == 250


def test_seek_jumps_between_steps_of_one_kind(steps) -> None:
    s = Stepper()
    s.load(steps)
    swaps = [st.id for st in steps if st.kind is StepKind.SWAP]

    assert s.seek(StepKind.SWAP)
    assert s.current_idx == swaps[0]
    assert s.seek(StepKind.SWAP)
    assert s.current_idx == swaps[1]
    assert s.seek(StepKind.SWAP, forward=False)
    assert s.current_idx == swaps[0]
    assert not s.seek(StepKind.INIT)
    assert s.current_idx == swaps[0]


def test_seek_to_complete_finishes(steps) -> None:
    s = Stepper()
    s.load(steps)

    assert s.seek(StepKind.COMPLETE)
    assert s.is_finished


def test_progress(steps) -> None:
    s = Stepper()
    assert s.progress == 0.0

    s.load(steps)
    assert s.progress == 0.0
    s.jump_to_end()
    assert s.progress == 1.0

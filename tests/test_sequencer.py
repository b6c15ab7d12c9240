"""Tests for the brewing step sequencer state machine."""
import pytest
from brewhouse.sequencer.machine import RunStatus, StepSequencer
from brewhouse.sequencer.stages import DEFAULT_STAGES, StageDefinition, StageState


def make_stages(*durations):
    return [
        StageDefinition(id=f"stage-{i}", name=f"Stage {i}", description="", duration=d)
        for i, d in enumerate(durations)
    ]


def tick_n(seq: StepSequencer, n: int) -> None:
    for _ in range(n):
        seq.tick()


def assert_ordering_holds(seq: StepSequencer) -> None:
    states = seq.states
    index = seq.current_index
    assert sum(1 for s in states if s == StageState.ACTIVE) <= 1, f"More than one active stage: {states}"
    assert all(s == StageState.COMPLETED for s in states[:index]), f"Stages before {index} not completed: {states}"
    assert all(s == StageState.PENDING for s in states[index + 1:]), f"Stages after {index} not pending: {states}"


def test_fresh_run_is_idle():
    seq = StepSequencer(make_stages(15, 60))

    assert seq.status == RunStatus.IDLE
    assert seq.current_index == 0
    assert seq.elapsed == 0
    assert seq.total_elapsed == 0
    assert not seq.is_running
    assert seq.states == (StageState.PENDING, StageState.PENDING)


def test_empty_stage_table_rejected():
    with pytest.raises(ValueError):
        StepSequencer([])


def test_milling_then_mashing_scenario():
    seq = StepSequencer([
        StageDefinition(id="milling", name="Milling", description="", duration=15),
        StageDefinition(id="mashing", name="Mashing", description="", duration=60),
    ])
    seq.start()
    assert seq.states[0] == StageState.ACTIVE

    tick_n(seq, 15)
    assert seq.states[0] == StageState.COMPLETED
    assert seq.states[1] == StageState.ACTIVE, "Next stage should activate without a manual start"
    assert seq.current_index == 1
    assert seq.elapsed == 0
    assert seq.total_elapsed == 15
    assert seq.is_running

    tick_n(seq, 60)
    assert seq.states[1] == StageState.COMPLETED
    assert seq.is_finished
    assert not seq.is_running
    assert seq.total_elapsed == 75
    assert seq.overall_progress == 100
    assert seq.status == RunStatus.FINISHED


@pytest.mark.parametrize("durations", [(1,), (15, 60), (3, 1, 4, 1, 5), (2, 2, 2, 2)])
def test_ticking_total_duration_completes_every_stage(durations):
    seq = StepSequencer(make_stages(*durations))
    seq.start()

    tick_n(seq, sum(durations))

    assert seq.completed_count == len(durations)
    assert not seq.is_running
    assert seq.is_finished


def test_ordering_invariant_holds_at_every_step():
    seq = StepSequencer(make_stages(2, 3, 1))
    assert_ordering_holds(seq)
    seq.start()
    for step in range(8):
        assert_ordering_holds(seq)
        if step == 3:
            seq.pause()
            assert_ordering_holds(seq)
            seq.start()
        seq.tick()
    assert_ordering_holds(seq)


def test_pause_marks_stage_paused_and_keeps_elapsed():
    seq = StepSequencer(make_stages(10, 10))
    seq.start()
    tick_n(seq, 4)
    seq.pause()

    assert seq.states[0] == StageState.PAUSED
    assert seq.status == RunStatus.PAUSED
    assert seq.elapsed == 4
    assert seq.total_elapsed == 4


def test_ticks_while_paused_are_ignored():
    seq = StepSequencer(make_stages(10))
    seq.start()
    tick_n(seq, 2)
    seq.pause()
    tick_n(seq, 5)

    assert seq.elapsed == 2
    assert seq.total_elapsed == 2


def test_pause_resume_matches_uninterrupted_run():
    paused = StepSequencer(make_stages(5, 7, 3))
    paused.start()
    tick_n(paused, 6)
    paused.pause()
    paused.start()
    tick_n(paused, 4)

    straight = StepSequencer(make_stages(5, 7, 3))
    straight.start()
    tick_n(straight, 10)

    assert paused.current_index == straight.current_index
    assert paused.elapsed == straight.elapsed
    assert paused.total_elapsed == straight.total_elapsed
    assert paused.states == straight.states


def test_resume_reactivates_current_stage():
    seq = StepSequencer(make_stages(10))
    seq.start()
    seq.tick()
    seq.pause()
    seq.start()

    assert seq.states[0] == StageState.ACTIVE
    assert seq.is_running
    assert seq.elapsed == 1


def test_pause_when_not_running_is_noop():
    seq = StepSequencer(make_stages(10))
    seq.pause()

    assert seq.states[0] == StageState.PENDING
    assert seq.status == RunStatus.IDLE


def test_double_start_is_noop():
    seq = StepSequencer(make_stages(10))
    seq.start()
    seq.tick()
    seq.start()

    assert seq.elapsed == 1
    assert seq.states[0] == StageState.ACTIVE


def test_start_after_finish_is_noop():
    seq = StepSequencer(make_stages(1))
    seq.start()
    seq.tick()
    assert seq.is_finished

    seq.start()
    seq.tick()

    assert not seq.is_running
    assert seq.total_elapsed == 1
    assert seq.states == (StageState.COMPLETED,)


def test_reset_returns_to_initial_state_from_any_point():
    seq = StepSequencer(make_stages(2, 2, 2))
    seq.start()
    tick_n(seq, 3)
    seq.pause()
    seq.reset()

    assert seq.current_index == 0
    assert seq.elapsed == 0
    assert seq.total_elapsed == 0
    assert not seq.is_running
    assert not seq.is_finished
    assert all(s == StageState.PENDING for s in seq.states)

    seq.start()
    tick_n(seq, 6)
    assert seq.is_finished
    seq.reset()
    assert seq.status == RunStatus.IDLE
    assert seq.completed_count == 0


def test_reset_does_not_touch_definitions():
    definitions = make_stages(4, 5)
    seq = StepSequencer(definitions)
    seq.start()
    tick_n(seq, 6)
    seq.reset()

    assert seq.definitions == tuple(definitions)


def test_zero_duration_stage_completes_on_next_tick_not_before():
    seq = StepSequencer(make_stages(1, 0, 2))
    seq.start()
    seq.tick()

    assert seq.current_index == 1
    assert seq.states[1] == StageState.ACTIVE, "Zero-length stage must not be skipped pre-emptively"

    seq.tick()
    assert seq.states[1] == StageState.COMPLETED
    assert seq.current_index == 2
    assert seq.states[2] == StageState.ACTIVE


def test_overall_progress_is_count_weighted():
    seq = StepSequencer(make_stages(1, 20160))
    seq.start()
    seq.tick()

    assert seq.overall_progress == 50, "A one-minute stage counts as much as a fourteen-day one"


def test_stage_progress_percentage():
    seq = StepSequencer(make_stages(60))
    seq.start()
    tick_n(seq, 15)
    assert seq.stage_progress == 25

    tick_n(seq, 45)
    assert seq.stage_progress == 100


def test_snapshot_reports_stage_views():
    seq = StepSequencer(make_stages(2, 3))
    seq.start()
    tick_n(seq, 3)

    snap = seq.snapshot()

    assert snap.status == RunStatus.RUNNING
    assert snap.current_index == 1
    assert snap.elapsed == 1
    assert snap.total_elapsed == 3
    assert [s.state for s in snap.stages] == [StageState.COMPLETED, StageState.ACTIVE]
    assert [s.elapsed for s in snap.stages] == [2, 1]
    assert snap.overall_progress == 50
    assert snap.completed_count == 1
    assert snap.total_elapsed_display == "3m"


def test_default_stage_table_runs_to_completion():
    seq = StepSequencer(DEFAULT_STAGES)
    seq.start()

    tick_n(seq, sum(s.duration for s in DEFAULT_STAGES))

    assert seq.is_finished
    assert seq.overall_progress == 100
    assert seq.snapshot().total_elapsed_display == "21d 4h"

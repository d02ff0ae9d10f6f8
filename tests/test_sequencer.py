from __future__ import annotations

import pytest

from forecast_builder.models.common import STEP_LABELS, STEP_ORDER, Step
from forecast_builder.models.state import default_state
from forecast_builder.services import reducers, sequencer
from forecast_builder.services.calculator import calculate_forecast


@pytest.mark.parametrize("moves", range(0, 7))
def test_next_step_completes_every_departed_step(moves):
    state = default_state(2026)
    for _ in range(moves):
        state = sequencer.next_step(state)

    position = STEP_ORDER.index(state.current_step)
    assert state.current_step == STEP_ORDER[min(moves, len(STEP_ORDER) - 1)]
    assert set(state.completed_steps) == set(STEP_ORDER[:position])


def test_next_step_at_review_is_no_op():
    state = sequencer.go_to_step(default_state(2026), Step.REVIEW)
    assert sequencer.next_step(state) is state


def test_jumps_never_complete_steps():
    state = default_state(2026)
    for step in (Step.REVIEW, Step.TEAM, "baseline", Step.INVESTMENTS):
        state = sequencer.go_to_step(state, step)
        assert state.completed_steps == ()
    assert state.current_step == Step.INVESTMENTS


def test_go_to_unknown_step_is_rejected():
    with pytest.raises(ValueError):
        sequencer.go_to_step(default_state(2026), "done")


def test_complete_step_is_idempotent():
    state = sequencer.complete_step(default_state(2026), Step.TEAM)
    again = sequencer.complete_step(state, "team")
    assert again is state
    assert state.completed_steps == (Step.TEAM,)


def test_previous_step_keeps_completion():
    state = sequencer.next_step(sequencer.next_step(default_state(2026)))
    state = sequencer.previous_step(state)
    assert state.current_step == Step.BASELINE
    assert set(state.completed_steps) == {Step.GOALS, Step.BASELINE}
    assert sequencer.previous_step(sequencer.go_to_step(state, Step.GOALS)).current_step == Step.GOALS


def test_navigation_predicates():
    state = default_state(2026)
    assert not sequencer.can_go_back(state)
    assert sequencer.can_go_forward(state)
    review = sequencer.go_to_step(state, Step.REVIEW)
    assert sequencer.can_go_back(review)
    assert not sequencer.can_go_forward(review)
    assert sequencer.is_last_step(review)


def test_can_save_requires_review_and_on_track():
    on_track = reducers.set_targets(default_state(2026), {"revenue": 100_000, "net_profit": 10_000})
    off_track = reducers.set_targets(on_track, {"net_profit": 90_000})

    assert not sequencer.can_save(on_track, calculate_forecast(on_track))
    review = sequencer.go_to_step(on_track, Step.REVIEW)
    assert sequencer.can_save(review, calculate_forecast(review))
    review_off = sequencer.go_to_step(off_track, Step.REVIEW)
    assert not sequencer.can_save(review_off, calculate_forecast(review_off))


def test_every_step_has_a_label():
    assert [STEP_LABELS[step] for step in STEP_ORDER] == ["Goals", "Prior Year", "Team", "Investments", "Review"]

"""Step navigation over the fixed ``goals -> ... -> review`` order.

Forward moves through ``next_step`` mark the step being left as completed.
Direct jumps and backward moves never touch the completion set.
"""
from __future__ import annotations

from typing import Optional

from ..models.common import STEP_ORDER, Step
from ..models.results import ForecastCalculations
from ..models.state import ForecastState


def _index(step: Step) -> int:
    return STEP_ORDER.index(step)


def following_step(step: Step) -> Optional[Step]:
    index = _index(step)
    if index < len(STEP_ORDER) - 1:
        return STEP_ORDER[index + 1]
    return None


def preceding_step(step: Step) -> Optional[Step]:
    index = _index(step)
    if index > 0:
        return STEP_ORDER[index - 1]
    return None


def go_to_step(state: ForecastState, step: Step | str) -> ForecastState:
    return state.model_copy(update={"current_step": Step(step)})


def complete_step(state: ForecastState, step: Step | str) -> ForecastState:
    step = Step(step)
    if step in state.completed_steps:
        return state
    return state.model_copy(update={"completed_steps": (*state.completed_steps, step)})


def next_step(state: ForecastState) -> ForecastState:
    upcoming = following_step(state.current_step)
    if upcoming is None:
        return state
    return go_to_step(complete_step(state, state.current_step), upcoming)


def previous_step(state: ForecastState) -> ForecastState:
    earlier = preceding_step(state.current_step)
    if earlier is None:
        return state
    return go_to_step(state, earlier)


def can_go_back(state: ForecastState) -> bool:
    return preceding_step(state.current_step) is not None


def can_go_forward(state: ForecastState) -> bool:
    return following_step(state.current_step) is not None


def is_last_step(state: ForecastState) -> bool:
    return state.current_step == STEP_ORDER[-1]


def can_save(state: ForecastState, calculations: ForecastCalculations) -> bool:
    """Saving is offered on the review step, and only while the plan meets its profit target."""
    return is_last_step(state) and calculations.is_on_track

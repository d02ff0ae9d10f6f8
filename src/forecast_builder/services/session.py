from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Sequence

from ..models.common import Step
from ..models.results import ForecastCalculations
from ..models.seed import SeedData
from ..models.state import ForecastState, default_state
from . import reducers, seeding, sequencer
from .calculator import ForecastCalculator


class ForecastSession:
    """Owns the live snapshot of one forecast-in-progress.

    Each operation swaps in the snapshot returned by a reducer and then
    recomputes the calculations from scratch.
    """

    def __init__(
        self,
        fiscal_year: int,
        state: ForecastState | None = None,
        calculator: ForecastCalculator | None = None,
    ) -> None:
        self.calculator = calculator or ForecastCalculator()
        self.state = state if state is not None else default_state(fiscal_year)
        self.calculations = self.calculator.run(self.state)

    def _apply(self, transition: Callable[..., ForecastState], *args: Any) -> ForecastState:
        self.state = transition(self.state, *args)
        self.calculations = self.calculator.run(self.state)
        return self.state

    def initialize_from_data(self, data: SeedData | Mapping[str, Any]) -> ForecastState:
        return self._apply(seeding.initialize_from_data, data)

    def set_targets(self, changes: Mapping[str, Any]) -> ForecastState:
        return self._apply(reducers.set_targets, changes)

    def set_baseline(self, changes: Mapping[str, Any]) -> ForecastState:
        return self._apply(reducers.set_baseline, changes)

    def set_opex_inflation(self, percent: float) -> ForecastState:
        return self._apply(reducers.set_opex_inflation, percent)

    def set_salary_increase(self, percent: float) -> ForecastState:
        return self._apply(reducers.set_salary_increase, percent)

    def set_existing_team(self, members: Iterable[Any]) -> ForecastState:
        return self._apply(reducers.set_existing_team, members)

    def add_team_member(self, data: Any) -> ForecastState:
        return self._apply(reducers.add_team_member, data)

    def update_team_member(self, member_id: str, changes: Mapping[str, Any]) -> ForecastState:
        return self._apply(reducers.update_team_member, member_id, changes)

    def remove_team_member(self, member_id: str) -> ForecastState:
        return self._apply(reducers.remove_team_member, member_id)

    def add_planned_hire(self, data: Any) -> ForecastState:
        return self._apply(reducers.add_planned_hire, data)

    def update_planned_hire(self, hire_id: str, changes: Mapping[str, Any]) -> ForecastState:
        return self._apply(reducers.update_planned_hire, hire_id, changes)

    def remove_planned_hire(self, hire_id: str) -> ForecastState:
        return self._apply(reducers.remove_planned_hire, hire_id)

    def add_investment(self, data: Any) -> ForecastState:
        return self._apply(reducers.add_investment, data)

    def remove_investment(self, investment_id: str) -> ForecastState:
        return self._apply(reducers.remove_investment, investment_id)

    def set_years_selected(self, years: Sequence[int]) -> ForecastState:
        return self._apply(reducers.set_years_selected, years)

    def go_to_step(self, step: Step | str) -> ForecastState:
        return self._apply(sequencer.go_to_step, step)

    def complete_step(self, step: Step | str) -> ForecastState:
        return self._apply(sequencer.complete_step, step)

    def next_step(self) -> ForecastState:
        return self._apply(sequencer.next_step)

    def previous_step(self) -> ForecastState:
        return self._apply(sequencer.previous_step)

    def can_save(self) -> bool:
        return sequencer.can_save(self.state, self.calculations)

    def snapshot(self) -> tuple[ForecastState, ForecastCalculations]:
        return self.state, self.calculations

from __future__ import annotations

from typing import Tuple

from pydantic import Field

from .baseline import ForecastBaseline
from .common import FrozenModel, Step
from .investments import Investment
from .targets import ForecastTargets
from .team import TeamPlan


class ForecastState(FrozenModel):
    fiscal_year: int
    current_step: Step = Step.GOALS
    completed_steps: Tuple[Step, ...] = Field(default_factory=tuple)
    targets: ForecastTargets = Field(default_factory=ForecastTargets)
    baseline: ForecastBaseline = Field(default_factory=ForecastBaseline)
    team: TeamPlan = Field(default_factory=TeamPlan)
    investments: Tuple[Investment, ...] = Field(default_factory=tuple)
    years_selected: Tuple[int, ...] = (1,)


def default_state(fiscal_year: int) -> ForecastState:
    return ForecastState(fiscal_year=fiscal_year)

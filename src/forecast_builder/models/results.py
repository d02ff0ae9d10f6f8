from __future__ import annotations

from enum import Enum

from .common import FrozenModel


class BudgetStatus(str, Enum):
    ON_TRACK = "on_track"
    WARNING = "warning"
    OVER_BUDGET = "over_budget"


class ForecastCalculations(FrozenModel):
    expense_budget: float

    forecast_cogs: float
    cogs_percent: float

    gross_profit: float
    gross_profit_percent: float

    team_costs_cogs: float
    team_costs_opex: float
    total_team_costs: float

    baseline_opex: float
    total_opex: float

    total_investments_opex: float
    total_investments_capex: float
    total_investments: float

    total_expenses: float
    projected_profit: float
    budget_remaining: float
    budget_used_percent: float

    profit_variance: float
    is_on_track: bool

    def budget_status(self, warning_percent: float = 85.0) -> BudgetStatus:
        if self.budget_used_percent > 100:
            return BudgetStatus.OVER_BUDGET
        if self.budget_used_percent > warning_percent:
            return BudgetStatus.WARNING
        return BudgetStatus.ON_TRACK

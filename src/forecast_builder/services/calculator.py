from __future__ import annotations

from typing import Tuple

from ..models.baseline import ForecastBaseline
from ..models.common import CostClassification, InvestmentType
from ..models.investments import Investment
from ..models.results import ForecastCalculations
from ..models.state import ForecastState
from ..models.team import TeamPlan


DEFAULT_COGS_PERCENT = 30.0


class ForecastCalculator:
    """Derives the year-one P&L projection from a forecast snapshot.

    ``run`` has no side effects and keeps no state between calls, so it is
    re-run in full after every mutation.
    """

    def run(self, state: ForecastState) -> ForecastCalculations:
        targets = state.targets
        revenue = targets.revenue

        expense_budget = revenue - targets.net_profit

        cogs_percent = state.baseline.prior_year_cogs_percent or DEFAULT_COGS_PERCENT
        forecast_cogs = revenue * (cogs_percent / 100)

        gross_profit = revenue - forecast_cogs
        gross_profit_percent = (gross_profit / revenue) * 100 if revenue > 0 else 0.0

        team_costs_cogs, team_costs_opex = self._compute_team_costs(state.team)
        total_team_costs = team_costs_cogs + team_costs_opex

        baseline_opex, total_opex = self._compute_opex(state.baseline)

        total_investments_opex, total_investments_capex = self._compute_investments(state.investments)
        total_investments = total_investments_opex + total_investments_capex

        # CapEx and COGS-classified salaries stay out of the P&L expense figure.
        total_expenses = forecast_cogs + team_costs_opex + total_opex + total_investments_opex
        projected_profit = revenue - total_expenses

        budget_remaining = expense_budget - total_expenses
        budget_used_percent = (total_expenses / expense_budget) * 100 if expense_budget > 0 else 0.0

        profit_variance = projected_profit - targets.net_profit

        return ForecastCalculations(
            expense_budget=expense_budget,
            forecast_cogs=forecast_cogs,
            cogs_percent=cogs_percent,
            gross_profit=gross_profit,
            gross_profit_percent=gross_profit_percent,
            team_costs_cogs=team_costs_cogs,
            team_costs_opex=team_costs_opex,
            total_team_costs=total_team_costs,
            baseline_opex=baseline_opex,
            total_opex=total_opex,
            total_investments_opex=total_investments_opex,
            total_investments_capex=total_investments_capex,
            total_investments=total_investments,
            total_expenses=total_expenses,
            projected_profit=projected_profit,
            budget_remaining=budget_remaining,
            budget_used_percent=budget_used_percent,
            profit_variance=profit_variance,
            is_on_track=profit_variance >= 0,
        )

    def _compute_team_costs(self, team: TeamPlan) -> Tuple[float, float]:
        salary_multiplier = 1 + (team.salary_increase_percent / 100)
        cogs_total = 0.0
        opex_total = 0.0
        for member in team.existing_members:
            adjusted_salary = member.annual_salary * salary_multiplier
            if member.classification == CostClassification.COGS:
                cogs_total += adjusted_salary
            else:
                opex_total += adjusted_salary
        # Hires are costed for the full year whatever their start month.
        for hire in team.planned_hires:
            if hire.classification == CostClassification.COGS:
                cogs_total += hire.annual_salary
            else:
                opex_total += hire.annual_salary
        return cogs_total, opex_total

    def _compute_opex(self, baseline: ForecastBaseline) -> Tuple[float, float]:
        inflation_multiplier = 1 + (baseline.opex_inflation_percent / 100)
        baseline_opex = baseline.prior_year_opex * inflation_multiplier
        category_total = baseline.category_total()
        total_opex = category_total if category_total > 0 else baseline_opex
        return baseline_opex, total_opex

    def _compute_investments(self, investments: Tuple[Investment, ...]) -> Tuple[float, float]:
        opex_total = 0.0
        capex_total = 0.0
        for investment in investments:
            if investment.type == InvestmentType.OPEX:
                opex_total += investment.amount
            else:
                capex_total += investment.amount
        return opex_total, capex_total


def calculate_forecast(state: ForecastState) -> ForecastCalculations:
    return ForecastCalculator().run(state)

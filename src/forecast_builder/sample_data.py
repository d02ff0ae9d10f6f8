from __future__ import annotations

from .models.baseline import ForecastBaseline, OpExCategory
from .models.common import CostClassification, InvestmentType, Step
from .models.investments import Investment
from .models.state import ForecastState
from .models.targets import ForecastTargets
from .models.team import PlannedHire, TeamMember, TeamPlan


def build_sample_state() -> ForecastState:
    targets = ForecastTargets(revenue=1_200_000, gross_profit_percent=60, net_profit=150_000)

    baseline = ForecastBaseline(
        prior_year_revenue=1_000_000,
        prior_year_cogs=350_000,
        prior_year_cogs_percent=35,
        prior_year_opex=220_000,
        monthly_avg_opex=220_000 / 12,
        opex_categories=(
            OpExCategory(id="cat-rent", name="Rent", prior_year_amount=60_000, forecast_amount=63_000),
            OpExCategory(id="cat-software", name="Software", prior_year_amount=24_000, forecast_amount=30_000),
            OpExCategory(
                id="cat-fitout",
                name="Office fit-out",
                prior_year_amount=15_000,
                forecast_amount=0,
                is_one_off=True,
            ),
        ),
        opex_inflation_percent=4,
    )

    team = TeamPlan(
        existing_members=(
            TeamMember(
                id="member-ops-lead",
                name="Alex Chen",
                position="Operations Lead",
                annual_salary=110_000,
                start_date="2019-03",
                classification=CostClassification.OPEX,
            ),
            TeamMember(
                id="member-technician",
                name="Sam Patel",
                position="Technician",
                annual_salary=75_000,
                start_date="2021-07",
                classification=CostClassification.COGS,
                is_from_xero=True,
                external_id="member-technician",
            ),
        ),
        salary_increase_percent=5,
        planned_hires=(
            PlannedHire(
                id="hire-sales",
                name="Sales Manager",
                position="Sales",
                annual_salary=95_000,
                start_date="2025-10",
                classification=CostClassification.OPEX,
            ),
        ),
    )

    investments = (
        Investment(id="inv-campaign", name="Marketing Campaign", amount=25_000, type=InvestmentType.OPEX),
        Investment(id="inv-van", name="Service van", amount=60_000, type=InvestmentType.CAPEX),
    )

    return ForecastState(
        fiscal_year=2026,
        current_step=Step.INVESTMENTS,
        completed_steps=(Step.GOALS, Step.BASELINE, Step.TEAM),
        targets=targets,
        baseline=baseline,
        team=team,
        investments=investments,
    )

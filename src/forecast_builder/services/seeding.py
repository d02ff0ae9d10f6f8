from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Tuple

from ..config import get_settings
from ..models.baseline import ForecastBaseline
from ..models.common import CostClassification, new_id
from ..models.seed import SeedData, SeedGoals, SeedPriorYearPL, SeedTeamRecord
from ..models.state import ForecastState
from ..models.targets import ForecastTargets
from ..models.team import TeamMember
from .calculator import DEFAULT_COGS_PERCENT
from .reducers import MEMBER_PREFIX


logger = logging.getLogger(__name__)

DEFAULT_GROSS_PROFIT_PERCENT = 30.0
DEFAULT_POSITION = "Team Member"
UNKNOWN_NAME = "Unknown"
WEEKS_PER_YEAR = 52


def initialize_from_data(state: ForecastState, data: SeedData | Mapping[str, Any]) -> ForecastState:
    """Overwrite targets, baseline and team from externally supplied records.

    Sections that are absent are left untouched, as is an empty team list.
    Step position and completion are never changed.
    """
    seed = data if isinstance(data, SeedData) else SeedData.model_validate(data)
    update: dict = {}
    if seed.goals is not None:
        update["targets"] = _targets_from_goals(seed.goals)
    if seed.prior_year_pl is not None:
        update["baseline"] = _baseline_from_prior_year(state.baseline, seed.prior_year_pl)
    if seed.team:
        members = _members_from_records(seed.team)
        update["team"] = state.team.model_copy(update={"existing_members": members})
    logger.info(
        "Seeding FY%s forecast: goals=%s prior_year=%s team=%d",
        state.fiscal_year,
        seed.goals is not None,
        seed.prior_year_pl is not None,
        len(seed.team),
    )
    return state.model_copy(update=update)


def _targets_from_goals(goals: SeedGoals) -> ForecastTargets:
    revenue = goals.revenue_target or 0.0
    gross_profit_percent = DEFAULT_GROSS_PROFIT_PERCENT
    if goals.gross_profit_target and revenue > 0:
        gross_profit_percent = (goals.gross_profit_target / revenue) * 100
    return ForecastTargets(
        revenue=revenue,
        gross_profit_percent=gross_profit_percent,
        net_profit=goals.profit_target or 0.0,
    )


def _baseline_from_prior_year(baseline: ForecastBaseline, prior_year: SeedPriorYearPL) -> ForecastBaseline:
    revenue = prior_year.revenue or 0.0
    cogs = prior_year.cogs or 0.0
    opex = prior_year.opex or 0.0
    return baseline.model_copy(
        update={
            "prior_year_revenue": revenue,
            "prior_year_cogs": cogs,
            "prior_year_cogs_percent": (cogs / revenue) * 100 if revenue > 0 else DEFAULT_COGS_PERCENT,
            "prior_year_opex": opex,
            "monthly_avg_opex": opex / 12,
        }
    )


def _members_from_records(records: list[SeedTeamRecord]) -> Tuple[TeamMember, ...]:
    members: Tuple[TeamMember, ...] = ()
    for record in records:
        taken = [member.id for member in members]
        member_id = record.id or record.external_id
        if not member_id or member_id in taken:
            member_id = new_id(MEMBER_PREFIX, taken)
        members = (*members, team_member_from_record(record, member_id))
    return members


def team_member_from_record(record: SeedTeamRecord, member_id: str) -> TeamMember:
    return TeamMember(
        id=member_id,
        name=record.name or "",
        position=record.position or record.role or DEFAULT_POSITION,
        annual_salary=resolve_annual_salary(record),
        start_date=record.start_date,
        end_date=record.end_date,
        classification=record.classification or CostClassification.OPEX,
        is_from_xero=record.is_from_xero,
        external_id=record.external_id,
    )


def resolve_annual_salary(record: SeedTeamRecord) -> float:
    if record.annual_salary:
        return record.annual_salary
    if record.hourly_rate and record.hours_per_week:
        return record.hourly_rate * record.hours_per_week * WEEKS_PER_YEAR
    return get_settings().fallback_annual_salary


def team_record_from_xero(employee: Mapping[str, Any]) -> SeedTeamRecord:
    """Map a raw payroll employee record onto a seed team record."""
    employee_id: Optional[str] = employee.get("EmployeeID") or None
    name = f"{employee.get('FirstName') or ''} {employee.get('LastName') or ''}".strip() or UNKNOWN_NAME
    return SeedTeamRecord(
        id=employee_id,
        name=name,
        position=employee.get("JobTitle") or None,
        annual_salary=employee.get("annualSalary"),
        hourly_rate=employee.get("hourlyRate"),
        hours_per_week=employee.get("hoursPerWeek"),
        start_date=employee.get("StartDate"),
        end_date=employee.get("TerminationDate"),
        classification=CostClassification.OPEX,
        is_from_xero=True,
        external_id=employee_id,
    )

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .common import CostClassification, YearMonth


class SeedModel(BaseModel):
    """Records handed over by the host; accepts snake_case or camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class SeedGoals(SeedModel):
    revenue_target: Optional[float] = Field(None, alias="revenue_target")
    gross_profit_target: Optional[float] = Field(None, alias="gross_profit_target")
    profit_target: Optional[float] = Field(None, alias="profit_target")


class SeedPriorYearPL(SeedModel):
    revenue: Optional[float] = None
    cogs: Optional[float] = None
    opex: Optional[float] = None


class SeedTeamRecord(SeedModel):
    id: Optional[str] = None
    name: Optional[str] = None
    position: Optional[str] = None
    role: Optional[str] = Field(None, description="Legacy name for position")
    annual_salary: Optional[float] = None
    hourly_rate: Optional[float] = None
    hours_per_week: Optional[float] = None
    start_date: YearMonth = None
    end_date: YearMonth = None
    classification: Optional[CostClassification] = None
    is_from_xero: Optional[bool] = None
    external_id: Optional[str] = None


class SeedData(SeedModel):
    goals: Optional[SeedGoals] = None
    prior_year_pl: Optional[SeedPriorYearPL] = Field(None, alias="priorYearPL")
    team: List[SeedTeamRecord] = Field(default_factory=list)

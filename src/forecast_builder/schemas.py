from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .models.common import CostClassification, InvestmentType, RequiredYearMonth, Step, YearMonth
from .models.results import BudgetStatus, ForecastCalculations
from .models.seed import SeedData
from .models.state import ForecastState


class SessionCreateRequest(BaseModel):
    fiscal_year: int
    seed: Optional[SeedData] = Field(default=None, description="Prior-year figures to start from")


class SessionView(BaseModel):
    session_id: str
    state: ForecastState
    calculations: ForecastCalculations
    budget_status: BudgetStatus
    can_save: bool
    headcount: Dict[CostClassification, int]


class TargetsUpdate(BaseModel):
    revenue: Optional[float] = None
    gross_profit_percent: Optional[float] = None
    net_profit: Optional[float] = None


class OpExCategoryInput(BaseModel):
    id: Optional[str] = None
    name: str = ""
    prior_year_amount: float = 0.0
    forecast_amount: float = 0.0
    is_one_off: bool = False


class BaselineUpdate(BaseModel):
    prior_year_revenue: Optional[float] = None
    prior_year_cogs: Optional[float] = None
    prior_year_cogs_percent: Optional[float] = None
    prior_year_opex: Optional[float] = None
    monthly_avg_opex: Optional[float] = None
    opex_categories: Optional[List[OpExCategoryInput]] = None
    opex_inflation_percent: Optional[float] = None


class PercentUpdate(BaseModel):
    percent: float


class TeamMemberCreate(BaseModel):
    name: str = ""
    position: str = ""
    annual_salary: float = 0.0
    start_date: YearMonth = None
    end_date: YearMonth = None
    classification: CostClassification = CostClassification.OPEX
    is_from_xero: Optional[bool] = None
    external_id: Optional[str] = None


class TeamMemberUpdate(BaseModel):
    name: Optional[str] = None
    position: Optional[str] = None
    annual_salary: Optional[float] = None
    start_date: YearMonth = None
    end_date: YearMonth = None
    classification: Optional[CostClassification] = None


class PlannedHireCreate(BaseModel):
    name: str = ""
    position: str = ""
    annual_salary: float = 0.0
    start_date: RequiredYearMonth
    end_date: YearMonth = None
    classification: CostClassification = CostClassification.OPEX


class PlannedHireUpdate(BaseModel):
    name: Optional[str] = None
    position: Optional[str] = None
    annual_salary: Optional[float] = None
    start_date: YearMonth = None
    end_date: YearMonth = None
    classification: Optional[CostClassification] = None


class InvestmentCreate(BaseModel):
    name: str
    amount: float
    type: InvestmentType = InvestmentType.OPEX
    initiative_id: Optional[str] = None


class YearsUpdate(BaseModel):
    years: List[int]


class StepUpdate(BaseModel):
    step: Step


class StepDescriptor(BaseModel):
    step: Step
    label: str


class SaveRequest(BaseModel):
    business_id: str


class SaveResponse(BaseModel):
    forecast_id: str

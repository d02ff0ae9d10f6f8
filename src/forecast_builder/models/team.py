from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import Field

from .common import CostClassification, FrozenModel, RequiredYearMonth, YearMonth


class TeamMember(FrozenModel):
    id: str
    name: str = ""
    position: str = ""
    annual_salary: float = 0.0
    start_date: YearMonth = None
    end_date: YearMonth = None
    classification: CostClassification = CostClassification.OPEX
    is_from_xero: Optional[bool] = None
    external_id: Optional[str] = None


class PlannedHire(FrozenModel):
    id: str
    name: str = ""
    position: str = ""
    annual_salary: float = Field(0.0, description="Full target salary, never escalated")
    start_date: RequiredYearMonth
    end_date: YearMonth = None
    classification: CostClassification = CostClassification.OPEX


class TeamPlan(FrozenModel):
    existing_members: Tuple[TeamMember, ...] = Field(default_factory=tuple)
    salary_increase_percent: float = 6.0
    planned_hires: Tuple[PlannedHire, ...] = Field(default_factory=tuple)

    def headcount_by_classification(self) -> Dict[CostClassification, int]:
        counts = {classification: 0 for classification in CostClassification}
        for person in (*self.existing_members, *self.planned_hires):
            counts[person.classification] += 1
        return counts

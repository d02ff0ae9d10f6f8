from __future__ import annotations

from pydantic import Field

from .common import FrozenModel


class ForecastTargets(FrozenModel):
    revenue: float = Field(0.0, description="Revenue goal for the forecast year")
    gross_profit_percent: float = Field(30.0, description="Gross profit goal as percent of revenue")
    net_profit: float = Field(0.0, description="Net profit goal for the forecast year")

from __future__ import annotations

from typing import Tuple

from pydantic import Field

from .common import FrozenModel


class OpExCategory(FrozenModel):
    id: str
    name: str = ""
    prior_year_amount: float = 0.0
    forecast_amount: float = 0.0
    is_one_off: bool = False


class ForecastBaseline(FrozenModel):
    prior_year_revenue: float = 0.0
    prior_year_cogs: float = 0.0
    prior_year_cogs_percent: float = 30.0
    prior_year_opex: float = 0.0
    monthly_avg_opex: float = 0.0
    opex_categories: Tuple[OpExCategory, ...] = Field(
        default_factory=tuple,
        description="Category detail; a non-zero forecast sum replaces the inflated prior-year OpEx",
    )
    opex_inflation_percent: float = 5.0

    def category_total(self) -> float:
        return sum(category.forecast_amount for category in self.opex_categories)

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .common import FrozenModel, InvestmentType


class Investment(FrozenModel):
    id: str
    name: str = ""
    amount: float = 0.0
    type: InvestmentType = InvestmentType.OPEX
    initiative_id: Optional[str] = None


class InvestmentPreset(BaseModel):
    name: str
    amount: float
    type: InvestmentType


INVESTMENT_PRESETS = (
    InvestmentPreset(name="Marketing Campaign", amount=25000, type=InvestmentType.OPEX),
    InvestmentPreset(name="New Equipment", amount=50000, type=InvestmentType.CAPEX),
    InvestmentPreset(name="Software/Technology", amount=15000, type=InvestmentType.OPEX),
    InvestmentPreset(name="Training & Development", amount=10000, type=InvestmentType.OPEX),
)

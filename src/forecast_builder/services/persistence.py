from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional
from uuid import uuid4

from pydantic import BaseModel

from ..models.results import ForecastCalculations
from ..models.state import ForecastState
from .session import ForecastSession


logger = logging.getLogger(__name__)


class ForecastNotReadyError(Exception):
    """Raised when a save is attempted before review or while the plan misses its target."""


class SavedForecast(BaseModel):
    business_id: str
    fiscal_year: int
    state: ForecastState
    calculations: ForecastCalculations


class ForecastRepository(ABC):
    @abstractmethod
    def save(self, forecast: SavedForecast) -> str:
        """Store the forecast and return its identifier."""

    @abstractmethod
    def get(self, forecast_id: str) -> Optional[SavedForecast]:
        ...


class InMemoryForecastRepository(ForecastRepository):
    def __init__(self) -> None:
        self._forecasts: Dict[str, SavedForecast] = {}

    def save(self, forecast: SavedForecast) -> str:
        forecast_id = uuid4().hex
        self._forecasts[forecast_id] = forecast
        return forecast_id

    def get(self, forecast_id: str) -> Optional[SavedForecast]:
        return self._forecasts.get(forecast_id)


def save_forecast(session: ForecastSession, repository: ForecastRepository, business_id: str) -> str:
    state, calculations = session.snapshot()
    if not session.can_save():
        raise ForecastNotReadyError(
            f"Cannot save forecast: step is {state.current_step.value}, on track is {calculations.is_on_track}"
        )
    forecast_id = repository.save(
        SavedForecast(
            business_id=business_id,
            fiscal_year=state.fiscal_year,
            state=state,
            calculations=calculations,
        )
    )
    logger.info("Saved FY%s forecast %s for business %s", state.fiscal_year, forecast_id, business_id)
    return forecast_id

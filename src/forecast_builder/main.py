from __future__ import annotations

import logging
from typing import Dict, List
from uuid import uuid4

from fastapi import FastAPI, HTTPException

from .config import get_settings
from .models.common import STEP_LABELS, STEP_ORDER
from .models.investments import INVESTMENT_PRESETS, InvestmentPreset
from .schemas import (
    BaselineUpdate,
    InvestmentCreate,
    PercentUpdate,
    PlannedHireCreate,
    PlannedHireUpdate,
    SaveRequest,
    SaveResponse,
    SessionCreateRequest,
    SessionView,
    StepDescriptor,
    StepUpdate,
    TargetsUpdate,
    TeamMemberCreate,
    TeamMemberUpdate,
    YearsUpdate,
)
from .services.persistence import ForecastNotReadyError, InMemoryForecastRepository, save_forecast
from .services.session import ForecastSession


settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_title, version="0.1.0")

SESSIONS: Dict[str, ForecastSession] = {}
repository = InMemoryForecastRepository()


def _get_session(session_id: str) -> ForecastSession:
    session = SESSIONS.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _view(session_id: str, session: ForecastSession) -> SessionView:
    return SessionView(
        session_id=session_id,
        state=session.state,
        calculations=session.calculations,
        budget_status=session.calculations.budget_status(settings.budget_warning_percent),
        can_save=session.can_save(),
        headcount=session.state.team.headcount_by_classification(),
    )


@app.get("/steps", response_model=List[StepDescriptor])
def list_steps() -> List[StepDescriptor]:
    return [StepDescriptor(step=step, label=STEP_LABELS[step]) for step in STEP_ORDER]


@app.get("/investment-presets", response_model=List[InvestmentPreset])
def list_investment_presets() -> List[InvestmentPreset]:
    return list(INVESTMENT_PRESETS)


@app.post("/sessions", response_model=SessionView)
def create_session(payload: SessionCreateRequest) -> SessionView:
    session_id = uuid4().hex
    session = ForecastSession(payload.fiscal_year)
    if payload.seed is not None:
        session.initialize_from_data(payload.seed)
    SESSIONS[session_id] = session
    logger.info("Created forecast session %s for FY%s", session_id, payload.fiscal_year)
    return _view(session_id, session)


@app.get("/sessions/{session_id}", response_model=SessionView)
def get_session(session_id: str) -> SessionView:
    return _view(session_id, _get_session(session_id))


@app.patch("/sessions/{session_id}/targets", response_model=SessionView)
def update_targets(session_id: str, payload: TargetsUpdate) -> SessionView:
    session = _get_session(session_id)
    session.set_targets(payload.model_dump(exclude_unset=True, exclude_none=True))
    return _view(session_id, session)


@app.patch("/sessions/{session_id}/baseline", response_model=SessionView)
def update_baseline(session_id: str, payload: BaselineUpdate) -> SessionView:
    session = _get_session(session_id)
    session.set_baseline(payload.model_dump(exclude_unset=True, exclude_none=True))
    return _view(session_id, session)


@app.put("/sessions/{session_id}/baseline/opex-inflation", response_model=SessionView)
def update_opex_inflation(session_id: str, payload: PercentUpdate) -> SessionView:
    session = _get_session(session_id)
    session.set_opex_inflation(payload.percent)
    return _view(session_id, session)


@app.put("/sessions/{session_id}/team/salary-increase", response_model=SessionView)
def update_salary_increase(session_id: str, payload: PercentUpdate) -> SessionView:
    session = _get_session(session_id)
    session.set_salary_increase(payload.percent)
    return _view(session_id, session)


@app.post("/sessions/{session_id}/team/members", response_model=SessionView)
def add_team_member(session_id: str, payload: TeamMemberCreate) -> SessionView:
    session = _get_session(session_id)
    session.add_team_member(payload.model_dump())
    return _view(session_id, session)


@app.patch("/sessions/{session_id}/team/members/{member_id}", response_model=SessionView)
def update_team_member(session_id: str, member_id: str, payload: TeamMemberUpdate) -> SessionView:
    session = _get_session(session_id)
    session.update_team_member(member_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    return _view(session_id, session)


@app.delete("/sessions/{session_id}/team/members/{member_id}", response_model=SessionView)
def remove_team_member(session_id: str, member_id: str) -> SessionView:
    session = _get_session(session_id)
    session.remove_team_member(member_id)
    return _view(session_id, session)


@app.post("/sessions/{session_id}/team/hires", response_model=SessionView)
def add_planned_hire(session_id: str, payload: PlannedHireCreate) -> SessionView:
    session = _get_session(session_id)
    session.add_planned_hire(payload.model_dump())
    return _view(session_id, session)


@app.patch("/sessions/{session_id}/team/hires/{hire_id}", response_model=SessionView)
def update_planned_hire(session_id: str, hire_id: str, payload: PlannedHireUpdate) -> SessionView:
    session = _get_session(session_id)
    session.update_planned_hire(hire_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    return _view(session_id, session)


@app.delete("/sessions/{session_id}/team/hires/{hire_id}", response_model=SessionView)
def remove_planned_hire(session_id: str, hire_id: str) -> SessionView:
    session = _get_session(session_id)
    session.remove_planned_hire(hire_id)
    return _view(session_id, session)


@app.post("/sessions/{session_id}/investments", response_model=SessionView)
def add_investment(session_id: str, payload: InvestmentCreate) -> SessionView:
    session = _get_session(session_id)
    session.add_investment(payload.model_dump())
    return _view(session_id, session)


@app.delete("/sessions/{session_id}/investments/{investment_id}", response_model=SessionView)
def remove_investment(session_id: str, investment_id: str) -> SessionView:
    session = _get_session(session_id)
    session.remove_investment(investment_id)
    return _view(session_id, session)


@app.put("/sessions/{session_id}/years", response_model=SessionView)
def update_years(session_id: str, payload: YearsUpdate) -> SessionView:
    session = _get_session(session_id)
    session.set_years_selected(payload.years)
    return _view(session_id, session)


@app.put("/sessions/{session_id}/steps/current", response_model=SessionView)
def go_to_step(session_id: str, payload: StepUpdate) -> SessionView:
    session = _get_session(session_id)
    session.go_to_step(payload.step)
    return _view(session_id, session)


@app.post("/sessions/{session_id}/steps/next", response_model=SessionView)
def next_step(session_id: str) -> SessionView:
    session = _get_session(session_id)
    session.next_step()
    return _view(session_id, session)


@app.post("/sessions/{session_id}/steps/previous", response_model=SessionView)
def previous_step(session_id: str) -> SessionView:
    session = _get_session(session_id)
    session.previous_step()
    return _view(session_id, session)


@app.post("/sessions/{session_id}/save", response_model=SaveResponse)
def save_session(session_id: str, payload: SaveRequest) -> SaveResponse:
    session = _get_session(session_id)
    try:
        forecast_id = save_forecast(session, repository, payload.business_id)
    except ForecastNotReadyError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return SaveResponse(forecast_id=forecast_id)


@app.get("/health")
def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}

"""Pure state transitions for a forecast snapshot.

Every function takes the current ``ForecastState`` plus a payload and returns
a new snapshot. Nothing here mutates its input. Lookups by an unknown id are
no-ops and hand back the snapshot unchanged.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence, Tuple, TypeVar

from ..models.common import merge, new_id
from ..models.investments import Investment
from ..models.state import ForecastState
from ..models.team import PlannedHire, TeamMember


logger = logging.getLogger(__name__)

MEMBER_PREFIX = "member"
HIRE_PREFIX = "hire"
INVESTMENT_PREFIX = "inv"
CATEGORY_PREFIX = "cat"

E = TypeVar("E", TeamMember, PlannedHire, Investment)


def _payload(data: Any) -> dict:
    if hasattr(data, "model_dump"):
        data = data.model_dump()
    payload = dict(data)
    payload.pop("id", None)
    return payload


def _append(entries: Tuple[E, ...], model: type[E], prefix: str, data: Any) -> Tuple[E, ...]:
    entry = model.model_validate({**_payload(data), "id": new_id(prefix, (e.id for e in entries))})
    return (*entries, entry)


def _update(entries: Tuple[E, ...], entry_id: str, changes: Mapping[str, Any]) -> Tuple[E, ...] | None:
    if not any(entry.id == entry_id for entry in entries):
        logger.debug("No entry with id %s to update", entry_id)
        return None
    payload = _payload(changes)
    return tuple(merge(entry, payload) if entry.id == entry_id else entry for entry in entries)


def _remove(entries: Tuple[E, ...], entry_id: str) -> Tuple[E, ...] | None:
    remaining = tuple(entry for entry in entries if entry.id != entry_id)
    if len(remaining) == len(entries):
        logger.debug("No entry with id %s to remove", entry_id)
        return None
    return remaining


def _with_team(state: ForecastState, **changes: Any) -> ForecastState:
    return state.model_copy(update={"team": state.team.model_copy(update=changes)})


def set_targets(state: ForecastState, changes: Mapping[str, Any]) -> ForecastState:
    return state.model_copy(update={"targets": merge(state.targets, changes)})


def set_baseline(state: ForecastState, changes: Mapping[str, Any]) -> ForecastState:
    changes = dict(changes)
    if "opex_categories" in changes:
        changes["opex_categories"] = _with_category_ids(changes["opex_categories"])
    return state.model_copy(update={"baseline": merge(state.baseline, changes)})


def _with_category_ids(categories: Iterable[Any]) -> list:
    issued: list = []
    for data in categories:
        payload = dict(data.model_dump() if hasattr(data, "model_dump") else data)
        if not payload.get("id") or any(category["id"] == payload["id"] for category in issued):
            payload["id"] = new_id(CATEGORY_PREFIX, (category["id"] for category in issued))
        issued.append(payload)
    return issued


def set_opex_inflation(state: ForecastState, percent: float) -> ForecastState:
    return set_baseline(state, {"opex_inflation_percent": percent})


def set_salary_increase(state: ForecastState, percent: float) -> ForecastState:
    return state.model_copy(update={"team": merge(state.team, {"salary_increase_percent": percent})})


def set_existing_team(state: ForecastState, members: Iterable[Any]) -> ForecastState:
    """Replace the existing team wholesale, re-issuing missing or clashing ids."""
    existing: Tuple[TeamMember, ...] = ()
    for data in members:
        payload = dict(data.model_dump() if hasattr(data, "model_dump") else data)
        member_id = payload.get("id")
        if not member_id or any(member.id == member_id for member in existing):
            payload["id"] = new_id(MEMBER_PREFIX, (member.id for member in existing))
        existing = (*existing, TeamMember.model_validate(payload))
    return _with_team(state, existing_members=existing)


def add_team_member(state: ForecastState, data: Any) -> ForecastState:
    members = _append(state.team.existing_members, TeamMember, MEMBER_PREFIX, data)
    return _with_team(state, existing_members=members)


def update_team_member(state: ForecastState, member_id: str, changes: Mapping[str, Any]) -> ForecastState:
    members = _update(state.team.existing_members, member_id, changes)
    if members is None:
        return state
    return _with_team(state, existing_members=members)


def remove_team_member(state: ForecastState, member_id: str) -> ForecastState:
    members = _remove(state.team.existing_members, member_id)
    if members is None:
        return state
    return _with_team(state, existing_members=members)


def add_planned_hire(state: ForecastState, data: Any) -> ForecastState:
    hires = _append(state.team.planned_hires, PlannedHire, HIRE_PREFIX, data)
    return _with_team(state, planned_hires=hires)


def update_planned_hire(state: ForecastState, hire_id: str, changes: Mapping[str, Any]) -> ForecastState:
    hires = _update(state.team.planned_hires, hire_id, changes)
    if hires is None:
        return state
    return _with_team(state, planned_hires=hires)


def remove_planned_hire(state: ForecastState, hire_id: str) -> ForecastState:
    hires = _remove(state.team.planned_hires, hire_id)
    if hires is None:
        return state
    return _with_team(state, planned_hires=hires)


def add_investment(state: ForecastState, data: Any) -> ForecastState:
    investments = _append(state.investments, Investment, INVESTMENT_PREFIX, data)
    return state.model_copy(update={"investments": investments})


def remove_investment(state: ForecastState, investment_id: str) -> ForecastState:
    investments = _remove(state.investments, investment_id)
    if investments is None:
        return state
    return state.model_copy(update={"investments": investments})


def set_years_selected(state: ForecastState, years: Sequence[int]) -> ForecastState:
    return state.model_copy(update={"years_selected": tuple(years)})

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from forecast_builder.main import app


@pytest.fixture
def client():
    return TestClient(app)


def _create(client, **extra):
    response = client.post("/sessions", json={"fiscal_year": 2026, **extra})
    assert response.status_code == 200
    return response.json()


def test_create_session_with_seed(client):
    body = _create(
        client,
        seed={
            "goals": {"revenue_target": 500_000, "profit_target": 100_000},
            "priorYearPL": {"revenue": 400_000, "cogs": 120_000, "opex": 80_000},
        },
    )
    assert body["state"]["current_step"] == "goals"
    assert body["calculations"]["expense_budget"] == 400_000
    assert body["state"]["baseline"]["prior_year_cogs_percent"] == pytest.approx(30)
    assert body["can_save"] is False


def test_full_walkthrough_and_save(client):
    session_id = _create(client)["session_id"]

    client.patch(f"/sessions/{session_id}/targets", json={"revenue": 500_000, "net_profit": 100_000})
    client.put(f"/sessions/{session_id}/team/salary-increase", json={"percent": 6})
    response = client.post(
        f"/sessions/{session_id}/team/members",
        json={"name": "Ops", "annual_salary": 100_000, "classification": "opex"},
    )
    assert response.json()["calculations"]["team_costs_opex"] == pytest.approx(106_000)

    response = client.post(
        f"/sessions/{session_id}/team/hires",
        json={"name": "Sales", "annual_salary": 90_000, "start_date": "2026-09-01"},
    )
    hire = response.json()["state"]["team"]["planned_hires"][0]
    assert hire["start_date"] == "2026-09"
    assert response.json()["calculations"]["team_costs_opex"] == pytest.approx(196_000)

    for _ in range(4):
        response = client.post(f"/sessions/{session_id}/steps/next")
    body = response.json()
    assert body["state"]["current_step"] == "review"
    assert body["state"]["completed_steps"] == ["goals", "baseline", "team", "investments"]
    assert body["can_save"] is True

    response = client.post(f"/sessions/{session_id}/save", json={"business_id": "biz-1"})
    assert response.status_code == 200
    assert response.json()["forecast_id"]


def test_save_before_review_conflicts(client):
    session_id = _create(client)["session_id"]
    response = client.post(f"/sessions/{session_id}/save", json={"business_id": "biz-1"})
    assert response.status_code == 409


def test_unknown_session_is_404(client):
    assert client.get("/sessions/nope").status_code == 404


def test_invalid_step_is_422(client):
    session_id = _create(client)["session_id"]
    response = client.put(f"/sessions/{session_id}/steps/current", json={"step": "done"})
    assert response.status_code == 422


def test_jump_and_remove_investment(client):
    session_id = _create(client)["session_id"]
    response = client.put(f"/sessions/{session_id}/steps/current", json={"step": "investments"})
    assert response.json()["state"]["completed_steps"] == []

    response = client.post(
        f"/sessions/{session_id}/investments", json={"name": "Van", "amount": 40_000, "type": "capex"}
    )
    investment = response.json()["state"]["investments"][0]
    assert response.json()["calculations"]["total_investments_capex"] == 40_000

    response = client.delete(f"/sessions/{session_id}/investments/{investment['id']}")
    assert response.json()["state"]["investments"] == []
    response = client.delete(f"/sessions/{session_id}/investments/{investment['id']}")
    assert response.status_code == 200


def test_steps_and_presets(client):
    steps = client.get("/steps").json()
    assert [step["label"] for step in steps] == ["Goals", "Prior Year", "Team", "Investments", "Review"]
    presets = client.get("/investment-presets").json()
    assert {preset["type"] for preset in presets} == {"opex", "capex"}


def test_healthcheck(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_create_session_with_unparseable_seed_dates(client):
    body = _create(
        client,
        seed={"team": [{"name": "A", "startDate": "99999999999999999999"}, {"name": "B", "startDate": "not a date"}]},
    )
    members = body["state"]["team"]["existing_members"]
    assert [member["start_date"] for member in members] == [None, None]


def test_explicit_nulls_leave_fields_unchanged(client):
    session_id = _create(client)["session_id"]
    client.patch(f"/sessions/{session_id}/targets", json={"revenue": 200_000})

    response = client.patch(f"/sessions/{session_id}/targets", json={"revenue": None, "net_profit": 20_000})
    assert response.status_code == 200
    assert response.json()["state"]["targets"]["revenue"] == 200_000
    assert response.json()["state"]["targets"]["net_profit"] == 20_000

    response = client.patch(f"/sessions/{session_id}/baseline", json={"opex_categories": None, "prior_year_opex": None})
    assert response.status_code == 200
    assert response.json()["state"]["baseline"]["opex_categories"] == []

    response = client.post(f"/sessions/{session_id}/team/members", json={"name": "Ops", "annual_salary": 50_000})
    member_id = response.json()["state"]["team"]["existing_members"][0]["id"]
    response = client.patch(
        f"/sessions/{session_id}/team/members/{member_id}", json={"annual_salary": None, "name": "Ops Lead"}
    )
    assert response.status_code == 200
    member = response.json()["state"]["team"]["existing_members"][0]
    assert (member["name"], member["annual_salary"]) == ("Ops Lead", 50_000)

    response = client.post(f"/sessions/{session_id}/team/hires", json={"name": "Sales", "start_date": "2026-04"})
    hire_id = response.json()["state"]["team"]["planned_hires"][0]["id"]
    response = client.patch(f"/sessions/{session_id}/team/hires/{hire_id}", json={"start_date": None})
    assert response.status_code == 200
    assert response.json()["state"]["team"]["planned_hires"][0]["start_date"] == "2026-04"


def test_session_view_reports_headcount_split(client):
    session_id = _create(client)["session_id"]
    assert client.get(f"/sessions/{session_id}").json()["headcount"] == {"cogs": 0, "opex": 0}

    client.post(f"/sessions/{session_id}/team/members", json={"name": "Chef", "classification": "cogs"})
    client.post(f"/sessions/{session_id}/team/members", json={"name": "Admin"})
    response = client.post(
        f"/sessions/{session_id}/team/hires", json={"name": "Cook", "start_date": "2026-06", "classification": "cogs"}
    )
    assert response.json()["headcount"] == {"cogs": 2, "opex": 1}

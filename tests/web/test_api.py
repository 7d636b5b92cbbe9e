from __future__ import annotations

import pytest

from src.workforce_tracker.workforce_tracker.common.datetime_utils import now_local
from src.workforce_tracker.workforce_tracker.database.kv_store import MemoryKeyValueStore
from src.workforce_tracker.workforce_tracker.main import create_app


class BrokenAuditClient:
    def audit(self, payload: dict) -> dict:
        raise ConnectionError("unreachable")


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(store=MemoryKeyValueStore(), audit_client=BrokenAuditClient())


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, login_id="admin", password="admin123"):
    return client.post("/api/login", json={"login_id": login_id, "password": password})


def this_month() -> str:
    return now_local().strftime("%Y-%m")


def test_login_and_me(client):
    assert client.get("/api/me").status_code == 401

    bad = login(client, password="wrong")
    assert bad.status_code == 401
    assert bad.get_json()["success"] is False

    resp = login(client)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["role"] == "admin"
    assert client.get("/api/me").get_json()["data"]["user_id"] == "admin"

    client.post("/api/logout")
    assert client.get("/api/me").status_code == 401


def test_requires_login(client):
    assert client.get("/api/employees").status_code == 401
    assert client.get("/api/dashboard").status_code == 401
    assert client.post("/api/attendance", json={}).status_code == 401


def test_admin_flow_attendance_to_payout(client):
    login(client)

    resp = client.post("/api/attendance", json={"employee_id": "emp2", "project_id": "proj1", "overtime_hours": 2})
    assert resp.status_code == 201

    dup = client.post("/api/attendance", json={"employee_id": "emp2", "project_id": "proj2"})
    assert dup.status_code == 400
    assert "Alice Smith" in dup.get_json()["message"]

    (row,) = [r for r in client.get(f"/api/payroll?month={this_month()}").get_json()["data"] if r["employee_id"] == "emp2"]
    # 30000 / 30 = 1000 per day, 1000 / 8 = 125 per OT hour
    assert row["net_payable"] == 1250

    payout = client.post("/api/payouts", json={"employee_id": "emp2", "month": this_month(), "mode": "cash"})
    assert payout.status_code == 201
    assert payout.get_json()["data"]["amount"] == 1250

    again = client.post("/api/payouts", json={"employee_id": "emp2", "month": this_month()})
    assert again.status_code == 400

    listed = client.get(f"/api/payouts?month={this_month()}").get_json()["data"]
    assert [p["employee_name"] for p in listed] == ["Alice Smith"]


def test_bad_month_is_rejected(client):
    login(client)
    assert client.get("/api/payroll?month=2024-13").status_code == 400
    assert client.get("/api/dashboard?month=all").status_code == 200


def test_csv_export(client):
    login(client)
    resp = client.get("/api/reports/payroll.csv?month=all")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "payroll_all.csv" in resp.headers["Content-Disposition"]
    lines = resp.get_data(as_text=True).splitlines()
    assert lines[0] == "Employee,Role,Days Worked,OT Hours,Advances,Net Payable"
    assert lines[1] == "John Doe,Foreman,0,0,0,0"
    assert len(lines) == 5


def test_supervisor_permissions(client):
    login(client)
    created = client.post(
        "/api/employees",
        json={
            "name": "Sam",
            "title": "Foreman",
            "monthly_salary": 40000,
            "join_date": "2024-01-01",
            "access": "supervisor",
            "login_id": "sam",
            "password": "secret1",
        },
    )
    assert created.status_code == 201
    assert "password" not in created.get_json()["data"]
    client.post("/api/attendance", json={"employee_id": "emp3", "project_id": "proj1"})
    client.post("/api/logout")

    assert login(client, "sam", "secret1").status_code == 200

    assert client.post("/api/attendance", json={"employee_id": "emp2", "project_id": "proj1", "date": "2000-01-01"}).status_code == 400
    assert client.post("/api/attendance", json={"employee_id": "emp2", "project_id": "proj1"}).status_code == 201

    mine = client.get("/api/attendance").get_json()["data"]
    assert [r["employee_name"] for r in mine] == ["Alice Smith"]

    assert client.get("/api/payroll").status_code == 403
    assert client.get("/api/reports/payroll.csv").status_code == 403
    assert client.post("/api/projects", json={"name": "New"}).status_code == 403
    assert client.delete(f"/api/attendance/{mine[0]['id']}").status_code == 403

    dashboard = client.get("/api/dashboard").get_json()["data"]
    assert dashboard["show_financials"] is False
    assert "net_payable" not in dashboard["employees"][0]
    assert "labor_cost" not in dashboard["projects"][0]

    employees = client.get("/api/employees").get_json()["data"]
    assert all("monthly_salary" not in e and "login_id" not in e for e in employees)


def test_audit_failure_maps_to_bad_gateway(client):
    login(client)
    resp = client.post("/api/admin/audit")
    assert resp.status_code == 502
    assert resp.get_json()["message"].startswith("Audit failed")


def test_admin_password_change(client):
    login(client)
    resp = client.post(
        "/api/admin/password",
        json={"current_password": "admin123", "new_password": "changed1", "confirm_password": "changed1"},
    )
    assert resp.status_code == 200
    client.post("/api/logout")

    assert login(client).status_code == 401
    assert login(client, password="changed1").status_code == 200


def test_non_text_fields_are_rejected(client):
    login(client)

    numeric_password = client.post(
        "/api/employees",
        json={
            "name": "Sam",
            "title": "Foreman",
            "monthly_salary": 40000,
            "join_date": "2024-01-01",
            "access": "supervisor",
            "login_id": "sam",
            "password": 123456,
        },
    )
    assert numeric_password.status_code == 400
    assert numeric_password.get_json()["success"] is False

    numeric_title = client.post(
        "/api/employees", json={"name": "Sam", "title": 7, "monthly_salary": 40000, "join_date": "2024-01-01"}
    )
    assert numeric_title.status_code == 400

    numeric_reason = client.post("/api/advances", json={"employee_id": "emp2", "amount": 100, "reason": 5})
    assert numeric_reason.status_code == 400
    assert client.get("/api/advances").get_json()["data"] == []

    assert client.post("/api/payouts", json={"employee_id": "emp2", "month": 202405}).status_code == 400
    assert client.post("/api/projects", json={"name": "Depot", "location": ["north"]}).status_code == 400


def test_non_text_login_is_a_plain_mismatch(client):
    by_number = login(client, login_id=42, password="x")
    assert by_number.status_code == 401
    assert by_number.get_json()["message"] == login(client, password="wrong").get_json()["message"]

    assert login(client, password=123456).status_code == 401
    assert client.get("/api/me").status_code == 401

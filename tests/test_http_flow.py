from __future__ import annotations

from datetime import date

import pytest

from src.shift_attendance.shift_attendance.main import create_app


@pytest.fixture
def app(monkeypatch, store):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(store=store)


@pytest.fixture
def client(app):
    return app.test_client()


def _login_admin(client):
    return client.post("/admin/login", json={"code": "ADMIN123"})


def _register_and_approve(client, employee_id="EMP010", section="QC"):
    res = client.post(
        "/register",
        json={"employee_id": employee_id, "full_name": "Dina Shah", "department": "Engineering", "section": section},
    )
    assert res.status_code == 201
    assert _login_admin(client).status_code == 200
    assert client.post(f"/admin/employees/{employee_id}/approve").status_code == 200


def test_pages_require_a_session(client):
    assert client.get("/shifts/history").status_code == 401
    assert client.get("/manager/pending").status_code == 401
    assert client.get("/hr/entries").status_code == 401


def test_wrong_role_is_forbidden(client):
    _login_admin(client)

    assert client.get("/hr/entries").status_code == 403


def test_bad_codes_are_unauthorized(client):
    assert _login_admin(client).status_code == 200
    assert client.post("/admin/login", json={"code": "nope"}).status_code == 401
    assert client.post("/hr/login", json={"code": "nope"}).status_code == 401
    assert client.post("/manager/login", json={"manager_id": "QC_MGR", "password": "bad"}).status_code == 401


def test_registration_errors_map_to_400(client):
    res = client.post("/register", json={"employee_id": "E1", "full_name": "No Section", "department": "Engineering"})

    assert res.status_code == 400
    assert res.get_json() == {"success": False, "message": "Section is required for Engineering department"}


def test_full_day_flow(client):
    _register_and_approve(client)

    res = client.get("/employees/emp010")
    assert res.status_code == 200
    assert res.get_json()["profile"]["approved"] is True

    client.post("/logout")
    client.get("/employees/EMP010")

    today = date.today().strftime("%Y-%m-%d")
    res = client.post("/shifts", json={"date": today, "shift_type": "3rd_shift"})
    assert res.status_code == 201
    entry_id = res.get_json()["entry"]["id"]

    dup = client.post("/shifts", json={"date": today, "shift_type": "leave"})
    assert dup.status_code == 400

    res = client.post("/manager/login", json={"manager_id": "QC_MGR", "password": "SH123"})
    assert res.status_code == 200
    pending = client.get("/manager/pending").get_json()["entries"]
    assert [e["id"] for e in pending] == [entry_id]

    short = client.post(f"/manager/entries/{entry_id}/reject", json={"justification": "too short"})
    assert short.status_code == 400

    res = client.post(f"/manager/entries/{entry_id}/approve")
    assert res.status_code == 200
    assert res.get_json()["entry"]["status"] == "Approved"

    export = client.get("/manager/export.csv")
    assert export.status_code == 200
    assert export.mimetype == "text/csv"
    assert "QC Manager" in export.data.decode("utf-8-sig")

    client.post("/logout")
    client.get("/employees/EMP010")
    summary = client.get(f"/overtime?month={today[:7]}").get_json()["summary"]
    assert summary["night_ot"] == 8
    assert summary["estimated_pay"] == 160.0

    roster = client.get(f"/roster?month={today[:7]}").get_json()["roster"]
    assert [d["status"] for d in roster["days"] if d["status"]] == ["Approved"]


def test_hr_sees_everything_and_filters(client):
    _register_and_approve(client, "EMP011", "QC")
    client.post("/logout")
    client.get("/employees/EMP011")
    client.post("/shifts", json={"date": date.today().strftime("%Y-%m-%d"), "shift_type": "1st_shift"})

    assert client.post("/hr/login", json={"code": "Akram"}).status_code == 200
    assert len(client.get("/hr/entries").get_json()["entries"]) == 1
    assert client.get("/hr/entries?department=Finance").get_json()["entries"] == []
    assert client.get("/hr/entries?department=Engineering&section=RTG").get_json()["entries"] == []
    assert client.get("/hr/entries?department=Marketing").status_code == 400

    export = client.get("/hr/export.csv")
    assert export.status_code == 200
    assert "Dina Shah" in export.data.decode("utf-8-sig")


def test_unknown_employee_lookup(client):
    res = client.get("/employees/NOBODY")

    assert res.status_code == 404


def test_non_string_json_values_are_validation_errors(client):
    res = client.post("/register", json={"employee_id": 123, "full_name": "Num Id", "department": "Finance"})
    assert res.status_code == 400
    assert res.get_json()["message"] == "Employee code is required"

    _register_and_approve(client, "EMP012", "QC")
    client.post("/logout")
    client.get("/employees/EMP012")
    assert client.post("/shifts", json={"date": 20240315, "shift_type": "1st_shift"}).status_code == 400
    today = date.today().strftime("%Y-%m-%d")
    res = client.post("/shifts", json={"date": today, "shift_type": "other", "other_remark": 5})
    assert res.status_code == 400

    client.post("/manager/login", json={"manager_id": "QC_MGR", "password": "SH123"})
    res = client.post("/manager/entries/any-id/reject", json={"justification": 1234567890})
    assert res.status_code == 400
    assert "at least 10 characters" in res.get_json()["message"]

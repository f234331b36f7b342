from __future__ import annotations

from datetime import date

from work_hours.core.constants import REMEMBER_USER_KEY


def _register(client, username="alice", password="secret", remember=False):
    return client.post("/api/register", json={"username": username, "password": password, "remember": remember})


def test_protected_routes_require_login(client):
    for path in ("/api/settings", "/api/entries", "/api/cycle", "/api/charts"):
        resp = client.get(path)
        assert resp.status_code == 401
        assert resp.get_json()["success"] is False


def test_register_login_logout_flow(client):
    resp = _register(client)
    assert resp.status_code == 201
    assert client.get("/api/session").get_json()["user"] == "alice"

    assert client.post("/api/logout").status_code == 200
    assert client.get("/api/session").get_json()["user"] is None

    bad = client.post("/api/login", json={"username": "alice", "password": "nope"})
    assert bad.status_code == 401
    assert bad.get_json()["message"] == "Invalid username or password"

    good = client.post("/api/login", json={"username": "alice", "password": "secret"})
    assert good.status_code == 200
    assert client.get("/api/session").get_json()["user"] == "alice"


def test_register_errors(client):
    assert _register(client, username="").status_code == 400
    assert _register(client).status_code == 201
    client.post("/api/logout")

    dup = _register(client, password="other")
    assert dup.status_code == 409
    assert dup.get_json()["message"] == "Username already exists"


def test_session_is_per_browser_without_remember(app):
    first = app.test_client()
    _register(first)

    other = app.test_client()
    assert other.get("/api/session").get_json()["user"] is None


def test_remember_me_stays_in_its_own_browser(app, durable):
    client = app.test_client()
    _register(client)
    client.post("/api/logout")

    client.post("/api/login", data={"username": "alice", "password": "secret", "remember": "on"})

    assert client.get("/api/session").get_json()["user"] == "alice"
    assert durable.get_item(REMEMBER_USER_KEY) is None
    assert app.test_client().get("/api/session").get_json()["user"] is None


def test_remembered_login_does_not_take_over_another_browser(app):
    browser_a = app.test_client()
    _register(browser_a)
    browser_a.post("/api/logout")

    browser_b = app.test_client()
    _register(browser_b, username="bob", password="pw")
    assert browser_b.get("/api/session").get_json()["user"] == "bob"

    browser_a.post("/api/login", json={"username": "alice", "password": "secret", "remember": True})

    assert browser_b.get("/api/session").get_json()["user"] == "bob"
    assert browser_a.get("/api/session").get_json()["user"] == "alice"

    browser_b.post("/api/logout")
    assert browser_a.get("/api/session").get_json()["user"] == "alice"


def test_non_string_username_is_rejected(client):
    resp = client.post("/api/register", json={"username": 123, "password": "pw"})

    assert resp.status_code == 400
    assert client.get("/api/session").get_json()["user"] is None


def test_settings_endpoints(client):
    _register(client)

    assert client.get("/api/settings").get_json()["settings"]["targetHoursPerCycle"] == 65

    resp = client.patch("/api/settings", json={"dailyHours": 7, "hourlyRate": 20})
    assert resp.get_json()["settings"] == {
        "hourlyRate": 20.0,
        "dailyHours": 7.0,
        "workingDays": 10,
        "targetHoursPerCycle": 70.0,
    }

    assert client.patch("/api/settings", json={"workingDays": -1}).status_code == 400


def test_entry_endpoints(client):
    _register(client)

    created = client.post("/api/entries", json={"date": "2024-03-04", "clockIn": "09:00", "clockOut": "17:30"})
    assert created.status_code == 201
    entry = created.get_json()["entry"]
    assert entry["hours"] == 8.5

    bad_range = client.post("/api/entries", json={"date": "2024-03-04", "clockIn": "17:30", "clockOut": "09:00"})
    assert bad_range.status_code == 400
    assert bad_range.get_json()["message"] == "Clock Out time must be after Clock In time"

    missing = client.post("/api/entries", json={"date": "2024-03-04", "clockIn": "09:00"})
    assert missing.status_code == 400

    assert [e["id"] for e in client.get("/api/entries").get_json()["entries"]] == [entry["id"]]

    assert client.delete(f"/api/entries/{entry['id']}").status_code == 200
    assert client.delete(f"/api/entries/{entry['id']}").status_code == 200
    assert client.get("/api/entries").get_json()["entries"] == []


def test_export_endpoint(client):
    _register(client)
    client.post("/api/entries", json={"date": "2024-03-04", "clockIn": "09:00", "clockOut": "17:30"})

    resp = client.get("/api/entries/export")

    assert resp.status_code == 200
    assert resp.data[:2] == b"PK"
    assert "attachment" in resp.headers["Content-Disposition"]


def test_cycle_and_charts(client, monkeypatch):
    from work_hours.payroll import service as payroll_service

    monkeypatch.setattr(payroll_service, "today_local", lambda: date(2024, 1, 10))
    _register(client)
    client.patch("/api/settings", json={"hourlyRate": 10})
    client.post("/api/entries", json={"date": "2024-01-05", "clockIn": "09:00", "clockOut": "12:00"})
    client.post("/api/entries", json={"date": "2024-01-05", "clockIn": "13:00", "clockOut": "15:00"})

    cycle = client.get("/api/cycle").get_json()["cycle"]
    assert cycle["totalHours"] == 5
    assert cycle["remainingHours"] == 60
    assert cycle["earnings"] == 50
    assert cycle["cycleLabel"] == "First half of January 2024"

    charts = client.get("/api/charts").get_json()
    assert charts["hours"] == [{"period": "1st half of Jan", "hours": 5}]
    assert charts["earnings"] == [{"period": "1st half of Jan", "earnings": 50}]

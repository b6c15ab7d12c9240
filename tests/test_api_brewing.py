"""Tests for the brewing sequencer endpoints."""
from fastapi.testclient import TestClient
from brewhouse.main import app
from conftest import signup_payload


def test_brewing_requires_login(client):
    assert client.get("/api/brewing/stages").status_code == 401
    assert client.get("/api/brewing/run").status_code == 401
    assert client.post("/api/brewing/run/start").status_code == 401


def test_list_stages(auth_client):
    stages = auth_client.get("/api/brewing/stages").json()

    assert [s["id"] for s in stages][:2] == ["milling", "mashing"]
    assert stages[0]["duration_display"] == "15m"
    assert stages[3]["duration_display"] == "1h 30m"
    assert stages[-1]["duration_display"] == "14d 0h"


def test_fresh_run_is_idle(auth_client):
    snap = auth_client.get("/api/brewing/run").json()

    assert snap["status"] == "idle"
    assert snap["current_index"] == 0
    assert snap["overall_progress"] == 0
    assert all(s["state"] == "pending" for s in snap["stages"])


def test_start_tick_pause_reset(auth_client):
    registry = app.state.run_registry

    snap = auth_client.post("/api/brewing/run/start").json()
    assert snap["status"] == "running"
    assert snap["stages"][0]["state"] == "active"

    for _ in range(15):
        registry.tick_running()
    snap = auth_client.get("/api/brewing/run").json()
    assert snap["current_index"] == 1
    assert snap["stages"][0]["state"] == "completed"
    assert snap["stages"][1]["state"] == "active"
    assert snap["total_elapsed"] == 15
    assert snap["total_elapsed_display"] == "15m"

    snap = auth_client.post("/api/brewing/run/pause").json()
    assert snap["status"] == "paused"
    assert snap["stages"][1]["state"] == "paused"
    registry.tick_running()
    assert auth_client.get("/api/brewing/run").json()["total_elapsed"] == 15

    snap = auth_client.post("/api/brewing/run/reset").json()
    assert snap["status"] == "idle"
    assert snap["total_elapsed"] == 0


def test_start_twice_is_harmless(auth_client):
    auth_client.post("/api/brewing/run/start")
    app.state.run_registry.tick_running()

    response = auth_client.post("/api/brewing/run/start")

    assert response.status_code == 200
    assert response.json()["elapsed"] == 1


def test_runs_are_per_session(auth_client):
    auth_client.post("/api/brewing/run/start")

    other = TestClient(app)
    other.post("/api/signup", json=signup_payload(username="rival", email="rival@example.com"))

    assert other.get("/api/brewing/run").json()["status"] == "idle"


def test_discard_run(auth_client):
    auth_client.post("/api/brewing/run/start")
    assert len(app.state.run_registry) == 1

    assert auth_client.delete("/api/brewing/run").status_code == 204
    assert len(app.state.run_registry) == 0
    assert auth_client.get("/api/brewing/run").json()["status"] == "idle"


def test_logout_discards_run(auth_client):
    auth_client.post("/api/brewing/run/start")
    assert len(app.state.run_registry) == 1

    auth_client.post("/api/logout")

    assert len(app.state.run_registry) == 0

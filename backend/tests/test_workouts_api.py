from fastapi.testclient import TestClient

from fitlog.core.config import settings


def test_health(client: TestClient):
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["port"] == settings.PORT
    assert "time" in body


def test_unknown_api_route(client: TestClient):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.json() == {"error": "API route not found", "pathTried": "/api/nothing-here"}


def test_workouts_crud_flow(client: TestClient):
    # List empty
    r_list = client.get("/api/workouts")
    assert r_list.status_code == 200
    assert r_list.json() == []

    # Create, calories and notes default
    r_create = client.post("/api/workouts", json={"date": "2024-06-01", "type": "Running", "duration": 30})
    assert r_create.status_code == 201, r_create.text
    created = r_create.json()
    assert created["calories"] == 0
    assert created["notes"] == ""
    wid = created["id"]

    # Get
    r_get = client.get(f"/api/workouts/{wid}")
    assert r_get.status_code == 200
    assert r_get.json() == created

    # Update
    upd = {"date": "2024-06-02", "type": "Cycling", "duration": 60, "calories": 400, "notes": "hills"}
    r_upd = client.put(f"/api/workouts/{wid}", json=upd)
    assert r_upd.status_code == 200
    assert r_upd.json() == {"id": wid, **upd}

    # Delete
    r_del = client.delete(f"/api/workouts/{wid}")
    assert r_del.status_code == 200
    assert r_del.json() == {"ok": True}

    # Ensure 404
    r_404 = client.get(f"/api/workouts/{wid}")
    assert r_404.status_code == 404
    assert r_404.json() == {"error": "Workout not found"}


def test_missing_workout_on_update_and_delete(client: TestClient):
    payload = {"date": "2024-06-01", "type": "Gym", "duration": 10}
    assert client.put("/api/workouts/999", json=payload).status_code == 404
    assert client.delete("/api/workouts/999").status_code == 404


def test_create_requires_date_type_and_duration(client: TestClient):
    for payload, field in [
        ({"type": "Gym", "duration": 10}, "date"),
        ({"date": "2024-06-01", "duration": 10}, "type"),
        ({"date": "2024-06-01", "type": "Gym"}, "duration"),
    ]:
        r = client.post("/api/workouts", json=payload)
        assert r.status_code == 400, r.text
        assert "detail" not in r.json()
        assert field in r.json()["error"]


def test_create_rejects_bad_values(client: TestClient):
    base = {"date": "2024-06-01", "type": "Gym", "duration": 10}
    for bad in [{"duration": 0}, {"calories": -5}, {"date": "2024-02-30"}]:
        r = client.post("/api/workouts", json={**base, **bad})
        assert r.status_code == 400, r.text
        assert next(iter(bad)) in r.json()["error"]


def test_update_rejects_invalid_body(client: TestClient):
    wid = client.post("/api/workouts", json={"date": "2024-06-01", "type": "Gym", "duration": 10}).json()["id"]

    r = client.put(f"/api/workouts/{wid}", json={"type": "Gym"})
    assert r.status_code == 400
    assert "date" in r.json()["error"]
    assert client.get(f"/api/workouts/{wid}").json()["duration"] == 10


def test_list_rejects_malformed_filter_date(client: TestClient):
    r = client.get("/api/workouts", params={"from": "June"})
    assert r.status_code == 400
    assert "from" in r.json()["error"]


def test_list_order_and_filters(client: TestClient):
    rows = [
        {"date": "2024-06-01", "type": "Gym", "duration": 10},
        {"date": "2024-06-03", "type": "Yoga", "duration": 20},
        {"date": "2024-06-01", "type": "Yoga", "duration": 30},
        {"date": "2024-05-20", "type": "Gym", "duration": 40},
    ]
    ids = [client.post("/api/workouts", json=row).json()["id"] for row in rows]

    listed = client.get("/api/workouts").json()
    assert [w["id"] for w in listed] == [ids[1], ids[2], ids[0], ids[3]]

    yoga = client.get("/api/workouts", params={"type": "Yoga"}).json()
    assert {w["id"] for w in yoga} == {ids[1], ids[2]}

    everything = client.get("/api/workouts", params={"type": "All"}).json()
    assert len(everything) == 4

    window = client.get("/api/workouts", params={"from": "2024-06-01", "to": "2024-06-02"}).json()
    assert {w["id"] for w in window} == {ids[0], ids[2]}

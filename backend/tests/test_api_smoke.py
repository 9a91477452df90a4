import json

import pytest


def sample(session_id="collar-1", **overrides):
    payload = {
        "session_id": session_id,
        "dog_breed": "Labrador",
        "weight": 20,
        "age": "adult (1-7 years)",
        "sex": "male",
        "speed": 3,
        "ir_value": 0,
        "x": 0,
        "y": 0,
        "z": 0,
    }
    payload.update(overrides)
    return payload


def test_root_ok(client):
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert "message" in data


def test_sensor_data_returns_metrics(client):
    r = client.post("/sensor_data", json=sample())
    assert r.status_code == 200, r.text
    data = r.json()
    assert set(data) == {"bpm", "caloriesBurnt", "steps"}
    assert data["bpm"] == 0
    assert data["steps"] == 0
    assert data["caloriesBurnt"] == pytest.approx(70 * 20 ** 0.75 * 1.2 * 1.2 * 1.5)


def test_missing_profile_gives_zero_calories(client):
    r = client.post("/sensor_data", json={"session_id": "s", "ir_value": 1, "x": 0, "y": 0, "z": 1})
    assert r.status_code == 200, r.text
    assert r.json()["caloriesBurnt"] == 0.0


def test_invalid_payload_is_rejected(client):
    payload = sample()
    del payload["ir_value"]
    assert client.post("/sensor_data", json=payload).status_code == 422
    assert client.post("/sensor_data", json=sample(dog_breed="Wolf")).status_code == 422
    assert client.post("/sensor_data", json=sample(session_id="")).status_code == 422


def test_steps_persist_across_requests(client, clock):
    for _ in range(10):
        clock.advance(50)
        client.post("/sensor_data", json=sample())
    steps = []
    for _ in range(10):
        clock.advance(50)
        steps.append(client.post("/sensor_data", json=sample(x=2)).json()["steps"])
    assert steps[-1] == 1

    # a different collar has its own estimators
    clock.advance(50)
    other = client.post("/sensor_data", json=sample("collar-2", x=2)).json()
    assert other["steps"] == 0


def test_heart_rate_builds_up_across_requests(client, clock):
    beats = [0.0] + ([1000.0] + [0.0] * 5) * 4
    for ir in beats:
        clock.advance(100)
        data = client.post("/sensor_data", json=sample(ir_value=ir)).json()
    assert data["bpm"] == 100


def test_session_lifecycle(client, clock):
    client.post("/sensor_data", json=sample())
    client.post("/sensor_data", json=sample())

    r = client.get("/sessions/collar-1")
    assert r.status_code == 200
    body = r.json()
    assert body["samples"] == 2
    assert body["steps"] == 0

    listed = client.get("/sessions/").json()
    assert [s["session_id"] for s in listed] == ["collar-1"]

    r = client.post("/sessions/collar-1/reset_steps")
    assert r.status_code == 200
    assert r.json()["steps"] == 0

    assert client.delete("/sessions/collar-1").status_code == 200
    assert client.get("/sessions/collar-1").status_code == 404
    assert client.delete("/sessions/collar-1").status_code == 404
    assert client.post("/sessions/collar-1/reset_steps").status_code == 404


def test_create_dog_and_use_profile(client):
    payload = {
        "name": "Biscuit",
        "breed": "Poodle",
        "weight_kg": 8,
        "age_group": "puppy (0-1 year)",
        "sex": "female",
    }
    cr = client.post("/dogs/", json=payload)
    assert cr.status_code == 200, cr.text
    dog = cr.json()
    assert dog["breed"] == "Poodle"

    assert client.get(f"/dogs/{dog['id']}").json()["name"] == "Biscuit"
    assert any(d["id"] == dog["id"] for d in client.get("/dogs/").json())

    r = client.post(
        "/sensor_data",
        json={"session_id": "biscuit", "dog_id": dog["id"], "speed": 1, "ir_value": 0, "x": 0, "y": 0, "z": 1},
    )
    assert r.status_code == 200, r.text
    assert r.json()["caloriesBurnt"] == pytest.approx(65 * 8 ** 0.75 * 1.3 * 1.1 * 1.2)
    assert client.get("/sessions/biscuit").json()["dog_id"] == dog["id"]

    assert client.delete(f"/dogs/{dog['id']}").status_code == 200
    assert client.get(f"/dogs/{dog['id']}").status_code == 404


def test_unknown_dog_and_bad_weight(client):
    r = client.post("/sensor_data", json=sample(dog_id=99999))
    assert r.status_code == 404
    bad = {"name": "X", "breed": "Other", "weight_kg": 0, "age_group": "adult (1-7 years)", "sex": "male"}
    assert client.post("/dogs/", json=bad).status_code == 422


def test_non_finite_samples_are_rejected(client):
    # stdlib json writes NaN/Infinity tokens that httpx would refuse to emit
    for field, value in [("ir_value", float("nan")), ("x", float("inf")), ("speed", float("-inf"))]:
        body = json.dumps(sample(**{field: value}))
        r = client.post("/sensor_data", content=body, headers={"content-type": "application/json"})
        assert r.status_code == 422, field
    assert client.get("/sessions/collar-1").status_code == 404


def test_session_survives_rejected_sample(client, clock):
    bad = json.dumps(sample(ir_value=float("nan")))
    beats = [0.0] + ([1000.0] + [0.0] * 5) * 4
    for i, ir in enumerate(beats):
        clock.advance(100)
        if i == 5:
            client.post("/sensor_data", content=bad, headers={"content-type": "application/json"})
        data = client.post("/sensor_data", json=sample(ir_value=ir)).json()
    assert data["bpm"] == 100

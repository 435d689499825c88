"""Tests for the per-user exercise catalogue."""


def test_requires_auth(client):
    assert client.get("/training/exercises").status_code == 401


def test_base_lifts_seeded_on_first_list(client, lifter):
    response = client.get("/training/exercises", headers=lifter["headers"])
    assert response.status_code == 200
    exercises = response.json()
    assert [e["name"] for e in exercises] == ["Bench press", "Deadlift", "Squat"]
    assert all(e["is_base"] for e in exercises)


def test_seeding_happens_once(client, lifter):
    client.get("/training/exercises", headers=lifter["headers"])
    assert len(client.get("/training/exercises", headers=lifter["headers"]).json()) == 3


def test_custom_exercises_listed_after_base(client, lifter):
    headers = lifter["headers"]
    created = client.post("/training/exercises", headers=headers, json={"name": "  Front squat "})
    assert created.status_code == 201
    assert created.json()["name"] == "Front squat"
    assert created.json()["is_base"] is False
    client.post("/training/exercises", headers=headers, json={"name": "Army press"})

    names = [e["name"] for e in client.get("/training/exercises", headers=headers).json()]
    assert names == ["Bench press", "Deadlift", "Squat", "Army press", "Front squat"]


def test_duplicate_name_conflicts(client, lifter):
    headers = lifter["headers"]
    client.post("/training/exercises", headers=headers, json={"name": "Pause squat"})
    assert client.post("/training/exercises", headers=headers, json={"name": "Pause squat"}).status_code == 409
    assert client.post("/training/exercises", headers=headers, json={"name": "Squat"}).status_code == 409


def test_blank_name_is_invalid_input(client, lifter):
    assert client.post("/training/exercises", headers=lifter["headers"], json={"name": "   "}).status_code == 400


def test_catalogues_are_per_user(client, lifter, other):
    client.post("/training/exercises", headers=lifter["headers"], json={"name": "Pause squat"})
    names = [e["name"] for e in client.get("/training/exercises", headers=other["headers"]).json()]
    assert "Pause squat" not in names
    assert client.post("/training/exercises", headers=other["headers"], json={"name": "Pause squat"}).status_code == 201


def test_delete_custom_exercise(client, lifter):
    headers = lifter["headers"]
    exercise = client.post("/training/exercises", headers=headers, json={"name": "Good morning"}).json()
    assert client.delete(f"/training/exercises/{exercise['id']}", headers=headers).status_code == 204
    names = [e["name"] for e in client.get("/training/exercises", headers=headers).json()]
    assert "Good morning" not in names


def test_base_exercise_cannot_be_deleted(client, lifter):
    headers = lifter["headers"]
    squat = next(e for e in client.get("/training/exercises", headers=headers).json() if e["name"] == "Squat")
    assert client.delete(f"/training/exercises/{squat['id']}", headers=headers).status_code == 400


def test_cannot_delete_someone_elses_exercise(client, lifter, other):
    exercise = client.post("/training/exercises", headers=lifter["headers"], json={"name": "Good morning"}).json()
    assert client.delete(f"/training/exercises/{exercise['id']}", headers=other["headers"]).status_code == 404

"""Tests for versioned training plans."""

import pytest


@pytest.fixture
def plan(client, lifter):
    response = client.post("/training/plans", headers=lifter["headers"],
                           json={"title": "Peaking block", "content": "Week 1: 5x3 @ 80%"})
    assert response.status_code == 201
    return response.json()


class TestCreate:
    def test_starts_at_version_one_as_draft(self, plan, lifter):
        assert plan["version"] == 1
        assert plan["status"] == "draft"
        assert plan["user_id"] == lifter["user"]["id"]

    def test_explicit_status(self, client, lifter):
        response = client.post("/training/plans", headers=lifter["headers"],
                               json={"title": "Base", "content": "Volume", "status": "active"})
        assert response.json()["status"] == "active"

    @pytest.mark.parametrize("payload", [
        {"title": "", "content": "x"},
        {"title": "x", "content": ""},
        {"title": "x", "content": "y", "status": "paused"},
        {"content": "y"},
    ])
    def test_invalid_input(self, client, lifter, payload):
        assert client.post("/training/plans", headers=lifter["headers"], json=payload).status_code == 400

    def test_first_version_recorded(self, client, lifter, plan):
        versions = client.get(f"/training/plans/{plan['id']}/versions", headers=lifter["headers"]).json()
        assert [(v["version"], v["content"]) for v in versions] == [(1, "Week 1: 5x3 @ 80%")]


class TestUpdate:
    def test_bumps_version_and_records_history(self, client, lifter, plan):
        headers = lifter["headers"]
        response = client.put(f"/training/plans/{plan['id']}", headers=headers,
                              json={"title": "Peaking block", "content": "Week 1: 4x3 @ 82%", "status": "active"})
        assert response.status_code == 200
        updated = response.json()
        assert updated["version"] == 2
        assert updated["status"] == "active"
        assert updated["content"] == "Week 1: 4x3 @ 82%"

        client.put(f"/training/plans/{plan['id']}", headers=headers, json={"title": "Final", "content": "Meet"})

        versions = client.get(f"/training/plans/{plan['id']}/versions", headers=headers).json()
        assert [v["version"] for v in versions] == [1, 2, 3]
        assert [v["title"] for v in versions] == ["Peaking block", "Peaking block", "Final"]

    def test_status_defaults_to_draft(self, client, lifter):
        headers = lifter["headers"]
        created = client.post("/training/plans", headers=headers,
                              json={"title": "A", "content": "B", "status": "active"}).json()
        updated = client.put(f"/training/plans/{created['id']}", headers=headers, json={"title": "A", "content": "C"})
        assert updated.json()["status"] == "draft"

    def test_unknown_plan(self, client, lifter):
        response = client.put("/training/plans/missing", headers=lifter["headers"], json={"title": "A", "content": "B"})
        assert response.status_code == 404

    def test_other_users_plan(self, client, other, plan):
        response = client.put(f"/training/plans/{plan['id']}", headers=other["headers"],
                              json={"title": "Mine now", "content": "B"})
        assert response.status_code == 404


class TestReadAndDelete:
    def test_list_is_most_recently_updated_first(self, client, lifter, plan):
        headers = lifter["headers"]
        second = client.post("/training/plans", headers=headers, json={"title": "Second", "content": "x"}).json()
        assert [p["id"] for p in client.get("/training/plans", headers=headers).json()] == [second["id"], plan["id"]]

        client.put(f"/training/plans/{plan['id']}", headers=headers, json={"title": "Touched", "content": "y"})
        assert [p["id"] for p in client.get("/training/plans", headers=headers).json()] == [plan["id"], second["id"]]

    def test_list_only_own_plans(self, client, other, plan):
        assert client.get("/training/plans", headers=other["headers"]).json() == []

    def test_get(self, client, lifter, plan):
        response = client.get(f"/training/plans/{plan['id']}", headers=lifter["headers"])
        assert response.status_code == 200
        assert response.json()["title"] == "Peaking block"

    def test_delete_removes_plan_and_history(self, client, lifter, plan):
        headers = lifter["headers"]
        assert client.delete(f"/training/plans/{plan['id']}", headers=headers).status_code == 204
        assert client.get(f"/training/plans/{plan['id']}", headers=headers).status_code == 404
        assert client.get(f"/training/plans/{plan['id']}/versions", headers=headers).status_code == 404

    def test_delete_unknown_plan(self, client, lifter):
        assert client.delete("/training/plans/missing", headers=lifter["headers"]).status_code == 404

    def test_cannot_delete_other_users_plan(self, client, lifter, other, plan):
        assert client.delete(f"/training/plans/{plan['id']}", headers=other["headers"]).status_code == 404
        assert client.get(f"/training/plans/{plan['id']}", headers=lifter["headers"]).status_code == 200

"""Tests for the event management and public event endpoints."""

from conftest import event_payload, register


def create_event(client, headers, **overrides):
    response = client.post("/api/events", json=event_payload(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateEvent:
    def test_create_returns_full_event(self, client, owner_headers):
        event = create_event(client, owner_headers)

        assert event["name"] == "Spring Hackathon"
        assert len(event["vote_code"]) == 6
        assert event["vote_code"] == event["vote_code"].upper()
        assert event["is_active"] is True
        assert event["is_voting_open"] is None
        assert [g["name"] for g in event["groups"]] == ["Judges", "Public"]
        assert event["groups"][0]["password"] == "judgepass"
        assert event["projects"][0]["team_members"] == ["Ann", "Bo"]
        assert event["criteria"] == [
            {"name": "Creativity", "max_score": 10},
            {"name": "Execution", "max_score": 10},
        ]

    def test_default_criteria_and_description(self, client, owner_headers):
        event = create_event(client, owner_headers, criteria=[], name="Demo Day")

        assert [c["name"] for c in event["criteria"]] == ["Creativity", "Execution", "Impact"]
        assert all(c["max_score"] == 10 for c in event["criteria"])
        assert event["description"].startswith("Join us for Demo Day")

    def test_vote_codes_are_unique(self, client, owner_headers):
        codes = {create_event(client, owner_headers)["vote_code"] for _ in range(5)}
        assert len(codes) == 5

    def test_requires_auth(self, client):
        response = client.post("/api/events", json=event_payload())
        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_invalid_token(self, client):
        response = client.get("/api/events", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401

    def test_validation_errors_are_structured(self, client, owner_headers):
        response = client.post("/api/events", json={"name": ""}, headers=owner_headers)
        body = response.json()
        assert response.status_code == 400
        assert body["success"] is False
        fields = {error["field"] for error in body["errors"]}
        assert {"name", "date", "start_time", "close_time"} <= fields

    def test_group_weight_out_of_range(self, client, owner_headers):
        payload = event_payload(groups=[{"name": "Judges", "weight": 150}])
        response = client.post("/api/events", json=payload, headers=owner_headers)
        assert response.status_code == 400


class TestOwnerEndpoints:
    def test_list_only_own_events(self, client, owner_headers):
        create_event(client, owner_headers, name="Mine")
        other = register(client, "someone_else")
        create_event(client, other, name="Theirs")

        response = client.get("/api/events", headers=owner_headers)

        assert [e["name"] for e in response.json()["data"]] == ["Mine"]

    def test_non_owner_is_forbidden(self, client, owner_headers):
        event = create_event(client, owner_headers)
        other = register(client, "intruder")

        assert client.get(f"/api/events/{event['id']}", headers=other).status_code == 403
        assert client.delete(f"/api/events/{event['id']}", headers=other).status_code == 403
        assert client.post(f"/api/events/{event['id']}/open-voting", headers=other).status_code == 403

    def test_missing_event(self, client, owner_headers):
        response = client.get("/api/events/does-not-exist", headers=owner_headers)
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "이벤트를 찾을 수 없습니다"}

    def test_partial_update(self, client, owner_headers):
        event = create_event(client, owner_headers)

        response = client.put(
            f"/api/events/{event['id']}",
            json={"name": "Renamed", "is_voting_open": False},
            headers=owner_headers,
        )

        data = response.json()["data"]
        assert data["name"] == "Renamed"
        assert data["description"] == event["description"]
        assert data["voting_status"] == "closed"

    def test_update_resets_override_to_auto(self, client, owner_headers):
        event = create_event(client, owner_headers, date="2000-01-01")
        client.post(f"/api/events/{event['id']}/open-voting", headers=owner_headers)

        response = client.put(f"/api/events/{event['id']}", json={"is_voting_open": None}, headers=owner_headers)

        data = response.json()["data"]
        assert data["is_voting_open"] is None
        assert data["voting_status"] == "closed"

    def test_update_rejects_null_name(self, client, owner_headers):
        event = create_event(client, owner_headers)
        response = client.put(f"/api/events/{event['id']}", json={"name": None}, headers=owner_headers)
        assert response.status_code == 400

    def test_open_and_close_voting(self, client, owner_headers):
        event = create_event(client, owner_headers, date="2999-01-01")
        assert event["voting_status"] == "upcoming"

        opened = client.post(f"/api/events/{event['id']}/open-voting", headers=owner_headers).json()["data"]
        assert opened["is_voting_open"] is True
        assert opened["voting_status"] == "open"

        closed = client.post(f"/api/events/{event['id']}/close-voting", headers=owner_headers).json()["data"]
        assert closed["voting_status"] == "closed"

    def test_delete_event(self, client, owner_headers):
        event = create_event(client, owner_headers)

        response = client.delete(f"/api/events/{event['id']}", headers=owner_headers)

        assert response.json() == {"success": True, "message": "이벤트 삭제 완료"}
        assert client.get(f"/api/events/{event['id']}", headers=owner_headers).status_code == 404


class TestSubResources:
    def test_add_and_remove_group(self, client, owner_headers):
        event = create_event(client, owner_headers)

        response = client.post(
            f"/api/events/{event['id']}/groups", json={"name": "Mentors", "password": "  "}, headers=owner_headers
        )
        group = response.json()["data"]
        assert group["weight"] == 50
        assert group["password"] is None

        response = client.delete(f"/api/events/{event['id']}/groups/{group['id']}", headers=owner_headers)
        assert response.status_code == 200

        data = client.get(f"/api/events/{event['id']}", headers=owner_headers).json()["data"]
        assert [g["name"] for g in data["groups"]] == ["Judges", "Public"]

    def test_remove_missing_group(self, client, owner_headers):
        event = create_event(client, owner_headers)
        response = client.delete(f"/api/events/{event['id']}/groups/nope", headers=owner_headers)
        assert response.status_code == 404

    def test_update_group_weight(self, client, owner_headers):
        event = create_event(client, owner_headers)
        group_id = event["groups"][1]["id"]

        response = client.put(
            f"/api/events/{event['id']}/groups/{group_id}/weight", json={"weight": 90}, headers=owner_headers
        )
        assert response.json()["data"]["weight"] == 90

        response = client.put(
            f"/api/events/{event['id']}/groups/{group_id}/weight", json={"weight": 101}, headers=owner_headers
        )
        assert response.status_code == 400

    def test_add_and_remove_project(self, client, owner_headers):
        event = create_event(client, owner_headers)

        project = client.post(
            f"/api/events/{event['id']}/projects",
            json={"name": "Gamma", "team_members": ["Cy", " "]},
            headers=owner_headers,
        ).json()["data"]
        assert project["team_members"] == ["Cy"]
        assert project["description"] == ""

        client.delete(f"/api/events/{event['id']}/projects/{event['projects'][0]['id']}", headers=owner_headers)

        data = client.get(f"/api/events/{event['id']}", headers=owner_headers).json()["data"]
        assert [p["name"] for p in data["projects"]] == ["Beta", "Gamma"]

    def test_add_and_remove_criterion_by_index(self, client, owner_headers):
        event = create_event(client, owner_headers)

        response = client.post(
            f"/api/events/{event['id']}/criteria", json={"name": "Impact", "max_score": 5}, headers=owner_headers
        )
        assert response.json()["data"] == {"name": "Impact", "max_score": 5}

        response = client.delete(f"/api/events/{event['id']}/criteria/0", headers=owner_headers)
        assert response.json()["data"] == {"name": "Creativity", "max_score": 10}

        data = client.get(f"/api/events/{event['id']}", headers=owner_headers).json()["data"]
        assert [c["name"] for c in data["criteria"]] == ["Execution", "Impact"]

    def test_remove_criterion_bad_index(self, client, owner_headers):
        event = create_event(client, owner_headers)
        assert client.delete(f"/api/events/{event['id']}/criteria/5", headers=owner_headers).status_code == 400
        assert client.delete(f"/api/events/{event['id']}/criteria/-1", headers=owner_headers).status_code == 400
        assert client.delete(f"/api/events/{event['id']}/criteria/abc", headers=owner_headers).status_code == 400

    def test_criterion_max_score_range(self, client, owner_headers):
        event = create_event(client, owner_headers)
        response = client.post(
            f"/api/events/{event['id']}/criteria", json={"name": "Impact", "max_score": 0}, headers=owner_headers
        )
        assert response.status_code == 400


class TestPublicView:
    def test_lookup_by_code_is_case_insensitive_and_redacted(self, client, owner_headers):
        event = create_event(client, owner_headers)

        response = client.get(f"/api/events/vote/{event['vote_code'].lower()}")

        data = response.json()["data"]
        assert data["id"] == event["id"]
        assert data["groups"][0] == {
            "id": event["groups"][0]["id"], "name": "Judges", "weight": 70, "has_password": True
        }
        assert data["groups"][1]["has_password"] is False
        assert "judgepass" not in response.text
        assert "owner_id" not in data

    def test_inactive_event_is_hidden(self, client, owner_headers):
        event = create_event(client, owner_headers)
        client.put(f"/api/events/{event['id']}", json={"is_active": False}, headers=owner_headers)

        response = client.get(f"/api/events/vote/{event['vote_code']}")

        assert response.status_code == 404

    def test_validate_group_password(self, client, owner_headers):
        event = create_event(client, owner_headers)
        url = f"/api/events/vote/{event['vote_code']}/validate-password"
        judges, public = event["groups"]

        ok = client.post(url, json={"group_id": judges["id"], "password": "judgepass"})
        bad = client.post(url, json={"group_id": judges["id"], "password": "wrong"})
        assert ok.json() == {"success": True, "is_valid": True}
        assert bad.json() == {"success": True, "is_valid": False}

        assert client.post(url, json={"group_id": public["id"], "password": "x"}).status_code == 400
        assert client.post(url, json={"group_id": "nope", "password": "x"}).status_code == 404
        assert client.post(url, json={"group_id": judges["id"]}).status_code == 400

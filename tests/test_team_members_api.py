import pytest
from datetime import date


def _create(client, **overrides):
    payload = {
        "full_name": "Grace Hopper",
        "email": "grace@example.com",
        "role": "Product Designer",
        "start_date": "2021-06-01",
        "current_level": "Level 1",
    }
    payload.update(overrides)
    return client.post("/api/team-members", json=payload)


def test_create_team_member(client):
    response = _create(client)
    assert response.status_code == 201
    data = response.json()
    assert data["full_name"] == "Grace Hopper"
    assert data["current_level"] == "Level 1"
    assert data["status"] == "active"


def test_create_team_member_rejects_unknown_level(client):
    response = _create(client, current_level="Wizard")
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["errors"][0]["field"] == "current_level"


def test_list_only_active_members_by_default(client, make_member):
    make_member(full_name="Zed Active")
    make_member(full_name="Amy Inactive", status="inactive")

    names = [m["full_name"] for m in client.get("/api/team-members").json()]
    assert names == ["Zed Active"]

    everyone = client.get("/api/team-members", params={"include_inactive": True}).json()
    assert [m["full_name"] for m in everyone] == ["Amy Inactive", "Zed Active"]


def test_update_team_member(client, member):
    response = client.patch(f"/api/team-members/{member.id}", json={"current_level": "Senior Level", "status": "inactive"})
    assert response.status_code == 200
    assert response.json()["current_level"] == "Senior Level"
    assert response.json()["status"] == "inactive"


def test_delete_team_member_removes_records(client, member, db_session):
    from app.models.one_on_one import OneOnOne

    client.post("/api/one-on-ones", json={"team_member_id": member.id, "meeting_date": "2024-02-01"})
    response = client.delete(f"/api/team-members/{member.id}")
    assert response.status_code == 204
    assert client.get(f"/api/team-members/{member.id}").status_code == 404
    assert db_session.query(OneOnOne).filter(OneOnOne.team_member_id == member.id).count() == 0


def test_unknown_member_returns_structured_404(client):
    response = client.get("/api/team-members/9999")
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["errors"][0]["code"] == "NOT_FOUND"


@pytest.mark.parametrize("field", ["full_name", "email", "status"])
def test_update_rejects_null_for_required_fields(client, member, field):
    response = client.patch(f"/api/team-members/{member.id}", json={field: None})
    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == field
    assert client.get(f"/api/team-members/{member.id}").json()["full_name"] == "Ada Lovelace"


def test_update_can_clear_optional_fields(client, member):
    response = client.patch(f"/api/team-members/{member.id}", json={"start_date": None, "current_level": None})
    assert response.status_code == 200
    assert response.json()["start_date"] is None
    assert response.json()["current_level"] is None


def test_create_with_duplicate_email(client):
    assert _create(client).status_code == 201
    response = _create(client, full_name="Someone Else")
    assert response.status_code == 409
    assert response.json()["errors"][0]["code"] == "DUPLICATE_EMAIL"

    # The failed insert leaves the existing member untouched
    names = [m["full_name"] for m in client.get("/api/team-members").json()]
    assert names == ["Grace Hopper"]


def test_update_to_taken_email(client, make_member):
    make_member(full_name="First", email="first@example.com")
    second = make_member(full_name="Second", email="second@example.com")

    response = client.patch(f"/api/team-members/{second.id}", json={"email": "first@example.com"})
    assert response.status_code == 409
    assert response.json()["errors"][0]["code"] == "DUPLICATE_EMAIL"
    assert client.get(f"/api/team-members/{second.id}").json()["email"] == "second@example.com"


def test_other_conflicts_are_not_reported_as_duplicate_email(client, maturity_model):
    response = client.post("/api/maturity/levels", json={"name": "Lead", "display_order": 9})
    assert response.status_code == 409
    assert response.json()["errors"][0]["code"] == "CONFLICT"


def test_assign_role(client, member, maturity_model):
    response = client.patch(f"/api/team-members/{member.id}", json={"role_id": maturity_model["role"]})
    assert response.status_code == 200
    assert response.json()["role_id"] == maturity_model["role"]

    unknown = client.patch(f"/api/team-members/{member.id}", json={"role_id": 9999})
    assert unknown.status_code == 422
    assert unknown.json()["errors"][0]["code"] == "INVALID_REFERENCE"

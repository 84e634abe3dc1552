import pytest


def test_record_and_list_one_on_ones(client, member):
    for meeting_date in ["2024-01-10", "2024-02-07", "2024-01-24"]:
        response = client.post(
            "/api/one-on-ones",
            json={"team_member_id": member.id, "meeting_date": meeting_date, "mood": "good"},
        )
        assert response.status_code == 201

    meetings = client.get("/api/one-on-ones", params={"team_member_id": member.id}).json()
    assert [m["meeting_date"] for m in meetings] == ["2024-02-07", "2024-01-24", "2024-01-10"]


def test_one_on_one_for_unknown_member(client):
    response = client.post("/api/one-on-ones", json={"team_member_id": 9999, "meeting_date": "2024-01-10"})
    assert response.status_code == 404


def test_quarterly_check_in_derives_quarter_and_year(client, member):
    response = client.post(
        "/api/check-ins",
        json={"team_member_id": member.id, "type": "quarterly", "review_date": "2024-08-14"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["quarter"] == "Q3"
    assert data["year"] == 2024


def test_quarterly_check_in_keeps_explicit_quarter(client, member):
    response = client.post(
        "/api/check-ins",
        json={"team_member_id": member.id, "type": "quarterly", "review_date": "2024-04-02", "quarter": "Q1", "year": 2024},
    )
    assert response.json()["quarter"] == "Q1"


def test_annual_check_in_rejects_quarter(client, member):
    response = client.post(
        "/api/check-ins",
        json={"team_member_id": member.id, "type": "annual", "review_date": "2024-03-15", "quarter": "Q1"},
    )
    assert response.status_code == 422


def test_list_check_ins_by_type(client, member):
    client.post("/api/check-ins", json={"team_member_id": member.id, "type": "annual", "review_date": "2024-03-15"})
    client.post("/api/check-ins", json={"team_member_id": member.id, "type": "quarterly", "review_date": "2024-05-01"})

    annual = client.get("/api/check-ins", params={"team_member_id": member.id, "type": "annual"}).json()
    assert len(annual) == 1
    assert annual[0]["quarter"] is None

    review_id = annual[0]["id"]
    assert client.delete(f"/api/check-ins/{review_id}").status_code == 204
    assert client.delete(f"/api/check-ins/{review_id}").status_code == 404

import pytest


def test_list_reference_data(client, maturity_model):
    levels = client.get("/api/maturity/levels").json()
    assert [l["name"] for l in levels] == ["Associate", "Level 1", "Level 2", "Senior Level", "Lead"]

    categories = client.get("/api/maturity/categories").json()
    assert [c["name"] for c in categories] == ["Craft Excellence", "Collaboration"]
    skills = maturity_model["skills"]
    assert categories[0]["skill_ids"] == [skills["Typography"], skills["Layout"]]

    listed = client.get("/api/maturity/skills").json()
    typography = next(s for s in listed if s["name"] == "Typography")
    assert [l["level_name"] for l in typography["levels"]][-1] == "Lead"


def test_create_skill_links_categories_and_levels(client, maturity_model):
    levels = maturity_model["levels"]
    response = client.post(
        "/api/maturity/skills",
        json={
            "name": "Storytelling",
            "category_ids": [maturity_model["categories"]["Collaboration"]],
            "levels": [
                {"level_id": levels["Level 1"], "description": "Explains own work"},
                {"level_id": levels["Lead"], "description": "Shapes the team narrative"},
            ],
        },
    )
    assert response.status_code == 201
    skill = response.json()
    assert skill["category_ids"] == [maturity_model["categories"]["Collaboration"]]
    assert [l["level_name"] for l in skill["levels"]] == ["Level 1", "Lead"]

    collaboration = next(
        c for c in client.get("/api/maturity/categories").json() if c["name"] == "Collaboration"
    )
    assert collaboration["skill_ids"][-1] == skill["id"]


def test_create_skill_with_unknown_category(client, maturity_model):
    response = client.post("/api/maturity/skills", json={"name": "Orphan", "category_ids": [9999]})
    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "INVALID_REFERENCE"


def test_save_assessments_upserts_per_skill(client, member, maturity_model):
    skills, levels = maturity_model["skills"], maturity_model["levels"]
    url = f"/api/maturity/{member.id}/assessments"

    first = client.put(url, json=[{"skill_id": skills["Typography"], "leader_rating": levels["Level 2"]}])
    assert first.status_code == 200

    second = client.put(url, json=[
        {"skill_id": skills["Typography"], "leader_rating": levels["Senior Level"], "self_rating": levels["Level 2"]},
        {"skill_id": skills["Feedback"], "self_rating": levels["Level 1"], "notes": "Asked for more practice"},
    ])
    assert second.status_code == 200
    saved = {a["skill_id"]: a for a in second.json()}
    assert len(saved) == 2
    assert saved[skills["Typography"]]["leader_rating"] == levels["Senior Level"]
    assert saved[skills["Feedback"]]["leader_rating"] is None
    assert saved[skills["Feedback"]]["notes"] == "Asked for more practice"


def test_save_assessment_with_unknown_skill(client, member, maturity_model):
    response = client.put(f"/api/maturity/{member.id}/assessments", json=[{"skill_id": 9999}])
    assert response.status_code == 422
def test_maturity_report(client, designer, maturity_model):
    skills, levels = maturity_model["skills"], maturity_model["levels"]
    client.put(f"/api/maturity/{designer.id}/assessments", json=[
        {"skill_id": skills["Typography"], "leader_rating": levels["Level 2"], "self_rating": levels["Level 2"]},
        {"skill_id": skills["Layout"]},
        {"skill_id": skills["Feedback"], "leader_rating": levels["Lead"], "self_rating": levels["Level 1"]},
        {"skill_id": skills["Facilitation"], "leader_rating": levels["Lead"], "self_rating": levels["Lead"]},
        {"skill_id": skills["Mentoring"], "leader_rating": levels["Level 1"]},
    ])

    response = client.get(f"/api/maturity/{designer.id}/report")
    assert response.status_code == 200
    report = response.json()["data"]

    assert report["maturity_model_id"] == maturity_model["model"]
    assert report["maturity_model_name"] == "Product Design"

    craft, collaboration = report["category_scores"]
    assert craft["avg_score"] == 2.0
    assert craft["skills_rated"] == 1
    assert collaboration["avg_score"] == 3.0
    assert collaboration["level_name"] == "Senior Level"

    assert report["average_category_score"]["avg_score"] == 2.5
    assert report["average_category_score"]["categories_rated"] == 2
    assert report["overall"]["avg_leader_score"] == 2.75
    assert report["overall"]["total_skills_rated"] == 4
    assert report["gap_skill_ids"] == [skills["Feedback"]]

    # Member is declared Level 2 (range 1.8 - 2.7), promotion threshold 2.4
    assert report["current_level"] == "Level 2"
    assert report["growth_indicator"]["status"] == "promotion-ready"


def test_report_without_assessments(client, designer, maturity_model):
    report = client.get(f"/api/maturity/{designer.id}/report").json()["data"]
    assert report["category_scores"] == []
    assert report["average_category_score"] is None
    assert report["growth_indicator"] is None


def test_report_for_member_with_unrecognized_level(client, make_member, maturity_model):
    legacy = make_member(current_level="Principal", role_id=maturity_model["role"])
    skills, levels = maturity_model["skills"], maturity_model["levels"]
    client.put(f"/api/maturity/{legacy.id}/assessments", json=[
        {"skill_id": skills["Typography"], "leader_rating": levels["Level 2"]},
    ])
    report = client.get(f"/api/maturity/{legacy.id}/report").json()["data"]
    assert report["average_category_score"]["avg_score"] == 2.0
    assert report["growth_indicator"] is None


def test_member_without_role_has_no_category_scores(client, member, maturity_model):
    skills, levels = maturity_model["skills"], maturity_model["levels"]
    client.put(f"/api/maturity/{member.id}/assessments", json=[
        {"skill_id": skills["Typography"], "leader_rating": levels["Senior Level"]},
    ])
    report = client.get(f"/api/maturity/{member.id}/report").json()["data"]

    assert report["maturity_model_id"] is None
    assert report["category_scores"] == []
    assert report["average_category_score"] is None
    assert report["growth_indicator"] is None
    # The flat view still covers every rated skill
    assert report["overall"]["total_skills_rated"] == 1


def test_create_model_and_role(client, maturity_model):
    categories = maturity_model["categories"]
    model = client.post("/api/maturity/models", json={
        "name": "Research",
        "category_ids": [categories["Collaboration"], categories["Craft Excellence"]],
    })
    assert model.status_code == 201
    assert model.json()["category_ids"] == [categories["Collaboration"], categories["Craft Excellence"]]

    role = client.post("/api/maturity/roles", json={"name": "Researcher", "maturity_model_id": model.json()["id"]})
    assert role.status_code == 201
    assert [r["name"] for r in client.get("/api/maturity/roles").json()] == ["Product Designer", "Researcher"]

    unknown = client.post("/api/maturity/roles", json={"name": "Ghost", "maturity_model_id": 9999})
    assert unknown.status_code == 422


def test_create_model_with_unknown_category(client, maturity_model):
    response = client.post("/api/maturity/models", json={"name": "Broken", "category_ids": [9999]})
    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "INVALID_REFERENCE"


def test_shared_skill_only_counts_in_the_members_model(client, db_session, make_member, designer, maturity_model):
    from app.models.maturity import CategorySkill

    skills, levels = maturity_model["skills"], maturity_model["levels"]
    eng_category = client.post("/api/maturity/categories", json={"name": "Engineering Craft"}).json()
    debugging = client.post("/api/maturity/skills", json={
        "name": "Debugging",
        "category_ids": [eng_category["id"]],
        "levels": [{"level_id": level_id} for level_id in levels.values()],
    }).json()
    # Feedback belongs to both rubrics
    db_session.add(CategorySkill(category_id=eng_category["id"], skill_id=skills["Feedback"], display_order=1))
    db_session.commit()

    eng_model = client.post("/api/maturity/models", json={
        "name": "Engineering", "category_ids": [eng_category["id"]],
    }).json()
    eng_role = client.post("/api/maturity/roles", json={
        "name": "Engineer", "maturity_model_id": eng_model["id"],
    }).json()
    engineer = make_member(full_name="Eli Engineer", role_id=eng_role["id"])

    ratings = [
        {"skill_id": skills["Typography"], "leader_rating": levels["Level 1"]},
        {"skill_id": skills["Feedback"], "leader_rating": levels["Lead"]},
        {"skill_id": debugging["id"], "leader_rating": levels["Level 2"]},
    ]
    for someone in (engineer, designer):
        assert client.put(f"/api/maturity/{someone.id}/assessments", json=ratings).status_code == 200

    engineering = client.get(f"/api/maturity/{engineer.id}/report").json()["data"]
    assert engineering["maturity_model_name"] == "Engineering"
    assert [c["category_name"] for c in engineering["category_scores"]] == ["Engineering Craft"]
    assert engineering["category_scores"][0]["avg_score"] == 3.0
    assert engineering["average_category_score"] == {
        "avg_score": 3.0, "level_name": "Senior Level", "categories_rated": 1,
    }
    assert engineering["overall"]["total_skills_rated"] == 3

    design = client.get(f"/api/maturity/{designer.id}/report").json()["data"]
    assert [c["category_name"] for c in design["category_scores"]] == ["Craft Excellence", "Collaboration"]
    assert [c["avg_score"] for c in design["category_scores"]] == [1.0, 4.0]
    assert design["average_category_score"]["avg_score"] == 2.5

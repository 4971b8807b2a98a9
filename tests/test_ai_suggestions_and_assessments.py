from __future__ import annotations

from skillbloom.database import SessionLocal
from skillbloom.data.marketplace import MENTORS
from skillbloom.models.assessment_response import AssessmentResponse
from skillbloom.models.mentor import Mentor
from skillbloom.models.skill_suggestion import SkillSuggestion
from skillbloom.services.errors import CollaboratorError


def _me(client, headers) -> dict:
    return client.get("/users/me", headers=headers).json()


def test_skill_suggestions_are_persisted(client, register_and_login, collaborator) -> None:
    headers = register_and_login("ideas@example.com")

    r = client.post(
        "/ai/skill-suggestions",
        json={"interests": "baking, gifts", "experience": ["home cooking"], "demographics": "urban"},
        headers=headers,
    )
    assert r.status_code == 200, r.text
    assert [s["name"] for s in r.json()] == ["Artisanal Baking Classes", "Handmade Gift Boxes"]

    profile = collaborator.calls[-1]["profile"]
    assert profile["interests"] == ["baking", "gifts"]
    assert profile["demographics"] == "urban"

    user_id = _me(client, headers)["id"]
    listed = client.get(f"/users/{user_id}/skill-suggestions").json()
    assert [s["match_percentage"] for s in listed] == [94, 88]


def test_skill_suggestions_collaborator_failure(client, register_and_login, collaborator) -> None:
    headers = register_and_login("nope@example.com")
    collaborator.error = CollaboratorError("provider down")

    r = client.post("/ai/skill-suggestions", json={"interests": "sewing"}, headers=headers)
    assert r.status_code == 502
    assert r.json()["detail"]["message"] == "provider down"

    with SessionLocal() as db:
        assert db.query(SkillSuggestion).count() == 0


def test_submit_assessment_returns_insights(client, register_and_login) -> None:
    headers = register_and_login("assess@example.com")

    r = client.post(
        "/assessments",
        json={"responses": {"time": "10 hours a week", "goal": "side income"}},
        headers=headers,
    )
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["assessment"]["completed"] is True
    assert body["assessment"]["responses"]["goal"] == "side income"
    assert body["business_insights"] == "Focus on a premium niche."
    assert len(body["skill_suggestions"]) == 2


def test_assessment_is_kept_when_analysis_fails(client, register_and_login, collaborator) -> None:
    headers = register_and_login("keep@example.com")
    collaborator.error = CollaboratorError("provider down")

    r = client.post("/assessments", json={"responses": {"goal": "side income"}}, headers=headers)
    assert r.status_code == 502

    with SessionLocal() as db:
        rows = db.query(AssessmentResponse).all()
        assert len(rows) == 1
        assert rows[0].responses == {"goal": "side income"}


def test_assessment_requires_responses(client, register_and_login) -> None:
    headers = register_and_login("blank@example.com")
    assert client.post("/assessments", json={"responses": {}}, headers=headers).status_code == 422


def test_assessment_for_foreign_skill_is_forbidden(client, register_and_login) -> None:
    owner = register_and_login("first@example.com")
    other = register_and_login("second@example.com")
    skill = client.post("/skills", json={"category": "cooking", "name": "Curry"}, headers=owner).json()

    r = client.post("/assessments", json={"skill_id": skill["id"], "responses": {"experience": "1"}}, headers=other)
    assert r.status_code == 403


def test_adopt_suggestion_creates_unverified_skill(client, register_and_login) -> None:
    headers = register_and_login("adopt@example.com")
    other = register_and_login("thief@example.com")
    suggestions = client.post("/ai/skill-suggestions", json={"interests": "baking"}, headers=headers).json()
    suggestion_id = suggestions[0]["id"]

    assert client.post(f"/skills/suggestions/{suggestion_id}/adopt", headers=other).status_code == 404

    r = client.post(f"/skills/suggestions/{suggestion_id}/adopt", headers=headers)
    assert r.status_code == 201, r.text
    skill = r.json()
    assert skill["name"] == "Artisanal Baking Classes"
    assert skill["category"] == "baking"
    assert skill["is_ai_suggested"] is True
    assert skill["is_verified"] is False
    assert skill["level"] == 0


def test_business_suggestion(client, register_and_login, collaborator) -> None:
    headers = register_and_login("growth@example.com")

    r = client.post(
        "/ai/business-suggestions",
        json={"skills": "baking, decorating", "currentServices": ["custom cakes"], "averagePrice": 4500},
        headers=headers,
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["potential_increase"] == "30-45%"
    assert len(body["actions"]) == 2

    sent = collaborator.calls[-1]["business"]
    assert sent["skills"] == ["baking", "decorating"]
    assert sent["current_services"] == ["custom cakes"]
    assert sent["average_price"] == 4500


def test_business_suggestion_failure_is_502(client, register_and_login, collaborator) -> None:
    headers = register_and_login("nogrowth@example.com")
    collaborator.error = CollaboratorError("provider down")

    r = client.post("/ai/business-suggestions", json={"skills": ["baking"]}, headers=headers)
    assert r.status_code == 502


def test_business_suggestion_requires_login(client) -> None:
    assert client.post("/ai/business-suggestions", json={"skills": ["baking"]}).status_code == 401


def _seed_mentors() -> list[int]:
    with SessionLocal() as db:
        rows = [Mentor(**seed.model_dump()) for seed in MENTORS]
        db.add_all(rows)
        db.commit()
        return [row.id for row in rows]


def test_mentor_recommendations_rank_stored_mentors(client, register_and_login, collaborator) -> None:
    headers = register_and_login("mentee@example.com")
    ids = _seed_mentors()
    collaborator.mentor_matches = [
        (ids[2], 81, "Teaches online"),
        (ids[0], 93, "Runs a home bakery"),
        (9999, 99, "Not a stored mentor"),
        (ids[0], 70, "Duplicate"),
    ]

    r = client.post(
        "/ai/mentor-recommendations",
        json={"skills": ["baking"], "interests": "business", "goals": ["open a bakery"]},
        headers=headers,
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert [(m["id"], m["match_percentage"]) for m in body] == [(ids[0], 93), (ids[2], 81)]
    assert body[0]["name"] == "Priya Sharma"
    assert body[0]["match_reason"] == "Runs a home bakery"

    call = collaborator.calls[-1]
    assert call["profile"]["interests"] == ["business"]
    assert [m["id"] for m in call["mentors"]] == ids
    assert set(call["mentors"][0]) == {"id", "name", "specialty", "bio"}


def test_mentor_recommendations_without_mentors_skip_ai(client, register_and_login, collaborator) -> None:
    headers = register_and_login("lonely@example.com")

    r = client.post("/ai/mentor-recommendations", json={"skills": ["sewing"]}, headers=headers)
    assert r.status_code == 200
    assert r.json() == []
    assert collaborator.calls == []


def test_mentor_recommendations_failure_is_502(client, register_and_login, collaborator) -> None:
    headers = register_and_login("mentorless@example.com")
    _seed_mentors()
    collaborator.error = CollaboratorError("provider down")

    r = client.post("/ai/mentor-recommendations", json={"skills": ["sewing"]}, headers=headers)
    assert r.status_code == 502

from __future__ import annotations

import pytest

from skillbloom.models.user import User
from skillbloom.services.profile_service import profile_completion


@pytest.mark.parametrize(
    "stored, expected",
    [
        (None, 65),
        (0, 0),
        (40, 40),
        (100, 100),
        (140, 100),
        (-5, 0),
    ],
)
def test_profile_completion_value(stored, expected) -> None:
    user = User(email="p@example.com", username="p", password="x", profile_completion_percentage=stored)
    assert profile_completion(user) == expected


def test_profile_completion_explicit_fallback() -> None:
    user = User(email="p@example.com", username="p", password="x")
    assert profile_completion(user, fallback=10) == 10


def test_dashboard_counts(client, register_and_login) -> None:
    headers = register_and_login("dash@example.com")

    r = client.get("/users/me/dashboard", headers=headers)
    assert r.status_code == 200
    empty = r.json()
    assert empty["profile_completion"] == 65
    assert empty["skills"] == []
    assert empty["verified_skill_count"] == 0

    skill = client.post("/skills", json={"category": "crafts", "name": "Knitting"}, headers=headers).json()
    client.post("/skills", json={"category": "tutoring", "name": "Algebra"}, headers=headers)
    client.post(
        "/skills/verify",
        json={
            "skill_id": skill["id"],
            "answers": {"experience": "10 years", "education": "self-taught", "materials": "wool"},
        },
        headers=headers,
    )
    client.post(
        "/api/listings",
        json={"title": "Scarves", "description": "Hand knitted", "price": 2500, "category": "Crafts & Handmade"},
        headers=headers,
    )
    client.post("/ai/skill-suggestions", json={"interests": "knitting, sewing"}, headers=headers)
    client.put("/users/me", json={"profile_completion_percentage": 80}, headers=headers)

    body = client.get("/users/me/dashboard", headers=headers).json()
    assert body["profile_completion"] == 80
    assert [s["name"] for s in body["skills"]] == ["Knitting", "Algebra"]
    assert body["verified_skill_count"] == 1
    assert body["listing_count"] == 1
    assert body["suggestion_count"] == 2


def test_profile_completion_out_of_range_rejected(client, register_and_login) -> None:
    headers = register_and_login("range@example.com")
    r = client.put("/users/me", json={"profile_completion_percentage": 101}, headers=headers)
    assert r.status_code == 422

from __future__ import annotations

import asyncio
import os
from typing import Any, Callable, Mapping

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["DB_URL"] = "sqlite:///./test.db"
    os.environ["ORM_DB_URL"] = "sqlite:///./test.db"
    os.environ["ENVIRONMENT"] = "test"
    os.environ["JWT_SECRET"] = "test-secret"
    os.environ["GROQ_API_KEY"] = "test-key"
    os.environ["AI_TIMEOUT_SECONDS"] = "2"


class StubCollaborator:
    """Stands in for the Groq client; scripted per test."""

    def __init__(self) -> None:
        from skillbloom.schemas.suggestion import SuggestedSkill

        self.verification: dict[str, Any] = {"skill_level": 4, "feedback": "Strong technique", "score": 88}
        self.error: Exception | None = None
        self.delay: float = 0.0
        self.suggestions = [
            SuggestedSkill(name="Artisanal Baking Classes", description="Teach sourdough", match_percentage=94, tags=["baking"], icon="ri-cake-line"),
            SuggestedSkill(name="Handmade Gift Boxes", description="Curated crafts", match_percentage=88, tags=["handmade"], icon="ri-gift-line"),
        ]
        self.insights = "Focus on a premium niche."
        self.business = {
            "suggestion": "Launch a signature collection",
            "potential_increase": "30-45%",
            "actions": ["Design three premium offerings", "Price them at twice the standard rate"],
        }
        # (mentor_id, match_percentage, reason); ids refer to whatever the test seeded.
        self.mentor_matches: list[tuple[int, int, str]] = []
        self.calls: list[dict[str, Any]] = []

    async def _maybe_fail(self) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error

    async def verify_skill(self, *, category: str, skill_name: str, answers: Mapping[str, str]):
        from skillbloom.services.ai_client import VerificationResult

        self.calls.append({"op": "verify", "category": category, "skill_name": skill_name, "answers": dict(answers)})
        await self._maybe_fail()
        return VerificationResult(
            skill_level=self.verification["skill_level"],
            feedback=self.verification["feedback"],
            score=self.verification["score"],
        )

    async def suggest_skills(self, profile: Mapping[str, Any]):
        self.calls.append({"op": "suggest", "profile": dict(profile)})
        await self._maybe_fail()
        return list(self.suggestions)

    async def analyze_assessment(self, responses: Mapping[str, Any]):
        from skillbloom.services.ai_client import AssessmentAnalysis

        self.calls.append({"op": "analyze", "responses": dict(responses)})
        await self._maybe_fail()
        return AssessmentAnalysis(suggested_skills=list(self.suggestions), business_insights=self.insights)

    async def suggest_business_growth(self, business: Mapping[str, Any]):
        from skillbloom.schemas.suggestion import BusinessSuggestion

        self.calls.append({"op": "business", "business": dict(business)})
        await self._maybe_fail()
        return BusinessSuggestion(**self.business)

    async def suggest_mentors(self, profile: Mapping[str, Any], mentors):
        from skillbloom.schemas.community import MentorMatch

        self.calls.append({"op": "mentors", "profile": dict(profile), "mentors": [dict(m) for m in mentors]})
        await self._maybe_fail()
        return [MentorMatch(id=i, match_percentage=p, match_reason=r) for i, p, r in self.mentor_matches]


def reset_database() -> None:
    from skillbloom.database import Base, engine
    import skillbloom.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture()
def collaborator() -> StubCollaborator:
    return StubCollaborator()


@pytest.fixture()
def db() -> Any:
    from skillbloom.database import SessionLocal

    reset_database()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(collaborator: StubCollaborator) -> Any:
    from skillbloom.main import create_app
    from skillbloom.routers.dependencies import get_collaborator

    reset_database()

    app = create_app()
    app.dependency_overrides[get_collaborator] = lambda: collaborator
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def register_and_login(client: TestClient) -> Callable[..., dict[str, str]]:
    def _register(email: str, *, role: str = "homemaker", password: str = "SecretPass123") -> dict[str, str]:
        username = email.split("@", 1)[0]
        r = client.post(
            "/auth/register",
            json={"email": email, "username": username, "password": password, "role": role},
        )
        assert r.status_code == 201, r.text
        r = client.post("/auth/login", json={"email": email, "password": password})
        assert r.status_code == 200, r.text
        return {"Authorization": f"Bearer {r.json()['access_token']}"}

    return _register

from __future__ import annotations

import asyncio
import json
from datetime import datetime, timezone

import httpx
import pytest

from skillbloom.config import Settings
from skillbloom.services.ai_client import GroqClient, parse_verification_payload
from skillbloom.services.errors import CollaboratorError


def _settings() -> Settings:
    return Settings(GROQ_API_KEY="test-key", GROQ_MODEL="test-model", AI_TIMEOUT_SECONDS=5)


def _completion(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _client(handler) -> GroqClient:
    transport = httpx.MockTransport(handler)
    http = httpx.AsyncClient(transport=transport, base_url="https://groq.test/openai/v1")
    return GroqClient(_settings(), http_client=http)


def _run(coro):
    return asyncio.run(coro)


def test_verify_skill_parses_json_answer() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        answer = {"skillLevel": 3, "score": 71.5, "feedback": "  Solid basics.  "}
        return httpx.Response(200, json=_completion(json.dumps(answer)))

    client = _client(handler)
    result = _run(client.verify_skill(category="cooking", skill_name="Curry", answers={"experience": "2 years"}))

    assert result.skill_level == 3
    assert result.score == 71.5
    assert result.feedback == "Solid basics."
    assert seen["path"].endswith("/chat/completions")
    assert seen["body"]["model"] == "test-model"
    assert seen["body"]["response_format"] == {"type": "json_object"}
    assert "Curry" in seen["body"]["messages"][0]["content"]


def test_provider_error_status_becomes_collaborator_error() -> None:
    client = _client(lambda request: httpx.Response(500, json={"error": "boom"}))
    with pytest.raises(CollaboratorError) as excinfo:
        _run(client.verify_skill(category="crafts", skill_name="Quilting", answers={}))
    assert excinfo.value.detail == {"status_code": 500}


def test_transport_error_becomes_collaborator_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(CollaboratorError):
        _run(_client(handler).verify_skill(category="crafts", skill_name="Quilting", answers={}))


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        json.dumps(["a", "list"]),
        "",
        json.dumps({"skill_level": 7, "score": 50, "feedback": "?"}),
        json.dumps({"skill_level": 2.5, "score": 50, "feedback": "?"}),
        json.dumps({"skill_level": 2, "score": 150, "feedback": "?"}),
        json.dumps({"score": 50, "feedback": "no level"}),
    ],
)
def test_unusable_answers_are_rejected(content) -> None:
    client = _client(lambda request: httpx.Response(200, json=_completion(content)))
    with pytest.raises(CollaboratorError):
        _run(client.verify_skill(category="cooking", skill_name="Curry", answers={}))


def test_missing_choices_is_rejected() -> None:
    client = _client(lambda request: httpx.Response(200, json={"choices": []}))
    with pytest.raises(CollaboratorError):
        _run(client.verify_skill(category="cooking", skill_name="Curry", answers={}))


def test_suggest_skills_accepts_camel_case_match() -> None:
    answer = {
        "skills": [
            {"name": "Meal Prep", "description": "Weekly boxes", "matchPercentage": 91, "tags": ["food"], "icon": "ri-bowl-line"},
            {"name": "Tutoring", "description": "Maths", "match_percentage": 85, "tags": ["teaching"]},
        ]
    }
    client = _client(lambda request: httpx.Response(200, json=_completion(json.dumps(answer))))
    skills = _run(client.suggest_skills({"interests": ["cooking"], "hobbies": []}))
    assert [(s.name, s.match_percentage) for s in skills] == [("Meal Prep", 91), ("Tutoring", 85)]


def test_suggest_skills_rejects_malformed_items() -> None:
    answer = {"skills": [{"name": "No score"}]}
    client = _client(lambda request: httpx.Response(200, json=_completion(json.dumps(answer))))
    with pytest.raises(CollaboratorError):
        _run(client.suggest_skills({"interests": ["cooking"]}))


def test_analyze_assessment() -> None:
    answer = {
        "suggestedSkills": [{"name": "Cake Decorating", "description": "Custom cakes", "match_percentage": 90}],
        "businessInsights": " Start with pre-orders. ",
    }
    client = _client(lambda request: httpx.Response(200, json=_completion(json.dumps(answer))))
    analysis = _run(client.analyze_assessment({"goal": "side income"}))
    assert [s.name for s in analysis.suggested_skills] == ["Cake Decorating"]
    assert analysis.business_insights == "Start with pre-orders."


def test_analyze_assessment_requires_insights() -> None:
    answer = {"suggested_skills": []}
    client = _client(lambda request: httpx.Response(200, json=_completion(json.dumps(answer))))
    with pytest.raises(CollaboratorError):
        _run(client.analyze_assessment({"goal": "side income"}))


def test_parse_verification_payload_keeps_timestamp() -> None:
    when = datetime(2024, 3, 1, tzinfo=timezone.utc)
    result = parse_verification_payload({"level": 5, "score": 100, "feedback": None}, verified_at=when)
    assert result.skill_level == 5
    assert result.feedback == ""
    assert result.to_details() == {
        "verified_at": "2024-03-01T00:00:00+00:00",
        "skill_level": 5,
        "feedback": "",
        "score": 100.0,
    }


def test_business_suggestion_accepts_camel_case() -> None:
    answer = {"suggestion": "Offer tasting boxes", "potentialIncrease": "20%", "actions": ["Bundle", "Promote"]}
    client = _client(lambda request: httpx.Response(200, json=_completion(json.dumps(answer))))
    result = _run(client.suggest_business_growth({"skills": ["baking"], "average_price": 1500}))
    assert result.suggestion == "Offer tasting boxes"
    assert result.potential_increase == "20%"
    assert result.actions == ["Bundle", "Promote"]


def test_business_suggestion_rejects_missing_fields() -> None:
    client = _client(lambda request: httpx.Response(200, json=_completion(json.dumps({"actions": []}))))
    with pytest.raises(CollaboratorError):
        _run(client.suggest_business_growth({"skills": ["baking"]}))


def test_suggest_mentors_parses_matches() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["prompt"] = json.loads(request.content)["messages"][0]["content"]
        answer = {"mentors": [{"id": 3, "matchPercentage": 90, "matchReason": "Same niche"}]}
        return httpx.Response(200, json=_completion(json.dumps(answer)))

    client = _client(handler)
    matches = _run(
        client.suggest_mentors({"skills": ["baking"]}, [{"id": 3, "name": "Priya", "specialty": "Bakery", "bio": "b"}])
    )
    assert [(m.id, m.match_percentage, m.match_reason) for m in matches] == [(3, 90, "Same niche")]
    assert "Priya" in seen["prompt"]


def test_suggest_mentors_requires_a_list() -> None:
    client = _client(lambda request: httpx.Response(200, json=_completion(json.dumps({"mentors": "none"}))))
    with pytest.raises(CollaboratorError):
        _run(client.suggest_mentors({"skills": []}, []))

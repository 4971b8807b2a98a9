"""
Groq AI collaborator.

Talks to Groq's OpenAI-compatible chat completions endpoint over httpx and
turns its JSON answers into typed results:

- skill verification (score, feedback, 1..5 level)
- marketable skill suggestions from onboarding answers
- assessment analysis (suggested skills plus business insights)
- business growth advice and mentor matching

Every failure mode (transport error, non-2xx status, unparsable or
incomplete JSON) is raised as `CollaboratorError`. Nothing here invents
fallback content.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Protocol, Sequence

import httpx
from pydantic import ValidationError as PydanticValidationError

from skillbloom.config import Settings, get_settings
from skillbloom.schemas.community import MentorMatch
from skillbloom.schemas.suggestion import BusinessSuggestion, SuggestedSkill
from skillbloom.services.errors import CollaboratorError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerificationResult:
    skill_level: int
    feedback: str
    score: float
    verified_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_details(self) -> dict[str, Any]:
        return {
            "verified_at": self.verified_at.isoformat(),
            "skill_level": self.skill_level,
            "feedback": self.feedback,
            "score": self.score,
        }


@dataclass(frozen=True)
class AssessmentAnalysis:
    suggested_skills: list[SuggestedSkill]
    business_insights: str


class SkillCollaborator(Protocol):
    async def verify_skill(self, *, category: str, skill_name: str, answers: Mapping[str, str]) -> VerificationResult:
        ...

    async def suggest_skills(self, profile: Mapping[str, Any]) -> list[SuggestedSkill]:
        ...

    async def analyze_assessment(self, responses: Mapping[str, Any]) -> AssessmentAnalysis:
        ...

    async def suggest_business_growth(self, business: Mapping[str, Any]) -> BusinessSuggestion:
        ...

    async def suggest_mentors(
        self, profile: Mapping[str, Any], mentors: Sequence[Mapping[str, Any]]
    ) -> list[MentorMatch]:
        ...


def _to_number(value: Any, name: str) -> float:
    if isinstance(value, bool) or value is None:
        raise CollaboratorError(f"AI response has no usable '{name}'", detail={"field": name})
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise CollaboratorError(f"AI response field '{name}' is not numeric", detail={"field": name}) from exc


def parse_verification_payload(payload: Mapping[str, Any], *, verified_at: datetime | None = None) -> VerificationResult:
    """Validate a verification answer; both `level` and `skillLevel` spellings are accepted."""

    if not isinstance(payload, Mapping):
        raise CollaboratorError("AI verification response is not a JSON object")

    raw_level = payload.get("skill_level", payload.get("skillLevel", payload.get("level")))
    level_f = _to_number(raw_level, "skill_level")
    if not level_f.is_integer() or not 1 <= level_f <= 5:
        raise CollaboratorError("AI skill level outside 1..5", detail={"skill_level": raw_level})

    score = _to_number(payload.get("score"), "score")
    if not 0 <= score <= 100:
        raise CollaboratorError("AI score outside 0..100", detail={"score": score})

    feedback = payload.get("feedback")
    if feedback is None:
        feedback = ""
    if not isinstance(feedback, str):
        raise CollaboratorError("AI feedback is not text", detail={"field": "feedback"})

    return VerificationResult(
        skill_level=int(level_f),
        feedback=feedback.strip(),
        score=score,
        verified_at=verified_at or datetime.now(timezone.utc),
    )


def _camel_to_snake(data: Mapping[str, Any], pairs: Mapping[str, str]) -> dict[str, Any]:
    out = dict(data)
    for camel, snake in pairs.items():
        if snake not in out and camel in out:
            out[snake] = out.pop(camel)
    return out


def _parse_suggestions(items: Any) -> list[SuggestedSkill]:
    if not isinstance(items, list):
        raise CollaboratorError("AI suggestions are not a list")
    out: list[SuggestedSkill] = []
    for item in items:
        if not isinstance(item, Mapping):
            raise CollaboratorError("AI suggestion is not an object")
        data = _camel_to_snake(item, {"matchPercentage": "match_percentage"})
        try:
            out.append(SuggestedSkill.model_validate(data))
        except PydanticValidationError as exc:
            raise CollaboratorError("AI suggestion is malformed", detail={"errors": exc.errors()}) from exc
    return out


def _parse_business_suggestion(data: Mapping[str, Any]) -> BusinessSuggestion:
    payload = _camel_to_snake(data, {"potentialIncrease": "potential_increase"})
    try:
        return BusinessSuggestion.model_validate(payload)
    except PydanticValidationError as exc:
        raise CollaboratorError("AI business suggestion is malformed", detail={"errors": exc.errors()}) from exc


def _parse_mentor_matches(items: Any) -> list[MentorMatch]:
    if not isinstance(items, list):
        raise CollaboratorError("AI mentor matches are not a list")
    out: list[MentorMatch] = []
    for item in items:
        if not isinstance(item, Mapping):
            raise CollaboratorError("AI mentor match is not an object")
        payload = _camel_to_snake(item, {"matchPercentage": "match_percentage", "matchReason": "match_reason"})
        try:
            out.append(MentorMatch.model_validate(payload))
        except PydanticValidationError as exc:
            raise CollaboratorError("AI mentor match is malformed", detail={"errors": exc.errors()}) from exc
    return out


class GroqClient:
    """Async client for the AI provider. One instance per application."""

    def __init__(self, settings: Settings | None = None, *, http_client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings or get_settings()
        self.client = http_client or httpx.AsyncClient(
            base_url=self.settings.groq_base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {self.settings.groq_api_key}",
                "Content-Type": "application/json",
            },
            timeout=self.settings.ai_timeout_seconds,
        )

    async def close(self) -> None:
        await self.client.aclose()

    async def _complete_json(self, prompt: str) -> dict[str, Any]:
        payload = {
            "model": self.settings.groq_model,
            "messages": [{"role": "user", "content": prompt}],
            "response_format": {"type": "json_object"},
        }
        try:
            response = await self.client.post("/chat/completions", json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning("groq request failed status=%s", exc.response.status_code)
            raise CollaboratorError(
                "AI provider returned an error", detail={"status_code": exc.response.status_code}
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("groq transport error: %s", type(exc).__name__)
            raise CollaboratorError("AI provider unreachable") from exc
        except ValueError as exc:
            raise CollaboratorError("AI provider returned invalid JSON") from exc

        try:
            content = body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise CollaboratorError("AI response has no message content") from exc
        if not content:
            raise CollaboratorError("AI response has no message content")

        try:
            parsed = json.loads(content)
        except (TypeError, ValueError) as exc:
            raise CollaboratorError("AI message content is not JSON") from exc
        if not isinstance(parsed, dict):
            raise CollaboratorError("AI message content is not a JSON object")
        return parsed

    async def verify_skill(self, *, category: str, skill_name: str, answers: Mapping[str, str]) -> VerificationResult:
        prompt = f"""
            You are assessing a homemaker's skill for a marketplace verification badge.

            Skill Category: {category}
            Skill Name: {skill_name}
            Assessment Answers:
            {json.dumps(dict(answers), indent=2, ensure_ascii=False)}

            Rate the skill and respond with a JSON object containing:
            - "skill_level": integer from 1 (beginner) to 5 (expert)
            - "score": number from 0 to 100
            - "feedback": two or three sentences of constructive feedback
        """
        data = await self._complete_json(prompt)
        return parse_verification_payload(data)

    async def suggest_skills(self, profile: Mapping[str, Any]) -> list[SuggestedSkill]:
        def _join(key: str) -> str:
            return ", ".join(profile.get(key) or [])

        demographics = profile.get("demographics")
        prompt = f"""
            Suggest marketable skills for a homemaker based on their input.

            - Interests: {_join("interests")}
            - Experience: {_join("experience")}
            - Hobbies: {_join("hobbies")}
            - Personality traits: {_join("personality_traits")}
            {f"- Demographics: {demographics}" if demographics else ""}

            Generate 3 high-value skill suggestions the user could monetize. For each include
            "name", "description", "match_percentage" (80-98), two "tags" and an "icon" from the
            Remix Icon set (ri-xxx-line format).

            Respond with a JSON object with a "skills" array.
        """
        data = await self._complete_json(prompt)
        return _parse_suggestions(data.get("skills"))

    async def analyze_assessment(self, responses: Mapping[str, Any]) -> AssessmentAnalysis:
        prompt = f"""
            Analyze these assessment responses from a homemaker looking to monetize their skills:

            {json.dumps(dict(responses), ensure_ascii=False)}

            Provide three suggested skills (with "name", "description", "match_percentage" 80-98,
            "tags" and "icon") and a short paragraph of actionable business advice.

            Respond with a JSON object with a "suggested_skills" array and a "business_insights" string.
        """
        data = await self._complete_json(prompt)
        skills = data.get("suggested_skills", data.get("suggestedSkills"))
        insights = data.get("business_insights", data.get("businessInsights"))
        if not isinstance(insights, str):
            raise CollaboratorError("AI analysis has no business insights")
        return AssessmentAnalysis(suggested_skills=_parse_suggestions(skills), business_insights=insights.strip())

    async def suggest_business_growth(self, business: Mapping[str, Any]) -> BusinessSuggestion:
        prompt = f"""
            Based on this information about a homemaker's business (prices in cents):

            {json.dumps(dict(business), ensure_ascii=False, default=str)}

            Generate one strategic growth suggestion to increase revenue, the potential
            percentage increase it could create, and 2-3 concrete actions to implement it.

            Respond with a JSON object with "suggestion", "potential_increase" and "actions" fields.
        """
        data = await self._complete_json(prompt)
        return _parse_business_suggestion(data)

    async def suggest_mentors(
        self, profile: Mapping[str, Any], mentors: Sequence[Mapping[str, Any]]
    ) -> list[MentorMatch]:
        prompt = f"""
            Match a homemaker with the most suitable mentors from this list.

            User profile:
            {json.dumps(dict(profile), ensure_ascii=False)}

            Available mentors:
            {json.dumps([dict(m) for m in mentors], ensure_ascii=False)}

            Suggest the top 2 mentors for this user. For each give its "id", a
            "match_percentage" (70-95) and a short "match_reason".

            Respond with a JSON object with a "mentors" array.
        """
        data = await self._complete_json(prompt)
        return _parse_mentor_matches(data.get("mentors"))

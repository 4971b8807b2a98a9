from __future__ import annotations

from enum import Enum

from skillbloom.schemas.assessment import AssessmentQuestion


class CategoryBucket(str, Enum):
    COOKING = "cooking"
    CRAFTS = "crafts"
    TUTORING = "tutoring"
    GENERAL = "general"


# Every alias a skill category may use. Anything not listed resolves to GENERAL.
CATEGORY_ALIASES: dict[str, CategoryBucket] = {
    "cooking": CategoryBucket.COOKING,
    "baking": CategoryBucket.COOKING,
    "crafts": CategoryBucket.CRAFTS,
    "handmade": CategoryBucket.CRAFTS,
    "tutoring": CategoryBucket.TUTORING,
    "teaching": CategoryBucket.TUTORING,
}

REQUIRED_QUESTION_IDS: tuple[str, ...] = ("experience", "education")

COMMON_QUESTIONS: tuple[AssessmentQuestion, ...] = (
    AssessmentQuestion(
        id="experience",
        question="How many years of experience do you have with this skill?",
    ),
    AssessmentQuestion(
        id="education",
        question="Have you had any formal education or training in this area?",
    ),
)

BUCKET_QUESTIONS: dict[CategoryBucket, tuple[AssessmentQuestion, ...]] = {
    CategoryBucket.COOKING: (
        AssessmentQuestion(id="techniques", question="Which cooking techniques are you most confident with?"),
        AssessmentQuestion(id="specialty", question="What is your specialty dish or baked good?"),
        AssessmentQuestion(
            id="dietary",
            question="Are you experienced with any dietary restrictions (vegan, gluten-free, etc.)?",
        ),
    ),
    CategoryBucket.CRAFTS: (
        AssessmentQuestion(id="materials", question="What materials do you primarily work with?"),
        AssessmentQuestion(id="tools", question="What specialized tools do you use in your craft?"),
        AssessmentQuestion(
            id="process",
            question="Briefly describe your creative process from idea to finished product.",
        ),
    ),
    CategoryBucket.TUTORING: (
        AssessmentQuestion(id="subjects", question="Which subjects do you teach?"),
        AssessmentQuestion(
            id="age_groups",
            question="Which age groups do you have experience teaching?",
            type="multiple_choice",
            options=["Young children (5-8)", "Pre-teens (9-12)", "Teenagers (13-17)", "Adults (18+)"],
        ),
        AssessmentQuestion(id="methodology", question="Briefly describe your teaching methodology."),
    ),
    CategoryBucket.GENERAL: (
        AssessmentQuestion(
            id="proficiency",
            question="How would you rate your proficiency in this skill?",
            type="multiple_choice",
            options=["Beginner", "Intermediate", "Advanced", "Expert"],
        ),
        AssessmentQuestion(id="description", question="Please describe your skill in detail."),
        AssessmentQuestion(id="examples", question="Can you provide examples of your work or projects?"),
    ),
}


def resolve_bucket(category: str | None) -> CategoryBucket:
    return CATEGORY_ALIASES.get((category or "").strip().lower(), CategoryBucket.GENERAL)


def get_assessment_questions(category: str | None) -> list[AssessmentQuestion]:
    """Return the ordered question set for a skill category.

    The two common questions always come first, followed by the bucket's own
    questions. Unknown categories get the GENERAL bucket. Copies are returned so
    callers cannot mutate the catalog.
    """

    bucket = resolve_bucket(category)
    return [q.model_copy(deep=True) for q in COMMON_QUESTIONS + BUCKET_QUESTIONS[bucket]]


def question_ids(category: str | None) -> list[str]:
    return [q.id for q in get_assessment_questions(category)]

# __init__.py
from skillbloom.models.assessment_response import AssessmentResponse
from skillbloom.models.listing import Listing
from skillbloom.models.mentor import Mentor
from skillbloom.models.skill import Skill
from skillbloom.models.skill_suggestion import SkillSuggestion
from skillbloom.models.success_story import SuccessStory
from skillbloom.models.user import User

__all__ = [
	"AssessmentResponse",
	"Listing",
	"Mentor",
	"Skill",
	"SkillSuggestion",
	"SuccessStory",
	"User",
]

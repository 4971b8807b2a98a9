# __init__.py
from skillbloom.schemas.assessment import (
	AssessmentQuestion,
	AssessmentQuestionsResponse,
	AssessmentRead,
	AssessmentResult,
	AssessmentSubmitRequest,
)
from skillbloom.schemas.community import MentorMatch, MentorRead, MentorRecommendation, MentorRecommendationRequest, SuccessStoryRead
from skillbloom.schemas.dashboard import DashboardResponse
from skillbloom.schemas.listing import ListingCategoriesResponse, ListingCreate, ListingRead, ListingUpdate
from skillbloom.schemas.skill import (
	SkillCreate,
	SkillRead,
	SkillUpdate,
	SkillVerifyRequest,
	SkillVerifyResponse,
	VerificationDetails,
)
from skillbloom.schemas.suggestion import (
	BusinessSuggestion,
	BusinessSuggestionRequest,
	SkillSuggestionRead,
	SkillSuggestionRequest,
	SuggestedSkill,
)
from skillbloom.schemas.user import Token, TokenData, UserCreate, UserLogin, UserPublic, UserRead, UserUpdate

__all__ = [
	"AssessmentQuestion",
	"AssessmentQuestionsResponse",
	"AssessmentRead",
	"AssessmentResult",
	"AssessmentSubmitRequest",
	"MentorMatch",
	"MentorRead",
	"MentorRecommendation",
	"MentorRecommendationRequest",
	"SuccessStoryRead",
	"DashboardResponse",
	"ListingCategoriesResponse",
	"ListingCreate",
	"ListingRead",
	"ListingUpdate",
	"SkillCreate",
	"SkillRead",
	"SkillUpdate",
	"SkillVerifyRequest",
	"SkillVerifyResponse",
	"VerificationDetails",
	"BusinessSuggestion",
	"BusinessSuggestionRequest",
	"SkillSuggestionRead",
	"SkillSuggestionRequest",
	"SuggestedSkill",
	"Token",
	"TokenData",
	"UserCreate",
	"UserLogin",
	"UserPublic",
	"UserRead",
	"UserUpdate",
]

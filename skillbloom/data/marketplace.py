from __future__ import annotations

from pydantic import BaseModel, Field


class MentorSeed(BaseModel):
    name: str
    specialty: str
    bio: str
    image: str | None = None
    rating: int | None = None
    mentee_count: int = 0
    session_price: int | None = None


class SuccessStorySeed(BaseModel):
    name: str
    title: str
    content: str
    business_type: str
    image: str | None = None
    tags: list[str] = Field(default_factory=list)


MENTORS: tuple[MentorSeed, ...] = (
    MentorSeed(
        name="Priya Sharma",
        specialty="Home Bakery Business",
        bio="Turned a weekend cake hobby into a bakery supplying three cafes. Helps bakers price, package and scale.",
        rating=5,
        mentee_count=42,
        session_price=2500,
    ),
    MentorSeed(
        name="Maria Lopez",
        specialty="Handmade Crafts & Etsy",
        bio="Runs a top-rated online store for hand-knitted goods and teaches product photography for makers.",
        rating=5,
        mentee_count=31,
        session_price=2000,
    ),
    MentorSeed(
        name="Aisha Bello",
        specialty="Online Tutoring",
        bio="Former teacher who built a tutoring practice from home; coaches on curriculum, scheduling and pricing.",
        rating=4,
        mentee_count=18,
        session_price=1500,
    ),
)

SUCCESS_STORIES: tuple[SuccessStorySeed, ...] = (
    SuccessStorySeed(
        name="Sunita K.",
        title="From family recipes to a catering business",
        content="Sunita verified her cooking skills, listed a weekend meal-prep service and now caters office lunches twice a week.",
        business_type="Food & Catering",
        tags=["cooking", "catering"],
    ),
    SuccessStorySeed(
        name="Grace O.",
        title="Knitting circle to online store",
        content="After an AI skill assessment suggested focusing on baby knitwear, Grace's listings sold out within a month.",
        business_type="Handmade Crafts",
        tags=["crafts", "handmade"],
    ),
    SuccessStorySeed(
        name="Fatima R.",
        title="Evening maths tutoring",
        content="Fatima started with two neighbourhood students and now tutors twelve learners online each week.",
        business_type="Education",
        tags=["tutoring", "teaching"],
    ),
)

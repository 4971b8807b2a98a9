# __init__.py
from skillbloom.data.marketplace import MENTORS, SUCCESS_STORIES, MentorSeed, SuccessStorySeed

__all__ = [
    "MENTORS",
    "SUCCESS_STORIES",
    "MentorSeed",
    "SuccessStorySeed",
]

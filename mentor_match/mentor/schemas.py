"""Mentor directory schemas."""

from enum import Enum
from typing import Literal

from mentor_match.core.schemas import CamelModel
from mentor_match.user.models import User
from mentor_match.user.schemas import MentorProfile


class MentorOrder(str, Enum):
    name = "name"
    skill = "skill"


class MentorListItem(CamelModel):
    """Public listing entry for one mentor."""

    id: int
    email: str
    role: Literal["mentor"] = "mentor"
    profile: MentorProfile

    @classmethod
    def from_user(cls, user: User) -> "MentorListItem":
        return cls(
            id=user.id,
            email=user.email,
            profile=MentorProfile(
                name=user.name,
                bio=user.bio or "",
                image_url=user.image_url,
                skills=user.skills or [],
            ),
        )

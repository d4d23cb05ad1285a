"""Match domain schemas."""

from datetime import datetime

from pydantic import Field

from mentor_match.core.schemas import CamelModel
from mentor_match.match.models import MatchRequest, MatchStatus
from mentor_match.user.models import User


class MatchRequestCreate(CamelModel):
    """Request schema for creating a match request.

    ``menteeId`` is optional; when sent it must be the caller's own id.
    """

    mentor_id: int = Field(gt=0)
    message: str = Field(min_length=1, max_length=500)
    mentee_id: int | None = Field(default=None, gt=0)


class MatchRequestRead(CamelModel):
    id: int
    mentor_id: int
    mentee_id: int
    message: str
    status: MatchStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, match: MatchRequest) -> "MatchRequestRead":
        return cls(
            id=match.id,
            mentor_id=match.mentor_id,
            mentee_id=match.mentee_id,
            message=match.message,
            status=match.status,
            created_at=match.created_at,
            updated_at=match.updated_at,
        )


class CounterpartInfo(CamelModel):
    """Public display fields of the other side of a request."""

    name: str
    email: str
    profile_image: str | None

    @classmethod
    def from_user(cls, user: User) -> "CounterpartInfo":
        return cls(name=user.name, email=user.email, profile_image=user.profile_image)


class IncomingMatchRequestRead(MatchRequestRead):
    """A request as seen by its mentor."""

    mentee: CounterpartInfo


class OutgoingMatchRequestRead(MatchRequestRead):
    """A request as seen by its mentee."""

    mentor: CounterpartInfo

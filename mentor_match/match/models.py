"""Match domain models.

SQLModel table definition for MatchRequest and its lifecycle status.
"""

from enum import Enum

from sqlalchemy import Index, text
from sqlmodel import Field, SQLModel

from mentor_match.core.mixins import TimestampMixin

PENDING_PAIR_INDEX = "uq_match_requests_pending_pair"


class MatchStatus(str, Enum):
    """Match request lifecycle.

    - pending: created by a mentee, awaiting the mentor
    - accepted / rejected: decided by the mentor (terminal)
    - cancelled: withdrawn by the mentee (terminal)
    """

    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"
    cancelled = "cancelled"


class MatchRequest(TimestampMixin, SQLModel, table=True):
    """A mentee's request to be mentored by a mentor.

    At most one pending request may exist per (mentee, mentor) pair; the
    partial unique index enforces that even under concurrent inserts.
    """

    __tablename__: str = "match_requests"
    __table_args__ = (
        Index(
            PENDING_PAIR_INDEX,
            "mentee_id",
            "mentor_id",
            unique=True,
            sqlite_where=text("status = 'pending'"),
            postgresql_where=text("status = 'pending'"),
        ),
    )

    id: int | None = Field(default=None, primary_key=True)
    mentor_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    mentee_id: int = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    status: MatchStatus = Field(
        default=MatchStatus.pending, index=True, max_length=20
    )
    message: str = Field(max_length=500)

"""User domain models.

SQLModel table definition for User.
"""

from enum import Enum

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from mentor_match.core.mixins import TimestampMixin


class UserRole(str, Enum):
    """The two fixed, mutually exclusive account roles.

    The role is chosen at signup and never changes afterwards.
    """

    mentor = "mentor"
    mentee = "mentee"


class User(TimestampMixin, SQLModel, table=True):
    """User database model.

    Note: password_hash is internal-only and must never be exposed in
    API responses. ``skills`` is only ever populated for mentors.
    """

    __tablename__: str = "users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True, max_length=255)
    password_hash: str = Field(max_length=255)
    name: str = Field(max_length=100)
    role: UserRole = Field(index=True, max_length=10)
    bio: str | None = Field(default=None, max_length=1000)
    profile_image: str | None = Field(default=None, max_length=255)
    skills: list[str] | None = Field(default=None, sa_column=Column(JSON))

    @property
    def image_url(self) -> str:
        """Stored image path, or the per-user default avatar route."""
        return self.profile_image or f"/images/{UserRole(self.role).value}/{self.id}"

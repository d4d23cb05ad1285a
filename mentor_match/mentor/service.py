"""Mentor directory queries."""

from sqlmodel import Session, col, select

from mentor_match.mentor.schemas import MentorOrder
from mentor_match.user.models import User, UserRole


def _has_skill(user: User, skill: str) -> bool:
    wanted = skill.casefold()
    return any(s.casefold() == wanted for s in user.skills or [])


def list_mentors(
    session: Session,
    skill: str | None = None,
    order_by: MentorOrder | None = None,
) -> list[User]:
    """Return every mentor, optionally filtered by skill and sorted.

    Without ``order_by`` the newest mentors come first. Skills live in a JSON
    column, so filtering and skill ordering happen here rather than in SQL.
    """
    statement = select(User).where(User.role == UserRole.mentor)
    if order_by == MentorOrder.name:
        statement = statement.order_by(col(User.name), col(User.id))
    else:
        statement = statement.order_by(
            col(User.created_at).desc(), col(User.id).desc()
        )

    mentors = list(session.exec(statement).all())

    if skill:
        mentors = [m for m in mentors if _has_skill(m, skill)]

    if order_by == MentorOrder.skill:
        mentors.sort(key=lambda m: [s.casefold() for s in m.skills or []])

    return mentors

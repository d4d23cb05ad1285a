"""Mentor directory router."""

from typing import Annotated

from fastapi import APIRouter, Query

from mentor_match.auth.dependencies import MenteeDep
from mentor_match.core.constants import CommonResponses, Routes
from mentor_match.core.deps import SessionDep
from mentor_match.mentor.schemas import MentorListItem, MentorOrder
from mentor_match.mentor.service import list_mentors

router = APIRouter(
    prefix=Routes.MENTOR.prefix,
    tags=[Routes.MENTOR.tag],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
        **CommonResponses.BAD_REQUEST,
    },
)


@router.get("", response_model=list[MentorListItem])
async def get_mentors(
    _mentee: MenteeDep,
    session: SessionDep,
    skill: Annotated[str | None, Query(min_length=1, max_length=50)] = None,
    order_by: Annotated[MentorOrder | None, Query(alias="orderBy")] = None,
):
    """List mentors for mentees, filtered by skill and sorted by name or skill."""
    return [
        MentorListItem.from_user(mentor)
        for mentor in list_mentors(session, skill=skill, order_by=order_by)
    ]

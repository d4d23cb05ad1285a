"""Match domain router.

Mentees open and cancel requests; mentors accept or reject the requests
addressed to them.
"""

from fastapi import APIRouter

from mentor_match.auth.dependencies import MenteeDep, MentorDep
from mentor_match.core.constants import CommonResponses, Routes
from mentor_match.match.exceptions import (
    MatchRequestNotFoundError,
    MenteeMismatchError,
)
from mentor_match.match.schemas import (
    CounterpartInfo,
    IncomingMatchRequestRead,
    MatchRequestCreate,
    MatchRequestRead,
    OutgoingMatchRequestRead,
)
from mentor_match.match.service import MatchLedgerDep

router = APIRouter(
    prefix=Routes.MATCH.prefix,
    tags=[Routes.MATCH.tag],
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.FORBIDDEN},
)


def _parse_request_id(request_id: str) -> int:
    """Path ids that are not positive integers cannot name any request."""
    # isdigit() alone admits non-ASCII digits such as "²" that int() rejects.
    if not (request_id.isascii() and request_id.isdigit()) or int(request_id) <= 0:
        raise MatchRequestNotFoundError("Invalid match request ID")
    return int(request_id)


@router.post(
    "",
    response_model=MatchRequestRead,
    responses={**CommonResponses.BAD_REQUEST},
)
async def create_match_request(
    payload: MatchRequestCreate, mentee: MenteeDep, ledger: MatchLedgerDep
):
    """Send a match request to a mentor."""
    if payload.mentee_id is not None and payload.mentee_id != mentee.id:
        raise MenteeMismatchError()
    match = ledger.create(mentee, payload.mentor_id, payload.message)
    return MatchRequestRead.from_model(match)


@router.get("/incoming", response_model=list[IncomingMatchRequestRead])
async def list_incoming(mentor: MentorDep, ledger: MatchLedgerDep):
    """List requests addressed to the current mentor, oldest first."""
    return [
        IncomingMatchRequestRead(
            **MatchRequestRead.from_model(match).model_dump(),
            mentee=CounterpartInfo.from_user(mentee),
        )
        for match, mentee in ledger.list_incoming(mentor)
    ]


@router.get("/outgoing", response_model=list[OutgoingMatchRequestRead])
async def list_outgoing(mentee: MenteeDep, ledger: MatchLedgerDep):
    """List requests sent by the current mentee, oldest first."""
    return [
        OutgoingMatchRequestRead(
            **MatchRequestRead.from_model(match).model_dump(),
            mentor=CounterpartInfo.from_user(mentor),
        )
        for match, mentor in ledger.list_outgoing(mentee)
    ]


@router.put(
    "/{request_id}/accept",
    response_model=MatchRequestRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def accept_match_request(
    request_id: str, mentor: MentorDep, ledger: MatchLedgerDep
):
    match = ledger.accept(mentor, _parse_request_id(request_id))
    return MatchRequestRead.from_model(match)


@router.put(
    "/{request_id}/reject",
    response_model=MatchRequestRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def reject_match_request(
    request_id: str, mentor: MentorDep, ledger: MatchLedgerDep
):
    match = ledger.reject(mentor, _parse_request_id(request_id))
    return MatchRequestRead.from_model(match)


@router.delete(
    "/{request_id}",
    response_model=MatchRequestRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def cancel_match_request(
    request_id: str, mentee: MenteeDep, ledger: MatchLedgerDep
):
    """Cancel one of the current mentee's requests."""
    match = ledger.cancel(mentee, _parse_request_id(request_id))
    return MatchRequestRead.from_model(match)

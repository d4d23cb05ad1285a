"""Match request ledger.

Owns the match request state machine. A request starts ``pending`` and
moves once to ``accepted``, ``rejected`` or ``cancelled``; all three are
terminal. Callers never learn whether a request they cannot act on exists,
so every miss surfaces as ``MatchRequestNotFoundError``.
"""

import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from mentor_match.core.mixins import utc_now
from mentor_match.db.engine import get_session
from mentor_match.match.exceptions import (
    DuplicatePendingRequestError,
    MatchRequestNotFoundError,
    MentorNotFoundError,
)
from mentor_match.match.models import MatchRequest, MatchStatus
from mentor_match.user.models import User, UserRole

logger = logging.getLogger(__name__)

CANCEL_NOT_FOUND_MESSAGE = (
    "The specified match request does not exist or does not belong to you"
)


class MatchLedger:
    def __init__(self, session: Session):
        self.session = session

    def create(self, mentee: User, mentor_id: int, message: str) -> MatchRequest:
        """Open a pending request from ``mentee`` to the mentor ``mentor_id``.

        Raises:
            MentorNotFoundError: If ``mentor_id`` is not a mentor
            DuplicatePendingRequestError: If the pair already has a pending
                request
        """
        mentor = self.session.get(User, mentor_id)
        if mentor is None or UserRole(mentor.role) != UserRole.mentor:
            raise MentorNotFoundError()

        if self._pending_between(mentee.id, mentor_id) is not None:
            raise DuplicatePendingRequestError()

        match = MatchRequest(
            mentor_id=mentor_id,
            mentee_id=mentee.id,
            message=message,
            status=MatchStatus.pending,
        )
        self.session.add(match)
        try:
            self.session.commit()
        except IntegrityError as e:
            # A concurrent create won the partial unique index.
            self.session.rollback()
            raise DuplicatePendingRequestError() from e
        self.session.refresh(match)

        logger.info(
            "Match request %s created for mentor %s",
            match.id,
            mentor_id,
            extra={"user_id": mentee.id},
        )
        return match

    def accept(self, mentor: User, request_id: int) -> MatchRequest:
        return self._decide(mentor, request_id, MatchStatus.accepted)

    def reject(self, mentor: User, request_id: int) -> MatchRequest:
        return self._decide(mentor, request_id, MatchStatus.rejected)

    def cancel(self, mentee: User, request_id: int) -> MatchRequest:
        """Cancel one of the mentee's own requests, whatever its status."""
        match = self.session.exec(
            select(MatchRequest).where(
                MatchRequest.id == request_id,
                MatchRequest.mentee_id == mentee.id,
            )
        ).first()
        if match is None:
            raise MatchRequestNotFoundError(CANCEL_NOT_FOUND_MESSAGE)
        return self._transition(match, MatchStatus.cancelled, mentee.id)

    def list_incoming(self, mentor: User) -> list[tuple[MatchRequest, User]]:
        """Requests addressed to ``mentor`` paired with each mentee."""
        statement = (
            select(MatchRequest, User)
            .join(User, col(MatchRequest.mentee_id) == col(User.id))
            .where(MatchRequest.mentor_id == mentor.id)
            .order_by(col(MatchRequest.created_at), col(MatchRequest.id))
        )
        return list(self.session.exec(statement).all())

    def list_outgoing(self, mentee: User) -> list[tuple[MatchRequest, User]]:
        """Requests sent by ``mentee`` paired with each mentor."""
        statement = (
            select(MatchRequest, User)
            .join(User, col(MatchRequest.mentor_id) == col(User.id))
            .where(MatchRequest.mentee_id == mentee.id)
            .order_by(col(MatchRequest.created_at), col(MatchRequest.id))
        )
        return list(self.session.exec(statement).all())

    def _decide(
        self, mentor: User, request_id: int, status: MatchStatus
    ) -> MatchRequest:
        match = self.session.exec(
            select(MatchRequest).where(
                MatchRequest.id == request_id,
                MatchRequest.mentor_id == mentor.id,
                MatchRequest.status == MatchStatus.pending,
            )
        ).first()
        if match is None:
            raise MatchRequestNotFoundError()
        return self._transition(match, status, mentor.id)

    def _transition(
        self, match: MatchRequest, status: MatchStatus, actor_id: int
    ) -> MatchRequest:
        previous = MatchStatus(match.status)
        match.status = status
        match.updated_at = utc_now()
        self.session.add(match)
        self.session.commit()
        self.session.refresh(match)

        logger.info(
            "Match request %s moved from %s to %s",
            match.id,
            previous.value,
            status.value,
            extra={"user_id": actor_id},
        )
        return match

    def _pending_between(self, mentee_id: int, mentor_id: int) -> MatchRequest | None:
        return self.session.exec(
            select(MatchRequest).where(
                MatchRequest.mentee_id == mentee_id,
                MatchRequest.mentor_id == mentor_id,
                MatchRequest.status == MatchStatus.pending,
            )
        ).first()


def get_match_ledger(
    session: Annotated[Session, Depends(get_session)],
) -> MatchLedger:
    return MatchLedger(session)


MatchLedgerDep = Annotated[MatchLedger, Depends(get_match_ledger)]

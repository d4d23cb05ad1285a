"""Match domain exceptions."""

from mentor_match.core.exceptions import BadRequestError, ConflictError, NotFoundError


class MatchRequestNotFoundError(NotFoundError):
    """Raised when a request is absent, not owned by the caller, or not pending.

    These cases are deliberately indistinguishable to the caller.
    """

    error_type = "match_request_not_found"

    def __init__(
        self,
        message: str = "The specified match request does not exist or is not pending",
    ):
        super().__init__(message)


class MentorNotFoundError(BadRequestError):
    """Raised when a request targets a user who is not a mentor."""

    error_type = "mentor_not_found"

    def __init__(self, message: str = "The specified mentor does not exist"):
        super().__init__(message)


class MenteeMismatchError(BadRequestError):
    """Raised when a request body names a mentee other than the caller."""

    error_type = "mentee_mismatch"

    def __init__(self, message: str = "menteeId must match authenticated user"):
        super().__init__(message)


class DuplicatePendingRequestError(ConflictError):
    """Raised when the mentee already has a pending request to the mentor."""

    error_type = "duplicate_pending_request"

    def __init__(
        self, message: str = "You already have a pending request to this mentor"
    ):
        super().__init__(message)

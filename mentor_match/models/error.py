"""Error response schemas for consistent API error formatting."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response schema.

    All API errors return this format, e.g.
    ``{"type": "token_expired", "message": "Token has expired, please login again"}``.
    """

    type: str
    message: str

"""User domain exceptions.

User-related exceptions for not found, ownership, image and conflict scenarios.
"""

from mentor_match.auth.exceptions import AuthorizationError
from mentor_match.core.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class UserNotFoundError(NotFoundError):
    """Raised when user cannot be found."""

    error_type = "user_not_found"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class UserExistsError(ConflictError):
    """Raised when attempting to sign up with an existing email."""

    error_type = "user_exists"

    def __init__(self, message: str = "A user with this email already exists"):
        super().__init__(message)


class ProfileOwnershipError(AuthorizationError):
    """Raised when a caller tries to update someone else's profile."""

    error_type = "access_denied"

    def __init__(self, message: str = "You can only update your own profile"):
        super().__init__(message)


class RoleChangeError(BadRequestError):
    """Raised when a profile update tries to switch the account's role."""

    error_type = "role_immutable"

    def __init__(self, message: str = "Role cannot be changed after signup"):
        super().__init__(message)


class ImageProcessingError(ValidationError):
    """Raised when an uploaded profile image cannot be decoded or stored."""

    error_type = "image_processing_failed"

    def __init__(self, message: str = "Failed to save profile image"):
        super().__init__(message)

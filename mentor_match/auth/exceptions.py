"""Auth domain exceptions.

Authentication and authorization related exceptions.
"""

from mentor_match.core.exceptions import AppException


# Authentication errors (401)
class AuthenticationError(AppException):
    """Base class for authentication failures."""

    status_code = 401
    error_type = "authentication_error"

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)


class MissingCredentialsError(AuthenticationError):
    """Raised when a protected route is called without a bearer token."""

    error_type = "missing_credentials"

    def __init__(self, message: str = "Authorization header is required"):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Raised when email/password combination is invalid.

    The message is identical for unknown emails and wrong passwords.
    """

    error_type = "invalid_credentials"

    def __init__(self, message: str = "Email or password is incorrect"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Raised when authentication token is invalid or expired."""

    error_type = "invalid_token"

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    """Raised when the token's expiry has been reached."""

    error_type = "token_expired"

    def __init__(self, message: str = "Token has expired, please login again"):
        super().__init__(message)


class MalformedTokenError(InvalidTokenError):
    """Raised when the token signature or structure does not verify."""

    error_type = "malformed_token"

    def __init__(self, message: str = "Token is malformed or invalid"):
        super().__init__(message)


class UnknownSubjectError(InvalidTokenError):
    """Raised when a validly signed token names a user that no longer exists."""

    error_type = "invalid_token"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


# Authorization errors (403)
class AuthorizationError(AppException):
    """Base class for authorization failures."""

    status_code = 403
    error_type = "authorization_error"

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class RoleRequiredError(AuthorizationError):
    """Raised when the caller's role is not allowed on a route."""

    error_type = "insufficient_permissions"

    def __init__(self, roles: list[str] | None = None):
        message = "Access denied"
        if roles:
            message = f"Access denied. Required role: {' or '.join(roles)}"
        self.roles = roles or []
        super().__init__(message)

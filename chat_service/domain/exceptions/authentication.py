"""
Session lookup failures.
Maps to: HTTP 401 Unauthorized
"""


class AuthenticationError(Exception):
    """Base class for bearer token failures."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class SessionNotFoundError(AuthenticationError):
    """No session is registered for the presented token."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class SessionExpiredError(AuthenticationError):
    """The token existed but its expiry has passed. The session is gone after this."""

    def __init__(self, message: str = "Token expired"):
        super().__init__(message)

"""
PersistenceError - Raised when the backing store fails (query error, connectivity).
Maps to: HTTP 500. Driver details are logged, never returned to clients.
"""


class PersistenceError(Exception):
    """Exception raised when a store operation fails."""

    def __init__(self, message: str = "Store operation failed"):
        super().__init__(message)

from typing import Any, Optional


class FilmorateError(Exception):
    """Base class for errors reported back to the API caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FilmorateError):
    """The payload breaks a field rule or misses a required id."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class NotFoundError(FilmorateError):
    """The referenced id is not in the store."""

"""
DomainValidationError - Raised when caller input breaks a business rule.
Maps to: HTTP 422 Unprocessable Entity
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(DomainValidationError):
    """A query argument (chat room id, user, page) is malformed."""

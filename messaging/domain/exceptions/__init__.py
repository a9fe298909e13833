"""
DOMAIN EXCEPTIONS - Wiring and input errors

These exceptions are raised by the use-case layer and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from messaging.domain.exceptions.validation_error import (
    DomainValidationError,
    InvalidArgumentError,
)
from messaging.domain.exceptions.missing_dependency import MissingDependencyError

__all__ = [
    "DomainValidationError",
    "InvalidArgumentError",
    "MissingDependencyError",
]

"""
MissingDependencyError - Raised when a use case is built without its repository.
Not caller-correctable at request time: the wiring has to be fixed.
"""


class MissingDependencyError(Exception):
    """Exception raised when a required dependency has not been injected."""

    def __init__(self, message: str = "A required dependency was not provided."):
        super().__init__(message)

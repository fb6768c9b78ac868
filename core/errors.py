# core/errors.py
"""
Domain exceptions shared by the depreciation engine and the API layer.
"""


class DepreciationError(Exception):
    """Base class for all domain errors."""
    pass


class ValidationError(DepreciationError):
    """
    One or more rule violations found while checking a record.

    `errors` always holds the complete list so callers can show every
    problem at once; `str()` renders a single message as-is and joins
    several with "; ".
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(self.render(self.errors))

    @staticmethod
    def render(errors: list[str]) -> str:
        if len(errors) == 1:
            return errors[0]
        return "Validation failed: " + "; ".join(errors)


class ConsistencyError(DepreciationError):
    """Raised when a schedule could not be replaced as a single unit."""
    pass


class NotFoundError(DepreciationError):
    """Raised when an asset or category id does not exist."""
    pass


class ReferentialError(DepreciationError):
    """Raised when a category is still referenced by assets."""

    def __init__(self, message: str, blocking_count: int):
        self.blocking_count = blocking_count
        super().__init__(message)


class DuplicateNameError(DepreciationError):
    """Raised when a category name already exists."""
    pass

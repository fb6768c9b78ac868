# api/errors.py
"""
Translation of domain errors into HTTP responses.
"""
from fastapi import HTTPException, status

from core.errors import (
    ConsistencyError,
    DepreciationError,
    DuplicateNameError,
    NotFoundError,
    ReferentialError,
    ValidationError,
)


def http_error(exc: DepreciationError) -> HTTPException:
    """Build the HTTPException for a domain error. Callers raise it `from exc`."""
    if isinstance(exc, ValidationError):
        # Keep the full list so clients can show every violation
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": str(exc), "errors": exc.errors},
        )
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ReferentialError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"message": str(exc), "blocking_count": exc.blocking_count},
        )
    if isinstance(exc, DuplicateNameError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, ConsistencyError):
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

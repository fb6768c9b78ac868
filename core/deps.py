# core/deps.py
"""
FastAPI dependencies shared by the routers.
"""
from datetime import date
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from db import get_session


def get_reference_date() -> date:
    """
    The "today" used for future-date checks and current-year figures.

    Kept as a dependency so tests can pin it through
    `app.dependency_overrides`.
    """
    return date.today()


# Type aliases for cleaner endpoint signatures
DbSession = Annotated[AsyncSession, Depends(get_session)]
ReferenceDate = Annotated[date, Depends(get_reference_date)]

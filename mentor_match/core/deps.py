"""Centralized dependency type aliases for FastAPI routes.

Infrastructure dependencies live here:
    from mentor_match.core.deps import SessionDep, SettingsDep

Caller identity dependencies live in ``mentor_match.auth.dependencies``.
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from mentor_match.core.settings import Settings, get_settings
from mentor_match.db.engine import get_session

# Database session
SessionDep = Annotated[Session, Depends(get_session)]

# Application settings
SettingsDep = Annotated[Settings, Depends(get_settings)]

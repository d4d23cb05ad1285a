"""Central API router aggregating all domain routers."""

from fastapi import APIRouter

from mentor_match.auth.router import router as auth_router
from mentor_match.core.constants import API_PREFIX
from mentor_match.match.router import router as match_router
from mentor_match.mentor.router import router as mentor_router
from mentor_match.user.router import router as user_router

api_router = APIRouter(prefix=API_PREFIX)

api_router.include_router(auth_router)
api_router.include_router(user_router)
api_router.include_router(mentor_router)
api_router.include_router(match_router)

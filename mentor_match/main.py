import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqladmin import Admin

from mentor_match.admin.auth import AdminAuth
from mentor_match.admin.views import MatchRequestAdmin, UserAdmin
from mentor_match.core.cors import add_cors_middleware
from mentor_match.core.exception_handlers import register_exception_handlers
from mentor_match.core.logging import configure_logging
from mentor_match.core.request_logging import add_request_logging_middleware
from mentor_match.core.settings import get_settings
from mentor_match.db.engine import engine, init_db
from mentor_match.health.router import router as health_router
from mentor_match.router import api_router

configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = get_settings()
    if settings.auto_create_tables:
        init_db()
    logger.info("Mentor Match API started (%s)", settings.env_name)
    yield


app = FastAPI(title="Mentor Match", version="0.1.0", lifespan=lifespan)

app.include_router(health_router)
app.include_router(api_router)

add_request_logging_middleware(app)
add_cors_middleware(app)
register_exception_handlers(app)

# Mount SQLAdmin UI at /admin (SQLAdmin enables sessions via auth backend secret)
if get_settings().admin_enabled:
    admin = Admin(
        app=app,
        engine=engine,
        authentication_backend=AdminAuth(),
    )
    admin.add_view(UserAdmin)
    admin.add_view(MatchRequestAdmin)

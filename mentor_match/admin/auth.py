import hmac

from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from mentor_match.core.settings import get_settings


class AdminAuth(AuthenticationBackend):
    """SQLAdmin auth using Starlette sessions.

    Credentials come from ADMIN_USERNAME / ADMIN_PASSWORD; the panel is not
    mounted at all while no password is configured.
    """

    def __init__(self) -> None:
        # SQLAdmin uses this secret for its session middleware.
        settings = get_settings()
        super().__init__(secret_key=settings.session_secret_key)

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = str(form.get("username", ""))
        password = str(form.get("password", ""))

        settings = get_settings()
        if not settings.admin_password:
            return False
        ok = username.strip() == settings.admin_username and hmac.compare_digest(
            password.encode(), settings.admin_password.encode()
        )
        if ok:
            request.session["admin_user"] = settings.admin_username
        return ok

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get("admin_user"))

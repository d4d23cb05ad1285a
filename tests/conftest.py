import inspect
from collections.abc import Callable
from pathlib import Path

import anyio
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

import mentor_match.models  # noqa: F401
from mentor_match.auth.security import get_password_hash
from mentor_match.auth.tokens import TokenService
from mentor_match.core.settings import Settings, get_settings
from mentor_match.db.engine import enable_sqlite_foreign_keys, get_session
from mentor_match.main import app
from mentor_match.user.models import User, UserRole

PASSWORD = "Pw123456"


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


@pytest.fixture(scope="session")
def password_hash() -> str:
    """Hash the shared test password once; bcrypt is slow on purpose."""
    return get_password_hash(PASSWORD)


@pytest.fixture(name="session")
def session_fixture():
    """Create an in-memory SQLite database with FK enforcement."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="test_settings")
def test_settings_fixture(tmp_path: Path) -> Settings:
    return Settings(
        env_name="test",
        database_url="sqlite://",
        jwt_secret="test-jwt-secret",
        session_secret_key="test-secret-key",
        admin_username="admin",
        admin_password="admin",
        upload_dir=tmp_path / "images",
    )


@pytest.fixture(name="token_service")
def token_service_fixture(test_settings: Settings) -> TokenService:
    return TokenService(
        test_settings.jwt_secret,
        issuer=test_settings.jwt_issuer,
        audience=test_settings.jwt_audience,
    )


@pytest.fixture(name="make_user")
def make_user_fixture(session: Session, password_hash: str) -> Callable[..., User]:
    """Factory persisting users that share the test password."""

    def _make_user(
        email: str,
        role: UserRole,
        name: str | None = None,
        skills: list[str] | None = None,
    ) -> User:
        user = User(
            email=email,
            password_hash=password_hash,
            name=name or email.split("@")[0],
            role=role,
            skills=skills,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture(name="mentor")
def mentor_fixture(make_user) -> User:
    return make_user("m@test.com", UserRole.mentor, name="Mia Mentor", skills=["React"])


@pytest.fixture(name="mentee")
def mentee_fixture(make_user) -> User:
    return make_user("e@test.com", UserRole.mentee, name="Eli Mentee")


@pytest.fixture(name="auth_headers")
def auth_headers_fixture(token_service: TokenService) -> Callable[[User], dict]:
    """Build a bearer Authorization header for a user."""

    def _auth_headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_service.issue(user)}"}

    return _auth_headers


@pytest.fixture(name="client")
def client_fixture(session: Session, test_settings: Settings):
    """Create a test client sharing the test session and settings.

    Authentication is not overridden: requests go through the real auth gate.
    """

    def get_session_override():
        return session

    def get_settings_override():
        return test_settings

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_settings] = get_settings_override

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()

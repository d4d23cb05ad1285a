"""Tests for mentor_match/core/settings.py."""

from pathlib import Path

from mentor_match.core.settings import Settings


def test_defaults(monkeypatch):
    for name in ("DATABASE_URL", "JWT_SECRET", "ADMIN_PASSWORD", "UPLOAD_DIR"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite:///./mentor_match.db"
    assert settings.jwt_issuer == "mentor-mentee-api"
    assert settings.jwt_audience == "mentor-mentee-app"
    assert settings.upload_dir == Path("uploads/images")
    assert settings.max_image_bytes == 5 * 1024 * 1024
    assert settings.admin_enabled is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("ADMIN_PASSWORD", "pw")
    monkeypatch.setenv("AUTO_CREATE_TABLES", "false")

    settings = Settings(_env_file=None)

    assert settings.jwt_secret == "from-env"
    assert settings.admin_enabled is True
    assert settings.auto_create_tables is False

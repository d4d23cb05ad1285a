"""Tests for mentor_match/main.py - Application lifespan and wiring."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI

from mentor_match.core.settings import Settings
from mentor_match.main import app, lifespan


@pytest.mark.asyncio
async def test_lifespan_creates_tables():
    """Test lifespan creates tables when AUTO_CREATE_TABLES is on."""
    with (
        patch("mentor_match.main.init_db") as mock_init_db,
        patch(
            "mentor_match.main.get_settings",
            return_value=Settings(auto_create_tables=True),
        ),
    ):
        async with lifespan(FastAPI()):
            mock_init_db.assert_called_once()


@pytest.mark.asyncio
async def test_lifespan_skips_tables_when_disabled():
    with (
        patch("mentor_match.main.init_db") as mock_init_db,
        patch(
            "mentor_match.main.get_settings",
            return_value=Settings(auto_create_tables=False),
        ),
    ):
        async with lifespan(FastAPI()):
            mock_init_db.assert_not_called()


def test_api_routes_are_prefixed():
    paths = set(app.openapi()["paths"])

    assert "/health" in paths
    assert "/api/signup" in paths
    assert "/api/login" in paths
    assert "/api/validate" in paths
    assert "/api/users/me" in paths
    assert "/api/users/profile" in paths
    assert "/api/mentors" in paths
    assert "/api/match-requests" in paths
    assert "/api/match-requests/{request_id}/accept" in paths

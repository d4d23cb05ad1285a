"""Tests for mentor_match/core/cors.py - CORS middleware configuration."""

from unittest.mock import MagicMock, patch

from mentor_match.core.cors import add_cors_middleware
from mentor_match.core.settings import Settings


def test_add_cors_middleware_wildcard():
    """Test a wildcard origin never allows credentials."""
    mock_app = MagicMock()

    with patch(
        "mentor_match.core.cors.get_settings",
        return_value=Settings(cors_origins="*"),
    ):
        add_cors_middleware(mock_app)

    call_kwargs = mock_app.add_middleware.call_args[1]
    assert call_kwargs["allow_origins"] == ["*"]
    assert call_kwargs["allow_credentials"] is False
    assert call_kwargs["allow_methods"] == ["*"]
    assert call_kwargs["allow_headers"] == ["*"]


def test_add_cors_middleware_explicit_origins():
    mock_app = MagicMock()

    with patch(
        "mentor_match.core.cors.get_settings",
        return_value=Settings(cors_origins="http://a.test, http://b.test,"),
    ):
        add_cors_middleware(mock_app)

    call_kwargs = mock_app.add_middleware.call_args[1]
    assert call_kwargs["allow_origins"] == ["http://a.test", "http://b.test"]
    assert call_kwargs["allow_credentials"] is True

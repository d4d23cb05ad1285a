"""Tests for user domain router."""

import base64

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from mentor_match.user.models import User

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-png-body"
PNG_DATA_URL = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode()

# --- GET /api/users/me ---


def test_get_me_mentor_shape(client: TestClient, mentor: User, auth_headers):
    response = client.get("/api/users/me", headers=auth_headers(mentor))

    assert response.status_code == 200
    assert response.json() == {
        "id": mentor.id,
        "email": "m@test.com",
        "role": "mentor",
        "profile": {
            "name": "Mia Mentor",
            "bio": "",
            "imageUrl": f"/images/mentor/{mentor.id}",
            "skills": ["React"],
        },
    }


def test_get_me_mentee_has_no_skills(client: TestClient, mentee: User, auth_headers):
    response = client.get("/api/users/me", headers=auth_headers(mentee))

    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "mentee"
    assert "skills" not in data["profile"]
    assert data["profile"]["imageUrl"] == f"/images/mentee/{mentee.id}"


def test_get_me_requires_token(client: TestClient):
    response = client.get("/api/users/me")

    assert response.status_code == 401


# --- PUT /api/users/profile ---


def test_update_mentor_profile(
    client: TestClient, session: Session, mentor: User, auth_headers
):
    response = client.put(
        "/api/users/profile",
        headers=auth_headers(mentor),
        json={
            "id": mentor.id,
            "name": "Mia M.",
            "role": "mentor",
            "bio": "Frontend lead",
            "skills": ["React", "TypeScript"],
        },
    )

    assert response.status_code == 200
    profile = response.json()["profile"]
    assert profile["name"] == "Mia M."
    assert profile["bio"] == "Frontend lead"
    assert profile["skills"] == ["React", "TypeScript"]

    session.refresh(mentor)
    assert mentor.skills == ["React", "TypeScript"]


def test_update_mentee_profile_ignores_skills(
    client: TestClient, session: Session, mentee: User, auth_headers
):
    """Test mentees never get a skill list, even if one is sent."""
    response = client.put(
        "/api/users/profile",
        headers=auth_headers(mentee),
        json={
            "id": mentee.id,
            "name": "Eli",
            "role": "mentee",
            "skills": ["Go"],
        },
    )

    assert response.status_code == 200
    assert "skills" not in response.json()["profile"]
    session.refresh(mentee)
    assert mentee.skills is None


def test_update_other_users_profile_forbidden(
    client: TestClient, mentor: User, mentee: User, auth_headers
):
    response = client.put(
        "/api/users/profile",
        headers=auth_headers(mentee),
        json={"id": mentor.id, "name": "Hijack", "role": "mentee"},
    )

    assert response.status_code == 403
    assert response.json()["message"] == "You can only update your own profile"


def test_update_profile_cannot_change_role(
    client: TestClient, session: Session, mentee: User, auth_headers
):
    response = client.put(
        "/api/users/profile",
        headers=auth_headers(mentee),
        json={"id": mentee.id, "name": "Eli", "role": "mentor", "skills": ["Go"]},
    )

    assert response.status_code == 400
    assert response.json()["type"] == "role_immutable"
    session.refresh(mentee)
    assert mentee.role == "mentee"


def test_update_profile_invalid_body(client: TestClient, mentee: User, auth_headers):
    response = client.put(
        "/api/users/profile",
        headers=auth_headers(mentee),
        json={"id": mentee.id, "name": "", "role": "mentee"},
    )

    assert response.status_code == 400
    assert response.json()["type"] == "validation_error"


def test_update_profile_with_image(
    client: TestClient, mentee: User, auth_headers, test_settings
):
    response = client.put(
        "/api/users/profile",
        headers=auth_headers(mentee),
        json={
            "id": mentee.id,
            "name": "Eli",
            "role": "mentee",
            "image": PNG_DATA_URL,
        },
    )

    assert response.status_code == 200
    assert response.json()["profile"]["imageUrl"] == f"/images/mentee/{mentee.id}"
    stored = test_settings.upload_dir / "mentee" / f"{mentee.id}.png"
    assert stored.read_bytes() == PNG_BYTES


def test_update_profile_with_bad_image(
    client: TestClient, mentee: User, auth_headers, test_settings
):
    response = client.put(
        "/api/users/profile",
        headers=auth_headers(mentee),
        json={
            "id": mentee.id,
            "name": "Eli",
            "role": "mentee",
            "image": "data:image/bmp;base64,AAAA",
        },
    )

    assert response.status_code == 400
    assert response.json()["type"] == "image_processing_failed"
    assert not (test_settings.upload_dir / "mentee").exists()


def test_update_profile_failed_commit_stores_no_image(
    client: TestClient,
    session: Session,
    mentee: User,
    auth_headers,
    test_settings,
    monkeypatch,
):
    """Test the image file is only written once the profile update commits."""

    def failing_commit():
        raise OperationalError("UPDATE users", {}, Exception("database is locked"))

    monkeypatch.setattr(session, "commit", failing_commit)
    failing_client = TestClient(client.app, raise_server_exceptions=False)

    response = failing_client.put(
        "/api/users/profile",
        headers=auth_headers(mentee),
        json={
            "id": mentee.id,
            "name": "Eli",
            "role": "mentee",
            "image": PNG_DATA_URL,
        },
    )

    assert response.status_code == 500
    assert not (test_settings.upload_dir / "mentee").exists()


# --- GET /api/users/images/{role}/{user_id} ---


def test_get_image_default_avatar(client: TestClient, mentor: User):
    response = client.get(f"/api/users/images/mentor/{mentor.id}")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert "max-age=86400" in response.headers["cache-control"]


def test_get_image_serves_stored_file(
    client: TestClient, mentee: User, auth_headers
):
    client.put(
        "/api/users/profile",
        headers=auth_headers(mentee),
        json={
            "id": mentee.id,
            "name": "Eli",
            "role": "mentee",
            "image": PNG_DATA_URL,
        },
    )

    response = client.get(f"/api/users/images/mentee/{mentee.id}")

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content == PNG_BYTES


def test_get_image_invalid_role(client: TestClient, mentor: User):
    response = client.get(f"/api/users/images/admin/{mentor.id}")

    assert response.status_code == 400


@pytest.mark.parametrize("user_id", ["abc", "0", "²"])
def test_get_image_invalid_id(client: TestClient, user_id):
    response = client.get(f"/api/users/images/mentor/{user_id}")

    assert response.status_code == 400


def test_get_image_unknown_user(client: TestClient):
    response = client.get("/api/users/images/mentor/999")

    assert response.status_code == 404


def test_get_image_role_mismatch(client: TestClient, mentee: User):
    response = client.get(f"/api/users/images/mentor/{mentee.id}")

    assert response.status_code == 400

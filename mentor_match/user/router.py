"""User domain router.

Profile routes for the authenticated caller plus public profile images.
"""

import logging

from fastapi import APIRouter, Response
from fastapi.responses import FileResponse

from mentor_match.auth.dependencies import CurrentUserDep
from mentor_match.core.constants import CommonResponses, Routes
from mentor_match.core.deps import SessionDep, SettingsDep
from mentor_match.core.exceptions import BadRequestError
from mentor_match.user.exceptions import (
    ProfileOwnershipError,
    RoleChangeError,
    UserNotFoundError,
)
from mentor_match.user.images import (
    DEFAULT_AVATAR_SVG,
    decode_profile_image,
    find_profile_image,
    image_path,
    store_profile_image,
)
from mentor_match.user.models import User, UserRole
from mentor_match.user.schemas import (
    MentorProfileUpdate,
    ProfileUpdate,
    UserProfileRead,
    to_profile_read,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=Routes.USER.prefix,
    tags=[Routes.USER.tag],
    responses={**CommonResponses.UNAUTHORIZED},
)


@router.get(
    "/me",
    response_model=UserProfileRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_me(user: CurrentUserDep):
    """Get the current user's role-shaped profile."""
    return to_profile_read(user)


@router.put(
    "/profile",
    response_model=UserProfileRead,
    responses={**CommonResponses.BAD_REQUEST, **CommonResponses.FORBIDDEN},
)
async def update_profile(
    payload: ProfileUpdate,
    user: CurrentUserDep,
    session: SessionDep,
    settings: SettingsDep,
):
    """Update the current user's profile.

    The body must name the caller's own id and role; the role only selects
    the payload shape and can never be changed. Skills are stored for
    mentors only.
    """
    if payload.id != user.id:
        raise ProfileOwnershipError()
    role = UserRole(user.role)
    if payload.role != role.value:
        raise RoleChangeError()

    # Decode before touching the row; the file is only written once the
    # update has committed so a failed commit leaves no orphaned image.
    image = (
        decode_profile_image(payload.image, settings.max_image_bytes)
        if payload.image
        else None
    )

    user.name = payload.name
    if payload.bio is not None:
        user.bio = payload.bio
    if image is not None:
        user.profile_image = image_path(role, user.id)
    if isinstance(payload, MentorProfileUpdate) and payload.skills is not None:
        user.skills = list(payload.skills)

    session.add(user)
    session.commit()
    session.refresh(user)

    if image is not None:
        store_profile_image(image, role, user.id, settings.upload_dir)
    logger.info("Profile updated", extra={"user_id": user.id})
    return to_profile_read(user)


@router.get(
    "/images/{role}/{user_id}",
    responses={
        200: {"content": {"image/*": {}}, "description": "Profile image"},
        **CommonResponses.BAD_REQUEST,
        **CommonResponses.NOT_FOUND,
    },
)
async def get_profile_image(
    role: str, user_id: str, session: SessionDep, settings: SettingsDep
):
    """Serve a user's profile image, falling back to a default avatar."""
    try:
        user_role = UserRole(role)
    except ValueError as e:
        raise BadRequestError('Role must be either "mentor" or "mentee"') from e

    if not (user_id.isascii() and user_id.isdigit()) or int(user_id) <= 0:
        raise BadRequestError("User ID must be a positive integer")

    user = session.get(User, int(user_id))
    if user is None:
        raise UserNotFoundError("User with specified ID does not exist")
    if UserRole(user.role) != user_role:
        raise BadRequestError("User role does not match requested role")

    stored = find_profile_image(settings.upload_dir, user_role, user.id)
    if stored is not None:
        path, media_type = stored
        return FileResponse(
            path,
            media_type=media_type,
            headers={"Cache-Control": "public, max-age=3600"},
        )

    return Response(
        content=DEFAULT_AVATAR_SVG,
        media_type="image/svg+xml",
        headers={"Cache-Control": "public, max-age=86400"},
    )

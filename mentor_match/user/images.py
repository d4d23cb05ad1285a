"""Profile image storage.

Images arrive as base64 data URLs in profile updates and are written to
``<upload_dir>/<role>/<user_id>.<ext>``. Users are addressed by the stable
path ``/images/<role>/<user_id>`` whatever the file extension.
"""

import base64
import binascii
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from mentor_match.user.exceptions import ImageProcessingError
from mentor_match.user.models import UserRole

logger = logging.getLogger(__name__)

_DATA_URL = re.compile(r"^data:image/([a-zA-Z]+);base64,(.+)$", re.DOTALL)

IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "gif")

CONTENT_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
}

DEFAULT_AVATAR_SVG = """\
<svg xmlns="http://www.w3.org/2000/svg"
     width="128" height="128" viewBox="0 0 128 128">
  <rect width="128" height="128" fill="#e2e8f0"/>
  <circle cx="64" cy="50" r="24" fill="#94a3b8"/>
  <path d="M24 112c0-22 18-36 40-36s40 14 40 36z" fill="#94a3b8"/>
</svg>
"""


def image_path(role: UserRole, user_id: int) -> str:
    return f"/images/{role.value}/{user_id}"


@dataclass(frozen=True)
class DecodedImage:
    extension: str
    data: bytes


def decode_profile_image(data_url: str, max_bytes: int) -> DecodedImage:
    """Validate and decode a base64 image data URL.

    Raises:
        ImageProcessingError: If the data URL is malformed, of an unsupported
            type, or too large
    """
    match = _DATA_URL.match(data_url)
    if match is None:
        raise ImageProcessingError("Invalid base64 image format")

    extension = match.group(1).lower()
    if extension not in IMAGE_EXTENSIONS:
        raise ImageProcessingError("Unsupported image type")

    try:
        data = base64.b64decode(match.group(2), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageProcessingError("Invalid base64 image format") from e

    if len(data) > max_bytes:
        raise ImageProcessingError(f"Image file too large (max {max_bytes} bytes)")

    return DecodedImage(extension=extension, data=data)


def store_profile_image(
    image: DecodedImage, role: UserRole, user_id: int, upload_dir: Path
) -> Path:
    """Write ``image`` as the user's only stored profile image.

    Raises:
        ImageProcessingError: If the file cannot be written
    """
    target_dir = upload_dir / role.value
    target = target_dir / f"{user_id}.{image.extension}"
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(image.data)
        # One file per user: drop images stored under other extensions.
        for old in find_profile_image_files(upload_dir, role, user_id):
            if old != target:
                old.unlink(missing_ok=True)
    except OSError as e:
        logger.error("Failed to store profile image for user %s: %s", user_id, e)
        raise ImageProcessingError() from e

    return target


def find_profile_image_files(
    upload_dir: Path, role: UserRole, user_id: int
) -> list[Path]:
    target_dir = upload_dir / role.value
    return [
        target_dir / f"{user_id}.{ext}"
        for ext in IMAGE_EXTENSIONS
        if (target_dir / f"{user_id}.{ext}").is_file()
    ]


def find_profile_image(
    upload_dir: Path, role: UserRole, user_id: int
) -> tuple[Path, str] | None:
    """Return the stored image file and its content type, if any."""
    for path in find_profile_image_files(upload_dir, role, user_id):
        return path, CONTENT_TYPES[path.suffix.lstrip(".")]
    return None

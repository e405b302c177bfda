import base64
import binascii
import logging
import re
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from folio.core.exceptions import NotFoundError, ValidationError
from folio.crud import crud_image
from folio.models.image import Image
from folio.schemas.image import ImageCreate

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = (
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/svg+xml",
)
MAX_IMAGE_BYTES = 5 * 1024 * 1024  # 5 MiB

_DATA_URI_PREFIX = re.compile(r"^data:image/[a-zA-Z0-9.+-]+;base64,")
_BASE64_CHARS = re.compile(r"^[A-Za-z0-9+/]+={0,2}$")
_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9._-]")


def sanitize_filename(filename: str) -> str:
    return _UNSAFE_FILENAME_CHARS.sub("_", filename)[:255]


def decoded_size(cleaned: str) -> int:
    return len(cleaned) * 3 // 4 - cleaned.count("=", -2)


def decode_image_data(data: str, max_bytes: Optional[int] = None) -> Tuple[str, bytes]:
    """
    Strip an optional data-URI prefix and decode the base64 payload.

    Returns the cleaned base64 text together with the decoded bytes. When
    max_bytes is given, oversized payloads are rejected before decoding.
    """
    cleaned = _DATA_URI_PREFIX.sub("", data.strip(), count=1)
    if not _BASE64_CHARS.match(cleaned):
        raise ValidationError("Invalid base64 data", errors=[{"field": "data", "message": "Invalid base64 data"}])
    size = decoded_size(cleaned)
    if max_bytes is not None and size > max_bytes:
        raise ValidationError(
            "Image too large. Maximum size is 5MB",
            errors=[{"field": "data", "message": f"{size} bytes exceeds {max_bytes}"}],
        )
    try:
        raw = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError("Invalid base64 data", errors=[{"field": "data", "message": "Invalid base64 data"}]) from exc
    return cleaned, raw


class ImageService:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Image]:
        return crud_image.get_images(self.db)

    def get_by_id(self, image_id: str) -> Image:
        image = crud_image.get_image(self.db, image_id)
        if image is None:
            raise NotFoundError("Image not found")
        return image

    def get_content(self, image_id: str) -> Tuple[bytes, str]:
        """
        Decoded bytes and mime type of a stored image.
        """
        image = self.get_by_id(image_id)
        _, raw = decode_image_data(image.data)
        return raw, image.mime_type

    def create(self, image_in: ImageCreate, uploaded_by: Optional[str] = None) -> Image:
        if image_in.mime_type not in ALLOWED_MIME_TYPES:
            raise ValidationError(
                "Invalid file type. Allowed: JPEG, PNG, GIF, WebP, SVG",
                errors=[{"field": "mimeType", "message": f"Unsupported type {image_in.mime_type}"}],
            )

        cleaned, raw = decode_image_data(image_in.data, max_bytes=MAX_IMAGE_BYTES)

        image = crud_image.create_image(
            self.db,
            filename=sanitize_filename(image_in.filename),
            mime_type=image_in.mime_type,
            data=cleaned,
            uploaded_by=uploaded_by,
        )
        logger.info(f"Image stored: {image.filename} ({len(raw)} bytes)", extra={"user_id": uploaded_by})
        return image

    def delete(self, image_id: str) -> None:
        crud_image.delete_image(self.db, image_id)

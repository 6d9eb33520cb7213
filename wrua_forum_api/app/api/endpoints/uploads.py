"""
Image upload endpoint.

Accepts one multipart file in the ``image`` field, checks its MIME
type, extension and size, and writes it to the upload directory under a
generated name.  The returned URL is served by the ``/uploads`` static
mount.
"""

import logging
import secrets
import time
from pathlib import Path
from typing import Dict, Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile

from ...core.config import Settings
from ...core.errors import ValidationError
from ..deps import get_settings

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif", ".webp"}

admin_router = APIRouter()


def _stored_name(original: str) -> str:
    suffix = Path(original).suffix.lower()
    return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{suffix}"


@admin_router.post("/upload")
async def upload_image(
    request: Request,
    image: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings),
) -> Dict[str, str]:
    if image is None or not image.filename:
        raise ValidationError("No file uploaded")
    content_type = (image.content_type or "").lower()
    if (
        Path(image.filename).suffix.lower() not in ALLOWED_EXTENSIONS
        or content_type not in settings.allowed_image_types
    ):
        raise ValidationError("Only image files are allowed")

    # Read one byte past the limit so oversized files are detected
    # without loading the whole body.
    data = await image.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        limit_mb = settings.max_upload_bytes / (1024 * 1024)
        raise ValidationError(f"File too large (limit {limit_mb:g} MB)")

    filename = _stored_name(image.filename)
    target: Path = request.app.state.upload_dir / filename
    target.write_bytes(data)
    logger.info("Stored upload %s (%d bytes)", filename, len(data))
    return {"url": f"/uploads/{filename}"}

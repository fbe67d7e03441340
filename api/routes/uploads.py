"""Image upload routes"""

from fastapi import APIRouter, File, Request, UploadFile
import anyio.to_thread
import logging
from typing import Optional

from app.config import settings
from app.exceptions import ServiceValidationError
from services import UploadService

router = APIRouter(tags=["Uploads"])
logger = logging.getLogger("dormdash.api.uploads")


@router.post("/upload")
async def upload_image(request: Request, image: Optional[UploadFile] = File(None)):
    """
    Store an uploaded image and return the URL to save on the meal.

    Args:
        image: Multipart file field named ``image``

    Returns:
        ``{"url": "<base>/uploads/<filename>"}``

    Raises:
        400: No file, empty file, or file over the size limit
    """
    if image is None:
        raise ServiceValidationError("No file uploaded")

    content = await UploadService.read_limited(image, settings.max_upload_bytes)
    filename = await anyio.to_thread.run_sync(
        UploadService.save_image,
        settings.upload_dir,
        image.filename,
        content,
        settings.max_upload_bytes,
    )
    base = settings.public_base_url or str(request.base_url).rstrip("/")
    return {"url": f"{base}/uploads/{filename}"}

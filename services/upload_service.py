from pathlib import Path
from typing import Optional
import logging
import random
import re
import time

from app.exceptions import ServiceValidationError

logger = logging.getLogger("dormdash.uploads")

_SAFE_SUFFIX = re.compile(r"^\.[A-Za-z0-9]{1,10}$")
_READ_CHUNK_BYTES = 64 * 1024


class UploadService:
    """Stores uploaded meal images on local disk"""

    @staticmethod
    def too_large(max_bytes: int) -> ServiceValidationError:
        return ServiceValidationError(
            f"File too large (max {max_bytes} bytes)", details={"max_bytes": max_bytes}
        )

    @staticmethod
    async def read_limited(upload, max_bytes: int) -> bytes:
        """
        Read an uploaded file, stopping as soon as it exceeds ``max_bytes``.

        Raises:
            ServiceValidationError: The file is larger than ``max_bytes``
        """
        size = getattr(upload, "size", None)
        if size is not None and size > max_bytes:
            raise UploadService.too_large(max_bytes)

        content = bytearray()
        while True:
            chunk = await upload.read(_READ_CHUNK_BYTES)
            if not chunk:
                return bytes(content)
            content.extend(chunk)
            if len(content) > max_bytes:
                raise UploadService.too_large(max_bytes)

    @staticmethod
    def make_filename(original_name: Optional[str]) -> str:
        """
        Build a unique stored filename: ``image-<epoch ms>-<random><ext>``.

        The extension of the client's filename is kept when it looks like a
        plain extension, otherwise it is dropped.
        """
        suffix = Path(original_name or "").suffix
        if not _SAFE_SUFFIX.match(suffix):
            suffix = ""
        unique = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
        return f"image-{unique}{suffix}"

    @staticmethod
    def save_image(
        upload_dir: str, original_name: Optional[str], content: bytes, max_bytes: int
    ) -> str:
        """
        Write an uploaded image to ``upload_dir``.

        Args:
            upload_dir: Target directory, created when missing
            original_name: Filename sent by the client
            content: File bytes
            max_bytes: Largest accepted size

        Returns:
            The stored filename (relative to ``upload_dir``)

        Raises:
            ServiceValidationError: Empty or oversized file
        """
        if not content:
            raise ServiceValidationError("No file uploaded")
        if len(content) > max_bytes:
            raise UploadService.too_large(max_bytes)

        target_dir = Path(upload_dir)
        target_dir.mkdir(parents=True, exist_ok=True)
        filename = UploadService.make_filename(original_name)
        (target_dir / filename).write_bytes(content)

        logger.info(f"image_uploaded filename={filename} size={len(content)}")
        return filename

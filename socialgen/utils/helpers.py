"""
Helper utilities for file handling and text processing.
"""

import math
import mimetypes
import re
from typing import List, Optional
from fastapi import UploadFile
from socialgen.config import settings as default_settings, Settings
from socialgen.models.api import SourceImage
from socialgen.utils.exceptions import FileValidationError


async def read_uploaded_image(file: UploadFile, settings: Optional[Settings] = None) -> SourceImage:
    """
    Read an uploaded image into memory after validating it.

    Args:
        file: FastAPI UploadFile object
        settings: Settings holding the allowed types and size limit

    Returns:
        SourceImage: Image bytes with the declared MIME type

    Raises:
        FileValidationError: If file validation fails
    """
    settings = settings or default_settings

    validate_file_type(file.content_type, settings)
    content = await file.read()
    validate_file_size(len(content), settings)

    return SourceImage(data=content, mime_type=file.content_type, filename=file.filename)


def validate_file_type(content_type: Optional[str], settings: Optional[Settings] = None) -> None:
    """
    Validate file type against allowed types.

    Raises:
        FileValidationError: If file type is not allowed
    """
    settings = settings or default_settings
    if content_type not in settings.allowed_file_types:
        raise FileValidationError(
            f"File type {content_type} not allowed. "
            f"Allowed types: {', '.join(settings.allowed_file_types)}"
        )


def validate_file_size(file_size: int, settings: Optional[Settings] = None) -> None:
    """
    Validate file size against maximum allowed size.

    Raises:
        FileValidationError: If file is empty or too large
    """
    settings = settings or default_settings
    if file_size == 0:
        raise FileValidationError("Uploaded file is empty")

    if file_size > settings.max_file_size:
        raise FileValidationError(
            f"File size {format_file_size(file_size)} exceeds maximum allowed size "
            f"{format_file_size(settings.max_file_size)}"
        )


def guess_image_type(path: str) -> Optional[str]:
    """Guess an image MIME type from a file name."""
    content_type, _ = mimetypes.guess_type(path)
    if content_type == "image/jpg":
        return "image/jpeg"
    return content_type


def extension_for_mime(mime_type: str) -> str:
    """Return the file extension for a MIME type, e.g. image/webp -> webp."""
    return mime_type.split("/")[-1].lower()


def slugify(text: str, fallback: str = "product") -> str:
    """
    Turn free text into a file name friendly slug.

    Args:
        text: Raw text, e.g. a product keyword

    Returns:
        str: Lowercase words joined by hyphens
    """
    slug = re.sub(r"[^\w]+", "-", (text or "").strip().lower()).strip("-_")
    return slug or fallback


def download_filename(product: str, platform: str, mime_type: str) -> str:
    """Build the '<product>-<platform>-image.<ext>' download name."""
    platform = getattr(platform, "value", platform)
    return f"{slugify(product)}-{platform}-image.{extension_for_mime(mime_type)}"


def count_words(text: str) -> int:
    """Count whitespace separated words."""
    return len(text.split()) if text and text.strip() else 0


def split_preserving_whitespace(text: str) -> List[str]:
    """Split text into words and the whitespace runs between them."""
    return [part for part in re.split(r"(\s+)", text or "") if part]


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        str: Formatted size string
    """
    if size_bytes == 0:
        return "0 B"

    size_names = ["B", "KB", "MB", "GB"]
    i = min(int(math.floor(math.log(size_bytes, 1024))), len(size_names) - 1)
    p = math.pow(1024, i)
    s = round(size_bytes / p, 2)

    return f"{s} {size_names[i]}"

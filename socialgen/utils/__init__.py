"""
Utility modules for the SocialGen application.
"""

from .exceptions import *
from .helpers import *

__all__ = [
    "SocialGenError",
    "ValidationError",
    "FileValidationError",
    "MissingCredential",
    "ApiError",
    "ContentFormatError",
    "ImageAdaptationError",
    "DecodeError",
    "RenderError",
    "read_uploaded_image",
    "validate_file_type",
    "validate_file_size",
    "download_filename",
    "count_words"
]

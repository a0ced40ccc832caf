"""
Custom exceptions for the SocialGen application.
"""

from typing import Optional


class SocialGenError(Exception):
    """Base exception for every failure of a submission."""

    # Language of the submission that failed, set by the API layer
    language = None

class ValidationError(SocialGenError):
    """Exception raised when required input is missing or malformed."""
    pass

class FileValidationError(ValidationError):
    """Exception raised when an uploaded image fails validation."""
    pass

class MissingCredential(SocialGenError):
    """Exception raised when no API key is configured."""
    pass

class ApiError(SocialGenError):
    """Exception raised when the content generation call fails in transport."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

class ContentFormatError(SocialGenError):
    """Exception raised when generated content does not match the schema."""
    pass

class ImageAdaptationError(SocialGenError):
    """Base exception for image adaptation failures."""
    pass

class DecodeError(ImageAdaptationError):
    """Exception raised when the source image cannot be decoded."""
    pass

class RenderError(ImageAdaptationError):
    """Exception raised when the adapted image cannot be rendered or encoded."""
    pass

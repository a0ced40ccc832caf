"""
Data models for the SocialGen application.
"""

from .platform import (
    Platform,
    Language,
    PlatformDimension,
    dimensions_for,
    display_name_for,
    schema_field_for,
)
from .api import (
    SourceImage,
    UserInput,
    TitledContent,
    GeneratedContent,
    ContentRequest,
    AdaptedImage,
    SubmissionResult,
    PostCard,
    SubmissionResponse
)

__all__ = [
    "Platform",
    "Language",
    "PlatformDimension",
    "dimensions_for",
    "display_name_for",
    "schema_field_for",
    "SourceImage",
    "UserInput",
    "TitledContent",
    "GeneratedContent",
    "ContentRequest",
    "AdaptedImage",
    "SubmissionResult",
    "PostCard",
    "SubmissionResponse"
]

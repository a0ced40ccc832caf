"""
API models using Pydantic for request/response validation.
"""

import base64
from datetime import datetime
from typing import Optional, List, Dict, Any, Union
from pydantic import BaseModel, Field
from .platform import Platform, Language


class SourceImage(BaseModel):
    """Uploaded image as raw bytes plus its declared MIME type."""
    data: bytes
    mime_type: str
    filename: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.data)

    class Config:
        frozen = True


class UserInput(BaseModel):
    """Form input for one submission."""
    description: str = ""
    product_url: str = ""
    keyword: str = ""
    image: Optional[SourceImage] = None

    def missing_fields(self) -> List[str]:
        """Return the names of required fields that are empty."""
        missing = [
            name for name in ("description", "product_url", "keyword")
            if not (getattr(self, name) or "").strip()
        ]
        if self.image is None or not self.image.data:
            missing.append("image")
        return missing


class TitledContent(BaseModel):
    """Content for platforms that need both a title and a description."""
    title: str
    description: str

    class Config:
        frozen = True
        extra = "forbid"


class GeneratedContent(BaseModel):
    """Generated copy, one entry per platform."""
    facebook: str
    instagram: str
    twitter: str
    linkedin: str
    vk: str
    pinterest: TitledContent
    youtube: TitledContent
    tiktok: str

    def for_platform(self, platform: Platform) -> Union[str, TitledContent]:
        return getattr(self, Platform(platform).value)

    class Config:
        frozen = True
        extra = "forbid"


class ContentRequest(BaseModel):
    """Fully assembled request for the generation API."""
    system_instruction: str
    prompt: str
    response_schema: Dict[str, Any]
    schema_name: str = "social_media_posts"
    response_format: str = "structured"
    temperature: float = 0.7
    language: Language = Language.ARABIC

    class Config:
        frozen = True


class AdaptedImage(BaseModel):
    """Image cropped and scaled to a platform's canvas."""
    platform: Optional[Platform] = None
    width: int
    height: int
    mime_type: str
    data: bytes

    @property
    def extension(self) -> str:
        """File extension derived from the MIME subtype."""
        return self.mime_type.split("/")[-1].lower()

    def to_data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("utf-8")
        return f"data:{self.mime_type};base64,{encoded}"

    class Config:
        frozen = True


class SubmissionResult(BaseModel):
    """Joined output of one submission: posts plus adapted images."""
    posts: GeneratedContent
    images: Dict[Platform, AdaptedImage]

    class Config:
        frozen = True


class HighlightSegment(BaseModel):
    """A piece of post text tagged for display."""
    kind: str  # "hashtag", "keyword" or "text"
    text: str


class PostCard(BaseModel):
    """Render-ready card for one platform."""
    platform: Platform
    name: str
    text: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    title_label: Optional[str] = None
    description_label: Optional[str] = None
    text_to_copy: str
    word_count: int
    char_count: int
    segments: List[HighlightSegment] = []
    title_segments: List[HighlightSegment] = []
    description_segments: List[HighlightSegment] = []
    image_url: str
    image_width: int
    image_height: int
    image_mime_type: str
    download_filename: str


class SubmissionResponse(BaseModel):
    """Response model for a generation request."""
    language: Language
    keyword: str
    posts: GeneratedContent
    cards: List[PostCard]
    created_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "language": "en",
                "keyword": "Digital Marketing",
                "posts": {"facebook": "...", "pinterest": {"title": "...", "description": "..."}},
                "cards": [],
                "created_at": "2026-01-01T00:00:00Z"
            }
        }


class PlatformInfo(BaseModel):
    """Platform entry of the dimension table."""
    platform: Platform
    name: str
    width: int
    height: int
    titled: bool


class ErrorResponse(BaseModel):
    """Error body returned for failed submissions."""
    error: str
    detail: str


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: datetime
    version: str
    openai_configured: bool

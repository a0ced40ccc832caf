"""
Platform enumeration and the per-platform tables keyed off it.

Every supported social network is declared once in ``Platform``. The image
canvas size, the display name and the structured output field used for
content generation are total lookups over that enumeration.
"""

from enum import Enum
from typing import Any, Dict
from pydantic import BaseModel, Field


class Platform(str, Enum):
    """Supported social media platforms, in display order."""
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    VK = "vk"
    PINTEREST = "pinterest"
    YOUTUBE = "youtube"
    TIKTOK = "tiktok"


class Language(str, Enum):
    """Languages supported by the UI and the generation prompt."""
    ARABIC = "ar"
    ENGLISH = "en"


class PlatformDimension(BaseModel):
    """Target canvas size for a platform's adapted image."""
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    class Config:
        frozen = True


PLATFORM_DIMENSIONS: Dict[Platform, PlatformDimension] = {
    Platform.FACEBOOK: PlatformDimension(width=1080, height=1080),  # 1:1
    Platform.INSTAGRAM: PlatformDimension(width=1080, height=1080),  # 1:1
    Platform.TWITTER: PlatformDimension(width=1600, height=900),  # 16:9
    Platform.LINKEDIN: PlatformDimension(width=1200, height=1200),  # 1:1
    Platform.VK: PlatformDimension(width=1080, height=1080),  # 1:1
    Platform.PINTEREST: PlatformDimension(width=1000, height=1500),  # 2:3
    Platform.YOUTUBE: PlatformDimension(width=1280, height=720),  # 16:9 thumbnail
    Platform.TIKTOK: PlatformDimension(width=1080, height=1920),  # 9:16
}

PLATFORM_DISPLAY_NAMES: Dict[Platform, str] = {
    Platform.FACEBOOK: "Facebook",
    Platform.INSTAGRAM: "Instagram",
    Platform.TWITTER: "X (Twitter)",
    Platform.LINKEDIN: "LinkedIn",
    Platform.VK: "VK",
    Platform.PINTEREST: "Pinterest",
    Platform.YOUTUBE: "YouTube",
    Platform.TIKTOK: "TikTok",
}

# Platforms whose generated content is a {title, description} pair
TITLED_PLATFORMS = frozenset({Platform.PINTEREST, Platform.YOUTUBE})

# Maximum characters for X posts
TWITTER_CHARACTER_LIMIT = 300

_FIELD_DESCRIPTIONS: Dict[Platform, Any] = {
    Platform.FACEBOOK: (
        "Optimized Facebook post with emojis, engaging text, call to action, "
        "and the product link."
    ),
    Platform.INSTAGRAM: (
        "Optimized Instagram caption with strong visual hook, emojis, call to action "
        "(Link in Bio), and 15-20 relevant hashtags."
    ),
    Platform.TWITTER: (
        "Optimized X (Twitter) post, short, punchy (MUST NOT exceed "
        f"{TWITTER_CHARACTER_LIMIT} characters), emojis, hashtags, and product link."
    ),
    Platform.LINKEDIN: (
        "Professional LinkedIn post. Corporate/Business tone, focus on value proposition, "
        "professional emojis, 3-5 relevant hashtags, and product link."
    ),
    Platform.VK: (
        "Optimized VK (VKontakte) post. Similar to Facebook but adapted for the platform "
        "culture. Engaging, informative, emojis, hashtags, and product link."
    ),
    Platform.PINTEREST: (
        "SEO optimized catchy title for Pinterest.",
        "Detailed SEO description for Pinterest with keywords, hashtags and call to action.",
    ),
    Platform.YOUTUBE: (
        "High CTR (Click-Through Rate) YouTube video title. Engaging and keyword-rich.",
        "Comprehensive YouTube video description. Include a hook in the first 2 lines, "
        "keyword usage, a call to action, the product link, and 3-5 relevant hashtags "
        "at the bottom.",
    ),
    Platform.TIKTOK: (
        "Optimized TikTok caption. Short scroll-stopping hook, trendy emojis, "
        "\"Link in Bio\" call to action instead of the raw link, and 3-6 trending hashtags."
    ),
}


def _coerce(platform) -> Platform:
    try:
        return Platform(platform)
    except ValueError:
        raise ValueError(f"Unknown platform: {platform!r}")


def dimensions_for(platform) -> PlatformDimension:
    """Return the fixed canvas size for a platform."""
    return PLATFORM_DIMENSIONS[_coerce(platform)]


def display_name_for(platform) -> str:
    """Return the human readable platform name."""
    return PLATFORM_DISPLAY_NAMES[_coerce(platform)]


def is_titled(platform) -> bool:
    """Whether the platform's content is a title/description pair."""
    return _coerce(platform) in TITLED_PLATFORMS


def schema_field_for(platform) -> Dict[str, Any]:
    """
    Return the JSON schema property declaring a platform's generated content.

    Args:
        platform: Platform identifier

    Returns:
        Dict[str, Any]: A string property, or a strict object property with
        ``title`` and ``description`` for titled platforms
    """
    platform = _coerce(platform)
    description = _FIELD_DESCRIPTIONS[platform]

    if platform in TITLED_PLATFORMS:
        title_desc, body_desc = description
        return {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": title_desc},
                "description": {"type": "string", "description": body_desc},
            },
            "required": ["title", "description"],
            "additionalProperties": False,
        }

    return {"type": "string", "description": description}

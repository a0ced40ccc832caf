"""
Turns a submission result into render-ready post cards.
"""

from typing import List, Optional

from socialgen.models.api import (
    SubmissionResult,
    PostCard,
    HighlightSegment,
    TitledContent,
    AdaptedImage,
)
from socialgen.models.platform import Platform, Language, display_name_for
from socialgen.utils.helpers import (
    count_words,
    download_filename,
    split_preserving_whitespace,
)
from socialgen.utils.ui_text import get_ui_text

_TITLE_LABEL_KEYS = {
    Platform.PINTEREST: ("pinterestTitle", "pinterestDesc"),
    Platform.YOUTUBE: ("youtubeTitle", "youtubeDesc"),
}


def highlight_segments(text: str, keyword: str) -> List[HighlightSegment]:
    """
    Tag hashtags and keyword matches in a post.

    Whitespace is kept as plain segments so the text can be rebuilt exactly
    by concatenating the segments.
    """
    lower_keyword = (keyword or "").strip().lower()
    segments = []

    for part in split_preserving_whitespace(text):
        if part.strip().startswith("#"):
            kind = "hashtag"
        elif lower_keyword and lower_keyword in part.lower():
            kind = "keyword"
        else:
            kind = "text"
        segments.append(HighlightSegment(kind=kind, text=part))

    return segments


def copy_text(content) -> str:
    """Text placed on the clipboard for a card."""
    if isinstance(content, TitledContent):
        return f"{content.title or ''}\n\n{content.description or ''}"
    return content or ""


def build_post_card(platform: Platform, content, image: AdaptedImage,
                    keyword: str, language: Language) -> PostCard:
    """Build the card for a single platform."""
    text = copy_text(content)
    card = {
        "platform": platform,
        "name": display_name_for(platform),
        "text_to_copy": text,
        "word_count": count_words(text),
        "char_count": len(text),
        "image_url": image.to_data_url(),
        "image_width": image.width,
        "image_height": image.height,
        "image_mime_type": image.mime_type,
        "download_filename": download_filename(keyword, platform, image.mime_type),
    }

    if isinstance(content, TitledContent):
        ui = get_ui_text(language)
        title_key, desc_key = _TITLE_LABEL_KEYS.get(platform, ("defaultTitle", "defaultDesc"))
        card.update(
            title=content.title,
            description=content.description,
            title_label=ui[title_key],
            description_label=ui[desc_key],
            title_segments=highlight_segments(content.title, keyword),
            description_segments=highlight_segments(content.description, keyword),
        )
    else:
        card.update(text=content, segments=highlight_segments(content, keyword))

    return PostCard(**card)


def build_post_cards(result: SubmissionResult, keyword: str,
                     language: Optional[Language] = None) -> List[PostCard]:
    """Build one card per platform, in platform order."""
    language = Language(language or Language.ARABIC)
    return [
        build_post_card(platform, result.posts.for_platform(platform), image, keyword, language)
        for platform, image in sorted(result.images.items(), key=lambda item: list(Platform).index(item[0]))
    ]

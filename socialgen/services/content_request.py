"""
Builds the structured request sent to the content generation API.
"""

from datetime import date
from typing import Any, Dict, Optional

from socialgen.config import settings
from socialgen.models.api import ContentRequest, UserInput
from socialgen.models.platform import (
    Platform,
    Language,
    TWITTER_CHARACTER_LIMIT,
    display_name_for,
    schema_field_for,
)

LANGUAGE_NAMES = {
    Language.ARABIC: "Arabic",
    Language.ENGLISH: "English",
}


def build_response_schema() -> Dict[str, Any]:
    """Return the strict JSON schema with one required property per platform."""
    return {
        "type": "object",
        "properties": {platform.value: schema_field_for(platform) for platform in Platform},
        "required": [platform.value for platform in Platform],
        "additionalProperties": False,
    }


def format_trend_date(today: date) -> str:
    """Format a date like 'Monday, October 19, 2026'."""
    return f"{today:%A}, {today:%B} {today.day}, {today.year}"


def _platform_list() -> str:
    return ", ".join(display_name_for(platform) for platform in Platform)


def _system_instruction(language: Language) -> str:
    return f"""
You are an expert Social Media Manager and SEO Specialist.
Your task is to create highly optimized and visually appealing social media posts for {_platform_list()}.

Guidelines:
1. **Tone**: Professional, engaging, and persuasive.
2. **Language**: The output MUST be in the same language as the user's description. If mixed, prioritize {LANGUAGE_NAMES[language]}.
3. **Emoji Strategy (CRITICAL)**:
   - **Decorate and beautify ALL posts** with relevant, professional, and well-placed emojis.
   - Emojis should enhance readability and emotional engagement, not clutter the text.
   - Tailor emoji use to the platform's tone (e.g., more playful on Instagram and TikTok, more professional on LinkedIn).
   - Use emojis to break up text and draw attention to key points like CTAs.
4. **Structure**:
   - Use appropriate line breaks for readability.
   - Use the provided Keyword naturally.
   - Include the Product URL where clickable (Facebook, X, LinkedIn, VK, Pinterest, YouTube). For Instagram and TikTok, do NOT paste the raw URL; use a "Link in Bio" call to action instead.
5. **Platform Specifics**:
   - **Facebook**: Conversational, moderate length, link preview focus.
   - **Instagram**: Visual storytelling, "Link in Bio" CTA, block of ~15-20 relevant hashtags at the bottom.
   - **X (Twitter)**: Concise, trending hashtags, direct link. The post MUST NOT exceed {TWITTER_CHARACTER_LIMIT} characters.
   - **LinkedIn**: Professional, industry-focused, clear value proposition, use bullet points if applicable, 3-5 hashtags.
   - **VK**: Informal yet informative, widely used in CIS, similar to Facebook structure but can be more community-focused.
   - **Pinterest**: SEO-heavy Title and Description.
   - **YouTube**: High-impact Title (under 60 chars preferred for mobile, but up to 100). Detailed description optimized for SEO, first 2 sentences are crucial. Include the link in the first paragraph and 3-5 hashtags at the bottom.
   - **TikTok**: Short, scroll-stopping hook in the first line, casual and trendy, "Link in Bio" CTA, 3-6 trending hashtags.
6. **Hashtags Strategy (CRITICAL)**:
   - Research and select the **strongest, highest-converting hashtags** specifically for **US and European markets**.
   - Consider the **current date and season** to include trending/seasonal tags.
   - Mix broad niche tags with specific long-tail tags for maximum reach.
""".strip()


def _prompt(user_input: UserInput, today: date) -> str:
    return f"""
Product Description: {user_input.description.strip()}
Product URL: {user_input.product_url.strip()}
Focus Keyword: {user_input.keyword.strip()}
Current Date for Trends: {format_trend_date(today)}

Generate posts for all platforms ({_platform_list()}). Ensure hashtags are optimized for US/EU markets at this specific time.
""".strip()


def build_request(user_input: UserInput, language: Language = Language.ARABIC,
                  today: Optional[date] = None,
                  temperature: Optional[float] = None) -> ContentRequest:
    """
    Assemble the generation request for a submission.

    Args:
        user_input: Text fields of the submission (the image is not sent)
        language: Preferred output language for mixed descriptions
        today: Date used for trending hashtags (defaults to today)
        temperature: Sampling temperature (defaults to the configured value)

    Returns:
        ContentRequest: Instruction, prompt and response schema
    """
    language = Language(language)
    today = today or date.today()

    return ContentRequest(
        system_instruction=_system_instruction(language),
        prompt=_prompt(user_input, today),
        response_schema=build_response_schema(),
        temperature=settings.generation_temperature if temperature is None else temperature,
        language=language
    )

"""
API endpoints for social media content generation.
"""

from datetime import datetime, timezone
from typing import List, Optional
from fastapi import APIRouter, Depends, UploadFile, File, Form
from socialgen.config import settings
from socialgen.models.api import (
    UserInput,
    SubmissionResponse,
    PlatformInfo,
    HealthCheckResponse
)
from socialgen.models.platform import Platform, Language, dimensions_for, display_name_for, is_titled
from socialgen.services.orchestrator import SubmissionOrchestrator
from socialgen.services.presentation import build_post_cards
from socialgen.utils.exceptions import SocialGenError
from socialgen.utils.helpers import read_uploaded_image
from socialgen.utils.ui_text import get_ui_text
from socialgen import __version__
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generation"])

# Initialize generation service
orchestrator = SubmissionOrchestrator()


def get_orchestrator() -> SubmissionOrchestrator:
    return orchestrator


@router.post("/generate", response_model=SubmissionResponse)
async def generate_content(
    description: str = Form("", description="Detailed product description"),
    product_url: str = Form("", description="Product link"),
    keyword: str = Form("", description="Main SEO keyword"),
    language: Language = Form(Language.ARABIC, description="Preferred output language"),
    image: Optional[UploadFile] = File(None, description="Post image (PNG, JPEG or WEBP)"),
    service: SubmissionOrchestrator = Depends(get_orchestrator)
):
    """
    Generate posts for every platform and adapt the image to each canvas.

    This endpoint accepts:
    - Product description, URL and keyword
    - Preferred language (ar or en)
    - One image file

    Either every platform is returned or the request fails as a whole.
    """
    try:
        source_image = None
        if image is not None and image.filename:
            source_image = await read_uploaded_image(image)

        user_input = UserInput(
            description=description,
            product_url=product_url,
            keyword=keyword,
            image=source_image
        )

        result = await service.generate(user_input, language)
    except SocialGenError as e:
        # Lets the exception handlers answer in the submitted language
        e.language = language
        raise

    return SubmissionResponse(
        language=language,
        keyword=keyword,
        posts=result.posts,
        cards=build_post_cards(result, keyword, language),
        created_at=datetime.now(timezone.utc)
    )


@router.get("/platforms", response_model=List[PlatformInfo])
async def list_platforms():
    """List supported platforms with their image canvas sizes."""
    return [
        PlatformInfo(
            platform=platform,
            name=display_name_for(platform),
            width=dimensions_for(platform).width,
            height=dimensions_for(platform).height,
            titled=is_titled(platform)
        )
        for platform in Platform
    ]


@router.get("/ui-text/{language}")
async def ui_text(language: Language):
    """Localized strings for the front-end."""
    return get_ui_text(language)


@router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """
    Health check endpoint.

    Verifies configuration.
    """
    openai_configured = settings.openai_configured

    return HealthCheckResponse(
        status="healthy" if openai_configured else "unhealthy",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        openai_configured=openai_configured
    )

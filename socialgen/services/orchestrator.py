"""
Main generation service that orchestrates one submission.
"""

import asyncio
import logging
import time
from typing import Optional

from socialgen.config import settings as default_settings, Settings
from socialgen.models.api import UserInput, GeneratedContent, ContentRequest, SubmissionResult
from socialgen.models.platform import Platform, Language
from socialgen.services.content_generator import ContentGenerator
from socialgen.services.content_request import build_request
from socialgen.services.image_adapter import ImageAdapter
from socialgen.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


class SubmissionOrchestrator:
    """Runs content generation and every image adaptation concurrently."""

    def __init__(self, settings: Optional[Settings] = None,
                 generator: Optional[ContentGenerator] = None,
                 adapter: Optional[ImageAdapter] = None):
        """Initialize the orchestrator and its collaborators."""
        self.settings = settings or default_settings
        self.generator = generator or ContentGenerator(self.settings)
        self.adapter = adapter or ImageAdapter(self.settings)

    @staticmethod
    def validate_input(user_input: UserInput) -> None:
        """
        Raises:
            ValidationError: If any required field is empty
        """
        missing = user_input.missing_fields()
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    async def generate(self, user_input: UserInput, language: Optional[Language] = None) -> SubmissionResult:
        """
        Generate posts and adapted images for every platform.

        The content request and one adaptation per platform run in parallel.
        If any of them fails, the remaining tasks are cancelled and the first
        failure is raised; a partial result is never returned.

        Args:
            user_input: Form input including the source image
            language: Preferred output language

        Returns:
            SubmissionResult: Posts and adapted images keyed by platform
        """
        self.validate_input(user_input)
        self.generator.ensure_credentials()

        language = Language(language or self.settings.default_language)
        request = build_request(user_input, language, temperature=self.settings.generation_temperature)
        platforms = list(Platform)

        logger.info(
            f"Starting submission: keyword={user_input.keyword.strip()!r} language={language.value} "
            f"image={user_input.image.mime_type} ({user_input.image.size} bytes)"
        )
        started = time.perf_counter()

        content_task = asyncio.ensure_future(self._generate_content(request))
        image_tasks = [
            asyncio.ensure_future(self.adapter.adapt_async(user_input.image, platform))
            for platform in platforms
        ]
        tasks = [content_task, *image_tasks]

        try:
            posts, *images = await asyncio.gather(*tasks)
        except Exception as e:
            for task in tasks:
                task.cancel()
            # Drain cancelled tasks, their results are discarded
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.error(f"Submission failed after {time.perf_counter() - started:.2f}s: "
                         f"{type(e).__name__}: {str(e)}")
            raise

        logger.info(f"Submission completed in {time.perf_counter() - started:.2f}s")

        return SubmissionResult(
            posts=posts,
            images=dict(zip(platforms, images))
        )

    async def _generate_content(self, request: ContentRequest) -> GeneratedContent:
        started = time.perf_counter()
        posts = await self.generator.generate(request)
        logger.info(f"Content generated in {time.perf_counter() - started:.2f}s")
        return posts

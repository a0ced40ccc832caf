"""
Service for generating per-platform social media copy using OpenAI.
"""

import json
import logging
from typing import Optional, Dict, Any

import openai
from openai import AsyncOpenAI
from pydantic import ValidationError as SchemaValidationError

from socialgen.config import settings as default_settings, Settings
from socialgen.models.api import ContentRequest, GeneratedContent
from socialgen.utils.exceptions import ApiError, ContentFormatError, MissingCredential

logger = logging.getLogger(__name__)


class ContentGenerator:
    """Client for the schema-constrained content generation API."""

    def __init__(self, settings: Optional[Settings] = None, client: Optional[AsyncOpenAI] = None):
        """
        Initialize the generator.

        The OpenAI client is created lazily so that a missing API key is
        reported per submission instead of at startup.
        """
        self.settings = settings or default_settings
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self.ensure_credentials()
            self._client = AsyncOpenAI(
                api_key=self.settings.openai_api_key,
                base_url=self.settings.openai_base_url or None,
                timeout=self.settings.openai_timeout_seconds,
                max_retries=0
            )
        return self._client

    def ensure_credentials(self) -> None:
        """
        Raises:
            MissingCredential: If no API key is configured
        """
        if self._client is None and not self.settings.openai_configured:
            raise MissingCredential("OpenAI API key not configured")

    async def generate(self, request: ContentRequest) -> GeneratedContent:
        """
        Send the request and parse the structured response.

        Args:
            request: Request assembled by the content request builder

        Returns:
            GeneratedContent: Posts for every platform

        Raises:
            MissingCredential: If no API key is configured
            ApiError: If the API call fails
            ContentFormatError: If the response does not match the schema
        """
        client = self.client

        try:
            response = await client.chat.completions.create(
                model=self.settings.openai_model,
                messages=[
                    {"role": "system", "content": request.system_instruction},
                    {"role": "user", "content": request.prompt}
                ],
                response_format=self._response_format(request),
                temperature=request.temperature
            )
        except openai.APIStatusError as e:
            logger.error(f"OpenAI API returned {e.status_code}: {str(e)}")
            raise ApiError(f"Content generation failed: {str(e)}", status_code=e.status_code)
        except openai.APIError as e:
            logger.error(f"OpenAI API error: {str(e)}")
            raise ApiError(f"Content generation failed: {str(e)}")

        if not response.choices:
            raise ContentFormatError("Empty response from AI")

        message = response.choices[0].message
        if getattr(message, "refusal", None):
            raise ContentFormatError(f"Model refused the request: {message.refusal}")

        return self.parse_response(message.content)

    @staticmethod
    def _response_format(request: ContentRequest) -> Dict[str, Any]:
        return {
            "type": "json_schema",
            "json_schema": {
                "name": request.schema_name,
                "schema": request.response_schema,
                "strict": True
            }
        }

    @staticmethod
    def parse_response(content: Optional[str]) -> GeneratedContent:
        """
        Parse the raw response text into GeneratedContent.

        Raises:
            ContentFormatError: If the text is empty, not JSON, or off-schema
        """
        if not content or not content.strip():
            raise ContentFormatError("Empty response from AI")

        # Clean response content (remove any markdown formatting)
        clean_content = content.strip()
        if clean_content.startswith("```json"):
            clean_content = clean_content[7:]
        elif clean_content.startswith("```"):
            clean_content = clean_content[3:]
        if clean_content.endswith("```"):
            clean_content = clean_content[:-3]
        clean_content = clean_content.strip()

        try:
            data = json.loads(clean_content)
        except json.JSONDecodeError as e:
            raise ContentFormatError(f"Response is not valid JSON: {str(e)}")

        if not isinstance(data, dict):
            raise ContentFormatError(f"Expected a JSON object, got {type(data).__name__}")

        try:
            return GeneratedContent.model_validate(data)
        except SchemaValidationError as e:
            missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ContentFormatError(f"Response does not match schema: {', '.join(missing)}")

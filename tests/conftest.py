import io
import json
from types import SimpleNamespace

import pytest
from PIL import Image

from socialgen.config import Settings
from socialgen.models.api import SourceImage, UserInput
from socialgen.services.content_generator import ContentGenerator

FORMATS = {"image/png": "PNG", "image/jpeg": "JPEG", "image/webp": "WEBP"}


def make_image(width, height, mime_type="image/png", mode="RGB", color=(200, 40, 40)) -> SourceImage:
    if mode == "RGBA" and len(color) == 3:
        color = (*color, 128)
    img = Image.new(mode, (width, height), color)
    buffer = io.BytesIO()
    img.save(buffer, format=FORMATS[mime_type])
    return SourceImage(data=buffer.getvalue(), mime_type=mime_type, filename=f"source.{mime_type.split('/')[1]}")


def decode(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


def valid_posts() -> dict:
    return {
        "facebook": "Meet the new #Coffee grinder ☕ https://example.com/grinder",
        "instagram": "Fresh mornings start here ☕ Link in Bio #coffee #barista",
        "twitter": "Grind smarter ☕ https://example.com/grinder #coffee",
        "linkedin": "Coffee grinder built for teams. https://example.com/grinder #Productivity",
        "vk": "Новая кофемолка ☕ https://example.com/grinder #кофе",
        "pinterest": {"title": "Best Coffee Grinder 2026", "description": "Burr grinder for espresso #coffee"},
        "youtube": {"title": "Coffee Grinder Review", "description": "Watch before you buy https://example.com/grinder"},
        "tiktok": "POV: perfect espresso ☕ Link in Bio #coffeetok",
    }


class FakeCompletions:
    def __init__(self, content=None, error=None, refusal=None):
        self.content = content
        self.error = error
        self.refusal = refusal
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content, refusal=self.refusal)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    def __init__(self, **kwargs):
        self.completions = FakeCompletions(**kwargs)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def settings():
    return Settings(openai_api_key="test-key", openai_model="test-model", generation_temperature=0.7)


@pytest.fixture
def fake_client():
    return FakeOpenAI(content=json.dumps(valid_posts()))


@pytest.fixture
def generator(settings, fake_client):
    return ContentGenerator(settings, client=fake_client)


@pytest.fixture
def source_image():
    return make_image(640, 480)


@pytest.fixture
def user_input(source_image):
    return UserInput(
        description="Ceramic burr coffee grinder with 40 settings",
        product_url="https://example.com/grinder",
        keyword="Coffee",
        image=source_image
    )

"""
Command-line entry point: run one submission against a local image file.

Writes one adapted image per platform as ``<product>-<platform>-image.<ext>``
and, unless ``--images-only`` is given, the generated posts as
``<product>-posts.json``.
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import List, Optional

import aiofiles

from socialgen.config import settings
from socialgen.models.api import SourceImage, UserInput, AdaptedImage
from socialgen.models.platform import Platform, Language
from socialgen.services.image_adapter import ImageAdapter
from socialgen.services.orchestrator import SubmissionOrchestrator
from socialgen.utils.exceptions import SocialGenError
from socialgen.utils.helpers import (
    download_filename,
    guess_image_type,
    slugify,
    validate_file_size,
    validate_file_type,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="socialgen",
        description="Generate social media posts and platform-sized images for a product."
    )
    parser.add_argument("--image", required=True, help="Path to a PNG, JPEG or WEBP image")
    parser.add_argument("--description", default="", help="Product description")
    parser.add_argument("--url", default="", help="Product URL")
    parser.add_argument("--keyword", default="", help="Main SEO keyword")
    parser.add_argument("--language", choices=[lang.value for lang in Language],
                        default=settings.default_language, help="Preferred output language")
    parser.add_argument("--output-dir", default=".", help="Directory for the generated files")
    parser.add_argument("--images-only", action="store_true",
                        help="Only adapt the image, skip content generation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


async def load_image(path: str) -> SourceImage:
    """Read a local image and validate it like an upload."""
    mime_type = guess_image_type(path)
    validate_file_type(mime_type)

    async with aiofiles.open(path, "rb") as f:
        data = await f.read()
    validate_file_size(len(data))

    return SourceImage(data=data, mime_type=mime_type, filename=os.path.basename(path))


async def write_images(images: List[AdaptedImage], product: str, output_dir: str) -> List[str]:
    paths = []
    for image in images:
        path = os.path.join(output_dir, download_filename(product, image.platform, image.mime_type))
        async with aiofiles.open(path, "wb") as f:
            await f.write(image.data)
        paths.append(path)
    return paths


async def run(args: argparse.Namespace) -> List[str]:
    """Execute the command and return the paths written."""
    os.makedirs(args.output_dir, exist_ok=True)
    source = await load_image(args.image)

    if args.images_only:
        adapter = ImageAdapter(settings)
        images = await asyncio.gather(*(adapter.adapt_async(source, platform) for platform in Platform))
        return await write_images(images, args.keyword, args.output_dir)

    user_input = UserInput(
        description=args.description,
        product_url=args.url,
        keyword=args.keyword,
        image=source
    )
    result = await SubmissionOrchestrator(settings).generate(user_input, Language(args.language))

    paths = await write_images(list(result.images.values()), args.keyword, args.output_dir)

    posts_path = os.path.join(args.output_dir, f"{slugify(args.keyword)}-posts.json")
    async with aiofiles.open(posts_path, "w", encoding="utf-8") as f:
        await f.write(json.dumps(result.posts.model_dump(), ensure_ascii=False, indent=2))
    paths.append(posts_path)

    return paths


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        paths = asyncio.run(run(args))
    except SocialGenError as e:
        logger.error(f"{type(e).__name__}: {str(e)}")
        return 1

    for path in paths:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())

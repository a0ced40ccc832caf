"""
Service for adapting an uploaded image to each platform's canvas.

The image is center-cropped to the target aspect ratio and then scaled to the
exact target size, keeping the source encoding.
"""

import asyncio
import io
import logging
from typing import NamedTuple, Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from socialgen.config import settings as default_settings, Settings
from socialgen.models.api import SourceImage, AdaptedImage
from socialgen.models.platform import Platform, dimensions_for
from socialgen.utils.exceptions import DecodeError, RenderError

logger = logging.getLogger(__name__)

# MIME type -> Pillow format name
ENCODERS = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
    "image/jpg": "JPEG",
    "image/webp": "WEBP",
}


class CropBox(NamedTuple):
    """Region of the source image that is scaled to the target canvas."""
    x: float
    y: float
    width: float
    height: float

    def as_box(self):
        """Return the (left, upper, right, lower) tuple Pillow expects."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


def compute_crop_box(source_width: int, source_height: int,
                     target_width: int, target_height: int) -> CropBox:
    """
    Compute the centered crop that matches the target aspect ratio.

    Args:
        source_width: Source image width in pixels
        source_height: Source image height in pixels
        target_width: Target canvas width in pixels
        target_height: Target canvas height in pixels

    Returns:
        CropBox: Centered crop region, possibly with fractional offsets
    """
    if source_width <= 0 or source_height <= 0:
        raise DecodeError(f"Source image has invalid size {source_width}x{source_height}")
    if target_width <= 0 or target_height <= 0:
        raise RenderError(f"Target size must be positive, got {target_width}x{target_height}")

    source_aspect = source_width / source_height
    target_aspect = target_width / target_height

    if source_aspect > target_aspect:
        # Source is wider: keep the full height, trim the sides
        crop_width = source_height * target_aspect
        return CropBox((source_width - crop_width) / 2, 0.0, crop_width, float(source_height))

    if source_aspect < target_aspect:
        # Source is taller: keep the full width, trim top and bottom
        crop_height = source_width / target_aspect
        return CropBox(0.0, (source_height - crop_height) / 2, float(source_width), crop_height)

    return CropBox(0.0, 0.0, float(source_width), float(source_height))


class ImageAdapter:
    """Center-crops and scales images to fixed platform canvases."""

    def __init__(self, settings: Optional[Settings] = None,
                 resample: Image.Resampling = Image.Resampling.LANCZOS):
        self.settings = settings or default_settings
        self.resample = resample

    def adapt(self, source: SourceImage, target_width: int, target_height: int) -> AdaptedImage:
        """
        Produce an image of exactly target_width x target_height.

        Args:
            source: Uploaded source image
            target_width: Output width in pixels
            target_height: Output height in pixels

        Returns:
            AdaptedImage: Re-encoded image in the source MIME type

        Raises:
            DecodeError: If the source cannot be decoded
            RenderError: If the output cannot be produced or encoded
        """
        image_format = ENCODERS.get((source.mime_type or "").lower())
        if image_format is None:
            raise RenderError(f"Cannot encode images of type {source.mime_type}")

        img = self._decode(source)
        prepared = adapted = None
        try:
            box = compute_crop_box(img.width, img.height, target_width, target_height)

            try:
                prepared = self._prepare_mode(img, image_format)
                adapted = prepared.resize((target_width, target_height), self.resample, box=box.as_box())
            except (ValueError, OSError, MemoryError) as e:
                raise RenderError(f"Failed to render {target_width}x{target_height} image: {str(e)}")

            data = self._encode(adapted, image_format)
        finally:
            for opened in (adapted, prepared, img):
                if opened is not None:
                    opened.close()

        logger.debug(
            f"Adapted {source.mime_type} image to {target_width}x{target_height} "
            f"(crop x={box.x:.1f} y={box.y:.1f} w={box.width:.1f} h={box.height:.1f})"
        )

        return AdaptedImage(
            width=target_width,
            height=target_height,
            mime_type=self._canonical_mime(source.mime_type),
            data=data
        )

    def adapt_for(self, source: SourceImage, platform: Platform) -> AdaptedImage:
        """Adapt the source image to a platform's canvas."""
        dimension = dimensions_for(platform)
        adapted = self.adapt(source, dimension.width, dimension.height)
        return adapted.model_copy(update={"platform": Platform(platform)})

    async def adapt_async(self, source: SourceImage, platform: Platform) -> AdaptedImage:
        """Run adapt_for in the default executor so adaptations run in parallel."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.adapt_for, source, platform)

    def _decode(self, source: SourceImage) -> Image.Image:
        """Decode the source bytes, applying EXIF orientation."""
        try:
            original = Image.open(io.BytesIO(source.data))
            try:
                original.load()
                # Returns a new image even when no rotation is needed
                img = ImageOps.exif_transpose(original)
            finally:
                original.close()
        except (UnidentifiedImageError, OSError, ValueError, SyntaxError, EOFError,
                Image.DecompressionBombError) as e:
            raise DecodeError(f"Failed to decode source image: {str(e)}")

        if img.width <= 0 or img.height <= 0:
            raise DecodeError(f"Source image has invalid size {img.width}x{img.height}")
        return img

    @staticmethod
    def _prepare_mode(img: Image.Image, image_format: str) -> Image.Image:
        """Convert to a mode that both resamples well and the encoder accepts."""
        if img.mode == "I" or img.mode.startswith("I;16"):
            # 16-bit grayscale: rescale to 8 bits, convert() alone would clip
            with img.convert("I") as wide:
                with wide.point(lambda v: v * (1 / 256)) as scaled:
                    return scaled.convert("L")

        has_alpha = img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info

        if image_format == "JPEG":
            if img.mode in ("RGB", "L"):
                return img
            if has_alpha:
                # Flatten onto white, JPEG has no alpha channel
                with img.convert("RGBA") as rgba:
                    background = Image.new("RGB", rgba.size, (255, 255, 255))
                    background.paste(rgba, mask=rgba.getchannel("A"))
                return background
            return img.convert("RGB")

        if img.mode in ("RGB", "RGBA", "L", "LA"):
            return img
        return img.convert("RGBA" if has_alpha else "RGB")

    def _encode(self, img: Image.Image, image_format: str) -> bytes:
        buffer = io.BytesIO()
        try:
            if image_format == "JPEG":
                img.save(buffer, format="JPEG", quality=self.settings.jpeg_quality, optimize=True)
            elif image_format == "WEBP":
                img.save(buffer, format="WEBP", quality=self.settings.webp_quality)
            else:
                img.save(buffer, format=image_format)
        except (OSError, ValueError, KeyError) as e:
            raise RenderError(f"Failed to encode {image_format} image: {str(e)}")
        return buffer.getvalue()

    @staticmethod
    def _canonical_mime(mime_type: str) -> str:
        mime_type = mime_type.lower()
        return "image/jpeg" if mime_type == "image/jpg" else mime_type

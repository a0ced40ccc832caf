import io

import pytest
from PIL import Image, ImageOps

from conftest import make_image, decode
from socialgen.models.api import SourceImage
from socialgen.models.platform import Platform, dimensions_for
from socialgen.services.image_adapter import ImageAdapter, compute_crop_box
from socialgen.utils.exceptions import DecodeError, RenderError


def test_crop_box_wide_source_for_tiktok():
    box = compute_crop_box(4000, 2000, 1080, 1920)

    assert box.width == pytest.approx(1125)
    assert box.height == 2000
    assert box.x == pytest.approx(1437.5)
    assert box.y == 0


def test_crop_box_tall_source_is_centered_vertically():
    box = compute_crop_box(1000, 3000, 1600, 900)

    assert box.width == 1000
    assert box.height == pytest.approx(562.5)
    assert box.x == 0
    assert box.y == pytest.approx((3000 - 562.5) / 2)


def test_crop_box_equal_aspect_uses_full_source():
    box = compute_crop_box(500, 500, 1080, 1080)

    assert box == (0.0, 0.0, 500.0, 500.0)


def test_crop_box_rejects_non_positive_target():
    with pytest.raises(RenderError):
        compute_crop_box(100, 100, 0, 100)


def test_literal_tiktok_scenario_output_size():
    source = make_image(4000, 2000)

    adapted = ImageAdapter().adapt(source, 1080, 1920)

    assert (adapted.width, adapted.height) == (1080, 1920)
    assert decode(adapted.data).size == (1080, 1920)


@pytest.mark.parametrize("platform", list(Platform))
def test_every_platform_gets_exact_dimensions(platform):
    source = make_image(640, 480)

    adapted = ImageAdapter().adapt_for(source, platform)
    expected = dimensions_for(platform)

    assert adapted.platform == platform
    assert decode(adapted.data).size == (expected.width, expected.height)


def test_wide_source_keeps_center_band():
    # 300x100: blue | red | blue, the red band is exactly the centered square
    img = Image.new("RGB", (300, 100), (0, 0, 255))
    img.paste((255, 0, 0), (100, 0, 200, 100))
    source = _to_source(img)

    adapted = ImageAdapter(resample=Image.Resampling.NEAREST).adapt(source, 50, 50)
    out = decode(adapted.data).convert("RGB")

    for x in (0, 25, 49):
        r, g, b = out.getpixel((x, 25))
        assert r > 200 and b < 50


def test_tall_source_keeps_center_band():
    img = Image.new("RGB", (100, 300), (0, 0, 255))
    img.paste((0, 255, 0), (0, 100, 100, 200))
    source = _to_source(img)

    adapted = ImageAdapter(resample=Image.Resampling.NEAREST).adapt(source, 50, 50)
    out = decode(adapted.data).convert("RGB")

    for y in (0, 25, 49):
        r, g, b = out.getpixel((25, y))
        assert g > 200 and b < 50


@pytest.mark.parametrize("mime_type,image_format", [
    ("image/png", "PNG"),
    ("image/jpeg", "JPEG"),
    ("image/webp", "WEBP"),
])
def test_output_keeps_source_format(mime_type, image_format):
    source = make_image(320, 240, mime_type=mime_type)

    adapted = ImageAdapter().adapt_for(source, Platform.TWITTER)

    assert adapted.mime_type == mime_type
    assert decode(adapted.data).format == image_format


def test_transparent_png_stays_transparent():
    source = make_image(200, 100, mode="RGBA")

    adapted = ImageAdapter().adapt(source, 100, 100)

    assert decode(adapted.data).mode == "RGBA"


def test_palette_png_is_supported():
    img = Image.new("RGB", (120, 60), (10, 120, 200)).convert("P")
    adapted = ImageAdapter().adapt(_to_source(img), 90, 160)

    assert decode(adapted.data).size == (90, 160)


def test_alpha_is_flattened_for_jpeg():
    img = Image.new("RGBA", (10, 10), (255, 0, 0, 0))

    prepared = ImageAdapter._prepare_mode(img, "JPEG")

    assert prepared.mode == "RGB"
    assert prepared.getpixel((5, 5)) == (255, 255, 255)


@pytest.mark.parametrize("mode", ["I;16", "I"])
def test_sixteen_bit_grayscale_png_is_rescaled(mode):
    img = Image.new(mode, (200, 100), 30000)

    adapted = ImageAdapter().adapt(_to_source(img), 100, 100)
    value = decode(adapted.data).convert("L").getpixel((50, 50))

    # 30000 / 256
    assert 110 <= value <= 125


def test_exif_orientation_is_applied_before_cropping():
    # Stored 400x200 with red on the left; Orientation=6 displays it as 200x400, red on top
    img = Image.new("RGB", (400, 200), (0, 0, 255))
    img.paste((255, 0, 0), (0, 0, 200, 200))
    exif = Image.Exif()
    exif[0x0112] = 6
    buffer = io.BytesIO()
    img.save(buffer, format="JPEG", exif=exif)
    source = SourceImage(data=buffer.getvalue(), mime_type="image/jpeg")

    adapted = ImageAdapter(resample=Image.Resampling.NEAREST).adapt(source, 1080, 1920)
    out = decode(adapted.data).convert("RGB")

    assert out.size == (1080, 1920)
    r, g, b = out.getpixel((100, 100))
    assert r > 200 and b < 60
    r, g, b = out.getpixel((100, 1800))
    assert b > 200 and r < 60


def test_decoded_images_are_closed(monkeypatch):
    seen = []
    real_transpose = ImageOps.exif_transpose

    def recording_transpose(image, **kwargs):
        transposed = real_transpose(image, **kwargs)
        seen.extend([image, transposed])
        return transposed

    monkeypatch.setattr(ImageOps, "exif_transpose", recording_transpose)

    ImageAdapter().adapt(make_image(200, 100, mime_type="image/jpeg"), 100, 100)

    assert len(seen) == 2
    for image in seen:
        with pytest.raises(ValueError, match="closed"):
            image.getpixel((0, 0))


def test_undecodable_bytes_raise_decode_error():
    source = SourceImage(data=b"definitely not an image", mime_type="image/png")

    with pytest.raises(DecodeError):
        ImageAdapter().adapt(source, 100, 100)


def test_truncated_image_raises_decode_error():
    source = make_image(200, 200)
    truncated = SourceImage(data=source.data[: len(source.data) // 2], mime_type="image/png")

    with pytest.raises(DecodeError):
        ImageAdapter().adapt(truncated, 100, 100)


def test_unsupported_output_type_raises_render_error():
    source = make_image(100, 100)
    gif = SourceImage(data=source.data, mime_type="image/gif")

    with pytest.raises(RenderError):
        ImageAdapter().adapt(gif, 100, 100)


async def test_adapt_async_runs_in_executor():
    source = make_image(300, 300)

    adapted = await ImageAdapter().adapt_async(source, Platform.PINTEREST)

    assert decode(adapted.data).size == (1000, 1500)


def _to_source(img: Image.Image) -> SourceImage:
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return SourceImage(data=buffer.getvalue(), mime_type="image/png")

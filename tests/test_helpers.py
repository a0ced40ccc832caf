import io

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from conftest import make_image
from socialgen.config import Settings
from socialgen.utils.exceptions import FileValidationError
from socialgen.utils.helpers import (
    count_words,
    download_filename,
    extension_for_mime,
    format_file_size,
    guess_image_type,
    read_uploaded_image,
    slugify,
    validate_file_size,
    validate_file_type,
)


def _upload(data: bytes, content_type: str, filename="photo.png") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type})
    )


@pytest.mark.parametrize("text,expected", [
    ("Digital Marketing", "digital-marketing"),
    ("  Coffee & Tea!! ", "coffee-tea"),
    ("", "product"),
    ("***", "product"),
])
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_download_filename_uses_mime_subtype():
    assert download_filename("Smart Watch", "instagram", "image/jpeg") == "smart-watch-instagram-image.jpeg"
    assert extension_for_mime("image/webp") == "webp"


@pytest.mark.parametrize("text,count", [
    ("", 0),
    ("   \n ", 0),
    ("one", 1),
    ("one  two\nthree", 3),
])
def test_count_words(text, count):
    assert count_words(text) == count


def test_file_type_validation():
    validate_file_type("image/webp")

    with pytest.raises(FileValidationError):
        validate_file_type("image/gif")
    with pytest.raises(FileValidationError):
        validate_file_type(None)


def test_file_size_validation():
    settings = Settings(max_file_size=100)

    validate_file_size(100, settings)
    with pytest.raises(FileValidationError):
        validate_file_size(101, settings)
    with pytest.raises(FileValidationError):
        validate_file_size(0, settings)


def test_format_file_size():
    assert format_file_size(0) == "0 B"
    assert format_file_size(10 * 1024 * 1024) == "10.0 MB"


def test_guess_image_type():
    assert guess_image_type("photo.PNG") == "image/png"
    assert guess_image_type("photo.jpg") == "image/jpeg"


async def test_read_uploaded_image():
    source = make_image(20, 10)

    image = await read_uploaded_image(_upload(source.data, "image/png"))

    assert image.data == source.data
    assert image.mime_type == "image/png"
    assert image.filename == "photo.png"


async def test_read_uploaded_image_rejects_type():
    with pytest.raises(FileValidationError):
        await read_uploaded_image(_upload(b"GIF89a", "image/gif", "anim.gif"))

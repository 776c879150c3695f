import io
import random

from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

FORMATS = {"png": ("PNG", "image/png"), "jpg": ("JPEG", "image/jpeg"), "bmp": ("BMP", "image/bmp")}


def placeholder_image(name: str = "image.png", size=(64, 64), color=None) -> SimpleUploadedFile:
    """Solid-colour image upload, used for demo data and tests."""
    extension = name.rsplit(".", 1)[-1].lower()
    image_format, content_type = FORMATS.get(extension, FORMATS["png"])
    color = color or tuple(random.randint(0, 255) for _ in range(3))

    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=image_format)
    return SimpleUploadedFile(name, buffer.getvalue(), content_type=content_type)

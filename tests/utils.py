"""
Helpers shared by blogify tests.
"""
import base64
from io import BytesIO

from PIL import Image


def png_bytes(color="red", size=(4, 4)):
    """Return the bytes of a small PNG image."""
    buffer = BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def png_data_url(color="red"):
    return "data:image/png;base64," + base64.b64encode(png_bytes(color)).decode()

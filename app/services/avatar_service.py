"""Letter avatars: one uppercase glyph centered on a solid square, encoded as PNG."""
from functools import lru_cache
from io import BytesIO

from PIL import Image, ImageDraw, ImageFont

from app.core.config import settings


@lru_cache(maxsize=8)
def _load_font(path: str, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    try:
        return ImageFont.truetype(path, size)
    except OSError:
        # Bundled Pillow font when the configured one is not installed
        return ImageFont.load_default(size=size)


def generate_avatar(
    letter: str,
    width: int = settings.AVATAR_SIZE,
    height: int = settings.AVATAR_SIZE,
) -> bytes:
    """Render ``letter`` (uppercased) on a ``width`` x ``height`` canvas and return PNG bytes.

    Output depends only on the arguments and settings, so the same letter
    always yields the same bytes.
    """
    image = Image.new("RGB", (width, height), settings.AVATAR_BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = _load_font(settings.AVATAR_FONT, settings.AVATAR_FONT_SIZE)
    draw.text(
        (width / 2, height / 2),
        letter.upper(),
        fill=settings.AVATAR_FOREGROUND,
        font=font,
        anchor="mm",
    )
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()

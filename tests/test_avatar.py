from io import BytesIO

from PIL import Image

from app.services.avatar_service import generate_avatar

BACKGROUND = (0, 123, 255)


def test_avatar_size_and_background():
    image = Image.open(BytesIO(generate_avatar("Z")))
    assert image.format == "PNG"
    assert image.size == (100, 100)
    assert image.convert("RGB").getpixel((0, 0)) == BACKGROUND


def test_avatar_draws_glyph_in_center():
    image = Image.open(BytesIO(generate_avatar("Z"))).convert("RGB")
    center = image.crop((30, 30, 70, 70))
    assert any(pixel != BACKGROUND for pixel in center.getdata())


def test_avatar_is_deterministic():
    assert generate_avatar("Z") == generate_avatar("Z")


def test_avatar_uppercases_letter():
    assert generate_avatar("z") == generate_avatar("Z")
    assert generate_avatar("a") != generate_avatar("b")


def test_avatar_custom_dimensions():
    image = Image.open(BytesIO(generate_avatar("q", width=64, height=48)))
    assert image.size == (64, 48)


def test_avatar_route(client):
    response = client.get("/avatar/zelda")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content == generate_avatar("Z")

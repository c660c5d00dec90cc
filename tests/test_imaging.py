import pytest
from PIL import Image

from corekit.imaging import remove_image_alpha_channel, resize_image


def _image(size=(100, 50), color=(10, 20, 30, 255)):
    return Image.new("RGBA", size, color)


def test_resize_to_exact_size():
    got = resize_image(_image(), 40, 20, Image.Resampling.BILINEAR)
    assert got.size == (40, 20)


def test_resize_width_zero_keeps_aspect():
    got = resize_image(_image(), 0, 25, Image.Resampling.NEAREST)
    assert got.size == (50, 25)


def test_resize_height_zero_keeps_aspect():
    got = resize_image(_image(), 50, 0, Image.Resampling.NEAREST)
    assert got.size == (50, 25)


def test_resize_both_zero_keeps_size():
    img = _image()
    got = resize_image(img, 0, 0, Image.Resampling.NEAREST)
    assert got.size == img.size


def test_resize_keeps_uniform_color():
    color = (10, 20, 30, 255)
    got = resize_image(_image(color=color), 10, 10, Image.Resampling.NEAREST)
    assert got.getpixel((5, 5)) == color


def test_resize_negative_raises():
    with pytest.raises(ValueError):
        resize_image(_image(), -1, 10, Image.Resampling.NEAREST)


def test_remove_alpha_keeps_opaque_pixels():
    color = (10, 20, 30, 255)
    got = remove_image_alpha_channel(_image(color=color))
    assert got.mode == "RGBA"
    assert got.getpixel((0, 0)) == color


def test_remove_alpha_transparent_becomes_black():
    got = remove_image_alpha_channel(_image(color=(200, 100, 50, 0)))
    assert got.getpixel((3, 3)) == (0, 0, 0, 255)


def test_remove_alpha_makes_every_pixel_opaque():
    img = _image()
    img.putpixel((1, 1), (200, 100, 50, 128))
    img.putpixel((2, 2), (1, 2, 3, 0))
    got = remove_image_alpha_channel(img)
    assert got.size == img.size
    assert got.getchannel("A").getextrema() == (255, 255)


def test_remove_alpha_translucent_is_darkened():
    original = (200, 100, 50, 128)
    got = remove_image_alpha_channel(_image(color=original)).getpixel((0, 0))
    assert all(g <= o for g, o in zip(got[:3], original[:3]))
    assert got[3] == 255


def test_remove_alpha_from_rgb_image():
    img = Image.new("RGB", (4, 4), (7, 8, 9))
    got = remove_image_alpha_channel(img)
    assert got.getpixel((0, 0)) == img.convert("RGBA").getpixel((0, 0))
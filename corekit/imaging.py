"""Image helpers built on Pillow."""

from __future__ import annotations

from PIL import Image


def resize_image(
    img: Image.Image,
    width: int,
    height: int,
    resample: Image.Resampling = Image.Resampling.BICUBIC,
) -> Image.Image:
    """Resize to width x height; a zero dimension keeps the aspect ratio."""
    if width < 0 or height < 0:
        raise ValueError(f"invalid size {width}x{height}")

    old_width, old_height = img.size

    if width == 0 and height == 0:
        scale_x = scale_y = 1.0
    elif width == 0:
        scale_y = old_height / height
        scale_x = scale_y
    else:
        scale_x = old_width / width
        scale_y = scale_x if height == 0 else old_height / height

    if width == 0:
        width = int(0.7 + old_width / scale_x)
    if height == 0:
        height = int(0.7 + old_height / scale_y)

    return img.resize((width, height), resample)


def remove_image_alpha_channel(img: Image.Image) -> Image.Image:
    """Return an opaque RGBA copy; translucent pixels are darkened as if premultiplied."""
    rgba = img.convert("RGBA")
    backdrop = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
    return Image.alpha_composite(backdrop, rgba)
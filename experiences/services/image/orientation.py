"""Orientation normalization for camera images.

Camera pixel data is often stored rotated, with an EXIF orientation tag
describing how to display it upright. ``flatten`` bakes that rotation into
the pixels so every later step can ignore the tag.
"""

from PIL import Image, ImageOps

ORIENTATION_TAG = 0x0112
ORIENTATION_UP = 1


def orientation_of(image: Image.Image) -> int:
    """Return the EXIF orientation value, or ``ORIENTATION_UP`` when untagged."""
    value = image.getexif().get(ORIENTATION_TAG, ORIENTATION_UP)
    return value if isinstance(value, int) and 1 <= value <= 8 else ORIENTATION_UP


def flatten(image: Image.Image) -> Image.Image:
    """Return an upright image.

    Already-upright images are returned as-is (same object). Otherwise a new
    image is rendered in the orientation the tag implies, with the tag
    removed, so ``flatten(flatten(x))`` equals ``flatten(x)``.
    """
    if orientation_of(image) == ORIENTATION_UP:
        return image
    return ImageOps.exif_transpose(image)

"""Aspect-ratio based image fitting.

Computes a target size for an image inside a bounding box and renders a
resized copy. The size rule always keeps one dimension of the box and
shrinks the other by the image's aspect ratio:

    aspect = image.width / image.height
    if box.width > box.width * aspect:   # only when aspect < 1
        size = (box.width * aspect, box.height)
    else:
        size = (box.width, box.height / aspect)

This is the reproducible corner-fit behaviour of the screen, not a strict
"contain" letterbox: for a non-square box the output ratio follows the
box as well as the image.
"""

import logging
import math

from PIL import Image

from experiences.core.exceptions import DecodeFailureError, InvalidTargetError
from experiences.core.models import BoundingBox

logger = logging.getLogger(__name__)

RESAMPLE_FILTERS: dict[str, Image.Resampling] = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


def resolve_resample(name: str) -> Image.Resampling:
    """Map a filter name from settings to a Pillow resampling constant.

    Raises:
        ValueError: If the name is not a known filter.
    """
    try:
        return RESAMPLE_FILTERS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown resample filter: {name}") from None


def fitted_size(image_size: tuple[int, int], box: BoundingBox) -> tuple[float, float]:
    """Return the exact (unrounded) target size for an image of ``image_size``.

    Args:
        image_size: Source ``(width, height)`` in pixels.
        box: Target bounding box.

    Returns:
        The ``(width, height)`` pair; one of them always equals the box.

    Raises:
        InvalidTargetError: If either box dimension is <= 0.
        DecodeFailureError: If the source has a zero dimension.
    """
    if not box.is_valid:
        raise InvalidTargetError(box.width, box.height)

    src_width, src_height = image_size
    if src_width <= 0 or src_height <= 0:
        raise DecodeFailureError(f"Image has no pixels: {src_width}x{src_height}")

    aspect = src_width / src_height
    width, height = box.width, box.height
    if width > width * aspect:
        width = width * aspect
    else:
        height = height / aspect
    return width, height


def _to_pixels(value: float, limit: float) -> int:
    # Round down so the raster never exceeds the box; at least one pixel
    return max(1, min(math.floor(value + 1e-6), math.floor(limit)))


def fit(
    image: Image.Image,
    box: BoundingBox,
    resample: Image.Resampling = Image.Resampling.BILINEAR,
) -> Image.Image:
    """Render ``image`` resized to its fitted size inside ``box``.

    Args:
        image: Decoded source image. Not modified.
        box: Target bounding box in pixels.
        resample: Pillow resampling filter (bilinear by default).

    Returns:
        A new image whose size is ``fitted_size`` rounded down to whole pixels,
        so neither dimension exceeds the box (minimum one pixel).

    Raises:
        InvalidTargetError: If the box has a non-positive dimension.
        DecodeFailureError: If the pixel data cannot be loaded.
    """
    width, height = fitted_size(image.size, box)
    target = (_to_pixels(width, box.width), _to_pixels(height, box.height))

    try:
        scaled = image.resize(target, resample=resample)
    except (OSError, ValueError) as exc:
        raise DecodeFailureError(f"Image could not be resampled: {exc}") from exc

    logger.debug("Scaled image %sx%s -> %sx%s", image.width, image.height, *target)
    return scaled

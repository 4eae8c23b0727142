"""Image decoding and the grayscale display filter."""

import io
import logging
from pathlib import Path
from typing import Union

from PIL import Image, ImageEnhance

from experiences.core.exceptions import DecodeFailureError

logger = logging.getLogger(__name__)

PLACEHOLDER_GRAY = (128, 128, 128)


def load_image(source: Union[str, Path, bytes, Image.Image]) -> Image.Image:
    """Decode an image from a path, raw bytes, or an already-open image.

    The pixel data is loaded eagerly so decode errors surface here rather
    than later in the scaler or filter.

    Raises:
        DecodeFailureError: If the source is missing or not a decodable image.
    """
    if isinstance(source, Image.Image):
        image = source
    elif isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise DecodeFailureError(f"Image file not found: {source}")
        try:
            image = Image.open(path)
        except OSError as exc:
            raise DecodeFailureError(f"Unsupported image file {path.name}: {exc}") from exc
    elif isinstance(source, bytes):
        try:
            image = Image.open(io.BytesIO(source))
        except OSError as exc:
            raise DecodeFailureError(f"Unsupported image data: {exc}") from exc
    else:
        raise DecodeFailureError(f"Unsupported image data type: {type(source)}")

    try:
        image.load()
    except (OSError, SyntaxError, ValueError) as exc:
        raise DecodeFailureError(f"Image pixel data could not be read: {exc}") from exc
    return image


def to_grayscale(image: Image.Image) -> Image.Image | None:
    """Apply a saturation-zero color transform.

    The output has the same size as the input, in ``RGB`` (``RGBA`` when the
    source carries alpha).

    Returns:
        The desaturated image, or None if no pixel buffer could be obtained.
    """
    try:
        image.load()
        if image.mode not in ("RGB", "RGBA"):
            has_alpha = "A" in image.getbands() or "transparency" in image.info
            image = image.convert("RGBA" if has_alpha else "RGB")
        # Color(0.0) blends fully toward the luminance image
        return ImageEnhance.Color(image).enhance(0.0)
    except (OSError, SyntaxError, ValueError) as exc:
        logger.warning("Grayscale filter failed: %s", exc)
        return None


def placeholder_image(size: tuple[int, int], path: str | Path | None = None) -> Image.Image:
    """Return the default image used when no photo was picked.

    Loads ``path`` when it is set and readable; otherwise renders a neutral
    gray image of ``size``.
    """
    if path:
        try:
            return load_image(path)
        except DecodeFailureError as exc:
            logger.warning("Placeholder image unavailable (%s); using gray fill", exc.detail)
    width, height = size
    return Image.new("RGB", (max(1, width), max(1, height)), PLACEHOLDER_GRAY)

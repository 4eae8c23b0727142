"""Reactive image store for the compose screen.

Holds the picked image and re-derives the scaled and displayed images
whenever the original or the display bounds change. Subscribers are
called synchronously after every re-derivation.
"""

import logging
from collections.abc import Callable

from PIL import Image

from experiences.core.exceptions import DecodeFailureError, InvalidTargetError
from experiences.core.models import BoundingBox
from experiences.services.image.filters import to_grayscale
from experiences.services.image.orientation import flatten
from experiences.services.image.scaler import fit

logger = logging.getLogger(__name__)

Subscriber = Callable[["ImageState"], None]


class ImageState:
    """Original -> scaled -> displayed image chain.

    Args:
        bounds: Pixel box the scaled image is fitted into.
        resample: Pillow resampling filter passed to ``fit``.
    """

    def __init__(
        self,
        bounds: BoundingBox,
        resample: Image.Resampling = Image.Resampling.BILINEAR,
    ) -> None:
        self._bounds = bounds
        self._resample = resample
        self._original: Image.Image | None = None
        self._scaled: Image.Image | None = None
        self._display: Image.Image | None = None
        self._subscribers: list[Subscriber] = []

    @property
    def bounds(self) -> BoundingBox:
        return self._bounds

    @property
    def original(self) -> Image.Image | None:
        return self._original

    @property
    def scaled(self) -> Image.Image | None:
        return self._scaled

    @property
    def display(self) -> Image.Image | None:
        """Grayscale rendition of the scaled image shown on screen."""
        return self._display

    def set_original(self, image: Image.Image | None) -> None:
        """Replace the picked image (None clears it) and re-derive."""
        self._original = flatten(image) if image is not None else None
        self._rederive()

    def set_bounds(self, bounds: BoundingBox) -> None:
        """Change the display bounds and re-derive from the current original."""
        self._bounds = bounds
        self._rederive()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a change callback; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _rederive(self) -> None:
        self._scaled = None
        self._display = None
        if self._original is not None:
            try:
                self._scaled = fit(self._original, self._bounds, resample=self._resample)
            except (InvalidTargetError, DecodeFailureError) as exc:
                logger.warning("Could not scale picked image: %s", exc.detail)
            if self._scaled is not None:
                self._display = to_grayscale(self._scaled)

        for callback in list(self._subscribers):
            callback(self)

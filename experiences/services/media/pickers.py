"""Concrete media pickers: a directory-backed library and an upload buffer."""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from experiences.services.image.filters import load_image
from experiences.services.media.base import CANCELLED, BaseMediaPicker, PickResult

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".heic", ".gif", ".bmp", ".tif", ".tiff", ".webp"}

Chooser = Callable[[Sequence[Path]], Path | None]


class FileMediaPicker(BaseMediaPicker):
    """Picks an image file out of a local photo directory.

    Args:
        media_dir: The "photo library" directory.
        choose: Presents the candidate files and returns the chosen one,
            or None when the user cancels.
    """

    def __init__(self, media_dir: str | Path, choose: Chooser) -> None:
        self._media_dir = Path(media_dir)
        self._choose = choose

    def is_available(self) -> bool:
        return self._media_dir.is_dir()

    def candidates(self) -> list[Path]:
        """Image files in the library, sorted by name."""
        return sorted(
            p for p in self._media_dir.iterdir()
            if p.is_file() and p.suffix.lower() in IMAGE_SUFFIXES
        )

    def pick(self) -> PickResult:
        if not self.is_available():
            logger.error("The photo library is unavailable: %s", self._media_dir)
            return CANCELLED

        chosen = self._choose(self.candidates())
        if chosen is None:
            logger.info("Image pick cancelled")
            return CANCELLED

        logger.info("Picked image %s", chosen.name)
        return load_image(chosen)


class UploadMediaPicker(BaseMediaPicker):
    """Wraps bytes delivered by an upload widget; no bytes means cancelled."""

    def __init__(self, data: bytes | None) -> None:
        self._data = data

    def is_available(self) -> bool:
        return True

    def pick(self) -> PickResult:
        if not self._data:
            return CANCELLED
        return load_image(self._data)

"""Screen controller for composing an experience.

Owns the image chain, the audio capture backend, and the hand-off to the
next screen. All methods run synchronously on the caller's thread.

Usage::

    from experiences.services.composer import ExperienceComposer

    composer = ExperienceComposer(capture)
    composer.pick_image(picker)
    composer.toggle_recording()
    handoff = composer.submit("Sunset at the pier")
"""

import logging
import math
from pathlib import Path

from PIL import Image

from experiences.core.config import get_settings
from experiences.core.exceptions import AudioSessionError, DecodeFailureError, PermissionDeniedError
from experiences.core.models import BoundingBox, ExperienceHandOff, RecordPermission
from experiences.services.audio.base import BaseAudioCapture
from experiences.services.image.filters import placeholder_image, to_grayscale
from experiences.services.image.scaler import resolve_resample
from experiences.services.image.state import ImageState
from experiences.services.media.base import CANCELLED, BaseMediaPicker

logger = logging.getLogger(__name__)


class ExperienceComposer:
    """Handles the compose screen's user actions.

    Args:
        capture: Audio capture backend.
        bounds: Pixel box for the displayed image; defaults to the configured
            viewport times the display scale.
        placeholder_path: Image handed off when nothing was picked.
    """

    def __init__(
        self,
        capture: BaseAudioCapture,
        bounds: BoundingBox | None = None,
        placeholder_path: str | None = None,
    ) -> None:
        settings = get_settings()
        if bounds is None:
            bounds = BoundingBox.from_viewport(
                settings.display_width, settings.display_height, settings.display_scale
            )
        self.images = ImageState(bounds, resample=resolve_resample(settings.resample_filter))
        self._capture = capture
        self._placeholder_path = (
            placeholder_path if placeholder_path is not None else settings.placeholder_image_path
        )
        self._settings_url = settings.settings_url
        self._recording_path: Path | None = None

        # Recording still works later if the session fails here
        try:
            capture.prepare_session()
        except AudioSessionError as exc:
            logger.warning("Audio session not prepared: %s", exc.detail)

    # ------------------------------------------------------------------
    # Image
    # ------------------------------------------------------------------

    def on_image_picked(self, image: Image.Image) -> None:
        logger.info("Picked image %sx%s", image.width, image.height)
        self.images.set_original(image)

    def on_pick_cancelled(self) -> None:
        logger.info("Image pick cancelled; keeping current image")

    def pick_image(self, picker: BaseMediaPicker) -> bool:
        """Run ``picker`` and adopt its image.

        Returns:
            True if a new image replaced the current one.
        """
        try:
            result = picker.pick()
        except DecodeFailureError as exc:
            logger.warning("Picked file is not a usable image: %s", exc.detail)
            return False

        if result is CANCELLED:
            self.on_pick_cancelled()
            return False
        self.on_image_picked(result)
        return True

    # ------------------------------------------------------------------
    # Audio
    # ------------------------------------------------------------------

    @property
    def is_recording(self) -> bool:
        return self._capture.is_recording

    @property
    def recording_path(self) -> Path | None:
        """Path of the most recently started clip."""
        return self._recording_path

    def toggle_recording(self) -> Path | None:
        """Stop an active recording, otherwise try to start one."""
        if self.is_recording:
            return self.stop_recording()
        return self.request_permission_or_start()

    def request_permission_or_start(self) -> Path | None:
        """Start recording if the microphone is available.

        An undetermined permission is requested but recording does not start;
        the user taps record again once access is granted.

        Returns:
            The new clip path, or None when recording did not start.

        Raises:
            PermissionDeniedError: If microphone access is blocked.
        """
        permission = self._capture.permission
        if permission == RecordPermission.undetermined:
            self._capture.request_permission(self._on_permission_answered)
            return None
        if permission == RecordPermission.denied:
            logger.warning("Microphone access has been blocked")
            raise PermissionDeniedError(settings_url=self._settings_url)
        return self.start_recording()

    def start_recording(self) -> Path:
        path = self._capture.start()
        self._recording_path = path
        return path

    def stop_recording(self) -> Path | None:
        return self._capture.stop()

    def record_clip(self, pcm_data: bytes) -> Path | None:
        """Record an already captured PCM buffer as one clip.

        Returns:
            The clip path, or None if permission was only just requested.
        """
        path = self.request_permission_or_start()
        if path is None:
            return None
        try:
            self._capture.write(pcm_data)
        finally:
            self.stop_recording()
        return path

    @staticmethod
    def _on_permission_answered(granted: bool) -> None:
        if granted:
            logger.info("Recording permission has been granted")
        else:
            logger.warning("Microphone access is needed to record")

    # ------------------------------------------------------------------
    # Hand-off
    # ------------------------------------------------------------------

    def submit(self, caption: str | None) -> ExperienceHandOff | None:
        """Bundle the screen's state for the next screen.

        Returns:
            The hand-off record, or None (no transition) when the caption is empty.
        """
        if not caption:
            logger.info("Hand-off refused: caption is empty")
            return None

        if self.is_recording:
            self.stop_recording()

        source = self.images.scaled
        if source is None:
            bounds = self.images.bounds
            source = placeholder_image(
                (max(1, math.floor(bounds.width)), max(1, math.floor(bounds.height))),
                self._placeholder_path or None,
            )

        handoff = ExperienceHandOff(
            caption=caption,
            image=to_grayscale(source),
            audio_clip=self._recording_path,
        )
        logger.info("Handing off experience %r (audio=%s)", caption, handoff.audio_clip)
        return handoff

"""
Abstract interfaces for audio capture and microphone permission.

The compose screen talks only to these interfaces, so the capture backend
(file writer, test double, platform recorder) can be swapped freely.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from experiences.core.models import RecordPermission


class PermissionProvider(ABC):
    """Source of truth for microphone permission."""

    @property
    @abstractmethod
    def status(self) -> RecordPermission:
        """Current permission state."""

    @abstractmethod
    def request(self, callback: Callable[[bool], None]) -> None:
        """Ask the user for access and report the answer to ``callback``.

        Only meaningful while the status is ``undetermined``; the callback
        receives True when access was granted.
        """


class BaseAudioCapture(ABC):
    """Interface that every audio capture backend must implement."""

    @property
    @abstractmethod
    def permission(self) -> RecordPermission:
        """Current microphone permission."""

    @abstractmethod
    def request_permission(self, callback: Callable[[bool], None]) -> None:
        """Forward a one-shot permission request to the permission provider."""

    @abstractmethod
    def prepare_session(self) -> None:
        """Make the backend ready to record.

        Raises:
            AudioSessionError: If the session cannot be activated.
        """

    @property
    @abstractmethod
    def is_recording(self) -> bool:
        """True between ``start`` and ``stop``."""

    @abstractmethod
    def start(self) -> Path:
        """Begin capturing to a new clip.

        Returns:
            Path of the clip, fixed at start time.

        Raises:
            RecordingAlreadyActiveError: If a capture is already running.
            AudioSessionError: If the clip cannot be opened.
        """

    @abstractmethod
    def write(self, pcm_data: bytes) -> None:
        """Append raw 16-bit PCM frames to the active clip."""

    @abstractmethod
    def stop(self) -> Path | None:
        """Finish the active clip; a no-op returning None when idle."""

"""File-backed audio capture.

Writes 16-bit PCM pushed by the caller into a Core Audio Format (``.caf``)
file through soundfile. Each clip is named after its ISO-8601 start time.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import soundfile as sf

from experiences.core.exceptions import AudioSessionError, RecordingAlreadyActiveError
from experiences.core.models import RecordPermission
from experiences.services.audio.base import BaseAudioCapture, PermissionProvider
from experiences.services.audio.processor import AudioProcessor

logger = logging.getLogger(__name__)


def recording_filename(moment: datetime, extension: str = "caf") -> str:
    """Return ``<ISO-8601 timestamp with UTC offset>.<extension>``."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return f"{moment.isoformat(timespec='seconds')}.{extension}"


class FileAudioCapture(BaseAudioCapture):
    """Records pushed PCM frames to one audio file per clip.

    Args:
        recordings_dir: Directory clips are created in.
        permissions: Microphone permission provider.
        sample_rate: Clip sample rate in Hz.
        channels: Clip channel count.
        file_format: libsndfile major format (``"CAF"``).
        subtype: libsndfile sample encoding (``"PCM_16"``).
        extension: File extension for new clips.
        clock: Returns the current time; used to name clips.
    """

    def __init__(
        self,
        recordings_dir: str | Path,
        permissions: PermissionProvider,
        sample_rate: int = 44100,
        channels: int = 1,
        file_format: str = "CAF",
        subtype: str = "PCM_16",
        extension: str = "caf",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._recordings_dir = Path(recordings_dir)
        self._permissions = permissions
        self._sample_rate = sample_rate
        self._channels = channels
        self._format = file_format
        self._subtype = subtype
        self._extension = extension
        self._clock = clock or (lambda: datetime.now().astimezone())
        self._processor = AudioProcessor(sample_rate=sample_rate, channels=channels)
        self._file: sf.SoundFile | None = None
        self._path: Path | None = None

    @property
    def permission(self) -> RecordPermission:
        return self._permissions.status

    def request_permission(self, callback: Callable[[bool], None]) -> None:
        self._permissions.request(callback)

    @property
    def is_recording(self) -> bool:
        return self._file is not None

    @property
    def recording_path(self) -> Path | None:
        """Path of the current or most recent clip."""
        return self._path

    def prepare_session(self) -> None:
        if not sf.check_format(self._format, self._subtype):
            raise AudioSessionError(
                f"Unsupported audio format: {self._format}/{self._subtype}"
            )
        try:
            self._recordings_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise AudioSessionError(f"Recordings directory unavailable: {exc}") from exc

    def new_recording_path(self) -> Path:
        name = recording_filename(self._clock(), self._extension)
        return self._recordings_dir / name

    def start(self) -> Path:
        if self.is_recording:
            raise RecordingAlreadyActiveError()

        path = self.new_recording_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = sf.SoundFile(
                str(path),
                mode="w",
                samplerate=self._sample_rate,
                channels=self._channels,
                format=self._format,
                subtype=self._subtype,
            )
        except (RuntimeError, OSError) as exc:
            raise AudioSessionError(f"Could not open {path.name}: {exc}") from exc

        self._path = path
        logger.info("Recording started: %s", path)
        return path

    def write(self, pcm_data: bytes) -> None:
        if self._file is None:
            raise AudioSessionError("No active recording to write to")
        try:
            self._file.write(self._processor.pcm_to_ndarray(pcm_data))
        except (RuntimeError, ValueError) as exc:
            logger.error("Error recording: %s", exc)
            self.stop()
            raise AudioSessionError(f"Error recording: {exc}") from exc

    def stop(self) -> Path | None:
        if self._file is None:
            return None
        self._file.close()
        self._file = None
        logger.info("Recording stopped: %s", self._path)
        return self._path

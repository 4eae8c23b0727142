"""Audio processing utilities for PCM data.

Converts between raw 16-bit PCM bytes, numpy sample arrays, and encoded
audio files (WAV, CAF, ...) read through soundfile.
"""

import io

import numpy as np
import soundfile as sf


class AudioProcessor:
    """Handles PCM audio data conversion.

    Provides utilities for converting raw PCM bytes to numpy arrays and for
    decoding uploaded audio into PCM at the capture format.
    """

    def __init__(
        self,
        sample_rate: int = 44100,
        sample_width: int = 2,
        channels: int = 1,
    ) -> None:
        """Initialize the audio processor.

        Args:
            sample_rate: Audio sample rate in Hz (default: 44.1 kHz).
            sample_width: Bytes per sample (2 = 16-bit signed PCM).
            channels: Number of audio channels (1 = mono).
        """
        self.sample_rate = sample_rate
        self.sample_width = sample_width
        self.channels = channels

    def pcm_to_ndarray(self, pcm_data: bytes) -> np.ndarray:
        """Convert raw PCM bytes (16-bit signed) to a float32 numpy array.

        Args:
            pcm_data: Raw interleaved PCM bytes.

        Returns:
            Float32 array normalized to [-1.0, 1.0], shaped ``(frames,)`` for
            mono or ``(frames, channels)`` otherwise.

        Raises:
            ValueError: If data length is not aligned to sample frame size.
        """
        frame_size = self.sample_width * self.channels
        if len(pcm_data) % frame_size != 0:
            raise ValueError(
                f"PCM data length ({len(pcm_data)}) is not aligned to frame size ({frame_size})"
            )
        # Convert 16-bit signed integers to float32 in [-1.0, 1.0] range
        samples = np.frombuffer(pcm_data, dtype=np.int16).astype(np.float32) / 32768.0
        if self.channels > 1:
            samples = samples.reshape(-1, self.channels)
        return samples

    def decode_to_pcm(self, audio_bytes: bytes) -> bytes:
        """Decode an encoded audio file and return PCM int16 at this format.

        Downmixes to mono when the processor is mono and linearly resamples
        to ``sample_rate`` when the source rate differs.

        Raises:
            ValueError: If the bytes are not a readable audio file.
        """
        try:
            data, source_rate = sf.read(io.BytesIO(audio_bytes), dtype="float32")
        except (RuntimeError, TypeError) as exc:
            raise ValueError(f"Unreadable audio data: {exc}") from exc

        if data.ndim > 1 and self.channels == 1:
            data = data.mean(axis=1)

        if source_rate != self.sample_rate and len(data) > 0:
            duration = len(data) / source_rate
            num_samples = int(duration * self.sample_rate)
            indices = np.linspace(0, len(data) - 1, num_samples)
            data = np.interp(indices, np.arange(len(data)), data)

        pcm = (data * 32767).clip(-32768, 32767).astype(np.int16)
        return pcm.tobytes()

    def to_wav_bytes(self, path) -> bytes:
        """Re-encode a recorded clip as 16-bit WAV for browser playback.

        Browsers other than Safari cannot play CAF, so the review page
        plays a WAV copy while the hand-off keeps the original clip path.

        Args:
            path: Path of any soundfile-readable clip.

        Returns:
            WAV file bytes at the clip's own sample rate and channel count.

        Raises:
            ValueError: If the clip cannot be read.
        """
        try:
            data, sample_rate = sf.read(path, dtype="int16")
        except (RuntimeError, OSError) as exc:
            raise ValueError(f"Unreadable audio clip {path}: {exc}") from exc

        buffer = io.BytesIO()
        sf.write(buffer, data, sample_rate, format="WAV", subtype="PCM_16")
        return buffer.getvalue()

"""Shared pytest fixtures for the Experiences test suite.

Provides synthetic Pillow images (plain, EXIF-rotated, truncated), PCM
audio buffers, and settings isolation used across unit and integration tests.
"""

import io
import math
import struct

import pytest
from PIL import Image

from experiences.core.config import get_settings

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Re-read settings in every test so env overrides do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Image Fixtures
# ---------------------------------------------------------------------------


def _two_tone(size: tuple[int, int]) -> Image.Image:
    """Red left half, blue right half, so rotations are visible."""
    width, height = size
    image = Image.new("RGB", size, (0, 0, 255))
    image.paste((255, 0, 0), (0, 0, width // 2, height))
    return image


@pytest.fixture
def landscape_image():
    """A 300x200 (aspect 1.5) RGB image."""
    return _two_tone((300, 200))


@pytest.fixture
def portrait_image():
    """A 200x400 (aspect 0.5) RGB image."""
    return _two_tone((200, 400))


@pytest.fixture
def jpeg_bytes():
    """A 64x48 JPEG encoded in memory."""
    buf = io.BytesIO()
    _two_tone((64, 48)).save(buf, format="JPEG")
    return buf.getvalue()


@pytest.fixture
def rotated_image():
    """A 40x20 JPEG tagged with EXIF orientation 6 (rotate 90 CW to display)."""
    exif = Image.Exif()
    exif[0x0112] = 6
    buf = io.BytesIO()
    _two_tone((40, 20)).save(buf, format="JPEG", exif=exif.tobytes())
    buf.seek(0)
    return Image.open(buf)


@pytest.fixture
def truncated_jpeg_bytes():
    """JPEG bytes cut short after the header so pixel decoding fails."""
    gradient = Image.linear_gradient("L").convert("RGB")
    buf = io.BytesIO()
    gradient.save(buf, format="JPEG", quality=95)
    data = buf.getvalue()
    return data[: len(data) // 2]


# ---------------------------------------------------------------------------
# Audio Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_pcm_bytes():
    """Generate 1 second of 440Hz sine-wave PCM audio (44.1kHz, 16-bit, mono).

    Returns:
        bytes: Raw PCM audio data.
    """
    sample_rate = 44100
    frequency = 440.0
    amplitude = 16000  # ~50% of max int16

    samples = []
    for i in range(sample_rate):
        value = int(amplitude * math.sin(2 * math.pi * frequency * i / sample_rate))
        samples.append(struct.pack("<h", value))
    return b"".join(samples)


@pytest.fixture
def silent_pcm_bytes():
    """1 second of silence as PCM audio (44.1kHz, 16-bit, mono)."""
    return b"\x00\x00" * 44100

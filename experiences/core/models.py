"""
Pydantic v2 models shared across the image, audio, and screen layers.
"""

from enum import StrEnum
from pathlib import Path

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Image
# ---------------------------------------------------------------------------


class BoundingBox(BaseModel):
    """Target width x height an image must be fitted into (in pixels).

    Non-positive dimensions are representable so that a degenerate viewport
    can be rejected by the scaler with ``InvalidTargetError``.
    """

    model_config = ConfigDict(frozen=True)

    width: float
    height: float

    @classmethod
    def from_viewport(cls, width: float, height: float, scale: float = 1.0) -> "BoundingBox":
        """Build a pixel box from a viewport size in points and a pixel density."""
        return cls(width=width * scale, height=height * scale)

    @property
    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0


# ---------------------------------------------------------------------------
# Audio
# ---------------------------------------------------------------------------


class RecordPermission(StrEnum):
    """Microphone permission states reported by a permission provider."""

    undetermined = "undetermined"
    denied = "denied"
    granted = "granted"


# ---------------------------------------------------------------------------
# Hand-off
# ---------------------------------------------------------------------------


class ExperienceHandOff(BaseModel):
    """Record passed by value to the next screen when *Next* is accepted."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    caption: str = Field(min_length=1)
    image: Image.Image | None = None
    audio_clip: Path | None = None

"""
Abstract base class for media pickers.

A picker hands back a decoded image chosen by the user, or ``CANCELLED``
when the user backed out. The compose screen never overwrites its current
image on cancel.
"""

from abc import ABC, abstractmethod
from enum import Enum

from PIL import Image


class PickCancelled(Enum):
    """Sentinel returned when the user dismisses the picker."""

    token = "cancelled"


CANCELLED = PickCancelled.token

PickResult = Image.Image | PickCancelled


class BaseMediaPicker(ABC):
    """Interface that every media picker must implement."""

    @abstractmethod
    def is_available(self) -> bool:
        """True when the picker's source can be presented."""

    @abstractmethod
    def pick(self) -> PickResult:
        """Present the source and return the chosen image or ``CANCELLED``.

        Raises:
            DecodeFailureError: If the selection is not a decodable image.
        """

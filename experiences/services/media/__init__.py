"""
Media module - image pickers.

Factory function for creating a picker based on the source type.
"""

from .base import CANCELLED, BaseMediaPicker, PickCancelled, PickResult
from .pickers import FileMediaPicker, UploadMediaPicker

__all__ = [
    "CANCELLED",
    "BaseMediaPicker",
    "FileMediaPicker",
    "PickCancelled",
    "PickResult",
    "UploadMediaPicker",
    "create_media_picker",
]


def create_media_picker(source: str, **kwargs) -> BaseMediaPicker:
    """
    Factory function to create a media picker.

    Args:
        source: Picker source ("library", "upload")
        **kwargs: Picker-specific configuration

    Returns:
        BaseMediaPicker implementation instance

    Raises:
        ValueError: If source is unknown
    """
    if source == "library":
        if "media_dir" not in kwargs:
            from experiences.core.config import get_settings

            kwargs["media_dir"] = get_settings().media_dir
        return FileMediaPicker(**kwargs)
    elif source == "upload":
        return UploadMediaPicker(**kwargs)
    else:
        raise ValueError(f"Unknown media source: {source}")

"""
Audio module - capture backends, permissions, and PCM utilities.

Factory function for creating the capture backend from settings.
"""

from .base import BaseAudioCapture, PermissionProvider
from .capture import FileAudioCapture
from .permissions import StaticPermissionProvider
from .processor import AudioProcessor

__all__ = [
    "AudioProcessor",
    "BaseAudioCapture",
    "FileAudioCapture",
    "PermissionProvider",
    "StaticPermissionProvider",
    "create_audio_capture",
]


def create_audio_capture(
    provider: str = "file",
    permissions: PermissionProvider | None = None,
    **kwargs,
) -> BaseAudioCapture:
    """
    Factory function to create an audio capture backend.

    Args:
        provider: Capture backend name ("file")
        permissions: Permission provider; defaults to an undetermined in-memory one
        **kwargs: Overrides for the settings-derived constructor arguments

    Returns:
        BaseAudioCapture implementation instance

    Raises:
        ValueError: If provider is unknown
    """
    if provider == "file":
        from experiences.core.config import get_settings

        settings = get_settings()
        options = {
            "recordings_dir": settings.recordings_dir,
            "sample_rate": settings.audio_sample_rate,
            "channels": settings.audio_channels,
            "file_format": settings.audio_format,
            "subtype": settings.audio_subtype,
            "extension": settings.audio_extension,
        }
        options.update(kwargs)
        return FileAudioCapture(
            permissions=permissions or StaticPermissionProvider(),
            **options,
        )
    else:
        raise ValueError(f"Unknown audio capture provider: {provider}")

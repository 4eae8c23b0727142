"""
Application configuration via pydantic-settings.

Loads values from .env file with sensible defaults for local development.
Use ``get_settings()`` to obtain the cached singleton instance.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from experiences.core.models import RecordPermission


class Settings(BaseSettings):
    """Experiences settings loaded from environment / .env file.

    All settings can be overridden via environment variables or a `.env` file.
    Field names map directly to env var names (case-insensitive).

    Attributes:
        recordings_dir: Directory new audio clips are written to.
        display_scale: Device pixel density (1x, 2x, 3x) applied to the viewport.
        resample_filter: Pillow resampling filter used when fitting images.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore unrecognized env vars
    )

    # --- Audio capture ---
    # 44.1 kHz mono PCM in a Core Audio Format container
    audio_sample_rate: int = 44100
    audio_channels: int = 1
    audio_format: str = "CAF"  # libsndfile major format
    audio_subtype: str = "PCM_16"
    audio_extension: str = "caf"

    # --- Display ---
    # Image view bounds in points; multiplied by display_scale for pixels
    display_width: float = 375.0
    display_height: float = 300.0
    display_scale: float = 2.0
    resample_filter: str = "bilinear"  # nearest, bilinear, bicubic, lanczos

    # Shown (through the grayscale filter) when no photo was picked
    placeholder_image_path: str = ""

    # --- Media ---
    media_dir: str = "data/media"  # Source directory for the file picker

    # --- Application ---
    log_level: str = "INFO"  # Python logging level
    settings_url: str = "app-settings:"  # Opened from the microphone-denied dialog
    # Initial state of the in-process permission provider; the browser asks for
    # the microphone before st.audio_input hands over a clip
    microphone_permission: RecordPermission = RecordPermission.granted

    # --- Storage ---
    recordings_dir: str = "data/recordings"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    Subsequent calls return the same ``Settings`` instance.

    Returns:
        Settings: The application-wide configuration object.
    """
    return Settings()

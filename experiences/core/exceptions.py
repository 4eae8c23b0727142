"""
Experiences exception hierarchy.

All application-specific exceptions inherit from ExperiencesError so the
screen controller and UI can handle every local failure in one place.
None of them is fatal to the screen.
"""

from datetime import UTC, datetime


class ExperiencesError(Exception):
    """Base exception for all Experiences errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "EXPERIENCES_ERROR",
    ) -> None:
        self.detail = detail
        self.code = code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class InvalidTargetError(ExperiencesError):
    """Raised when a bounding box has a non-positive width or height."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__(
            detail=f"Invalid target size: {width}x{height}",
            code="INVALID_TARGET",
        )
        self.width = width
        self.height = height


class DecodeFailureError(ExperiencesError):
    """Raised when no processable pixel buffer can be obtained from an image."""

    def __init__(self, detail: str = "Image could not be decoded") -> None:
        super().__init__(detail=detail, code="DECODE_FAILURE")


class PermissionDeniedError(ExperiencesError):
    """Raised when microphone access has been blocked by the user.

    Carries the prompt shown to the user, who may open system settings.
    """

    def __init__(
        self,
        title: str = "Microphone Access Denied",
        message: str = "Please allow this app to access your Microphone.",
        settings_url: str = "",
    ) -> None:
        super().__init__(detail=message, code="PERMISSION_DENIED")
        self.title = title
        self.message = message
        self.settings_url = settings_url


class RecordingAlreadyActiveError(ExperiencesError):
    """Raised when trying to start a recording while one is already active."""

    def __init__(self) -> None:
        super().__init__(
            detail="A recording is already active",
            code="RECORDING_ALREADY_ACTIVE",
        )


class AudioSessionError(ExperiencesError):
    """Raised when the audio session cannot be prepared or a clip cannot be written."""

    def __init__(self, detail: str = "Audio session could not be prepared") -> None:
        super().__init__(detail=detail, code="AUDIO_SESSION_ERROR")

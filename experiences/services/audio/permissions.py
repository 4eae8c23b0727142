"""In-process microphone permission provider."""

import logging
from collections.abc import Callable

from experiences.core.models import RecordPermission
from experiences.services.audio.base import PermissionProvider

logger = logging.getLogger(__name__)


class StaticPermissionProvider(PermissionProvider):
    """Permission state held in memory.

    Used where access is decided outside this process (e.g. the browser
    already asked for the microphone) and in tests.

    Args:
        status: Initial state.
        grant_on_request: Answer given when an ``undetermined`` request is made.
    """

    def __init__(
        self,
        status: RecordPermission = RecordPermission.undetermined,
        grant_on_request: bool = True,
    ) -> None:
        self._status = status
        self._grant_on_request = grant_on_request

    @property
    def status(self) -> RecordPermission:
        return self._status

    def request(self, callback: Callable[[bool], None]) -> None:
        if self._status == RecordPermission.undetermined:
            self._status = (
                RecordPermission.granted if self._grant_on_request else RecordPermission.denied
            )
            logger.info("Microphone permission resolved: %s", self._status)
        callback(self._status == RecordPermission.granted)

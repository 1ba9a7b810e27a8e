from __future__ import annotations
import logging
from typing import List, Optional

from beacon.domain.ports import CrashReporterPort


class LoggingCrashReporter(CrashReporterPort):
    """Crash sink that logs unrecoverable errors with their traceback."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self.reports: List[BaseException] = []

    @property
    def last_report(self) -> Optional[BaseException]:
        return self.reports[-1] if self.reports else None

    def report(self, error: BaseException) -> None:
        self.reports.append(error)
        self._log.critical(
            "Unrecoverable error: %s",
            error,
            exc_info=(type(error), error, error.__traceback__),
        )

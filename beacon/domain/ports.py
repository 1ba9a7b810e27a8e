from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from .entities import Project, ProjectModel


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta


# ---- Ports (Hexagonal boundaries) ----
class BackendPort(Protocol):
    """Server-assisted persistence path owned by the application backend."""

    def save_project(self, model: ProjectModel) -> Project: ...  # may raise OSError


class ExporterPort(Protocol):
    """Hands a backend-saved project to the user for manual transfer."""

    def open_for_project(self, project: Project) -> None: ...


class DirectoryChooserPort(Protocol):
    """Native directory picker; returns None when the user cancels."""

    def choose(self) -> Optional[Path]: ...


class ImportWatcherPort(Protocol):
    """Starts watching a project file's directory for incoming pledge files."""

    def register_file(self, path: Path) -> None: ...  # may raise OSError


class CrashReporterPort(Protocol):
    """Terminal sink for unrecoverable failures."""

    def report(self, error: BaseException) -> None: ...


class NoticePort(Protocol):
    """One-shot informational message shown to the user."""

    def inform(self, title: str, message: str) -> None: ...

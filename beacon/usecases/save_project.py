from __future__ import annotations

"""Persist a project along the path its descriptor selects."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Literal, Optional

from ..domain.entities import (
    DecentralizedDescriptor,
    Project,
    ProjectModel,
    ServerAssistedDescriptor,
    classify_descriptor,
)
from ..domain.errors import FatalPersistError
from ..domain.ports import (
    BackendPort,
    CrashReporterPort,
    DirectoryChooserPort,
    ExporterPort,
    ImportWatcherPort,
    NoticePort,
)
from ..utils.project_files import project_file_path, write_project_file
from .error_mapping import map_save_error

FOLDER_WATCH_TITLE = "Folder watching"
FOLDER_WATCH_MESSAGE = (
    "The folder to which you save your project file will be watched for pledge files. "
    "When you receive them from backers, just put them in the same directory and they will appear."
)

SaveKind = Literal["exported", "watched", "cancelled"]


def _noop() -> None:
    """Default hook."""


@dataclass(frozen=True)
class SaveOutcome:
    """Result of one save attempt."""

    kind: SaveKind
    project: Optional[Project] = None
    path: Optional[Path] = None

    @property
    def cancelled(self) -> bool:
        return self.kind == "cancelled"


class SaveProject:
    """Save a resolved project model, either via the backend or into a watched folder.

    Server-assisted descriptors go through ``backend.save_project`` and are
    then handed to the exporter. Decentralized descriptors are written to a
    user-chosen directory which is then registered for pledge-file watching.

    Error Cases:
        Backend failures raise ``RecoverableSaveError`` with the root cause.
        Write or registration failures are reported to the crash reporter and
        raised as ``FatalPersistError``.
    """

    def __init__(
        self,
        *,
        backend: BackendPort,
        exporter: ExporterPort,
        chooser: DirectoryChooserPort,
        import_watcher: ImportWatcherPort,
        crash_reporter: CrashReporterPort,
        notice: NoticePort,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.backend = backend
        self.exporter = exporter
        self.chooser = chooser
        self.import_watcher = import_watcher
        self.crash_reporter = crash_reporter
        self.notice = notice

    def __call__(
        self,
        model: ProjectModel,
        *,
        before_write: Callable[[], None] = _noop,
    ) -> SaveOutcome:
        """Run one save attempt for ``model``.

        Args:
            model: Project model already synced by ``ResolveDistributionMode``.
            before_write: Called after a directory was chosen and before the
                project file is written (the dialog closes here).
        """
        details = model.build_details()
        self._log.info("Saving: %s", details.title)
        descriptor = classify_descriptor(details)

        if isinstance(descriptor, ServerAssistedDescriptor):
            return self._save_server_assisted(model)
        if isinstance(descriptor, DecentralizedDescriptor):
            return self._save_decentralized(model, before_write)
        raise TypeError(f"Unknown descriptor variant: {type(descriptor).__name__}")

    # ------------------------------------------------------------------
    def _save_server_assisted(self, model: ProjectModel) -> SaveOutcome:
        # The user exports the file themselves so it can reach the server; it is not watched.
        self._log.debug("Server-assisted project, saving through backend")
        try:
            project = self.backend.save_project(model)
        except Exception as exc:
            self._log.exception("Could not save project")
            raise map_save_error(exc) from exc
        self.exporter.open_for_project(project)
        return SaveOutcome(kind="exported", project=project)

    def _save_decentralized(
        self, model: ProjectModel, before_write: Callable[[], None]
    ) -> SaveOutcome:
        self.notice.inform(FOLDER_WATCH_TITLE, FOLDER_WATCH_MESSAGE)
        # Ask for the directory first, then build the project.
        directory = self.chooser.choose()
        if directory is None:
            self._log.debug("Directory selection cancelled, nothing saved")
            return SaveOutcome(kind="cancelled")

        project = Project.from_model(model)
        before_write()
        path = project_file_path(Path(directory), project)
        self.save_and_watch(project, path)
        return SaveOutcome(kind="watched", project=project, path=path)

    def save_and_watch(self, project: Project, path: Path) -> None:
        """Write ``project`` to ``path`` and register it for pledge watching."""
        try:
            write_project_file(path, project)
            self._log.info("Wrote project file %s", path)
            self.import_watcher.register_file(path)
        except Exception as exc:
            error = FatalPersistError(f"Could not save project to {path}: {exc}", path=path)
            self.crash_reporter.report(error)
            raise error from exc


__all__ = ["FOLDER_WATCH_MESSAGE", "FOLDER_WATCH_TITLE", "SaveOutcome", "SaveProject"]

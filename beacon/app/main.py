# beacon/app/main.py
from __future__ import annotations
import logging
import tkinter as tk
from tkinter import messagebox
from typing import Callable, Optional

# ---- Views (UI-only) ----
from .views.dialogs import TkCrashReporter, TkDirectoryChooser, TkExporter, TkNotice

# ---- ViewModels ----
from ..viewmodels.project_type_vm import ProjectTypeVM

# ---- UseCases & Adapters ----
from ..usecases.save_project import SaveProject
from ..adapters.local_backend import LocalBackend
from ..adapters.watch_registry import DirectoryWatchRegistry
from ..domain.entities import ProjectModel
from .project_type_controller import ProjectTypeController
from .settings import AppSettings, load_settings
from .task_scheduler import TaskScheduler
from ..utils import logging as logging_utils

_log = logging.getLogger(__name__)


def create_project_type_controller(
    root: tk.Misc,
    model: ProjectModel,
    *,
    editing: bool = False,
    settings: Optional[AppSettings] = None,
    show_field_prompt: Optional[Callable[[str], None]] = None,
    on_done: Optional[Callable[[], None]] = None,
    on_back: Optional[Callable[[ProjectModel, bool], None]] = None,
) -> ProjectTypeController:
    """Wire the project type dialog: Tk dialogs, local adapters, and use-cases."""
    settings = settings or load_settings()
    logging_utils.configure_root(settings.effective_log_level)

    backend = LocalBackend(root_dir=settings.storage_root)
    notice = TkNotice(root)
    uc_save = SaveProject(
        backend=backend,
        exporter=TkExporter(backend.path_for, root),
        chooser=TkDirectoryChooser(root),
        import_watcher=DirectoryWatchRegistry(root_dir=settings.storage_root),
        crash_reporter=TkCrashReporter(root),
        notice=notice,
    )
    vm = ProjectTypeVM(known_servers=settings.known_servers, editing=editing)
    if show_field_prompt is None:
        def show_field_prompt(message: str) -> None:
            messagebox.showwarning(vm.title, message, parent=root)

    controller = ProjectTypeController(
        model=model,
        vm=vm,
        scheduler=TaskScheduler(root.after, root.after_cancel),
        uc_save=uc_save,
        notice=notice,
        show_field_prompt=show_field_prompt,
        on_done=on_done or (lambda: None),
        on_back=on_back or (lambda _model, _editing: None),
    )
    _log.debug("Project type dialog wired (storage root %s)", settings.storage_root)
    return controller


"""Tk implementations of the dialog-facing ports.

These are thin wrappers over ``tkinter.filedialog`` and ``tkinter.messagebox``;
the decision logic lives in the use-cases.
"""

from __future__ import annotations

import logging
import shutil
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox
from typing import Callable, Optional

from beacon.adapters.crash_reporter import LoggingCrashReporter
from beacon.domain.entities import PROJECT_FILE_EXTENSION, Project

CHOOSER_TITLE = "Select a directory to store the project and pledges"


class TkNotice:
    def __init__(self, parent: Optional[tk.Misc] = None) -> None:
        self.parent = parent

    def inform(self, title: str, message: str) -> None:
        messagebox.showinfo(title, message, parent=self.parent)


class TkDirectoryChooser:
    """Native directory picker; ``None`` when the user cancels."""

    def __init__(self, parent: Optional[tk.Misc] = None, initial_dir: Optional[str] = None) -> None:
        self.parent = parent
        self.initial_dir = initial_dir

    def choose(self) -> Optional[Path]:
        chosen = filedialog.askdirectory(
            parent=self.parent,
            title=CHOOSER_TITLE,
            initialdir=self.initial_dir,
            mustexist=True,
        )
        if not chosen:
            return None
        self.initial_dir = chosen
        return Path(chosen)


class TkExporter:
    """Let the user copy a backend-saved project file somewhere for manual transfer."""

    def __init__(self, source_for: Callable[[Project], Path], parent: Optional[tk.Misc] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.source_for = source_for
        self.parent = parent

    def open_for_project(self, project: Project) -> None:
        target = filedialog.asksaveasfilename(
            parent=self.parent,
            title="Export project file",
            initialfile=project.suggested_file_name,
            defaultextension=PROJECT_FILE_EXTENSION,
        )
        if not target:
            return
        try:
            shutil.copyfile(self.source_for(project), target)
        except OSError as exc:
            self._log.exception("Export failed")
            messagebox.showerror("Export failed", str(exc), parent=self.parent)
            return
        self._log.info("Exported %s to %s", project.title, target)


class TkCrashReporter(LoggingCrashReporter):
    """Logs the crash and tells the user the application state cannot be trusted."""

    def __init__(self, parent: Optional[tk.Misc] = None) -> None:
        super().__init__()
        self.parent = parent

    def report(self, error: BaseException) -> None:
        super().report(error)
        messagebox.showerror(
            "Unexpected error",
            f"{error}\n\nThe project may not receive pledges. Please restart the application.",
            parent=self.parent,
        )

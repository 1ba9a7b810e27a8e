"""UI-facing controller for the project type dialog.

This module maps save/cancel button events from the view into the mode
resolution and save use-cases. It contains orchestration only.
"""

from __future__ import annotations


import logging
from typing import Callable, Optional

from beacon.app.task_scheduler import TaskScheduler
from beacon.domain.entities import ProjectModel
from beacon.domain.errors import RecoverableSaveError, ValidationError
from beacon.domain.ports import NoticePort
from beacon.usecases.resolve_mode import ResolveDistributionMode
from beacon.usecases.save_project import SaveOutcome, SaveProject
from beacon.viewmodels.project_type_vm import ProjectTypeVM

SAVE_TASK_KEY = "save"
SAVE_FAILED_TITLE = "Could not save project"


def _noop(*_: object, **__: object) -> None:
    """Default no-op callback used for hooks."""


class ProjectTypeController:
    """Coordinate validation and saving for the project type dialog."""

    def __init__(
        self,
        *,
        model: ProjectModel,
        vm: ProjectTypeVM,
        scheduler: TaskScheduler,
        uc_save: SaveProject,
        notice: NoticePort,
        show_field_prompt: Callable[[str], None],
        on_done: Callable[[], None] = _noop,
        on_back: Callable[[ProjectModel, bool], None] = _noop,
    ) -> None:
        """Initialize controller dependencies.

        Args:
            model: Project model owned by this dialog session.
            vm: Form state for the radio buttons and server combo.
            scheduler: Defers save work to the next event-loop turn.
            uc_save: Save use-case.
            notice: Used for save failure alerts.
            show_field_prompt: Shows a message next to the server field.
            on_done: Called when the dialog should close.
            on_back: Called with ``(model, editing)`` to return to the edit screen.
        """
        self._log = logging.getLogger(__name__)
        self.model = model
        self.vm = vm
        self.scheduler = scheduler
        self.uc_resolve = ResolveDistributionMode(model)
        self.uc_save = uc_save
        self.notice = notice
        self.show_field_prompt = show_field_prompt
        self.on_done = on_done
        self.on_back = on_back
        self.last_outcome: Optional[SaveOutcome] = None
        self.vm.load_from_model(model)

    def save_clicked(self) -> None:
        """Queue a save attempt; never runs inside the triggering event."""
        self.scheduler.defer(SAVE_TASK_KEY, self._save)

    def cancel_clicked(self) -> None:
        self.scheduler.cancel_all()
        self.on_back(self.model, self.vm.editing)

    def validate_and_sync(self) -> bool:
        """Resolve the selected mode into the model; prompt on the field if invalid."""
        try:
            self.uc_resolve(self.vm.selected_mode, self.vm.server_name)
        except ValidationError as exc:
            self.show_field_prompt(exc.message)
            return False
        return True

    def _close(self) -> None:
        self.scheduler.cancel_all()
        self.on_done()

    def _save(self) -> None:
        if not self.validate_and_sync():
            return
        try:
            outcome = self.uc_save(self.model, before_write=self._close)
        except RecoverableSaveError as exc:
            self.notice.inform(SAVE_FAILED_TITLE, exc.message)
            return
        self.last_outcome = outcome
        if outcome.kind == "exported":
            self._close()
        elif outcome.cancelled:
            self._log.info("Save cancelled by user")


__all__ = ["ProjectTypeController"]

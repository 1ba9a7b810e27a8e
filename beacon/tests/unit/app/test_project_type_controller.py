from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pytest

from beacon.adapters.crash_reporter import LoggingCrashReporter
from beacon.adapters.local_backend import LocalBackend
from beacon.adapters.watch_registry import DirectoryWatchRegistry
from beacon.app.project_type_controller import ProjectTypeController
from beacon.app.task_scheduler import TaskScheduler
from beacon.domain.entities import DistributionMode, ProjectModel
from beacon.domain.errors import FatalPersistError, RecoverableSaveError
from beacon.usecases.save_project import SaveOutcome, SaveProject
from beacon.viewmodels.project_type_vm import ProjectTypeVM
from beacon.tests.unit.app.helpers import FakeLoop


class _SaveStub:
    def __init__(self, outcome: Optional[SaveOutcome] = None, error: Optional[Exception] = None) -> None:
        self.outcome = outcome or SaveOutcome(kind="exported")
        self.error = error
        self.calls: List[ProjectModel] = []

    def __call__(self, model, *, before_write=lambda: None):
        self.calls.append(model)
        if self.error is not None:
            raise self.error
        return self.outcome


class _NoticeRecorder:
    def __init__(self) -> None:
        self.messages: List[tuple] = []

    def inform(self, title: str, message: str) -> None:
        self.messages.append((title, message))


class _Dialog:
    """Collects controller callbacks."""

    def __init__(self) -> None:
        self.prompts: List[str] = []
        self.done = 0
        self.back: List[tuple] = []

    def show_field_prompt(self, message: str) -> None:
        self.prompts.append(message)

    def on_done(self) -> None:
        self.done += 1

    def on_back(self, model, editing) -> None:
        self.back.append((model, editing))


def _controller(model: ProjectModel, uc_save, *, editing: bool = False):
    loop = FakeLoop()
    dialog = _Dialog()
    notice = _NoticeRecorder()
    controller = ProjectTypeController(
        model=model,
        vm=ProjectTypeVM(known_servers=["example.com"], editing=editing),
        scheduler=TaskScheduler(loop.after, loop.after_cancel),
        uc_save=uc_save,
        notice=notice,
        show_field_prompt=dialog.show_field_prompt,
        on_done=dialog.on_done,
        on_back=dialog.on_back,
    )
    return controller, loop, dialog, notice


def test_vm_preselects_server_assisted_from_model():
    controller, _, _, _ = _controller(ProjectModel(server_name="example.com"), _SaveStub())

    assert controller.vm.selected_mode is DistributionMode.SERVER_ASSISTED
    assert controller.vm.server_name == "example.com"
    assert controller.vm.server_field_enabled


def test_vm_defaults_to_decentralized():
    controller, _, _, _ = _controller(ProjectModel(server_name=""), _SaveStub())

    assert controller.vm.selected_mode is DistributionMode.DECENTRALIZED
    assert not controller.vm.server_field_enabled
    assert controller.vm.title == "Select type"


def test_save_click_is_deferred_to_the_loop():
    uc_save = _SaveStub()
    controller, loop, dialog, _ = _controller(ProjectModel(server_name="example.com"), uc_save)

    controller.save_clicked()
    controller.save_clicked()

    assert uc_save.calls == []
    loop.run_pending()
    assert len(uc_save.calls) == 1
    assert dialog.done == 1


def test_missing_server_name_prompts_and_skips_save():
    uc_save = _SaveStub()
    model = ProjectModel(server_name=None)
    controller, loop, dialog, _ = _controller(model, uc_save)
    controller.vm.select_mode(DistributionMode.SERVER_ASSISTED)
    controller.vm.set_server_name("")

    controller.save_clicked()
    loop.run_pending()

    assert dialog.prompts == ["You must pick a server."]
    assert uc_save.calls == []
    assert model.server_name is None


def test_invalid_server_name_prompts():
    uc_save = _SaveStub()
    controller, loop, dialog, _ = _controller(ProjectModel(), uc_save)
    controller.vm.select_mode(DistributionMode.SERVER_ASSISTED)
    controller.vm.set_server_name("203.0.113.5")

    controller.save_clicked()
    loop.run_pending()

    assert dialog.prompts == ["The server name is not considered valid."]
    assert uc_save.calls == []


def test_recoverable_error_shows_alert_and_allows_retry():
    uc_save = _SaveStub(error=RecoverableSaveError("An error was encountered: disk full"))
    controller, loop, dialog, notice = _controller(ProjectModel(server_name="example.com"), uc_save)

    controller.save_clicked()
    loop.run_pending()

    assert notice.messages == [("Could not save project", "An error was encountered: disk full")]
    assert dialog.done == 0

    uc_save.error = None
    controller.save_clicked()
    loop.run_pending()
    assert dialog.done == 1


def test_fatal_error_escapes_the_controller():
    uc_save = _SaveStub(error=FatalPersistError("Could not save project"))
    controller, loop, _, _ = _controller(ProjectModel(server_name=""), uc_save)

    controller.save_clicked()
    with pytest.raises(FatalPersistError):
        loop.run_pending()


def test_cancel_returns_to_edit_screen_and_drops_pending_save():
    uc_save = _SaveStub()
    model = ProjectModel()
    controller, loop, dialog, _ = _controller(model, uc_save, editing=True)

    controller.save_clicked()
    controller.cancel_clicked()
    loop.run_pending()

    assert uc_save.calls == []
    assert dialog.back == [(model, True)]


class _ChooserStub:
    def __init__(self, directory: Optional[Path]) -> None:
        self.directory = directory

    def choose(self) -> Optional[Path]:
        return self.directory


class _ExporterStub:
    def __init__(self) -> None:
        self.projects = []

    def open_for_project(self, project) -> None:
        self.projects.append(project)


def _real_save(tmp_path: Path, directory: Optional[Path], exporter=None) -> SaveProject:
    state = tmp_path / "state"
    return SaveProject(
        backend=LocalBackend(root_dir=str(state)),
        exporter=exporter or _ExporterStub(),
        chooser=_ChooserStub(directory),
        import_watcher=DirectoryWatchRegistry(root_dir=str(state)),
        crash_reporter=LoggingCrashReporter(),
        notice=_NoticeRecorder(),
    )


def test_decentralized_flow_writes_and_watches(tmp_path):
    project_dir = tmp_path / "proj"
    project_dir.mkdir()
    model = ProjectModel(title="Tool Library", project_id="t-1", server_name="example.com")
    controller, loop, dialog, _ = _controller(model, _real_save(tmp_path, project_dir))
    controller.vm.select_mode(DistributionMode.DECENTRALIZED)

    controller.save_clicked()
    loop.run_pending()

    written = project_dir / "Tool_Library.beacon-project"
    assert model.server_name == ""
    assert written.read_bytes() == model.build_details().to_bytes()
    assert DirectoryWatchRegistry(root_dir=str(tmp_path / "state")).watched_dirs() == [
        str(project_dir.resolve())
    ]
    assert controller.last_outcome.kind == "watched"
    assert dialog.done == 1


def test_decentralized_flow_cancelled_keeps_dialog_open(tmp_path):
    model = ProjectModel(title="Tool Library", server_name=None)
    controller, loop, dialog, _ = _controller(model, _real_save(tmp_path, None))

    controller.save_clicked()
    loop.run_pending()

    assert model.server_name == ""
    assert controller.last_outcome.cancelled
    assert dialog.done == 0
    assert not (tmp_path / "state").exists()


def test_server_assisted_flow_exports(tmp_path):
    exporter = _ExporterStub()
    model = ProjectModel(title="Mesh Network", project_id="m-1")
    controller, loop, dialog, _ = _controller(model, _real_save(tmp_path, tmp_path, exporter))
    controller.vm.select_mode(DistributionMode.SERVER_ASSISTED)
    controller.vm.set_server_name("pledges.example.org")

    controller.save_clicked()
    loop.run_pending()

    assert model.server_name == "pledges.example.org"
    assert [p.details.payment_url for p in exporter.projects] == [
        "https://pledges.example.org/_beacon/crowdfund/project/m-1"
    ]
    assert (tmp_path / "state" / "projects" / "Mesh_Network.beacon-project").exists()
    assert dialog.done == 1


def test_closing_the_dialog_drops_other_pending_tasks():
    uc_save = _SaveStub()
    controller, loop, dialog, _ = _controller(ProjectModel(server_name="example.com"), uc_save)
    leftovers = []

    controller.save_clicked()
    controller.scheduler.defer("refresh", lambda: leftovers.append("ran"))
    loop.run_pending()

    assert dialog.done == 1
    assert leftovers == []
    assert not controller.scheduler.pending("refresh")


def test_cancel_drops_every_pending_task():
    controller, loop, _, _ = _controller(ProjectModel(), _SaveStub())
    leftovers = []
    controller.scheduler.defer("refresh", lambda: leftovers.append("ran"))

    controller.cancel_clicked()
    loop.run_pending()

    assert leftovers == []

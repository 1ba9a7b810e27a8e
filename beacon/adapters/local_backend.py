from __future__ import annotations
import logging
import os
from pathlib import Path

from beacon.domain.entities import Project, ProjectModel
from beacon.domain.ports import BackendPort
from beacon.utils.project_files import project_file_path, write_project_file


class LocalBackend(BackendPort):
    """Backend save path for server-assisted projects (files under ``<root>/projects``)."""

    PROJECTS_DIR = "projects"

    def __init__(self, root_dir: str = ".") -> None:
        self._log = logging.getLogger(__name__)
        self.root = root_dir

    @property
    def projects_dir(self) -> Path:
        return Path(self.root) / self.PROJECTS_DIR

    def save_project(self, model: ProjectModel) -> Project:
        project = Project.from_model(model)
        os.makedirs(self.projects_dir, exist_ok=True)
        path = project_file_path(self.projects_dir, project)
        write_project_file(path, project)
        self._log.info("Backend saved project %s to %s", project.title, path)
        return project

    def path_for(self, project: Project) -> Path:
        """Return where :meth:`save_project` stored ``project``."""
        return project_file_path(self.projects_dir, project)

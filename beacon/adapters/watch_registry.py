from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import List

from beacon.domain.entities import ProjectDetails
from beacon.domain.ports import ImportWatcherPort


class DirectoryWatchRegistry(ImportWatcherPort):
    """Records project directories that the pledge-file watcher should monitor.

    The list is persisted as JSON in ``<root>/watched_dirs.json``. Watching
    itself happens elsewhere; this adapter only imports the project file and
    registers its parent directory.
    """

    FILE_NAME = "watched_dirs.json"

    def __init__(self, root_dir: str = ".") -> None:
        self._log = logging.getLogger(__name__)
        self.root = root_dir

    @property
    def registry_path(self) -> Path:
        return Path(self.root) / self.FILE_NAME

    def register_file(self, path: Path) -> None:
        """Import ``path`` and start watching its directory.

        Raises:
            OSError: If the file cannot be read or the registry cannot be written.
            ValueError: If the file does not hold a project descriptor.
        """
        path = Path(path)
        with open(path, "rb") as f:
            details = ProjectDetails.from_bytes(f.read())
        directory = str(path.resolve().parent)
        dirs = self.watched_dirs()
        if directory not in dirs:
            dirs.append(directory)
            self._write(dirs)
        self._log.info("Watching %s for pledges to %s", directory, details.title)

    def watched_dirs(self) -> List[str]:
        if not os.path.exists(self.registry_path):
            return []
        with open(self.registry_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        return [str(item) for item in payload.get("directories", [])]

    def _write(self, dirs: List[str]) -> None:
        os.makedirs(self.root, exist_ok=True)
        with open(self.registry_path, "w", encoding="utf-8") as f:
            json.dump({"directories": dirs}, f, ensure_ascii=False, indent=2)

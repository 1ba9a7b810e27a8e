from __future__ import annotations

import io
from pathlib import Path

from ..domain.entities import Project


def project_file_path(directory: Path, project: Project) -> Path:
    """Return ``directory / project.suggested_file_name``."""
    return Path(directory) / project.suggested_file_name


def write_project_file(path: Path, project: Project) -> Path:
    """Write the serialized descriptor verbatim to ``path``.

    The file is opened with truncation and written through a buffered
    stream that is flushed before the handle is closed. The handle is
    released on every exit path, including a failed write.
    """
    data = project.to_bytes()
    with open(path, "wb", buffering=io.DEFAULT_BUFFER_SIZE) as stream:
        stream.write(data)
        stream.flush()
    return Path(path)

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..domain.entities import DistributionMode, ProjectModel
from ..domain.errors import InvalidServerName, MissingServerName
from ..domain.hostname import is_valid_server_name


@dataclass
class ResolveDistributionMode:
    """Validate the selected project type and sync the server name into the model.

    This is the only gate for save eligibility: it must succeed before a
    descriptor is built. On failure the model is left untouched.
    """

    model: ProjectModel

    def __call__(self, mode: DistributionMode, candidate: Optional[str]) -> str:
        if mode is DistributionMode.SERVER_ASSISTED:
            if not candidate:
                raise MissingServerName()
            if not is_valid_server_name(candidate):
                raise InvalidServerName(candidate)
            resolved = candidate
        else:
            # Explicitly clears a previously stored server name.
            resolved = ""
        self.model.server_name = resolved
        return resolved

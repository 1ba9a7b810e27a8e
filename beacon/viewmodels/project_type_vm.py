from __future__ import annotations

from typing import Iterable, List, Optional

from ..domain.entities import DistributionMode, ProjectModel


class ProjectTypeVM:
    """Keeps project type form state (radio choice + server combo), no I/O here."""

    def __init__(self, *, known_servers: Iterable[str] = (), editing: bool = False) -> None:
        self.known_servers: List[str] = list(known_servers)
        self.editing = editing
        self.selected_mode: DistributionMode = DistributionMode.DECENTRALIZED
        self.server_name: Optional[str] = None

    @property
    def title(self) -> str:
        return "Change type" if self.editing else "Select type"

    @property
    def server_field_enabled(self) -> bool:
        return self.selected_mode is DistributionMode.SERVER_ASSISTED

    def load_from_model(self, model: ProjectModel) -> None:
        """Preselect the form from a model's stored server name."""
        if model.server_name:
            self.server_name = model.server_name
            self.selected_mode = DistributionMode.SERVER_ASSISTED
        else:
            self.selected_mode = DistributionMode.DECENTRALIZED

    def select_mode(self, mode: DistributionMode) -> None:
        self.selected_mode = DistributionMode(mode)

    def set_server_name(self, value: Optional[str]) -> None:
        self.server_name = value

from __future__ import annotations

"""Domain value objects for project setup shared across adapters, use-cases, and view models."""

import json
import re
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

PROJECT_FILE_EXTENSION = ".beacon-project"
PAYMENT_PATH_TEMPLATE = "/_beacon/crowdfund/project/{project_id}"

_FILE_NAME_PATTERN = re.compile(r"[^A-Za-z0-9._-]+")


class DistributionMode(str, Enum):
    """How pledges for a project are collected."""

    DECENTRALIZED = "decentralized"
    SERVER_ASSISTED = "server_assisted"


@dataclass
class ProjectModel:
    """Mutable project state owned by a single dialog session.

    ``server_name`` is ``None`` for a project that never chose a type and an
    empty string once decentralized mode was resolved explicitly.
    """

    title: str = ""
    description: str = ""
    goal_amount: int = 0
    project_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    server_name: Optional[str] = None

    def build_details(self) -> "ProjectDetails":
        """Freeze the current model state into a descriptor."""
        payment_url: Optional[str] = None
        if self.server_name:
            path = PAYMENT_PATH_TEMPLATE.format(project_id=self.project_id)
            payment_url = f"https://{self.server_name}{path}"
        return ProjectDetails(
            title=self.title,
            description=self.description,
            goal_amount=int(self.goal_amount),
            project_id=self.project_id,
            payment_url=payment_url,
        )


@dataclass(frozen=True)
class ProjectDetails:
    """Immutable project descriptor built from a :class:`ProjectModel` at save time."""

    title: str
    description: str
    goal_amount: int
    project_id: str
    payment_url: Optional[str] = None
    """Present only for server-assisted projects; drives the save branch."""

    def has_payment_url(self) -> bool:
        return bool(self.payment_url)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "goal_amount": self.goal_amount,
            "project_id": self.project_id,
        }
        if self.payment_url:
            payload["payment_url"] = self.payment_url
        return payload

    def to_bytes(self) -> bytes:
        """Serialize to the canonical on-disk descriptor format (UTF-8 JSON)."""
        text = json.dumps(
            self.to_payload(), ensure_ascii=False, sort_keys=True, separators=(",", ":")
        )
        return text.encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> "ProjectDetails":
        """Parse a descriptor previously written by :meth:`to_bytes`.

        Raises:
            ValueError: If the payload is not a descriptor object.
        """
        payload = json.loads(data.decode("utf-8"))
        if not isinstance(payload, dict):
            raise ValueError("Project descriptor must be a JSON object.")
        try:
            return cls(
                title=str(payload["title"]),
                description=str(payload.get("description", "")),
                goal_amount=int(payload.get("goal_amount", 0)),
                project_id=str(payload["project_id"]),
                payment_url=payload.get("payment_url") or None,
            )
        except KeyError as exc:
            raise ValueError(f"Project descriptor is missing field {exc}.") from exc


@dataclass(frozen=True)
class ServerAssistedDescriptor:
    """Descriptor whose pledges are collected by a coordination server."""

    details: ProjectDetails


@dataclass(frozen=True)
class DecentralizedDescriptor:
    """Descriptor whose pledges arrive as files in a watched directory."""

    details: ProjectDetails


Descriptor = Union[ServerAssistedDescriptor, DecentralizedDescriptor]


def classify_descriptor(details: ProjectDetails) -> Descriptor:
    """Wrap ``details`` in the variant matching its persistence path."""
    if details.has_payment_url():
        return ServerAssistedDescriptor(details)
    return DecentralizedDescriptor(details)


def suggested_file_name(title: str) -> str:
    """Return a filesystem-safe file name derived from a project title."""
    cleaned = _FILE_NAME_PATTERN.sub("_", title.strip())
    cleaned = re.sub(r"_+", "_", cleaned).strip("_.")
    return f"{cleaned or 'project'}{PROJECT_FILE_EXTENSION}"


@dataclass(frozen=True)
class Project:
    """Finalized project artifact created once per save attempt."""

    details: ProjectDetails

    @classmethod
    def from_model(cls, model: ProjectModel) -> "Project":
        return cls(details=model.build_details())

    @property
    def title(self) -> str:
        return self.details.title

    @property
    def suggested_file_name(self) -> str:
        return suggested_file_name(self.details.title)

    def to_bytes(self) -> bytes:
        return self.details.to_bytes()


__all__ = [
    "DecentralizedDescriptor",
    "Descriptor",
    "DistributionMode",
    "PROJECT_FILE_EXTENSION",
    "Project",
    "ProjectDetails",
    "ProjectModel",
    "ServerAssistedDescriptor",
    "classify_descriptor",
    "suggested_file_name",
]

"""Domain package exports for value objects and validation helpers."""

from .entities import (
    DecentralizedDescriptor,
    Descriptor,
    DistributionMode,
    Project,
    ProjectDetails,
    ProjectModel,
    ServerAssistedDescriptor,
    classify_descriptor,
)
from .hostname import is_valid_server_name

__all__ = [
    "DecentralizedDescriptor",
    "Descriptor",
    "DistributionMode",
    "Project",
    "ProjectDetails",
    "ProjectModel",
    "ServerAssistedDescriptor",
    "classify_descriptor",
    "is_valid_server_name",
]

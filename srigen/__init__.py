"""srigen: Subresource Integrity generator for web projects."""

__version__ = "0.1.0"

from srigen.digest import compute_integrity
from srigen.exceptions import (
    BackupError,
    ProjectNotFoundError,
    ResourceNotFoundError,
    SriError,
)
from srigen.models import (
    HashAlgorithm,
    ProcessingResult,
    ResourceType,
    SriConfiguration,
    SriResult,
    SriStatus,
)
from srigen.pipeline import SriGenerator, process_project

__all__ = [
    "BackupError",
    "HashAlgorithm",
    "ProcessingResult",
    "ProjectNotFoundError",
    "ResourceNotFoundError",
    "ResourceType",
    "SriConfiguration",
    "SriError",
    "SriGenerator",
    "SriResult",
    "SriStatus",
    "compute_integrity",
    "process_project",
]

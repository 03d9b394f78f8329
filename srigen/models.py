"""Data models for srigen: run configuration and per-resource outcomes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class HashAlgorithm(Enum):
    """Digest algorithm used for integrity strings."""

    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @classmethod
    def parse(cls, value: HashAlgorithm | str | None) -> HashAlgorithm:
        """Map *value* to a member, falling back to SHA-384 when unrecognized."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "")
            for member in cls:
                if member.value == key:
                    return member
        return cls.SHA384


class ResourceType(Enum):
    """Kind of resource referenced by a markup element."""

    SCRIPT = "script"
    STYLESHEET = "stylesheet"
    UNKNOWN = "unknown"


class SriStatus(Enum):
    """Outcome of processing one resource reference."""

    ADDED = "added"
    UPDATED = "updated"
    SKIPPED = "skipped"
    FAILED = "failed"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class SriConfiguration:
    """Policy for a single run. Constructed once and never mutated."""

    hash_algorithm: HashAlgorithm = HashAlgorithm.SHA384
    include_external_resources: bool = False
    create_backup: bool = True
    overwrite_existing: bool = False
    exclude_patterns: tuple[str, ...] = ()
    http_timeout: float = 30.0

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__.
        object.__setattr__(self, "hash_algorithm", HashAlgorithm.parse(self.hash_algorithm))
        patterns: Iterable[str] = self.exclude_patterns or ()
        if isinstance(patterns, str):
            patterns = (patterns,)
        # "" is a substring of every name; an empty pattern would exclude all files.
        object.__setattr__(self, "exclude_patterns", tuple(p for p in patterns if p))

    @classmethod
    def local_only(cls) -> SriConfiguration:
        """Hash local resources only; remote references are skipped."""
        return cls(include_external_resources=False, create_backup=True)

    @classmethod
    def all_resources(cls) -> SriConfiguration:
        """Hash local resources and fetch remote (CDN) ones too."""
        return cls(include_external_resources=True, create_backup=True)


@dataclass(frozen=True)
class SriResult:
    """Outcome for a single resource reference found in a markup file."""

    file_path: str
    resource_url: str
    integrity_hash: str
    resource_type: ResourceType
    is_local: bool
    status: SriStatus
    error_message: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status in (SriStatus.ADDED, SriStatus.UPDATED)

    @property
    def failed(self) -> bool:
        return self.status is SriStatus.FAILED


@dataclass(frozen=True)
class ProcessingResult:
    """Summary of a full project run."""

    total_files_processed: int
    successful_updates: int
    failures: int
    processing_time: float  # seconds
    results: tuple[SriResult, ...] = field(default_factory=tuple)

    @classmethod
    def from_results(
        cls,
        file_count: int,
        results: Iterable[SriResult],
        elapsed: float,
    ) -> ProcessingResult:
        """Fold per-element results into the run summary."""
        ordered = tuple(results)
        return cls(
            total_files_processed=file_count,
            successful_updates=sum(1 for r in ordered if r.succeeded),
            failures=sum(1 for r in ordered if r.failed),
            processing_time=elapsed,
            results=ordered,
        )

    def by_status(self, status: SriStatus) -> list[SriResult]:
        return [r for r in self.results if r.status is status]

"""Report schemas for machine-readable output."""

from __future__ import annotations

from pydantic import BaseModel

from srigen.models import ProcessingResult, SriResult


class SriResultItem(BaseModel):
    file_path: str
    resource_url: str
    integrity_hash: str
    resource_type: str
    is_local: bool
    status: str
    error_message: str | None = None

    @classmethod
    def from_result(cls, result: SriResult) -> SriResultItem:
        return cls(
            file_path=result.file_path,
            resource_url=result.resource_url,
            integrity_hash=result.integrity_hash,
            resource_type=result.resource_type.value,
            is_local=result.is_local,
            status=result.status.value,
            error_message=result.error_message,
        )


class ProcessingReport(BaseModel):
    total_files_processed: int
    successful_updates: int
    failures: int
    processing_time: float
    results: list[SriResultItem]

    @classmethod
    def from_result(cls, result: ProcessingResult) -> ProcessingReport:
        return cls(
            total_files_processed=result.total_files_processed,
            successful_updates=result.successful_updates,
            failures=result.failures,
            processing_time=round(result.processing_time, 3),
            results=[SriResultItem.from_result(r) for r in result.results],
        )

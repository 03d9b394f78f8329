"""SriGenerator: discover markup files and annotate them, one at a time."""

from __future__ import annotations

import time
from pathlib import Path

import httpx
import structlog

from srigen.discovery import discover_markup_files
from srigen.exceptions import ProjectNotFoundError
from srigen.models import (
    ProcessingResult,
    ResourceType,
    SriConfiguration,
    SriResult,
    SriStatus,
)
from srigen.processor import MarkupProcessor
from srigen.resolver import ResourceResolver

log = structlog.get_logger("srigen.pipeline")


class SriGenerator:
    """Run the integrity pipeline over a project directory.

    The HTTP client is created at the start of each :meth:`process_project`
    call and closed when it returns, so separate runs share no state.
    *transport* is handed to ``httpx`` (tests pass an ``httpx.MockTransport``).
    """

    def __init__(
        self,
        configuration: SriConfiguration | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.configuration = configuration or SriConfiguration()
        self._transport = transport

    # ── presets ────────────────────────────────────────────────────────────

    @classmethod
    def create_default(cls) -> SriGenerator:
        return cls()

    @classmethod
    def create_for_local_resources_only(cls) -> SriGenerator:
        return cls(SriConfiguration.local_only())

    @classmethod
    def create_for_all_resources(cls) -> SriGenerator:
        return cls(SriConfiguration.all_resources())

    # ── public ─────────────────────────────────────────────────────────────

    def process_project(self, project_path: str | Path) -> ProcessingResult:
        """Annotate every markup file under *project_path*.

        Raises :class:`ProjectNotFoundError` if the directory does not exist.
        Per-file failures never abort the batch: they are reported as a
        single ``FAILED`` result for that file.
        """
        root = Path(project_path)
        if not root.is_dir():
            raise ProjectNotFoundError(str(project_path))

        started = time.monotonic()
        files = discover_markup_files(root, self.configuration.exclude_patterns)
        log.info(
            "pipeline.start",
            root=str(root),
            files=len(files),
            algorithm=self.configuration.hash_algorithm.value,
            include_external=self.configuration.include_external_resources,
        )

        results: list[SriResult] = []
        with ResourceResolver(
            timeout=self.configuration.http_timeout,
            transport=self._transport,
        ) as resolver:
            processor = MarkupProcessor(self.configuration, resolver)
            for file_path in files:
                try:
                    results.extend(processor.process_file(file_path, root))
                except Exception as e:
                    log.error("pipeline.file_failed", file=str(file_path), error=str(e))
                    results.append(
                        SriResult(
                            file_path=str(file_path),
                            resource_url="",
                            integrity_hash="",
                            resource_type=ResourceType.UNKNOWN,
                            is_local=False,
                            status=SriStatus.FAILED,
                            error_message=str(e) or type(e).__name__,
                        )
                    )

        summary = ProcessingResult.from_results(
            file_count=len(files),
            results=results,
            elapsed=time.monotonic() - started,
        )
        log.info(
            "pipeline.done",
            files=summary.total_files_processed,
            successes=summary.successful_updates,
            failures=summary.failures,
            duration=round(summary.processing_time, 3),
        )
        return summary


def process_project(
    project_path: str | Path,
    configuration: SriConfiguration | None = None,
) -> ProcessingResult:
    """Convenience wrapper: ``SriGenerator(configuration).process_project(path)``."""
    return SriGenerator(configuration).process_project(project_path)

"""Markup processor: annotate one markup file with integrity attributes."""

from __future__ import annotations

import shutil
from datetime import datetime
from pathlib import Path

import structlog

from srigen.digest import compute_integrity
from srigen.exceptions import BackupError
from srigen.markup import Element, MarkupDocument
from srigen.models import ResourceType, SriConfiguration, SriResult, SriStatus
from srigen.resolver import ResourceResolver, is_remote

log = structlog.get_logger("srigen.processor")

_BACKUP_TIMESTAMP = "%Y%m%d%H%M%S"


def read_markup(path: Path) -> str:
    """Read a markup file without translating its line endings."""
    with open(path, encoding="utf-8", newline="") as fh:
        return fh.read()


def write_markup(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(content)


def create_backup(path: Path, now: datetime | None = None) -> Path:
    """Copy *path* to a timestamped sibling and return the backup path.

    The name is ``<file>.backup_<YYYYMMDDHHmmss>``; a numeric suffix is
    added when a backup from the same second already exists.
    """
    stamp = (now or datetime.now()).strftime(_BACKUP_TIMESTAMP)
    backup = path.with_name(f"{path.name}.backup_{stamp}")
    counter = 1
    while backup.exists():
        backup = path.with_name(f"{path.name}.backup_{stamp}_{counter}")
        counter += 1
    try:
        shutil.copy2(path, backup)
    except OSError as e:
        raise BackupError(f"Backup of {path} failed: {e}") from e
    return backup


class MarkupProcessor:
    """Apply the configured integrity policy to a single markup file."""

    def __init__(self, configuration: SriConfiguration, resolver: ResourceResolver) -> None:
        self._config = configuration
        self._resolver = resolver

    def process_file(self, file_path: str | Path, project_root: str | Path) -> list[SriResult]:
        """Annotate *file_path* and return one result per eligible element.

        Read and backup errors propagate to the caller; element-level errors
        are reported as ``FAILED`` results. The file is only rewritten when
        at least one element gained or changed its integrity attribute.
        """
        path = Path(file_path)
        content = read_markup(path)

        if self._config.create_backup:
            backup = create_backup(path)
            log.debug("processor.backup_created", file=str(path), backup=str(backup))

        doc = MarkupDocument.parse(content)

        results: list[SriResult] = []
        for element in doc.scripts():
            results.append(
                self._process_element(element, "src", ResourceType.SCRIPT, path, project_root)
            )
        for element in doc.stylesheets():
            results.append(
                self._process_element(element, "href", ResourceType.STYLESHEET, path, project_root)
            )

        if any(r.succeeded for r in results):
            write_markup(path, doc.serialize())
            log.info(
                "processor.file_rewritten",
                file=str(path),
                updated=sum(1 for r in results if r.succeeded),
            )
        return results

    # ── internal ───────────────────────────────────────────────────────────

    def _process_element(
        self,
        element: Element,
        attribute: str,
        resource_type: ResourceType,
        file_path: Path,
        project_root: str | Path,
    ) -> SriResult:
        reference = element.get(attribute, "") or ""
        is_local = not is_remote(reference)

        def result(status: SriStatus, integrity: str = "", error: str | None = None) -> SriResult:
            return SriResult(
                file_path=str(file_path),
                resource_url=reference,
                integrity_hash=integrity,
                resource_type=resource_type,
                is_local=is_local,
                status=status,
                error_message=error,
            )

        if not is_local and not self._config.include_external_resources:
            log.debug("processor.skipped_external", file=str(file_path), reference=reference)
            return result(SriStatus.SKIPPED)

        had_integrity = bool(element.get("integrity"))
        if had_integrity and not self._config.overwrite_existing:
            return result(SriStatus.ALREADY_EXISTS)

        try:
            content = self._resolver.resolve(reference, project_root, is_local)
            integrity = compute_integrity(content, self._config.hash_algorithm)
            element.set_attribute("integrity", integrity)
            element.set_attribute("crossorigin", "anonymous")
        except Exception as e:
            log.warning(
                "processor.element_failed",
                file=str(file_path),
                reference=reference,
                error=str(e),
            )
            return result(SriStatus.FAILED, error=str(e) or type(e).__name__)

        status = SriStatus.UPDATED if had_integrity else SriStatus.ADDED
        log.debug(
            "processor.integrity_set",
            file=str(file_path),
            reference=reference,
            status=status.value,
        )
        return result(status, integrity)

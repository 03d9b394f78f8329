"""CLI entry point: srigen.

Subcommands:
    srigen run /path/to/site                     # annotate local resources
    srigen run /path/to/site --include-external  # also hash CDN resources
    srigen run /path/to/site --json              # machine-readable report
    srigen hash static/app.js                    # print one integrity string
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
import httpx

from srigen.config import load_configuration
from srigen.digest import compute_integrity
from srigen.exceptions import ProjectNotFoundError, ResourceNotFoundError
from srigen.logging import setup_logging
from srigen.models import HashAlgorithm, ProcessingResult, SriStatus
from srigen.pipeline import SriGenerator
from srigen.resolver import ResourceResolver, is_remote
from srigen.schemas import ProcessingReport

_ALGORITHMS = click.Choice([a.value for a in HashAlgorithm], case_sensitive=False)

_STATUS_LABELS: dict[SriStatus, str] = {
    SriStatus.ADDED: "[+] added",
    SriStatus.UPDATED: "[~] updated",
    SriStatus.SKIPPED: "[-] skipped",
    SriStatus.FAILED: "[!] failed",
    SriStatus.ALREADY_EXISTS: "[=] exists",
}


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """srigen: add Subresource Integrity attributes to a web project."""
    setup_logging("DEBUG" if verbose else None)


@main.command("run")
@click.argument("project_path", type=click.Path(file_okay=False))
@click.option("--algorithm", type=_ALGORITHMS, default=None, help="Digest algorithm (default: sha384)")
@click.option(
    "--include-external/--local-only",
    default=None,
    help="Fetch and hash http(s) resources",
)
@click.option("--backup/--no-backup", default=None, help="Write .backup_<timestamp> copies")
@click.option(
    "--overwrite/--no-overwrite",
    default=None,
    help="Recompute integrity attributes that already exist",
)
@click.option(
    "-x",
    "--exclude",
    multiple=True,
    help="Skip files whose name contains PATTERN (repeatable)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
def run(
    project_path: str,
    algorithm: str | None,
    include_external: bool | None,
    backup: bool | None,
    overwrite: bool | None,
    exclude: tuple[str, ...],
    as_json: bool,
) -> None:
    """Annotate every markup file under PROJECT_PATH."""
    try:
        config = load_configuration(
            hash_algorithm=algorithm,
            include_external_resources=include_external,
            create_backup=backup,
            overwrite_existing=overwrite,
            exclude_patterns=exclude or None,
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    try:
        result = SriGenerator(config).process_project(project_path)
    except ProjectNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    if as_json:
        click.echo(ProcessingReport.from_result(result).model_dump_json(indent=2))
    else:
        _print_report(result, Path(project_path))

    if result.failures:
        sys.exit(1)


@main.command("hash")
@click.argument("target")
@click.option("--algorithm", type=_ALGORITHMS, default=HashAlgorithm.SHA384.value, show_default=True)
def hash_resource(target: str, algorithm: str) -> None:
    """Print the integrity string for a local file or an http(s) URL."""
    if is_remote(target):
        try:
            with ResourceResolver() as resolver:
                content = resolver.resolve(target, ".", is_local=False)
        except httpx.HTTPError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
    else:
        path = Path(target)
        if not path.is_file():
            click.echo(f"Error: {ResourceNotFoundError(target)}", err=True)
            sys.exit(1)
        content = path.read_bytes()
    click.echo(compute_integrity(content, algorithm))


def _print_report(result: ProcessingResult, root: Path) -> None:
    click.echo("Processing complete:")
    click.echo(f"  Files processed: {result.total_files_processed}")
    click.echo(f"  Successes: {result.successful_updates}")
    click.echo(f"  Failures: {result.failures}")
    click.echo(f"  Time: {result.processing_time:.2f}s")

    if not result.results:
        return
    click.echo("\nDetails:")
    for item in result.results:
        try:
            shown = Path(item.file_path).relative_to(root)
        except ValueError:
            shown = Path(item.file_path)
        label = _STATUS_LABELS.get(item.status, "[?] unknown")
        click.echo(f"  {label:12s} {shown}: {item.resource_url or '-'}")
        if item.error_message:
            click.echo(f"               error: {item.error_message}")


if __name__ == "__main__":
    main()

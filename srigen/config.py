"""Build an :class:`SriConfiguration` from environment variables and overrides."""

from __future__ import annotations

import os
from collections.abc import Iterable

from srigen.models import HashAlgorithm, SriConfiguration

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw!r})")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return _parse_bool(name, raw)


def _env_patterns(name: str) -> tuple[str, ...]:
    raw = os.environ.get(name, "")
    return tuple(p.strip() for p in raw.split(",") if p.strip())


def load_configuration(
    *,
    hash_algorithm: HashAlgorithm | str | None = None,
    include_external_resources: bool | None = None,
    create_backup: bool | None = None,
    overwrite_existing: bool | None = None,
    exclude_patterns: Iterable[str] | None = None,
    http_timeout: float | None = None,
) -> SriConfiguration:
    """Return a configuration; explicit (non-None) arguments win over the env.

    Environment variables:
        SRIGEN_HASH_ALGORITHM      sha256 | sha384 | sha512 (default: sha384)
        SRIGEN_INCLUDE_EXTERNAL    fetch http(s) resources (default: false)
        SRIGEN_CREATE_BACKUP       write .backup_<timestamp> copies (default: true)
        SRIGEN_OVERWRITE_EXISTING  recompute existing integrity (default: false)
        SRIGEN_EXCLUDE             comma-separated filename substrings
        SRIGEN_HTTP_TIMEOUT        seconds (default: 30)
    """
    defaults = SriConfiguration()

    if hash_algorithm is None:
        hash_algorithm = os.environ.get("SRIGEN_HASH_ALGORITHM", defaults.hash_algorithm.value)
    if include_external_resources is None:
        include_external_resources = _env_bool(
            "SRIGEN_INCLUDE_EXTERNAL", defaults.include_external_resources
        )
    if create_backup is None:
        create_backup = _env_bool("SRIGEN_CREATE_BACKUP", defaults.create_backup)
    if overwrite_existing is None:
        overwrite_existing = _env_bool("SRIGEN_OVERWRITE_EXISTING", defaults.overwrite_existing)
    if exclude_patterns is None:
        exclude_patterns = _env_patterns("SRIGEN_EXCLUDE")
    if http_timeout is None:
        http_timeout = float(os.environ.get("SRIGEN_HTTP_TIMEOUT", defaults.http_timeout))

    return SriConfiguration(
        hash_algorithm=HashAlgorithm.parse(hash_algorithm),
        include_external_resources=include_external_resources,
        create_backup=create_backup,
        overwrite_existing=overwrite_existing,
        exclude_patterns=tuple(exclude_patterns),
        http_timeout=http_timeout,
    )

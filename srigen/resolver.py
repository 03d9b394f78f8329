"""Resource resolver — load the bytes behind a script/stylesheet reference."""

from __future__ import annotations

import re
from pathlib import Path

import httpx
import structlog

from srigen.exceptions import ResourceNotFoundError

log = structlog.get_logger("srigen.resolver")

_SEPARATORS_RE = re.compile(r"[\\/]+")


def is_remote(reference: str) -> bool:
    """A reference is remote iff it starts with ``http`` (any case)."""
    return reference[:4].lower() == "http"


def local_path(reference: str, project_root: str | Path) -> Path:
    """Map a local reference onto the project tree.

    Leading ``~`` and ``/`` characters are dropped so ``~/js/app.js`` and
    ``/js/app.js`` both resolve against *project_root*.
    """
    relative = reference.lstrip("~/")
    parts = [p for p in _SEPARATORS_RE.split(relative) if p]
    return Path(project_root).joinpath(*parts)


class ResourceResolver:
    """Fetches resource bytes from the project tree or over HTTP.

    Owns one ``httpx.Client`` for its lifetime; nothing is cached, so a
    reference that appears in several files is fetched once per encounter.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ResourceResolver:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ── public ─────────────────────────────────────────────────────────────

    def resolve(self, reference: str, project_root: str | Path, is_local: bool) -> bytes:
        """Return the full content of *reference*.

        Raises :class:`ResourceNotFoundError` for a missing local file and
        ``httpx.HTTPError`` for transport failures or non-success responses.
        """
        if is_local:
            return self._read_local(reference, project_root)
        return self._fetch_remote(reference)

    # ── internal ───────────────────────────────────────────────────────────

    @staticmethod
    def _read_local(reference: str, project_root: str | Path) -> bytes:
        path = local_path(reference, project_root)
        if not path.is_file():
            raise ResourceNotFoundError(str(path))
        return path.read_bytes()

    def _fetch_remote(self, url: str) -> bytes:
        log.debug("resolver.fetch", url=url)
        response = self._client.get(url)
        response.raise_for_status()
        log.debug("resolver.fetched", url=url, size=len(response.content))
        return response.content

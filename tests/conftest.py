"""Shared pytest fixtures for srigen tests."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

CDN_CONTENT: dict[str, bytes] = {
    "https://cdn.example/x.css": b"body { color: red; }\n",
    "https://cdn.example/lib.js": b"console.log('lib');\n",
}


class RecordingTransport(httpx.MockTransport):
    """MockTransport serving CDN_CONTENT and recording every requested URL."""

    def __init__(self, content: dict[str, bytes] | None = None) -> None:
        self.content = dict(CDN_CONTENT if content is None else content)
        self.requests: list[str] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        if url in self.content:
            return httpx.Response(200, content=self.content[url])
        return httpx.Response(404, content=b"not found")


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A small project: two local assets and nothing else."""
    (tmp_path / "js").mkdir()
    (tmp_path / "css").mkdir()
    (tmp_path / "app.js").write_bytes(b"console.log('app');\n")
    (tmp_path / "js" / "main.js").write_bytes(b"function main() {}\n")
    (tmp_path / "css" / "site.css").write_bytes(b"h1 { margin: 0; }\n")
    return tmp_path

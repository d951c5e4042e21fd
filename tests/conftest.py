from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest

from recordflow.testing import EventLog


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Clears any endpoint inherited from the shell.
    Automatically applied to all tests.
    """
    monkeypatch.delenv("RECORDFLOW_URL", raising=False)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """
    A dedicated temp root directory for each test.
    All filesystem writes in tests should be under this root (or tmp_path directly).
    """
    root = tmp_path / "proj"
    root.mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def chdir_to_project_root(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Automatically change working directory to project_root for all tests.
    """
    monkeypatch.chdir(project_root)


@pytest.fixture
def event_log() -> EventLog:
    """A fresh, empty trace for one pipeline run."""
    return EventLog()


@pytest.fixture
def john_payload() -> dict[str, object]:
    return {"name": "John Smith", "age": 20}


@pytest.fixture
def mock_client() -> Iterator[Callable[..., httpx.Client]]:
    """
    Factory for httpx clients backed by a MockTransport.

    Pass either a handler function or a body/status pair. Requests seen by the
    transport are collected on the returned client's `requests_seen` list.
    """
    clients: list[httpx.Client] = []

    def _make(
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
        *,
        status_code: int = 200,
        body: object = None,
        content: bytes | None = None,
    ) -> httpx.Client:
        seen: list[httpx.Request] = []

        def _default(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, content=json.dumps(body).encode())

        def _recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return (handler or _default)(request)

        client = httpx.Client(transport=httpx.MockTransport(_recording))
        client.requests_seen = seen  # type: ignore[attr-defined]
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()

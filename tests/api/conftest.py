"""
Fixtures for the HTTP conformance suite.

By default the suite runs against a local server that serves the reference
snapshot (head at slot 100, finalized at epoch 1, 16384 active validators).
Pass --server-url to point it at another deployment serving the same chain.
"""

from __future__ import annotations

import asyncio
import threading
import time
from typing import Generator

import httpx
import pytest

from tests.validator_api.helpers import make_snapshot
from validator_api.api import ApiServer, ApiServerConfig, SnapshotAttestationProvider
from validator_api.api.endpoints import health

LOCAL_PORT = 15099
STARTUP_TIMEOUT = 10.0


class _BackgroundServer:
    """An `ApiServer` running on its own event loop in a daemon thread."""

    def __init__(self, port: int) -> None:
        snapshot = make_snapshot()
        self.server = ApiServer(
            config=ApiServerConfig(host="127.0.0.1", port=port),
            provider=SnapshotAttestationProvider(snapshot_getter=lambda: snapshot),
        )
        self.loop = asyncio.new_event_loop()
        self.started = threading.Event()
        self.startup_error: BaseException | None = None
        self._thread = threading.Thread(target=self._serve, daemon=True)

    def _serve(self) -> None:
        asyncio.set_event_loop(self.loop)
        try:
            self.loop.run_until_complete(self.server.start())
        except Exception as e:
            self.startup_error = e
            return
        finally:
            self.started.set()

        try:
            self.loop.run_forever()
            self.loop.run_until_complete(self.server.close())
        finally:
            self.loop.close()

    def start(self) -> None:
        self._thread.start()
        self.started.wait(timeout=STARTUP_TIMEOUT)

    def shutdown(self) -> None:
        self.loop.call_soon_threadsafe(self.loop.stop)
        self._thread.join(timeout=STARTUP_TIMEOUT)


def _wait_until_healthy(url: str, timeout: float = 5.0) -> bool:
    """Poll the health endpoint until it answers 200 or `timeout` elapses."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            if httpx.get(f"{url}{health.ROUTE}", timeout=1.0).status_code == 200:
                return True
        except (httpx.ConnectError, httpx.ReadTimeout):
            pass
        time.sleep(0.1)
    return False


@pytest.fixture(scope="session")
def server_url(request: pytest.FixtureRequest) -> Generator[str, None, None]:
    """Base URL of the server under test."""
    external_url = request.config.getoption("--server-url")
    if external_url:
        yield external_url
        return

    background = _BackgroundServer(LOCAL_PORT)
    background.start()
    if background.startup_error is not None:
        pytest.fail(f"Local server failed to start: {background.startup_error}")

    url = f"http://127.0.0.1:{LOCAL_PORT}"
    try:
        if not _wait_until_healthy(url):
            pytest.fail("Local server did not become healthy")
        yield url
    finally:
        background.shutdown()

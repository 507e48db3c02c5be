"""Liveness endpoint."""

from __future__ import annotations

from typing import Final

from aiohttp import web

ROUTE: Final = "/health"
"""Path of the health endpoint."""

STATUS_HEALTHY: Final = "healthy"
SERVICE_NAME: Final = "validator-api"


async def handle(_request: web.Request) -> web.Response:
    """
    Report that the server is up.

    Answers 200 with {"status": "healthy", "service": "validator-api"} whenever
    the process can serve requests. The chain snapshot is not consulted: a
    server without a snapshot is alive, it just answers attestation requests
    with 503.
    """
    return web.json_response({"status": STATUS_HEALTHY, "service": SERVICE_NAME})

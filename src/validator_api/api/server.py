"""
API server for the validator attestation, health, and metrics endpoints.

Provides HTTP endpoints for:
- /validator/attestation - Unsigned attestation for a slot and committee (deprecated)
- /health - Health check endpoint
- /metrics - Prometheus metrics endpoint
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from aiohttp import web
from aiohttp.typedefs import Handler

from validator_api import config as env_config
from validator_api.exceptions import ChainNotReadyError

from .provider import AttestationProvider, SnapshotAttestationProvider
from .routes import build_routes

logger = logging.getLogger(__name__)


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """
    Turn failures that escape a handler into 5xx responses.

    aiohttp's own HTTP exceptions (404 for unknown routes, ...) pass through.
    A missing chain snapshot is answered with 503. Everything else is logged
    with its traceback and answered with 500.
    """
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except ChainNotReadyError as e:
        logger.warning(f"{request.method} {request.path}: {e.message}")
        return web.json_response({"message": e.message}, status=503)
    except Exception as e:
        logger.exception(f"Unhandled error serving {request.method} {request.path}")
        message = "Internal server error"
        if env_config.VALIDATOR_API_ENV == "test":
            message = f"{message}: {e!r}"
        return web.json_response({"message": message}, status=500)


@dataclass(frozen=True, slots=True)
class ApiServerConfig:
    """Configuration for the API server."""

    host: str = env_config.DEFAULT_HOST
    """Host address to bind to."""

    port: int = env_config.DEFAULT_PORT
    """Port to listen on."""

    enabled: bool = True
    """Whether the API server is enabled."""


def create_app(provider: AttestationProvider) -> web.Application:
    """Build the aiohttp application serving every API route."""
    app = web.Application(middlewares=[error_middleware])
    app.add_routes([web.get(path, handler) for path, handler in build_routes(provider).items()])
    return app


@dataclass(slots=True)
class ApiServer:
    """
    HTTP API server for validator clients.

    Uses aiohttp to handle HTTP protocol details efficiently.
    """

    config: ApiServerConfig
    """Server configuration."""

    provider: AttestationProvider = field(default_factory=SnapshotAttestationProvider)
    """Builds the attestations served by the attestation endpoint."""

    _runner: web.AppRunner | None = field(default=None, init=False)
    """The aiohttp application runner."""

    _site: web.TCPSite | None = field(default=None, init=False)
    """The TCP site for the server."""

    @property
    def is_running(self) -> bool:
        """Whether the server is accepting connections."""
        return self._runner is not None

    async def start(self) -> None:
        """Start the API server in the background."""
        if not self.config.enabled:
            logger.info("API server is disabled")
            return

        self._runner = web.AppRunner(create_app(self.provider))
        await self._runner.setup()

        self._site = web.TCPSite(self._runner, self.config.host, self.config.port)
        await self._site.start()

        logger.info(f"API server listening on {self.config.host}:{self.config.port}")

    async def run(self) -> None:
        """
        Run the API server until shutdown.

        This method blocks until stop() is called.
        """
        await self.start()

        # Keep running until stopped
        while self._runner is not None:
            await asyncio.sleep(1)

    def stop(self) -> None:
        """Request graceful shutdown."""
        if self._runner is not None:
            asyncio.create_task(self.close())

    async def close(self) -> None:
        """Gracefully stop the server."""
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            self._site = None
            logger.info("API server stopped")

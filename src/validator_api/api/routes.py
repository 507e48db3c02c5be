"""API route definitions."""

from collections.abc import Awaitable, Callable

from aiohttp import web

from .endpoints import attestation, health, metrics
from .provider import AttestationProvider

Handler = Callable[[web.Request], Awaitable[web.Response]]


def build_routes(provider: AttestationProvider) -> dict[str, Handler]:
    """Map every API route to its handler, wiring `provider` into the attestation endpoint."""
    return {
        health.ROUTE: health.handle,
        metrics.ROUTE: metrics.handle,
        attestation.ROUTE: attestation.GetAttestation(provider=provider).handle,
    }

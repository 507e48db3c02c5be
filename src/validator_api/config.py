"""
Global configuration for the validator API.

This module contains environment-specific settings read once at import time.
"""

import os

_SUPPORTED_ENVS: list[str] = ["prod", "test"]

VALIDATOR_API_ENV = os.environ.get("VALIDATOR_API_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if VALIDATOR_API_ENV not in _SUPPORTED_ENVS:
    raise ValueError(
        f"Invalid VALIDATOR_API_ENV environment variable: '{VALIDATOR_API_ENV}'. "
        f"Supported values: {_SUPPORTED_ENVS}"
    )

DEFAULT_HOST = os.environ.get("VALIDATOR_API_HOST", "0.0.0.0")
"""Default address the API server binds to."""

DEFAULT_PORT = int(os.environ.get("VALIDATOR_API_PORT", "5051"))
"""Default port the API server listens on."""

"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import settings

if "VALIDATOR_API_ENV" not in os.environ:
    os.environ["VALIDATOR_API_ENV"] = "test"

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add --server-url option for running the API conformance tests against external servers."""
    parser.addoption(
        "--server-url",
        action="store",
        default=None,
        help="External server URL. If not provided, starts a local server.",
    )

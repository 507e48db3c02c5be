"""
Validator API CLI entry point.

Serve unsigned attestations built from a chain snapshot.

Usage::

    python -m validator_api --snapshot chain.yaml
    python -m validator_api --snapshot chain.yaml --host 127.0.0.1 --port 5051

Options:
    --snapshot   Path to chain snapshot YAML file (required)
    --host       Address to bind to (default: VALIDATOR_API_HOST or 0.0.0.0)
    --port       Port to listen on (default: VALIDATOR_API_PORT or 5051)
    --verbose    Enable debug logging
    --no-color   Disable colored log output

Send SIGHUP to reload the snapshot file without restarting.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal
from collections.abc import Callable
from pathlib import Path

import yaml
from pydantic import ValidationError

from validator_api import config as env_config
from validator_api.api import ApiServer, ApiServerConfig, SnapshotAttestationProvider
from validator_api.chain.snapshot import ChainSnapshot, SnapshotHolder

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)

        timestamp = self.formatTime(record, self.datefmt)
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"{self.CYAN}{timestamp}{self.RESET} {levelname} {name}: {message}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging for the server with optional colors."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def load_snapshot(snapshot_path: Path) -> ChainSnapshot:
    """Read and validate the chain snapshot file."""
    logger.info(f"Loading chain snapshot from {snapshot_path}")
    snapshot = ChainSnapshot.from_yaml_file(snapshot_path)
    logger.info(
        f"Snapshot loaded: head_slot={snapshot.head_slot}, "
        f"justified_epoch={snapshot.current_justified.epoch}, "
        f"finalized_epoch={snapshot.finalized.epoch}, "
        f"validators={snapshot.active_validator_count}"
    )
    return snapshot


def reload_snapshot(holder: SnapshotHolder, snapshot_path: Path) -> bool:
    """
    Re-read the snapshot file and install it for subsequent requests.

    A file that cannot be read or does not describe a valid snapshot leaves
    the current snapshot in place.

    Returns:
        Whether a new snapshot was installed.
    """
    try:
        snapshot = load_snapshot(snapshot_path)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        logger.error(f"Keeping current chain snapshot, reload from {snapshot_path} failed: {e}")
        return False
    holder.replace_snapshot(snapshot)
    return True


def build_server(holder: SnapshotHolder, host: str, port: int) -> ApiServer:
    """
    Wire the snapshot holder into an API server.

    Args:
        holder: Holds the snapshot attestations are built from.
        host: Address to bind to.
        port: Port to listen on.

    Returns:
        A server ready to be started.
    """
    provider = SnapshotAttestationProvider(snapshot_getter=holder.get)
    return ApiServer(config=ApiServerConfig(host=host, port=port), provider=provider)


async def run_server(server: ApiServer, on_reload: Callable[[], object] | None = None) -> None:
    """
    Run the server until cancelled, then shut it down.

    Where the platform has SIGHUP, receiving it calls `on_reload`.
    """
    loop = asyncio.get_running_loop()
    watch_sighup = on_reload is not None and hasattr(signal, "SIGHUP")
    if watch_sighup:
        loop.add_signal_handler(signal.SIGHUP, on_reload)
    try:
        await server.run()
    finally:
        if watch_sighup:
            loop.remove_signal_handler(signal.SIGHUP)
        await server.close()


def main() -> None:
    """Parse arguments and run the API server."""
    parser = argparse.ArgumentParser(
        description="Serve unsigned attestations to validator clients",
    )
    parser.add_argument(
        "--snapshot",
        type=Path,
        required=True,
        help="Path to chain snapshot YAML file",
    )
    parser.add_argument(
        "--host",
        default=env_config.DEFAULT_HOST,
        help="Address to bind to",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=env_config.DEFAULT_PORT,
        help="Port to listen on",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored log output",
    )

    args = parser.parse_args()
    setup_logging(args.verbose, args.no_color)

    holder = SnapshotHolder(load_snapshot(args.snapshot))
    server = build_server(holder, args.host, args.port)

    try:
        asyncio.run(run_server(server, on_reload=lambda: reload_snapshot(holder, args.snapshot)))
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()

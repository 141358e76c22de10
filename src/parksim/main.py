# File: src/parksim/main.py
"""
Main application entry point for the Parking Simulator
Wires configuration, logging, the application service and the console
"""

from datetime import datetime
from typing import List, Optional
import argparse
import logging
import os
import sys

from pydantic import ValidationError

from .config import AppConfig, Settings
from .infrastructure.factories import ParkingServiceFactory
from .presentation.console import ParkingConsoleApp


def setup_logging(settings: Settings) -> logging.Logger:
    """
    Setup application logging configuration
    Logs go to the log file when one is configured, otherwise to stderr
    """
    handlers: List[logging.Handler] = []

    if settings.log_file:
        log_dir = os.path.dirname(settings.log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(settings.log_file))
    else:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=settings.log_level_value,
        format=AppConfig.LOG_FORMAT,
        handlers=handlers,
        force=True
    )
    return logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parksim",
        description=f"{AppConfig.APP_NAME} - single-facility parking simulation"
    )
    parser.add_argument("--capacity", type=int, help="number of parking spots")
    parser.add_argument("--log-level", help="logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--log-file", help="write logs to this file instead of stderr")
    parser.add_argument(
        "--start-time",
        type=datetime.fromisoformat,
        help="initial simulation time, ISO 8601 (default: now)"
    )
    parser.add_argument("--version", action="version", version=AppConfig.VERSION)
    return parser


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    """Environment settings overridden by command-line flags"""
    args = build_parser().parse_args(argv)
    return Settings.from_env().merged_with(
        capacity=args.capacity,
        log_level=args.log_level,
        log_file=args.log_file,
        start_time=args.start_time
    )


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings(argv)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logger = setup_logging(settings)
    logger.info(f"Starting {AppConfig.APP_NAME} with {settings.capacity} spots")

    service = ParkingServiceFactory.create_service(settings)
    app = ParkingConsoleApp(service)
    try:
        app.run()
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted, shutting down")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())

# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (hydrating the store), then runs the
console loop in the main thread until /exit, EOF, Ctrl+C or SIGTERM.
"""

from __future__ import annotations

import logging
import signal

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (log file: %s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings)

    # SIGTERM ends the console loop the same way Ctrl+C does.
    try:
        signal.signal(signal.SIGTERM, signal.default_int_handler)
    except (ValueError, OSError, AttributeError):
        logger.debug("SIGTERM handler not installed on this platform.")

    try:
        run_console_loop(state)
    except KeyboardInterrupt:
        logger.info("Interrupted while handling a command, shutting down...")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()

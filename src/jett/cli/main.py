# src/jett/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then dispatches argv to a command.
The process always exits 0; problems are reported through usage text and
the log.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=getattr(settings, "log_dir", None), console_level=console_level)

    if argv is None:
        argv = sys.argv[1:]

    state = create_initial_state(settings=settings)
    logger.debug("Running %s argv=%s", settings.app_name, argv)
    registry.handle(state, argv)


if __name__ == "__main__":
    main()

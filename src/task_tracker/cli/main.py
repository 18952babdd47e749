# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the TaskManager, runs exactly one command and
exits with its status code.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_context
from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from .commands import registry

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    # choose console log level from settings.log_level
    console_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    setup_logging(
        console_level=console_level,
        log_dir=settings.log_dir if settings.log_to_file else None,
    )

    logger.debug("%s invoked argv=%s", settings.app_name, argv)

    ctx = create_context(settings=settings)
    code = registry.dispatch(ctx, list(argv))

    logger.debug("%s exiting code=%s", settings.app_name, code)
    return code


def run() -> None:
    """Console-script target."""
    sys.exit(main())


if __name__ == "__main__":
    run()

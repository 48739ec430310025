# src/flat_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs one command and maps the outcome to
an exit code: reply on stdout and 0, or an error on stderr and 1.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import UsageError, registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.task_models import StoreError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    args = sys.argv[1:] if argv is None else list(argv)
    state = create_initial_state(settings=settings)

    try:
        reply = registry.handle(state, args)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1
    except StoreError as exc:
        # Full detail goes to the log file; the user gets one line.
        logger.info("Command %s failed: %s", args[:1], exc, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(reply)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface for the miqaat calendar."""

import logging
import sys

from miqaat.config import CalendarConfig

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: CalendarConfig | None = None
) -> None:
    """Send every record to the log file and warnings (by default) to stderr.

    Args:
        verbose: Show INFO records on the console.
        quiet: Show only ERROR records on the console (wins over verbose).
        config: Supplies ``log_dir`` and ``log_filename``; read from the
            environment when omitted.
    """
    config = config or CalendarConfig.from_env()
    config.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(config.log_dir / config.log_filename)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_console_level(verbose, quiet))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)


def main() -> None:
    """Entry point for the ``miqaat-cal`` script."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]

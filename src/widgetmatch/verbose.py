"""Debug logging setup for check runs."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path, verbose: bool = False, logger_name: str = "widgetmatch"
) -> logging.Logger:
    """
    Attach the run's debug.log to a fresh logger.

    Every check in a run logs the screenshot it loaded, the expected color and
    the pixel sampler's verdict here. Pass verbose=True to mirror the same lines
    to stderr while a run is in progress. Call close_logger when the run ends so
    the next run can reuse the name.

    Args:
        debug_file: The run directory's debug.log (created with its parents)
        verbose: Also echo to stderr.
        logger_name: Must not belong to a logger that still has handlers.

    Raises:
        RuntimeError: If a logger with this name is already configured.
    """
    logger = logging.getLogger(logger_name)

    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached; "
            "use a unique logger name per run"
        )

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"
    )

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(debug_file, mode="a")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger


def close_logger(logger: logging.Logger) -> None:
    """Flush, close and detach every handler of ``logger``."""
    for handler in list(logger.handlers):
        handler.flush()
        handler.close()
        logger.removeHandler(handler)

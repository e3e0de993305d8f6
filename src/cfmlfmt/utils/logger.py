"""Logging helpers for cfmlfmt.

Every logger handed out here lives under the ``cfmlfmt`` namespace, so an
editor host or the CLI tunes the whole formatter through one parent logger.
The formatter only logs at DEBUG (per-call line counts and blocks left
open) and WARNING (an internal error that made it return the input
unchanged).

Example:
    >>> import logging
    >>> logging.getLogger("cfmlfmt").setLevel(logging.ERROR)  # hide fallbacks
    >>> from cfmlfmt.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("formatted %d lines, %d blocks left open", 12, 0)
"""

from __future__ import annotations

import logging

_ROOT = "cfmlfmt"


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the ``cfmlfmt`` parent logger.

    Module names from inside the package pass through unchanged; anything
    else is nested under the package so records from the CLI and the
    formatter share one handler chain.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("scanner").name
        'cfmlfmt.scanner'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)

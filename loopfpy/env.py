"""Environment-variable helpers.

``LOOPFPY_PROCESSES`` sets the default number of worker processes for grid
evaluation and ``LOOPFPY_LOG_LEVEL`` the default logging level of the command
line.

Notes
-----
These are forgiving: invalid inputs fall back to defaults rather than
raising, to keep batch runs robust.
"""

from __future__ import annotations

import os

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_int_env(name: str, *, default: int, minimum: int = 1) -> int:
    """Parse an integer environment variable with a lower bound.

    Parameters
    ----------
    name:
        Environment variable name.
    default:
        Default value used when the variable is unset or invalid.
    minimum:
        Lower bound enforced on the returned value.

    Returns
    -------
    int
        Parsed integer value (at least ``minimum``).
    """

    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, value)


def normalize_log_level(value: str, default: str = "WARNING") -> str:
    """Normalize a logging level name.

    Returns
    -------
    str
        One of ``{'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}``.
    """

    value = value.strip().upper()
    if value in LOG_LEVELS:
        return value
    return default


def default_processes() -> int:
    return parse_int_env("LOOPFPY_PROCESSES", default=1)


def default_log_level() -> str:
    return normalize_log_level(os.environ.get("LOOPFPY_LOG_LEVEL", ""))

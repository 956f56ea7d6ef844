"""Shared helpers: logging setup, id generation and timestamps."""

# Court Shuffle
# Copyright (C) 2025  Court Shuffle developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import time
from datetime import datetime, timezone

ROOT_LOGGER_NAME = "courtshuffle"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_last_id = 0


def setup_logger(name: str) -> logging.Logger:
    """Get a logger under the application logger hierarchy.

    The first call installs a single stream handler on the ``courtshuffle``
    root logger; child loggers propagate to it.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Configured logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_log_level(level: int) -> None:
    """Set the level of the application root logger."""
    setup_logger(ROOT_LOGGER_NAME).setLevel(level)


def generate_id() -> str:
    """Generate a unique, creation-ordered id.

    Ids are the current time in milliseconds as a decimal string. When two ids
    are requested within the same millisecond the later one is bumped, so ids
    issued by one process are strictly increasing.

    Returns:
        New id string
    """
    global _last_id
    candidate = time.time_ns() // 1_000_000
    if candidate <= _last_id:
        candidate = _last_id + 1
    _last_id = candidate
    return str(candidate)


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

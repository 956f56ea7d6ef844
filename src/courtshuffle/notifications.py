"""Notification sinks for human-readable outcome messages."""

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
from abc import ABC, abstractmethod
from typing import Callable

from courtshuffle.constants import (
    SEVERITY_ERROR,
    SEVERITY_INFO,
    SEVERITY_SUCCESS,
    SEVERITY_WARNING,
)
from courtshuffle.type_hints import Severity
from courtshuffle.utils import setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


SEVERITY_COLORS = {
    SEVERITY_INFO: Colors.OKCYAN,
    SEVERITY_SUCCESS: Colors.OKGREEN,
    SEVERITY_WARNING: Colors.WARNING,
    SEVERITY_ERROR: Colors.FAIL,
}

SEVERITY_LOG_LEVELS = {
    SEVERITY_INFO: logging.INFO,
    SEVERITY_SUCCESS: logging.INFO,
    SEVERITY_WARNING: logging.WARNING,
    SEVERITY_ERROR: logging.WARNING,
}


class Notifier(ABC):
    """Fire-and-forget sink for outcome messages."""

    @abstractmethod
    def notify(self, title: str, message: str, severity: Severity = SEVERITY_INFO) -> None:
        """Surface a message to the user."""


class LogNotifier(Notifier):
    """Writes notifications to the application log."""

    def notify(self, title: str, message: str, severity: Severity = SEVERITY_INFO) -> None:
        level = SEVERITY_LOG_LEVELS.get(severity, logging.INFO)
        logger.log(level, "%s: %s", title, message)


class ConsoleNotifier(Notifier):
    """Prints colored notification lines to the terminal."""

    def __init__(self, output: Callable[[str], None] = print) -> None:
        self.output = output

    def notify(self, title: str, message: str, severity: Severity = SEVERITY_INFO) -> None:
        color = SEVERITY_COLORS.get(severity, Colors.OKCYAN)
        self.output(f"{color}{Colors.BOLD}{title}{Colors.ENDC} {message}")

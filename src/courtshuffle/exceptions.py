"""Exceptions for use in Court Shuffle"""

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


# ========== Base Application Exception ==========


class CourtShuffleException(Exception):
    """Base exception for all Court Shuffle errors.

    Every error raised by a roster or match operation inherits from this class,
    so a caller can reject a single user action with one except clause.
    """

    title = "Error"


# ========== Validation Exceptions ==========


class ValidationException(CourtShuffleException):
    """Base exception for rejected user input."""

    pass


class EmptyNameException(ValidationException):
    """Raised when a player, group or court name is empty or whitespace."""

    pass


class DuplicateNameException(ValidationException):
    """Raised when a player name already exists in the same group."""

    pass


class MissingSelectionException(ValidationException):
    """Raised when a group or court must be selected but is not."""

    pass


class InvalidMatchTypeException(ValidationException):
    """Raised for a match type other than singles or doubles."""

    pass


class InvalidLimitException(ValidationException):
    """Raised when a requested number of matches is not positive."""

    pass


# ========== Precondition Exceptions ==========


class PreconditionException(CourtShuffleException):
    """Base exception for operations not allowed in the current state."""

    pass


class InsufficientPlayersException(PreconditionException):
    """Raised when the pool is too small for the requested match type."""

    title = "Not Enough Players"


class GroupNotEmptyException(PreconditionException):
    """Raised when deleting a group that still has players."""

    title = "Group Not Empty"


# ========== Lookup Exceptions ==========


class NotFoundException(CourtShuffleException):
    """Base exception for references to entities that do not exist."""

    pass


class GroupNotFoundException(NotFoundException):
    """Raised when a group id does not match any group."""

    pass


class CourtNotFoundException(NotFoundException):
    """Raised when a court id does not match any court."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(CourtShuffleException):
    """Base exception for storage errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(CourtShuffleException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass

"""Name checks for players, groups and courts."""

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

from dataclasses import dataclass
from typing import Iterable, Optional

from courtshuffle.exceptions import DuplicateNameException, EmptyNameException


@dataclass(frozen=True)
class NameCheck:
    """Outcome of checking a name typed for a player, group or court.

    Attributes:
        name: The trimmed name ("" when the input was empty)
        error: Message shown to the user, or None if the name is usable
        duplicate: True when the name clashes with an existing one
    """

    name: str = ""
    error: Optional[str] = None
    duplicate: bool = False

    def __bool__(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> str:
        """Return the trimmed name, or raise the matching exception.

        Raises:
            DuplicateNameException: The name is already taken
            EmptyNameException: The name is empty or whitespace
        """
        if self.duplicate:
            raise DuplicateNameException(self.error)
        if self.error is not None:
            raise EmptyNameException(self.error)
        return self.name


# ========== Name Validation ==========


def check_name(
    name: Optional[str], label: str = "player", existing: Iterable[str] = ()
) -> NameCheck:
    """Check a player, group or court name.

    Args:
        name: Raw name as typed by the user
        label: Entity kind used in the error message
        existing: Names already in use; compared ignoring case

    Example:
        >>> check_name("  Alice ").name
        'Alice'
        >>> bool(check_name("alice", existing=["Alice"]))
        False
    """
    clean = name.strip() if name else ""
    if not clean:
        return NameCheck(error=f"Please enter a {label} name")

    folded = clean.casefold()
    if any(other.casefold() == folded for other in existing):
        return NameCheck(
            name=clean,
            error=f"{label.capitalize()} already exists",
            duplicate=True,
        )
    return NameCheck(name=clean)


def validate_name_strict(name: Optional[str], label: str = "player") -> str:
    """Validate a name and raise exception if invalid.

    Returns:
        The trimmed name

    Raises:
        EmptyNameException: If the name is empty or whitespace
    """
    return check_name(name, label).raise_for_error()


def ensure_unique_name(name: str, existing: Iterable[str]) -> None:
    """Raise if ``name`` matches any of ``existing`` ignoring case.

    Raises:
        DuplicateNameException: On a case-insensitive match
    """
    check_name(name, existing=existing).raise_for_error()

"""Court data class."""

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
from typing import Any, Dict


@dataclass(frozen=True)
class Court:
    """A playing court.

    There is no reservation logic, so ``is_available`` is always True.
    """

    id: str
    name: str
    is_available: bool = True
    date_created: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize court to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "isAvailable": self.is_available,
            "dateCreated": self.date_created,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Court":
        """Deserialize court from dictionary."""
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            is_available=bool(data.get("isAvailable", True)),
            date_created=data.get("dateCreated", ""),
        )

"""Group data class."""

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

from courtshuffle.constants import GROUP_COLORS


@dataclass(frozen=True)
class Group:
    """A named set of players sharing a roster scope.

    Attributes
    ----------
    id : str
        Unique identifier.
    name : str
        Trimmed display name.
    color : str
        Cosmetic tag taken from ``GROUP_COLORS``.
    date_created : str
        ISO-8601 creation timestamp.
    """

    id: str
    name: str
    color: str = GROUP_COLORS[0]
    date_created: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "dateCreated": self.date_created,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Group":
        """Deserialize group from dictionary."""
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            color=data.get("color", GROUP_COLORS[0]),
            date_created=data.get("dateCreated", ""),
        )


def color_for_index(index: int) -> str:
    """Palette color for the group created when ``index`` groups exist."""
    return GROUP_COLORS[index % len(GROUP_COLORS)]

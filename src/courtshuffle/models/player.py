"""Player data class."""

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
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Player:
    """A registered participant.

    Attributes
    ----------
    id : str
        Unique, creation-ordered identifier.
    name : str
        Trimmed display name.
    group_id : str or None
        Owning group, or None in the single-roster variant.
    date_added : str
        ISO-8601 creation timestamp.
    """

    id: str
    name: str
    group_id: Optional[str] = None
    date_added: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        data: Dict[str, Any] = {"id": self.id, "name": self.name}
        if self.group_id is not None:
            data["groupId"] = self.group_id
        data["dateAdded"] = self.date_added
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        group_id = data.get("groupId")
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            group_id=str(group_id) if group_id is not None else None,
            date_added=data.get("dateAdded", ""),
        )

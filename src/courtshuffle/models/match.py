"""Match and rejection data classes."""

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
from typing import Any, Dict, Optional, Tuple

from courtshuffle.constants import MATCH_DOUBLES, REQUIRED_PLAYERS
from courtshuffle.models.player import Player
from courtshuffle.type_hints import Team


@dataclass(frozen=True)
class Match:
    """A generated matchup.

    Attributes
    ----------
    id : str
        Unique identifier.
    type : str
        ``"singles"`` or ``"doubles"``.
    players : tuple of Player
        Snapshots of the selected players in draw order. For doubles the first
        two form Team 1 and the last two Team 2; for singles the two entries
        are the opposing sides.
    group_id : str or None
        Group the pool was drawn from.
    court_id : str or None
        Court assigned to the match. May dangle once the court is deleted.
    timestamp : str
        ISO-8601 generation time.
    """

    id: str
    type: str
    players: Tuple[Player, ...]
    group_id: Optional[str] = None
    court_id: Optional[str] = None
    timestamp: str = ""

    @property
    def teams(self) -> Tuple[Team, Team]:
        """The two opposing sides, in draw order."""
        half = len(self.players) // 2
        return self.players[:half], self.players[half:]

    @property
    def is_doubles(self) -> bool:
        return self.type == MATCH_DOUBLES

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        data: Dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "players": [p.to_dict() for p in self.players],
        }
        if self.group_id is not None:
            data["groupId"] = self.group_id
        if self.court_id is not None:
            data["courtId"] = self.court_id
        data["timestamp"] = self.timestamp
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary.

        Raises:
            ValueError: If the type is unknown or the player count does not
                match it
        """
        match_type = data["type"]
        if match_type not in REQUIRED_PLAYERS:
            raise ValueError(f"Unknown match type: {match_type!r}")
        players = tuple(Player.from_dict(p) for p in data["players"])
        if len(players) != REQUIRED_PLAYERS[match_type]:
            raise ValueError(
                f"A {match_type} match needs {REQUIRED_PLAYERS[match_type]} "
                f"players, got {len(players)}"
            )
        group_id = data.get("groupId")
        court_id = data.get("courtId")
        return cls(
            id=str(data["id"]),
            type=match_type,
            players=players,
            group_id=str(group_id) if group_id is not None else None,
            court_id=str(court_id) if court_id is not None else None,
            timestamp=data.get("timestamp", ""),
        )


@dataclass(frozen=True)
class Rejection:
    """A refused match request, carrying the reason shown to the user."""

    reason: str
    title: str = "Error"

    def __bool__(self) -> bool:
        return False

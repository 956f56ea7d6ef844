"""Container for the in-memory roster state."""

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

from dataclasses import dataclass, field
from typing import List, Optional

from courtshuffle.models.court import Court
from courtshuffle.models.group import Group
from courtshuffle.models.match import Match
from courtshuffle.models.player import Player


@dataclass
class RosterState:
    """All collections and selections of one session.

    Attributes
    ----------
    players : list of Player
        Roster in insertion order.
    groups : list of Group
        Groups in creation order.
    courts : list of Court
        Courts in creation order.
    matches : list of Match
        Match history, newest first.
    current_match : Match or None
        Most recently generated match, held for display. Not persisted.
    active_group_id : str or None
        Selected group used as default context.
    active_court_id : str or None
        Selected court used as default context.
    """

    players: List[Player] = field(default_factory=list)
    groups: List[Group] = field(default_factory=list)
    courts: List[Court] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    current_match: Optional[Match] = None
    active_group_id: Optional[str] = None
    active_court_id: Optional[str] = None

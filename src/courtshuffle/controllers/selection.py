"""Derived views over the roster state.

Every view is recomputed from the current collections on each call, so it
always reflects the latest mutation.
"""

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

from typing import List, Optional

from courtshuffle.constants import UNKNOWN_COURT_NAME, UNKNOWN_GROUP_NAME
from courtshuffle.models import Court, Group, Player, RosterState


def find_player(state: RosterState, player_id: Optional[str]) -> Optional[Player]:
    return next((p for p in state.players if p.id == player_id), None)


def find_group(state: RosterState, group_id: Optional[str]) -> Optional[Group]:
    return next((g for g in state.groups if g.id == group_id), None)


def find_court(state: RosterState, court_id: Optional[str]) -> Optional[Court]:
    return next((c for c in state.courts if c.id == court_id), None)


def players_in_group(state: RosterState, group_id: Optional[str]) -> List[Player]:
    """Players whose group is ``group_id``, in roster order."""
    return [p for p in state.players if p.group_id == group_id]


def current_group_players(state: RosterState, groups_enabled: bool) -> List[Player]:
    """The default match pool.

    Args:
        state: Roster state
        groups_enabled: When False the whole roster is returned

    Returns:
        Players of the active group, or the full roster
    """
    if not groups_enabled:
        return list(state.players)
    return players_in_group(state, state.active_group_id)


def current_group(state: RosterState) -> Optional[Group]:
    return find_group(state, state.active_group_id)


def current_court(state: RosterState) -> Optional[Court]:
    return find_court(state, state.active_court_id)


def court_name(state: RosterState, court_id: Optional[str]) -> str:
    """Display name of a court; deleted courts resolve to a placeholder."""
    court = find_court(state, court_id)
    return court.name if court else UNKNOWN_COURT_NAME


def group_name(state: RosterState, group_id: Optional[str]) -> str:
    """Display name of a group; deleted groups resolve to a placeholder."""
    group = find_group(state, group_id)
    return group.name if group else UNKNOWN_GROUP_NAME

"""Data models for Court Shuffle."""

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

from courtshuffle.models.court import Court
from courtshuffle.models.group import Group, color_for_index
from courtshuffle.models.match import Match, Rejection
from courtshuffle.models.player import Player
from courtshuffle.models.roster_state import RosterState
from courtshuffle.models.session_config import SessionConfig, load_config

__all__ = [
    "Court",
    "Group",
    "Match",
    "Player",
    "Rejection",
    "RosterState",
    "SessionConfig",
    "color_for_index",
    "load_config",
]

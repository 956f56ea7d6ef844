"""Roster, selection and match generation controllers."""

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

from courtshuffle.controllers import selection
from courtshuffle.controllers.match_generator import MatchGenerator, required_count
from courtshuffle.controllers.repository import EntityRepository

__all__ = [
    "EntityRepository",
    "MatchGenerator",
    "required_count",
    "selection",
]

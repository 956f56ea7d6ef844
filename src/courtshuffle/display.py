"""
Text rendering of the roster, the current match and match history.
This module provides the shared formatting used by the command line.
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

from typing import Iterable, List, Optional

from dateutil import parser as date_parser
from dateutil import tz

from courtshuffle.controllers import selection
from courtshuffle.models import Court, Group, Match, Player, RosterState
from courtshuffle.utils import setup_logger

logger = setup_logger(__name__)


def format_timestamp(timestamp: str, date_only: bool = False) -> str:
    """Render an ISO-8601 timestamp in local time.

    Unparseable values are returned unchanged.
    """
    if not timestamp:
        return ""
    try:
        moment = date_parser.isoparse(timestamp)
    except (ValueError, OverflowError):
        logger.debug("Cannot parse timestamp %r", timestamp)
        return timestamp

    if moment.tzinfo is not None:
        moment = moment.astimezone(tz.tzlocal())
    if date_only:
        return moment.strftime("%Y-%m-%d")
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def format_player_list(players: List[Player]) -> List[str]:
    """Numbered roster lines, in insertion order."""
    if not players:
        return ["No players added yet. Add some players to start!"]
    return [f"{index:3}. {p.name}  [{p.id}]" for index, p in enumerate(players, 1)]


def format_groups(groups: Iterable[Group], state: RosterState) -> List[str]:
    lines = []
    for group in groups:
        marker = "*" if group.id == state.active_group_id else " "
        count = len(selection.players_in_group(state, group.id))
        lines.append(f" {marker} {group.name} ({count}) {group.color}  [{group.id}]")
    return lines or ["No groups yet."]


def format_courts(courts: Iterable[Court], state: RosterState) -> List[str]:
    lines = []
    for court in courts:
        marker = "*" if court.id == state.active_court_id else " "
        lines.append(f" {marker} {court.name}  [{court.id}]")
    return lines or ["No courts yet."]


def format_match(match: Match, state: Optional[RosterState] = None) -> List[str]:
    """Lines showing a match the way the match card lays it out.

    Singles put the two players against each other on one line; doubles show
    Team 1 (first two players) and Team 2 (last two players).
    """
    lines = [f"Current Match - {match.type.capitalize()}"]
    if match.is_doubles:
        team_one, team_two = match.teams
        lines.append("Team 1: " + " & ".join(p.name for p in team_one))
        lines.append("  VS")
        lines.append("Team 2: " + " & ".join(p.name for p in team_two))
    else:
        lines.append(f"{match.players[0].name}  VS  {match.players[1].name}")

    if state is not None:
        if match.group_id is not None:
            lines.append(f"Group: {selection.group_name(state, match.group_id)}")
        if match.court_id is not None:
            lines.append(f"Court: {selection.court_name(state, match.court_id)}")
    lines.append(f"Generated: {format_timestamp(match.timestamp)}")
    return lines


def format_history_entry(match: Match) -> str:
    """One-line summary of a past match, teams joined with "&"."""
    names = " vs ".join(" & ".join(p.name for p in team) for team in match.teams)
    when = format_timestamp(match.timestamp, date_only=True)
    return f"{match.type.capitalize():8} {when:10}  {names}"


def format_recent_matches(matches: List[Match]) -> List[str]:
    if not matches:
        return ["No matches yet."]
    return [format_history_entry(m) for m in matches]

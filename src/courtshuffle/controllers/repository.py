"""Entity repository for players, groups, courts and match history.

Every mutator validates first, then updates the in-memory state, rewrites the
affected collection to the store and emits a notification. A rejected call
raises before anything changes, and a failed write puts the in-memory state
back the way it was.
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

import dataclasses
from contextlib import contextmanager
from typing import Iterator, List, Optional

from courtshuffle.constants import SEVERITY_SUCCESS
from courtshuffle.controllers import selection
from courtshuffle.exceptions import (
    CourtNotFoundException,
    GroupNotEmptyException,
    GroupNotFoundException,
    InvalidLimitException,
    MissingSelectionException,
    ResourceException,
)
from courtshuffle.models import (
    Court,
    Group,
    Match,
    Player,
    RosterState,
    SessionConfig,
    color_for_index,
)
from courtshuffle.notifications import LogNotifier, Notifier
from courtshuffle.storage import RosterPersistence
from courtshuffle.utils import generate_id, setup_logger, utc_now_iso
from courtshuffle.utils.validation import ensure_unique_name, validate_name_strict

logger = setup_logger(__name__)


class EntityRepository:
    """Owns the roster state and applies all mutations to it.

    Attributes:
        state: The in-memory collections and selections
        persistence: Writes collections back to the store
        config: Session configuration
        notifier: Receives success messages
    """

    def __init__(
        self,
        state: RosterState,
        persistence: RosterPersistence,
        config: Optional[SessionConfig] = None,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self.state = state
        self.persistence = persistence
        self.config = config or persistence.config
        self.notifier = notifier or LogNotifier()

    @contextmanager
    def _saving(self) -> Iterator[None]:
        """Restore the in-memory state if writing it to the store fails."""
        snapshot = dataclasses.replace(
            self.state,
            players=list(self.state.players),
            groups=list(self.state.groups),
            courts=list(self.state.courts),
            matches=list(self.state.matches),
        )
        try:
            yield
        except ResourceException:
            for f in dataclasses.fields(RosterState):
                setattr(self.state, f.name, getattr(snapshot, f.name))
            logger.error("Save failed, roster changes were undone")
            raise

    # ========== Player Management ==========

    def add_player(self, name: str, group_id: Optional[str] = None) -> Player:
        """Add a player to the roster.

        Args:
            name: Player name; surrounding whitespace is dropped
            group_id: Owning group. Defaults to the active group when groups
                are enabled; ignored otherwise.

        Returns:
            The new Player

        Raises:
            EmptyNameException: Empty or whitespace name
            MissingSelectionException: A group is required but none is set
            GroupNotFoundException: Unknown group id
            DuplicateNameException: Same name (ignoring case) in the same scope
            FileSaveException: The store could not be written
        """
        clean_name = validate_name_strict(name, "player")

        if self.config.groups_enabled:
            if group_id is None:
                group_id = self.state.active_group_id
            if group_id is None and self.config.require_group:
                raise MissingSelectionException("Please select a group first")
            if group_id is not None and selection.find_group(self.state, group_id) is None:
                raise GroupNotFoundException(f"Group {group_id} does not exist")
            scope = selection.players_in_group(self.state, group_id)
        else:
            group_id = None
            scope = self.state.players

        ensure_unique_name(clean_name, (p.name for p in scope))

        player = Player(
            id=generate_id(),
            name=clean_name,
            group_id=group_id,
            date_added=utc_now_iso(),
        )
        with self._saving():
            self.state.players.append(player)
            self.persistence.save_players(self.state)

        logger.info(f"Added player: {player.name} ({player.id})")
        self.notifier.notify(
            "Success", f"{player.name} added to the roster!", SEVERITY_SUCCESS
        )
        return player

    def remove_player(self, player_id: str) -> Optional[Player]:
        """Remove a player from the roster.

        An unknown id is not an error: nothing changes and None is returned.

        Args:
            player_id: ID of player to remove

        Returns:
            The removed Player, or None if not found
        """
        player = selection.find_player(self.state, player_id)
        if player is None:
            logger.debug(f"Remove player: no player with id {player_id}")
            return None

        with self._saving():
            self.state.players = [p for p in self.state.players if p.id != player_id]
            self.persistence.save_players(self.state)

        logger.info(f"Removed player: {player.name} ({player_id})")
        self.notifier.notify(
            "Player Removed", f"{player.name} has been removed from the roster"
        )
        return player

    def clear_players(self, group_id: Optional[str] = None) -> List[Player]:
        """Remove every player in scope and drop the current match.

        Match history is kept.

        Args:
            group_id: Group to clear when groups are enabled; None then means
                the players without a group. Ignored when groups are disabled,
                where the whole roster is cleared.

        Returns:
            The removed players
        """
        if self.config.groups_enabled:
            removed = selection.players_in_group(self.state, group_id)
            kept = [p for p in self.state.players if p.group_id != group_id]
        else:
            removed = list(self.state.players)
            kept = []

        with self._saving():
            self.state.players = kept
            self.state.current_match = None
            self.persistence.save_players(self.state)

        logger.info(f"Cleared {len(removed)} players")
        self.notifier.notify("All Players Cleared", "Player roster has been reset")
        return removed

    # ========== Group Management ==========

    def add_group(self, name: str) -> Group:
        """Create a group.

        The color is taken from the palette by the current group count. The
        first group created while none is active becomes the active group.

        Raises:
            EmptyNameException: Empty or whitespace name
        """
        clean_name = validate_name_strict(name, "group")
        group = Group(
            id=generate_id(),
            name=clean_name,
            color=color_for_index(len(self.state.groups)),
            date_created=utc_now_iso(),
        )
        with self._saving():
            self.state.groups.append(group)
            self.persistence.save_groups(self.state)

            if self.state.active_group_id is None:
                self.state.active_group_id = group.id
                self.persistence.save_active_group(self.state)

        logger.info(f"Added group: {group.name} ({group.id})")
        self.notifier.notify("Group Created", f"{group.name} is ready", SEVERITY_SUCCESS)
        return group

    def remove_group(self, group_id: str) -> Optional[Group]:
        """Delete a group that has no players.

        If the group was active another remaining group becomes active, or
        the selection is cleared when none remain.

        Returns:
            The removed Group, or None if not found

        Raises:
            GroupNotEmptyException: Players still reference the group
        """
        group = selection.find_group(self.state, group_id)
        if group is None:
            logger.debug(f"Remove group: no group with id {group_id}")
            return None

        members = selection.players_in_group(self.state, group_id)
        if members:
            raise GroupNotEmptyException(
                f"Cannot delete {group.name}: it still has {len(members)} "
                f"player{'s' if len(members) != 1 else ''}"
            )

        with self._saving():
            self.state.groups = [g for g in self.state.groups if g.id != group_id]
            self.persistence.save_groups(self.state)

            if self.state.active_group_id == group_id:
                self.state.active_group_id = (
                    self.state.groups[0].id if self.state.groups else None
                )
                self.persistence.save_active_group(self.state)

        logger.info(f"Removed group: {group.name} ({group_id})")
        self.notifier.notify("Group Deleted", f"{group.name} has been deleted")
        return group

    def select_group(self, group_id: Optional[str]) -> Optional[Group]:
        """Make a group active, or clear the selection with None.

        Raises:
            GroupNotFoundException: Unknown group id
        """
        group = None
        if group_id is not None:
            group = selection.find_group(self.state, group_id)
            if group is None:
                raise GroupNotFoundException(f"Group {group_id} does not exist")

        with self._saving():
            self.state.active_group_id = group_id
            self.persistence.save_active_group(self.state)
        logger.info(f"Active group: {group.name if group else 'None'}")
        return group

    # ========== Court Management ==========

    def add_court(self, name: str) -> Court:
        """Create a court; the first one becomes active if none is.

        Raises:
            EmptyNameException: Empty or whitespace name
        """
        clean_name = validate_name_strict(name, "court")
        court = Court(id=generate_id(), name=clean_name, date_created=utc_now_iso())
        with self._saving():
            self.state.courts.append(court)
            self.persistence.save_courts(self.state)

            if self.state.active_court_id is None:
                self.state.active_court_id = court.id
                self.persistence.save_active_court(self.state)

        logger.info(f"Added court: {court.name} ({court.id})")
        self.notifier.notify("Court Added", f"{court.name} is available", SEVERITY_SUCCESS)
        return court

    def remove_court(self, court_id: str) -> Optional[Court]:
        """Delete a court.

        Matches played on it keep their court id.

        Returns:
            The removed Court, or None if not found
        """
        court = selection.find_court(self.state, court_id)
        if court is None:
            logger.debug(f"Remove court: no court with id {court_id}")
            return None

        with self._saving():
            self.state.courts = [c for c in self.state.courts if c.id != court_id]
            self.persistence.save_courts(self.state)

            if self.state.active_court_id == court_id:
                self.state.active_court_id = (
                    self.state.courts[0].id if self.state.courts else None
                )
                self.persistence.save_active_court(self.state)

        logger.info(f"Removed court: {court.name} ({court_id})")
        self.notifier.notify("Court Deleted", f"{court.name} has been deleted")
        return court

    def select_court(self, court_id: Optional[str]) -> Optional[Court]:
        """Make a court active, or clear the selection with None.

        Raises:
            CourtNotFoundException: Unknown court id
        """
        court = None
        if court_id is not None:
            court = selection.find_court(self.state, court_id)
            if court is None:
                raise CourtNotFoundException(f"Court {court_id} does not exist")

        with self._saving():
            self.state.active_court_id = court_id
            self.persistence.save_active_court(self.state)
        logger.info(f"Active court: {court.name if court else 'None'}")
        return court

    # ========== Match History ==========

    def record_match(self, match: Match) -> None:
        """Make ``match`` current and put it at the head of the history."""
        with self._saving():
            self.state.current_match = match
            self.state.matches.insert(0, match)
            self.persistence.save_matches(self.state)

        label = match.type.capitalize()
        logger.info(f"Recorded {match.type} match {match.id}")
        self.notifier.notify(
            "Match Generated!", f"{label} match ready to play!", SEVERITY_SUCCESS
        )

    def recent_matches(self, limit: Optional[int] = None) -> List[Match]:
        """Newest matches first, at most ``limit`` (configured default).

        Raises:
            InvalidLimitException: If ``limit`` is less than one
        """
        if limit is None:
            limit = self.config.recent_limit
        if limit < 1:
            raise InvalidLimitException(f"Match limit must be at least 1, got {limit}")
        return self.state.matches[:limit]

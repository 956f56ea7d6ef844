"""Main MatchSession class - entry point for every user action.

The session loads the roster from a store, wires the repository, match
generator and selection views together, and turns rejected actions into
notifications instead of exceptions.
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

import random
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from courtshuffle.constants import SEVERITY_ERROR
from courtshuffle.controllers import EntityRepository, MatchGenerator, selection
from courtshuffle.exceptions import (
    CourtShuffleException,
    NotFoundException,
    PreconditionException,
    ValidationException,
)
from courtshuffle.models import (
    Court,
    Group,
    Match,
    Player,
    Rejection,
    RosterState,
    SessionConfig,
)
from courtshuffle.notifications import LogNotifier, Notifier
from courtshuffle.storage import JsonFileStore, KeyValueStore, RosterPersistence
from courtshuffle.type_hints import MatchOutcome, MatchType
from courtshuffle.utils import setup_logger

logger = setup_logger(__name__)

# Errors that reject a single action without touching state
REJECTED_ACTION_ERRORS = (ValidationException, PreconditionException, NotFoundException)


class MatchSession:
    """One match-making session backed by a store.

    The session reads every collection once on construction. Each action
    either completes (state updated, store rewritten, success notification)
    or is rejected (error notification, nothing changed).
    """

    def __init__(
        self,
        store: KeyValueStore,
        config: Optional[SessionConfig] = None,
        notifier: Optional[Notifier] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize a session.

        Args:
            store: Key-value store holding the persisted collections
            config: Session configuration (defaults to a single roster)
            notifier: Sink for outcome messages (defaults to the log)
            rng: Random source for match generation
        """
        self.config = config or SessionConfig()
        self.notifier = notifier or LogNotifier()
        self.persistence = RosterPersistence(store, self.config)
        self.repository = EntityRepository(
            self.persistence.load_state(),
            self.persistence,
            self.config,
            self.notifier,
        )
        self.generator = MatchGenerator(self.config, rng)

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        config: Optional[SessionConfig] = None,
        notifier: Optional[Notifier] = None,
        rng: Optional[random.Random] = None,
    ) -> "MatchSession":
        """Create a session stored in a JSON file."""
        return cls(JsonFileStore(path), config, notifier, rng)

    # ========== Views ==========

    @property
    def state(self) -> RosterState:
        return self.repository.state

    @property
    def players(self) -> List[Player]:
        return list(self.state.players)

    @property
    def groups(self) -> List[Group]:
        return list(self.state.groups)

    @property
    def courts(self) -> List[Court]:
        return list(self.state.courts)

    @property
    def match_history(self) -> List[Match]:
        return list(self.state.matches)

    @property
    def current_match(self) -> Optional[Match]:
        return self.state.current_match

    @property
    def current_group(self) -> Optional[Group]:
        return selection.current_group(self.state)

    @property
    def current_court(self) -> Optional[Court]:
        return selection.current_court(self.state)

    @property
    def current_group_players(self) -> List[Player]:
        """The pool used for match generation."""
        return selection.current_group_players(self.state, self.config.groups_enabled)

    def recent_matches(self, limit: Optional[int] = None) -> List[Match]:
        """Newest matches first; an invalid limit is rejected and gives []."""
        return self._run(self.repository.recent_matches, limit) or []

    # ========== Actions ==========

    def _run(self, action: Callable[..., Any], *args: Any) -> Any:
        """Run a repository action, reporting a rejection to the notifier."""
        try:
            return action(*args)
        except REJECTED_ACTION_ERRORS as e:
            self._reject(e)
            return None

    def _reject(self, error: CourtShuffleException) -> Rejection:
        logger.warning(f"Action rejected ({type(error).__name__}): {error}")
        self.notifier.notify(error.title, str(error), SEVERITY_ERROR)
        return Rejection(reason=str(error), title=error.title)

    def add_player(self, name: str, group_id: Optional[str] = None) -> Optional[Player]:
        return self._run(self.repository.add_player, name, group_id)

    def remove_player(self, player_id: str) -> Optional[Player]:
        return self._run(self.repository.remove_player, player_id)

    def clear_players(self) -> List[Player]:
        """Clear the active group (or the whole roster without groups).

        With groups enabled and no active group, only players without a group
        are removed.
        """
        scope = self.state.active_group_id if self.config.groups_enabled else None
        return self._run(self.repository.clear_players, scope) or []

    def add_group(self, name: str) -> Optional[Group]:
        return self._run(self.repository.add_group, name)

    def remove_group(self, group_id: str) -> Optional[Group]:
        return self._run(self.repository.remove_group, group_id)

    def select_group(self, group_id: Optional[str]) -> Optional[Group]:
        return self._run(self.repository.select_group, group_id)

    def add_court(self, name: str) -> Optional[Court]:
        return self._run(self.repository.add_court, name)

    def remove_court(self, court_id: str) -> Optional[Court]:
        return self._run(self.repository.remove_court, court_id)

    def select_court(self, court_id: Optional[str]) -> Optional[Court]:
        return self._run(self.repository.select_court, court_id)

    def generate_match(self, match_type: MatchType) -> MatchOutcome:
        """Generate a match from the current pool.

        Args:
            match_type: "singles" or "doubles"

        Returns:
            The new Match, now current and first in history, or a Rejection
            with the reason when a precondition is not met
        """
        group_id = self.state.active_group_id if self.config.groups_enabled else None
        try:
            match = self.generator.generate_match(
                match_type,
                self.current_group_players,
                group_id=group_id,
                court_id=self.state.active_court_id,
            )
        except REJECTED_ACTION_ERRORS as e:
            return self._reject(e)

        self.repository.record_match(match)
        return match

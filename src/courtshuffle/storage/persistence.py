"""Reading and writing whole collections to a key-value store."""

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

import json
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

from courtshuffle.constants import (
    ACTIVE_COURT_KEY,
    ACTIVE_GROUP_KEY,
    COURTS_KEY,
    GROUPS_KEY,
    MATCHES_KEY,
    PLAYERS_KEY,
)
from courtshuffle.models import Court, Group, Match, Player, RosterState, SessionConfig
from courtshuffle.storage.store import KeyValueStore
from courtshuffle.utils import setup_logger

logger = setup_logger(__name__)

T = TypeVar("T")


class RosterPersistence:
    """Serializes roster collections to a store under configured keys.

    Every save writes the complete collection; there is no diffing. Loading
    never raises: absent keys give empty collections and malformed blobs or
    records are logged and dropped.
    """

    def __init__(self, store: KeyValueStore, config: SessionConfig) -> None:
        self.store = store
        self.config = config

    # ========== Loading ==========

    def load_state(self) -> RosterState:
        """Rebuild the full roster state from the store."""
        state = RosterState(
            players=self.load_collection(PLAYERS_KEY, Player.from_dict),
            groups=self.load_collection(GROUPS_KEY, Group.from_dict),
            courts=self.load_collection(COURTS_KEY, Court.from_dict),
            matches=self.load_collection(MATCHES_KEY, Match.from_dict),
            active_group_id=self.load_scalar(ACTIVE_GROUP_KEY),
            active_court_id=self.load_scalar(ACTIVE_COURT_KEY),
        )
        logger.info(
            "Loaded %d players, %d groups, %d courts, %d matches",
            len(state.players),
            len(state.groups),
            len(state.courts),
            len(state.matches),
        )
        return state

    def load_collection(
        self, name: str, from_dict: Callable[[Dict[str, Any]], T]
    ) -> List[T]:
        """Load one collection, tolerating absent or malformed data.

        Args:
            name: Collection name, without the storage prefix
            from_dict: Record deserializer

        Returns:
            Records in stored order
        """
        key = self.config.key(name)
        blob = self.store.get(key)
        if blob is None:
            return []

        try:
            raw = json.loads(blob)
        except (TypeError, ValueError) as e:
            logger.warning("Ignoring malformed data under %s: %s", key, e)
            return []

        if not isinstance(raw, list):
            logger.warning("Ignoring %s: expected a list, got %s", key, type(raw).__name__)
            return []

        items: List[T] = []
        for index, record in enumerate(raw):
            try:
                items.append(from_dict(record))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning("Skipping record %d under %s: %s", index, key, e)
        return items

    def load_scalar(self, name: str) -> Optional[str]:
        """Load a persisted id, or None when absent or malformed."""
        key = self.config.key(name)
        blob = self.store.get(key)
        if blob is None:
            return None
        try:
            value = json.loads(blob)
        except (TypeError, ValueError) as e:
            logger.warning("Ignoring malformed data under %s: %s", key, e)
            return None
        return str(value) if value is not None else None

    # ========== Saving ==========

    def save_collection(self, name: str, items: Sequence[Any]) -> None:
        """Rewrite a whole collection."""
        key = self.config.key(name)
        self.store.set(key, json.dumps([item.to_dict() for item in items]))
        logger.debug("Saved %d records to %s", len(items), key)

    def save_scalar(self, name: str, value: Optional[str]) -> None:
        """Rewrite a persisted id."""
        self.store.set(self.config.key(name), json.dumps(value))

    def save_players(self, state: RosterState) -> None:
        self.save_collection(PLAYERS_KEY, state.players)

    def save_groups(self, state: RosterState) -> None:
        self.save_collection(GROUPS_KEY, state.groups)

    def save_courts(self, state: RosterState) -> None:
        self.save_collection(COURTS_KEY, state.courts)

    def save_matches(self, state: RosterState) -> None:
        self.save_collection(MATCHES_KEY, state.matches)

    def save_active_group(self, state: RosterState) -> None:
        self.save_scalar(ACTIVE_GROUP_KEY, state.active_group_id)

    def save_active_court(self, state: RosterState) -> None:
        self.save_scalar(ACTIVE_COURT_KEY, state.active_court_id)

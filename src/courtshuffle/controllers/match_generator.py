"""Random match generation.

Selects the players for a singles or doubles match by shuffling the pool and
taking the first two or four players.
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
import random
from typing import List, Optional, Sequence

from courtshuffle.constants import REQUIRED_PLAYERS
from courtshuffle.exceptions import (
    InsufficientPlayersException,
    InvalidMatchTypeException,
    MissingSelectionException,
)
from courtshuffle.models import Match, Player, SessionConfig
from courtshuffle.type_hints import MatchType
from courtshuffle.utils import generate_id, setup_logger, utc_now_iso

logger = setup_logger(__name__)


def required_count(match_type: str) -> int:
    """Number of players a match type needs.

    Raises:
        InvalidMatchTypeException: If the type is not singles or doubles
    """
    try:
        return REQUIRED_PLAYERS[match_type]
    except KeyError:
        raise InvalidMatchTypeException(
            f"Unknown match type '{match_type}' (expected singles or doubles)"
        ) from None


class MatchGenerator:
    """Builds matches from a player pool.

    The generator does not touch roster state; recording the match as current
    and in history is done by the caller.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            config: Session configuration, for the group/court requirements
            rng: Random source; pass a seeded ``random.Random`` for
                reproducible draws
        """
        self.config = config or SessionConfig()
        self.random = rng if rng is not None else random.Random()

    def select_players(self, match_type: str, pool: Sequence[Player]) -> List[Player]:
        """Draw the players for a match.

        Every ordering of the pool is equally likely, so the selected players
        and their order are uniform.

        Args:
            match_type: "singles" or "doubles"
            pool: Eligible players

        Returns:
            The selected players in draw order

        Raises:
            InvalidMatchTypeException: Unknown match type
            InsufficientPlayersException: Pool smaller than the type needs
        """
        needed = required_count(match_type)
        if len(pool) < needed:
            raise InsufficientPlayersException(
                f"You need at least {needed} players for {match_type}"
            )

        shuffled = list(pool)
        self.random.shuffle(shuffled)
        return shuffled[:needed]

    def generate_match(
        self,
        match_type: MatchType,
        pool: Sequence[Player],
        group_id: Optional[str] = None,
        court_id: Optional[str] = None,
    ) -> Match:
        """Generate a match from the pool.

        Args:
            match_type: "singles" or "doubles"
            pool: Eligible players (whole roster or one group)
            group_id: Group the pool belongs to
            court_id: Court to play on

        Returns:
            The new Match. Players are copies, so later roster changes do not
            alter it.

        Raises:
            InvalidMatchTypeException: Unknown match type
            MissingSelectionException: Required group or court not set
            InsufficientPlayersException: Pool too small
        """
        required_count(match_type)
        if self.config.require_group and group_id is None:
            raise MissingSelectionException("Please select a group first")
        if self.config.require_court and court_id is None:
            raise MissingSelectionException("Please select a court first")

        selected = self.select_players(match_type, pool)
        match = Match(
            id=generate_id(),
            type=match_type,
            players=tuple(dataclasses.replace(p) for p in selected),
            group_id=group_id,
            court_id=court_id,
            timestamp=utc_now_iso(),
        )
        logger.info(
            "Generated %s match %s: %s",
            match_type,
            match.id,
            ", ".join(p.name for p in match.players),
        )
        return match

"""SessionConfig data class."""

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
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from courtshuffle.constants import DEFAULT_STORAGE_PREFIX, RECENT_MATCHES_LIMIT
from courtshuffle.exceptions import FileLoadException, InvalidConfigurationException


@dataclass
class SessionConfig:
    """Session configuration settings.

    Attributes
    ----------
    groups_enabled : bool
        When False every player belongs to one global roster.
    require_group : bool or None
        Adding players and generating matches need a group. Defaults to
        ``groups_enabled``.
    require_court : bool
        Generating a match needs an active court.
    storage_prefix : str
        Prefix of every store key.
    recent_limit : int
        Number of matches in the recent matches view.
    """

    groups_enabled: bool = False
    require_group: Optional[bool] = None
    require_court: bool = False
    storage_prefix: str = DEFAULT_STORAGE_PREFIX
    recent_limit: int = RECENT_MATCHES_LIMIT

    def __post_init__(self) -> None:
        if self.require_group is None:
            self.require_group = self.groups_enabled
        if self.require_group and not self.groups_enabled:
            raise InvalidConfigurationException(
                "require_group needs groups_enabled"
            )
        if self.recent_limit < 1:
            raise InvalidConfigurationException("recent_limit must be positive")
        if not self.storage_prefix:
            raise InvalidConfigurationException("storage_prefix must not be empty")

    def key(self, name: str) -> str:
        """Full store key for a collection name."""
        return f"{self.storage_prefix}-{name}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "groups_enabled": self.groups_enabled,
            "require_group": self.require_group,
            "require_court": self.require_court,
            "storage_prefix": self.storage_prefix,
            "recent_limit": self.recent_limit,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionConfig":
        """Deserialize configuration from dictionary.

        Raises:
            InvalidConfigurationException: On values of the wrong type
        """
        expected = {
            "groups_enabled": bool,
            "require_group": bool,
            "require_court": bool,
            "storage_prefix": str,
            "recent_limit": int,
        }
        data = {k: v for k, v in data.items() if v is not None}
        for key, kind in expected.items():
            if key not in data:
                continue
            value = data[key]
            # bool is a subclass of int
            if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
                raise InvalidConfigurationException(
                    f"{key} must be of type {kind.__name__}, got {value!r}"
                )
        return cls(
            groups_enabled=data.get("groups_enabled", False),
            require_group=data.get("require_group"),
            require_court=data.get("require_court", False),
            storage_prefix=data.get("storage_prefix", DEFAULT_STORAGE_PREFIX),
            recent_limit=data.get("recent_limit", RECENT_MATCHES_LIMIT),
        )


def load_config(path: Optional[Union[str, Path]]) -> SessionConfig:
    """Load a configuration file.

    A missing path or file gives the default configuration.

    Raises:
        FileLoadException: If the file exists but cannot be read
        InvalidConfigurationException: If the content is not a valid config
    """
    if path is None:
        return SessionConfig()
    path = Path(path)
    if not path.exists():
        return SessionConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise FileLoadException(f"Could not read config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidConfigurationException(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigurationException(f"{path} must contain a JSON object")
    return SessionConfig.from_dict(data)

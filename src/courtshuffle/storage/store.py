"""Key-value stores holding the persisted collections.

A store maps string keys to raw string blobs. It is read once per key at
start-up and written after every mutation.
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

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from courtshuffle.exceptions import FileSaveException
from courtshuffle.utils import setup_logger

logger = setup_logger(__name__)


class KeyValueStore(ABC):
    """Synchronous get/set of named string blobs."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the blob stored under ``key``, or None if absent."""

    @abstractmethod
    def set(self, key: str, blob: str) -> None:
        """Store ``blob`` under ``key``, replacing any previous value."""


class MemoryStore(KeyValueStore):
    """Dictionary backed store, used for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, blob: str) -> None:
        self.data[key] = blob


class JsonFileStore(KeyValueStore):
    """Store kept in a single JSON file mapping key to blob.

    The file is read once on construction and rewritten in full on every
    ``set``. A missing file is an empty store; an unreadable or corrupted file
    is logged and treated as empty.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._data: Dict[str, str] = self._read()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            logger.debug("No data file at %s, starting empty", self.path)
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read data file %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Data file %s does not hold a JSON object", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, blob: str) -> None:
        self._data[key] = blob
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=4)
        except OSError as e:
            raise FileSaveException(f"Could not save {self.path}: {e}") from e
        logger.debug("Wrote %s to %s", key, self.path)

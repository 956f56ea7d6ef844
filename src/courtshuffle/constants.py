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

# --- Constants ---
DEFAULT_DATA_FILE = "courtshuffle.json"
DEFAULT_STORAGE_PREFIX = "badminton"

# Store key names, joined to the storage prefix ("badminton-players", ...)
PLAYERS_KEY = "players"
GROUPS_KEY = "groups"
COURTS_KEY = "courts"
MATCHES_KEY = "matches"
ACTIVE_GROUP_KEY = "active-group"
ACTIVE_COURT_KEY = "active-court"

# Match types
MATCH_SINGLES = "singles"
MATCH_DOUBLES = "doubles"

# Number of players drawn for each match type
REQUIRED_PLAYERS = {
    MATCH_SINGLES: 2,
    MATCH_DOUBLES: 4,
}

# Size of the "recent matches" view
RECENT_MATCHES_LIMIT = 5

# Colors handed out to new groups, cycling
GROUP_COLORS = [
    "#16a34a",  # green
    "#2563eb",  # blue
    "#9333ea",  # purple
    "#ea580c",  # orange
    "#db2777",  # pink
    "#0891b2",  # cyan
    "#ca8a04",  # yellow
    "#dc2626",  # red
]

# Notification severities
SEVERITY_INFO = "info"
SEVERITY_SUCCESS = "success"
SEVERITY_WARNING = "warning"
SEVERITY_ERROR = "error"

UNKNOWN_COURT_NAME = "Unknown court"
UNKNOWN_GROUP_NAME = "Unknown group"

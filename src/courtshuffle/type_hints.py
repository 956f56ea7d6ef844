"""Type hints used in Court Shuffle."""

from typing import Literal, Tuple, Union

# Match type literals (for type hints)
MatchType = Literal["singles", "doubles"]

# Notification severity literals
Severity = Literal["info", "success", "warning", "error"]

# Players on one side of a match
Team = Tuple["Player", ...]
# Outcome of a match generation request
MatchOutcome = Union["Match", "Rejection"]

"""Player-name validation."""

from __future__ import annotations

import re

_NAME_RE = re.compile(r"^[A-Za-z ]+$")


class PlayerNameError(ValueError):
    """Raised for an empty player name or one with characters other than
    letters and spaces."""


def validate_player_name(name: str | None) -> str:
    """Return the trimmed *name*, or raise :class:`PlayerNameError`."""
    if name is None:
        raise PlayerNameError("Player name is required")
    trimmed = name.strip()
    if not trimmed:
        raise PlayerNameError("Player name is required")
    if not _NAME_RE.match(trimmed):
        raise PlayerNameError("Invalid name. Only letters and spaces are allowed.")
    return trimmed

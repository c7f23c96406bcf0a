"""
Input validation for the registration form — field parsers and Pydantic v2 models.

Each ``parse_*`` function takes one raw console line and either returns the
canonical value or raises ValueError. The prompt loops retry on ValueError;
RegistrationData applies the same rules to a whole player payload.
"""
from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from tigerclub.models.player import RegistrationType, Roster

# Fixed retry messages shown by the prompt loops
COUNT_ERROR = (
    f"Invalid input. Please enter a number between "
    f"{Roster.MIN_SIZE} and {Roster.MAX_SIZE}."
)
NAME_ERROR = "Please enter a valid name (at least 2 characters)."
TYPE_ERROR = "Please enter 'Kids' or 'Adult'."
JERSEY_ERROR = "Please enter 'yes' or 'no'."

MIN_NAME_LENGTH = 2

# Optional sign and ASCII digits; no underscores, no decimals
_COUNT_RE = re.compile(r"^[+-]?[0-9]+$")

_YES = ("yes", "y")
_NO  = ("no", "n")


def parse_player_count(raw: str) -> int:
    value = raw.strip()
    if not _COUNT_RE.match(value):
        raise ValueError(COUNT_ERROR)
    count = int(value)
    if not (Roster.MIN_SIZE <= count <= Roster.MAX_SIZE):
        raise ValueError(COUNT_ERROR)
    return count


def parse_name(raw: str) -> str:
    name = raw.strip()
    if len(name) < MIN_NAME_LENGTH:
        raise ValueError(NAME_ERROR)
    return name


def parse_registration_type(raw: str) -> str:
    """Accept 'kids' / 'adult' in any case; return 'Kids' / 'Adult'."""
    value = raw.strip().lower()
    for canonical in RegistrationType.ALL:
        if value == canonical.lower():
            return value.capitalize()
    raise ValueError(TYPE_ERROR)


def parse_jersey_choice(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _YES:
        return True
    if value in _NO:
        return False
    raise ValueError(JERSEY_ERROR)


class RegistrationData(BaseModel):
    """
    One player's registration payload, validated before it joins the roster.

    Attributes
    ----------
    name              : Trimmed player name (at least 2 chars)
    registration_type : "Kids" or "Adult" (accepts any letter case)
    wants_jersey      : bool, or "yes" / "y" / "no" / "n" in any case
    """

    model_config = ConfigDict(frozen=True)

    name: str
    registration_type: Literal["Kids", "Adult"]
    wants_jersey: bool

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: object) -> object:
        if isinstance(v, str):
            return parse_name(v)
        return v

    @field_validator("registration_type", mode="before")
    @classmethod
    def validate_registration_type(cls, v: object) -> object:
        if isinstance(v, str):
            return parse_registration_type(v)
        return v

    @field_validator("wants_jersey", mode="before")
    @classmethod
    def validate_wants_jersey(cls, v: object) -> object:
        # Narrower than pydantic's own bool coercion ("on", "1", "true" ...)
        if isinstance(v, str):
            return parse_jersey_choice(v)
        return v

"""
Domain records for one registration run.

Domain overview
---------------
Roster   — ordered list of players registered in this run (1–4)
  └─ Player — name, registration type, jersey choice, computed total cost
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator, List

from tigerclub.errors import RosterError

# ─────────────────────────── Constants ────────────────────────────────────────

class RegistrationType:
    KIDS  = "Kids"
    ADULT = "Adult"

    ALL: tuple[str, ...] = (KIDS, ADULT)


# ─────────────────────────── Records ──────────────────────────────────────────

@dataclass
class Player:
    """A registered player. ``total_cost`` stays 0 until the roster is priced."""
    name:              str
    registration_type: str
    wants_jersey:      bool
    total_cost:        float = 0.0

    @property
    def jersey_label(self) -> str:
        return "Yes" if self.wants_jersey else "No"


@dataclass
class Roster:
    """
    Players in registration order.

    Filled by the registration session, then priced exactly once by
    ``pricing_service.apply_group_discount``. After pricing the roster is
    closed to new players.
    """
    MIN_SIZE: ClassVar[int] = 1
    MAX_SIZE: ClassVar[int] = 4

    players: List[Player] = field(default_factory=list)
    priced:  bool = False

    def add(self, player: Player) -> None:
        if self.priced:
            raise RosterError("Cannot add players to a roster that has already been priced")
        if len(self.players) >= self.MAX_SIZE:
            raise RosterError(f"A roster holds at most {self.MAX_SIZE} players")
        self.players.append(player)

    @property
    def has_group_discount(self) -> bool:
        return len(self.players) > 1

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

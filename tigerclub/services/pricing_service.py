"""
Pricing engine for Tiger Soccer Club registrations.

Per-player cost
---------------
1. Base fee: 150 for Kids, 230 for Adult.
2. Jersey: +100 when requested.
3. Group discount: the running total × 0.95 when more than one player
   registers in the same run.

No rounding happens here; amounts are rounded to cents only when displayed.
"""
from __future__ import annotations

import logging

from tigerclub.errors import RosterError
from tigerclub.models.player import Roster

logger = logging.getLogger(__name__)

KIDS_BASE_COST      = 150
ADULT_BASE_COST     = 230
JERSEY_COST         = 100
GROUP_DISCOUNT_RATE = 0.05


def calculate_player_cost(
    registration_type: str,
    wants_jersey: bool,
    has_group_discount: bool,
) -> float:
    """
    Cost for one player.

    Any registration type other than "kids" (case-insensitive) is priced as
    Adult, including strings that never went through validation.
    """
    if registration_type.lower() == "kids":
        cost = float(KIDS_BASE_COST)
    else:
        cost = float(ADULT_BASE_COST)

    if wants_jersey:
        cost += JERSEY_COST

    if has_group_discount:
        cost *= (1 - GROUP_DISCOUNT_RATE)

    return cost


def apply_group_discount(roster: Roster) -> None:
    """
    Price every player on a complete roster, in place.

    The discount is all-or-nothing: it applies to everyone when the roster
    has more than one player and to no one otherwise. Runs once per roster.
    """
    if roster.priced:
        raise RosterError("Group discount has already been applied to this roster")
    if not len(roster):
        raise RosterError("Cannot price an empty roster")

    has_group_discount = roster.has_group_discount
    for player in roster:
        player.total_cost = calculate_player_cost(
            player.registration_type, player.wants_jersey, has_group_discount
        )
    roster.priced = True

    logger.info(
        "Priced %d player(s), group discount %s, total %.2f",
        len(roster),
        "applied" if has_group_discount else "not applied",
        grand_total(roster),
    )


def grand_total(roster: Roster) -> float:
    """Sum of all player costs. Only meaningful once the roster is priced."""
    if not roster.priced:
        raise RosterError("Roster has not been priced yet")
    return sum(player.total_cost for player in roster)

"""
Console output for the registration form.

``format_*`` helpers are pure and return text; ``display_*`` helpers write
that text to a Console. Money is always shown with two decimals.
"""
from __future__ import annotations

from typing import List, Optional

from tigerclub.console import Console
from tigerclub.models.player import Player, Roster
from tigerclub.services.pricing_service import GROUP_DISCOUNT_RATE, grand_total

WELCOME_BANNER = "*****Welcome to TigerSoccerClub*****"
SUMMARY_TITLE  = "Summary of Registrations"
FAREWELL       = "Thank you for registering with Tiger Soccer Club!"
EXIT_PROMPT    = "Press any key to exit..."

SUMMARY_WIDTH = 80

# Summary table column widths
_NAME_W   = 20
_TYPE_W   = 10
_JERSEY_W = 10
_TOTAL_W  = 15
_LABEL_W  = 45


# ─────────────────────────── Formatting ──────────────────────────────────────

def format_money(amount: float) -> str:
    return f"${amount:.2f}"


def center(text: str, width: Optional[int]) -> str:
    """Left-pad ``text`` to sit centred in ``width``; unchanged when width is unknown."""
    if not width:
        return text
    return " " * max(0, (width - len(text)) // 2) + text


def format_player_cost(player: Player) -> str:
    return f"Total cost for {player.name}: {format_money(player.total_cost)}"


def format_summary(roster: Roster) -> List[str]:
    """
    Summary table lines, without the leading blank line.

    Raises RosterError when the roster has not been priced.
    """
    total = grand_total(roster)

    lines = [
        "*" * SUMMARY_WIDTH,
        center(SUMMARY_TITLE, SUMMARY_WIDTH),
        "*" * SUMMARY_WIDTH,
        f"{'Name':<{_NAME_W}} {'Type':<{_TYPE_W}} {'Jersey':<{_JERSEY_W}} {'Total':<{_TOTAL_W}}",
        "-" * SUMMARY_WIDTH,
    ]
    for player in roster:
        lines.append(
            f"{player.name:<{_NAME_W}} {player.registration_type:<{_TYPE_W}} "
            f"{player.jersey_label:<{_JERSEY_W}} {format_money(player.total_cost)}"
        )
    lines.append("-" * SUMMARY_WIDTH)
    lines.append(f"{'Grand Total:':<{_LABEL_W}} {format_money(total)}")

    if roster.has_group_discount:
        lines.append(f"{'Group Discount Applied:':<{_LABEL_W}} {GROUP_DISCOUNT_RATE:.0%}")

    return lines


# ─────────────────────────── Display ─────────────────────────────────────────

def display_welcome_header(console: Console) -> None:
    console.write_line(center(WELCOME_BANNER, console.width))
    console.write_line()


def display_section(console: Console, title: str) -> None:
    console.write_line()
    console.write_line(f"--- {title} ---")


def display_player_cost(console: Console, player: Player) -> None:
    console.write_line(format_player_cost(player))
    console.write_line()


def display_summary(console: Console, roster: Roster) -> None:
    lines = format_summary(roster)
    console.write_line()
    for line in lines:
        console.write_line(line)


def display_farewell(console: Console) -> None:
    console.write_line()
    console.write_line(FAREWELL)


def display_error(console: Console, exc: BaseException) -> None:
    console.write_line(f"An error occurred: {exc}")

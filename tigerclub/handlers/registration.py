"""
Console registration flow.

Flow:
  welcome → player count → (name → type → jersey) × count
          → price roster → individual costs → summary → farewell → exit prompt

Malformed field input is retried inside the prompt loops. Any other
exception ends the flow early; it is logged, reported on the console, and
the run still finishes at the exit prompt.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from tigerclub.config import settings
from tigerclub.console import Console
from tigerclub.models.player import Player, Roster
from tigerclub.services.display_service import (
    EXIT_PROMPT,
    display_error,
    display_farewell,
    display_player_cost,
    display_section,
    display_summary,
    display_welcome_header,
)
from tigerclub.services.pricing_service import apply_group_discount
from tigerclub.services.prompt_service import (
    read_jersey_choice,
    read_name,
    read_player_count,
    read_registration_type,
)
from tigerclub.states import RegistrationStates
from tigerclub.validators import RegistrationData

logger = logging.getLogger(__name__)


class RegistrationSession:
    """One pass through the registration form on a given console."""

    def __init__(self, console: Console, pause_on_exit: Optional[bool] = None) -> None:
        self.console = console
        self.pause_on_exit = settings.PAUSE_ON_EXIT if pause_on_exit is None else pause_on_exit
        self.state: Optional[RegistrationStates] = None
        self.history: List[RegistrationStates] = []
        self.roster: Optional[Roster] = None

    def run(self) -> Optional[Roster]:
        """
        Drive the form to the exit prompt.

        Returns the priced roster, or None when the run ended on the
        error path.
        """
        logger.info("Registration session started")
        try:
            roster = self._register()
        except Exception as exc:
            logger.exception("Unhandled error in state %s: %s", self._state_name, exc)
            display_error(self.console, exc)
            roster = None

        self._enter(RegistrationStates.EXIT)
        self.console.write_line(EXIT_PROMPT)
        if self.pause_on_exit:
            self.console.wait_for_key()

        logger.info(
            "Registration session finished (%s)",
            "completed" if roster is not None else "aborted",
        )
        return roster

    # ── Steps ─────────────────────────────────────────────────────────────────

    def _register(self) -> Roster:
        self._enter(RegistrationStates.WELCOME)
        display_welcome_header(self.console)

        self._enter(RegistrationStates.COLLECT_COUNT)
        count = read_player_count(self.console)

        roster = Roster()
        self.roster = roster
        for index in range(1, count + 1):
            self._enter(RegistrationStates.COLLECT_PLAYER)
            roster.add(self._collect_player(index))

        self._enter(RegistrationStates.PRICE)
        apply_group_discount(roster)

        self._enter(RegistrationStates.DISPLAY_INDIVIDUAL)
        display_section(self.console, "Individual Costs")
        for player in roster:
            display_player_cost(self.console, player)

        self._enter(RegistrationStates.DISPLAY_SUMMARY)
        display_summary(self.console, roster)

        self._enter(RegistrationStates.FAREWELL)
        display_farewell(self.console)
        return roster

    def _collect_player(self, index: int) -> Player:
        display_section(self.console, f"Player {index} Information")

        data = RegistrationData(
            name=read_name(self.console),
            registration_type=read_registration_type(self.console),
            wants_jersey=read_jersey_choice(self.console),
        )
        logger.debug("Player %d registered: %s (%s)", index, data.name, data.registration_type)
        return Player(**data.model_dump())

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _enter(self, state: RegistrationStates) -> None:
        self.state = state
        self.history.append(state)
        logger.debug("→ %s", state.value)

    @property
    def _state_name(self) -> str:
        return self.state.value if self.state else "-"

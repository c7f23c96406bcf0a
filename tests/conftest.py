"""
Shared pytest fixtures for Tiger Soccer Club tests.

Sets environment variables BEFORE any tigerclub module is imported so that
pydantic-settings picks up test-friendly values (no exit pause).
"""
from __future__ import annotations

import io
import os

# ── Set env vars before any tigerclub import ──────────────────────────────────
os.environ.setdefault("TIGERCLUB_PAUSE_ON_EXIT", "false")
os.environ.setdefault("TIGERCLUB_LOG_LEVEL", "DEBUG")

# ── Third-party ───────────────────────────────────────────────────────────────
import pytest

# ── Package imports (safe after env vars are set) ─────────────────────────────
from tigerclub.console import Console
from tigerclub.models.player import Player, Roster


# ── Console fixtures ──────────────────────────────────────────────────────────

def _scripted_console(*lines: str, width: int | None = None) -> Console:
    """Console whose stdin replays ``lines`` (one per Enter) and whose stdout is captured."""
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    return Console(stdin=stdin, stdout=io.StringIO(), width=width)


def output_of(console: Console) -> str:
    """Everything written to a scripted console so far."""
    return console.stdout.getvalue()


@pytest.fixture
def make_console():
    """Factory fixture — returns a callable that builds a scripted Console."""
    return _scripted_console


# ── Roster helpers ────────────────────────────────────────────────────────────

@pytest.fixture
def make_roster():
    """
    Factory fixture — build an unpriced Roster from
    (name, registration_type, wants_jersey) tuples.
    """
    def _make(*entries: tuple[str, str, bool]) -> Roster:
        roster = Roster()
        for name, registration_type, wants_jersey in entries:
            roster.add(Player(name, registration_type, wants_jersey))
        return roster

    return _make

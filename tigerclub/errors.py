"""Exception hierarchy for the registration form.

Malformed field input never becomes an exception outside the prompt loops;
everything here belongs to the unexpected tier that the session reports
once at the top level.
"""


class TigerClubError(Exception):
    """Base exception for all registration-form failures."""


class RosterError(TigerClubError):
    """Roster used out of order: priced twice, read before pricing, overfilled."""


class ConsoleClosedError(TigerClubError):
    """The input stream ended while a field was being prompted."""

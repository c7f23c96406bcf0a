from enum import Enum


class RegistrationStates(str, Enum):
    """States of one console registration run, in the order they are visited."""
    WELCOME            = "welcome"             # Banner
    COLLECT_COUNT      = "collect_count"       # Number of players (1-4)
    COLLECT_PLAYER     = "collect_player"      # Name → type → jersey, once per player
    PRICE              = "price"               # Group discount pass over the full roster
    DISPLAY_INDIVIDUAL = "display_individual"  # Per-player totals
    DISPLAY_SUMMARY    = "display_summary"     # Summary table
    FAREWELL           = "farewell"            # Thank-you line
    EXIT               = "exit"                # Press-any-key acknowledgement

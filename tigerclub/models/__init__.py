from tigerclub.models.player import Player, RegistrationType, Roster

__all__ = [
    "Player",
    "RegistrationType",
    "Roster",
]

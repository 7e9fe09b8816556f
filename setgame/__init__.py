"""Top-level package for the Set game engine."""

from . import cards, deck, rules, scoreboard, session

__all__ = [
    "cards",
    "deck",
    "rules",
    "scoreboard",
    "session",
]

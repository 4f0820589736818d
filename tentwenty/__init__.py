"""Top-level package for the 10-20-30 solitaire simulator."""

from . import cards, engine, rules, scoreboard, stack, state

__all__ = [
    "cards",
    "engine",
    "rules",
    "scoreboard",
    "stack",
    "state",
]

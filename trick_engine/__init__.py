"""Core engine package for the one-trick simulator."""

__all__ = [
    "rng",
    "cards",
    "deck",
    "trick",
    "trump",
    "mechanics",
    "rules_schema",
    "scoring",
    "events",
    "simulator",
]

"""Bot strategies for the one-trick simulator."""

from .base import BotStrategy
from .naive_bot import NaiveBot
from .random_bot import RandomBot

__all__ = ["BotStrategy", "NaiveBot", "RandomBot"]

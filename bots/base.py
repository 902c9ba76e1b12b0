"""Common bot strategy interfaces."""

from __future__ import annotations

from typing import Optional, Sequence

from trick_engine.cards import Card, Suit
from trick_engine.mechanics import legal_plays
from trick_engine.rng import SplittableRandom
from trick_engine.rules_schema import RuleSet


class BotStrategy:
    """Base class for bot policies.

    Subclasses may also define ``choose_trump(*, rng, rules) -> Suit``; the
    simulator picks a uniformly random suit for dealers that do not.
    """

    name: str = "BaseBot"

    def __init__(self, name: Optional[str] = None) -> None:
        if name is not None:
            self.name = name

    def bid(self, hand: Sequence[Card], *, rng: SplittableRandom, rules: RuleSet) -> int:
        """Return the number of tricks this player expects to take."""
        return 0

    def play(
        self,
        hand: Sequence[Card],
        *,
        led_suit: Optional[Suit],
        trump_suit: Optional[Suit],
        plays_so_far: Sequence[Card],
        rng: SplittableRandom,
        rules: RuleSet,
    ) -> Card:
        """Return a card from ``hand``."""
        legal = legal_plays(hand, led_suit)
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return legal[0]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

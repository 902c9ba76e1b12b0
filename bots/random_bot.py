"""Uniformly random baseline bot."""

from __future__ import annotations

from typing import Optional, Sequence

from trick_engine.cards import Card, Suit
from trick_engine.mechanics import legal_plays
from trick_engine.rng import SplittableRandom
from trick_engine.rules_schema import RuleSet

from .base import BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def bid(self, hand: Sequence[Card], *, rng: SplittableRandom, rules: RuleSet) -> int:
        return rng.next_bounded(len(hand) + 1)

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
        legal = legal_plays(hand, led_suit)
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return rng.choice(legal)

    def choose_trump(self, *, rng: SplittableRandom, rules: RuleSet) -> Suit:
        return rng.choice(list(Suit))

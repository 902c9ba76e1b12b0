"""Baseline bot that bids high cards and takes tricks as cheaply as possible."""

from __future__ import annotations

from typing import List, Optional, Sequence

from trick_engine.cards import Card, JesterCard, Suit, SuitedCard, WizardCard
from trick_engine.mechanics import legal_plays
from trick_engine.rng import SplittableRandom
from trick_engine.rules_schema import RuleSet
from trick_engine.trick import resolve_trick

from .base import BotStrategy

HIGH_RANKS = (13, 14)


def _is_high_card(card: Card) -> bool:
    return isinstance(card, SuitedCard) and card.rank in HIGH_RANKS


def _winning_cost(card: Card) -> int:
    # King < Ace < Wizard
    if isinstance(card, WizardCard):
        return 3
    if isinstance(card, SuitedCard) and card.rank == 14:
        return 2
    return 1


def _discard_score(card: Card) -> int:
    if isinstance(card, JesterCard):
        return -1
    if isinstance(card, SuitedCard):
        return card.rank
    return 100


def would_take_lead(
    candidate: Card,
    plays_so_far: Sequence[Card],
    led_suit: Optional[Suit],
    trump_suit: Optional[Suit],
) -> bool:
    """Return True if ``candidate`` would win the trick if played now."""
    cards = list(plays_so_far) + [candidate]
    if led_suit is None and isinstance(candidate, SuitedCard):
        led_suit = candidate.suit
    return resolve_trick(cards, led_suit, trump_suit) == len(cards) - 1


class NaiveBot(BotStrategy):
    """Bids one trick per wizard, Ace and King; has no trump preference."""

    name = "Naive"

    def bid(self, hand: Sequence[Card], *, rng: SplittableRandom, rules: RuleSet) -> int:
        return sum(1 for card in hand if isinstance(card, WizardCard) or _is_high_card(card))

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

        winners = [card for card in legal if isinstance(card, WizardCard) or _is_high_card(card)]
        others = [card for card in legal if card not in winners]

        if plays_so_far:
            viable: List[Card] = [
                card for card in winners if would_take_lead(card, plays_so_far, led_suit, trump_suit)
            ]
            if viable:
                return min(viable, key=_winning_cost)

        pool = others or legal
        return min(pool, key=_discard_score)

"""Trick representation and resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .cards import Card, JesterCard, Suit, SuitedCard, WizardCard


class TrickError(RuntimeError):
    """Raised when a trick cannot be resolved."""


class EmptyTrick(TrickError):
    """Raised when resolution is requested for a trick with no cards."""


def resolve_trick(
    cards: Sequence[Card],
    led_suit: Optional[Suit],
    trump_suit: Optional[Suit],
) -> int:
    """Return the index of the winning card.

    Precedence: first wizard, then first jester when only jesters were
    played, then the highest trump, then the highest card of the led suit,
    and finally the first card.
    """
    if not cards:
        raise EmptyTrick("Cannot resolve an empty trick.")

    for index, card in enumerate(cards):
        if isinstance(card, WizardCard):
            return index

    if all(isinstance(card, JesterCard) for card in cards):
        return 0

    if trump_suit is not None:
        best = _highest_of_suit(cards, trump_suit)
        if best is not None:
            return best

    if led_suit is not None:
        best = _highest_of_suit(cards, led_suit)
        if best is not None:
            return best

    # No trump or led-suit card; not reachable in well-formed play.
    return 0


def _highest_of_suit(cards: Sequence[Card], suit: Suit) -> Optional[int]:
    best_index: Optional[int] = None
    best_rank = -1
    for index, card in enumerate(cards):
        if isinstance(card, SuitedCard) and card.suit is suit and card.rank > best_rank:
            best_index = index
            best_rank = card.rank
    return best_index


def led_suit_of(cards: Sequence[Card]) -> Optional[Suit]:
    """Return the suit of the first suited card, if any."""
    for card in cards:
        if isinstance(card, SuitedCard):
            return card.suit
    return None


@dataclass(frozen=True)
class Trick:
    """Immutable snapshot of the cards played so far."""

    cards: Tuple[Card, ...]
    led_suit: Optional[Suit] = None
    trump_suit: Optional[Suit] = None

    @classmethod
    def from_plays(cls, cards: Sequence[Card], trump_suit: Optional[Suit] = None) -> "Trick":
        return cls(tuple(cards), led_suit_of(cards), trump_suit)

    def is_empty(self) -> bool:
        return not self.cards

    def winner_index(self) -> int:
        return resolve_trick(self.cards, self.led_suit, self.trump_suit)

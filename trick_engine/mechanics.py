"""Legal move generation."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .cards import Card, Suit, SuitedCard


def legal_plays(hand: Iterable[Card], led_suit: Optional[Suit]) -> List[Card]:
    """Return the cards that may be played given the led suit.

    A player holding the led suit must follow it, but wizards and jesters
    may always be played.
    """
    cards = list(hand)
    if led_suit is None:
        return cards

    following = [card for card in cards if isinstance(card, SuitedCard) and card.suit is led_suit]
    if not following:
        return cards

    specials = [card for card in cards if not isinstance(card, SuitedCard)]
    return following + specials

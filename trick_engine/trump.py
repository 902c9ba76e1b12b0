"""Interpretation of the card turned up after dealing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cards import Card, JesterCard, Suit, SuitedCard
from .rules_schema import RuleSet


@dataclass(frozen=True)
class TrumpDecision:
    trump_suit: Optional[Suit]
    needs_dealer_choice: bool
    # Trump is fixed later to the first led suit.
    deferred: bool = False


NO_TRUMP = TrumpDecision(trump_suit=None, needs_dealer_choice=False)


def interpret_flip(card: Optional[Card], rules: RuleSet) -> TrumpDecision:
    """Map the flipped card to a trump decision.

    A suited card names trump directly and a jester means no trump. A wizard
    follows ``trump.flip_interpretation.wizard``: ``dealerChooses`` defers to
    the dealer, while ``ledSuit`` and ``fixedNone`` both leave trump unset
    here. Under ``ledSuit`` a wizard or jester flip is marked ``deferred`` and
    the simulator fixes trump to the first led suit.
    ``None`` means the deck was exhausted and nothing could be flipped.
    """
    if card is None:
        return NO_TRUMP
    if isinstance(card, SuitedCard):
        return TrumpDecision(trump_suit=card.suit, needs_dealer_choice=False)
    if rules.wizard_mode == "ledSuit":
        return TrumpDecision(trump_suit=None, needs_dealer_choice=False, deferred=True)
    if isinstance(card, JesterCard):
        return NO_TRUMP
    if rules.wizard_mode == "dealerChooses":
        return TrumpDecision(trump_suit=None, needs_dealer_choice=True)
    return NO_TRUMP

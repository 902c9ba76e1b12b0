"""Deck creation and dealing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .cards import RANKS, Card, JesterCard, Suit, SuitedCard, WizardCard
from .rng import SplittableRandom

WIZARD_COUNT = 4
JESTER_COUNT = 4
DECK_SIZE = len(Suit) * len(RANKS) + WIZARD_COUNT + JESTER_COUNT


class InvalidParameter(ValueError):
    """Raised when dealing is requested with unusable counts."""


@dataclass(frozen=True)
class Deck:
    """Ordered, immutable sequence of cards."""

    cards: Tuple[Card, ...]

    @classmethod
    def standard(cls) -> "Deck":
        """Return the 60-card deck: suited cards, then wizards, then jesters."""
        cards: List[Card] = [SuitedCard(suit, rank) for suit in Suit for rank in RANKS]
        cards.extend(WizardCard() for _ in range(WIZARD_COUNT))
        cards.extend(JesterCard() for _ in range(JESTER_COUNT))
        return cls(tuple(cards))

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self, rng: SplittableRandom) -> "Deck":
        """Return a new deck shuffled with a descending Fisher-Yates pass."""
        cards = list(self.cards)
        for i in range(len(cards) - 1, 0, -1):
            j = rng.next_bounded(i + 1)
            cards[i], cards[j] = cards[j], cards[i]
        return Deck(tuple(cards))

    def deal(self, num_players: int, hand_size: int) -> List[List[Card]]:
        """Deal round-robin: card k goes to player k mod num_players."""
        hands: List[List[Card]] = [[] for _ in range(num_players)]
        for index in range(num_players * hand_size):
            hands[index % num_players].append(self.cards[index])
        return hands


@dataclass
class DealResult:
    hands: List[List[Card]]
    remaining_deck: List[Card]


def build_deck() -> List[Card]:
    """Return the ordered 60-card deck as a list."""
    return list(Deck.standard().cards)


def deal_round(
    num_players: int,
    hand_size: int,
    rng: SplittableRandom,
    *,
    deck: Optional[Deck] = None,
) -> DealResult:
    """Shuffle a fresh deck and deal ``hand_size`` cards to each player.

    A prearranged ``deck`` is dealt as given, without shuffling.
    """
    if num_players <= 0:
        raise InvalidParameter("Number of players must be positive.")
    if hand_size <= 0:
        raise InvalidParameter("Round number must be positive.")
    if num_players * hand_size > DECK_SIZE:
        raise InvalidParameter(
            f"Cannot deal {hand_size} cards to {num_players} players from a {DECK_SIZE}-card deck."
        )

    if deck is None:
        shuffled = Deck.standard().shuffle(rng)
    elif len(deck) != DECK_SIZE:
        raise InvalidParameter(f"Deck must contain exactly {DECK_SIZE} cards.")
    else:
        shuffled = deck
    hands = shuffled.deal(num_players, hand_size)
    remaining = list(shuffled.cards[num_players * hand_size :])
    return DealResult(hands=hands, remaining_deck=remaining)


def validate_deal(deal: DealResult, num_players: int, hand_size: int) -> bool:
    """Independent sanity check of a finished deal."""
    if len(deal.hands) != num_players:
        return False
    if any(len(hand) != hand_size for hand in deal.hands):
        return False
    total_dealt = sum(len(hand) for hand in deal.hands)
    return total_dealt + len(deal.remaining_deck) == DECK_SIZE


def remove_card(hand: List[Card], card: Card) -> bool:
    """Remove ``card`` from ``hand`` in place; return False if it is absent.

    The exact object is removed when present, otherwise the first
    structurally equal card.
    """
    for index, held in enumerate(hand):
        if held is card:
            del hand[index]
            return True
    try:
        hand.remove(card)
    except ValueError:
        return False
    return True


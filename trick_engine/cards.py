"""Card-related data structures and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Union


class Suit(Enum):
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Suit":
        """Accept either the suit symbol or its name in any case."""
        for suit in cls:
            if text == suit.value or text.upper() == suit.name:
                return suit
        raise ValueError(f"Unknown suit: {text!r}")

    def __str__(self) -> str:
        return self.name.lower()


MIN_RANK = 2
MAX_RANK = 14  # Ace

RANKS: tuple[int, ...] = tuple(range(MIN_RANK, MAX_RANK + 1))

RANK_LABELS: dict[int, str] = {11: "J", 12: "Q", 13: "K", 14: "A"}
RANK_NAMES: dict[int, str] = {11: "Jack", 12: "Queen", 13: "King", 14: "Ace"}

WIZARD_ID = "Wizard"
JESTER_ID = "Jester"


@dataclass(frozen=True)
class SuitedCard:
    """Regular card with a suit and a rank from 2 to 14."""

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise ValueError(f"Rank {self.rank} outside {MIN_RANK}..{MAX_RANK}.")


@dataclass(frozen=True)
class WizardCard:
    """Special card that wins every trick unless an earlier wizard was played."""


@dataclass(frozen=True)
class JesterCard:
    """Special card that loses to everything."""


Card = Union[SuitedCard, WizardCard, JesterCard]


def card_id(card: Card) -> str:
    """Return the opaque identifier used in event logs."""
    if isinstance(card, WizardCard):
        return WIZARD_ID
    if isinstance(card, JesterCard):
        return JESTER_ID
    return f"{RANK_LABELS.get(card.rank, str(card.rank))}{card.suit.symbol}"


def parse_card_id(identifier: str) -> Card:
    if identifier == WIZARD_ID:
        return WizardCard()
    if identifier == JESTER_ID:
        return JesterCard()
    if len(identifier) < 2:
        raise ValueError(f"Malformed card id: {identifier!r}")
    rank_text, suit_text = identifier[:-1], identifier[-1]
    suit = Suit.parse(suit_text)
    labels = {label: rank for rank, label in RANK_LABELS.items()}
    if rank_text in labels:
        return SuitedCard(suit, labels[rank_text])
    try:
        return SuitedCard(suit, int(rank_text))
    except ValueError as exc:
        raise ValueError(f"Malformed card id: {identifier!r}") from exc


def card_ids(cards: Iterable[Card]) -> list[str]:
    return [card_id(card) for card in cards]


def card_label(card: Card) -> str:
    if isinstance(card, WizardCard):
        return WIZARD_ID
    if isinstance(card, JesterCard):
        return JESTER_ID
    return f"{RANK_NAMES.get(card.rank, str(card.rank))} of {card.suit.name.title()}"


def serialize_card(card: Card) -> dict[str, object]:
    if isinstance(card, WizardCard):
        return {"kind": "wizard"}
    if isinstance(card, JesterCard):
        return {"kind": "jester"}
    return {"kind": "suited", "suit": card.suit.name.lower(), "rank": card.rank}


def deserialize_card(payload: Mapping[str, object]) -> Card:
    kind = payload.get("kind", "suited")
    if kind == "wizard":
        return WizardCard()
    if kind == "jester":
        return JesterCard()
    return SuitedCard(Suit.parse(str(payload["suit"])), int(payload["rank"]))

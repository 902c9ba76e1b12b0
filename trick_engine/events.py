"""Typed events emitted while a trick is simulated."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, ClassVar, Optional, Tuple, Union

from .cards import Suit


class EventKind(str, Enum):
    DEAL = "deal"
    FLIP = "flip"
    CHOOSE_TRUMP = "chooseTrump"
    BID = "bid"
    PLAY = "play"
    RESOLVE = "resolve"


def _suit_value(suit: Optional[Suit]) -> Optional[str]:
    return suit.symbol if suit is not None else None


@dataclass(frozen=True)
class DealEvent:
    kind: ClassVar[EventKind] = EventKind.DEAL

    seq: int
    dealer: int
    dealer_name: Optional[str]
    round: int
    hands: Tuple[Tuple[str, ...], ...]

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["hands"] = [list(hand) for hand in self.hands]
        return {"type": self.kind.value, **payload}


@dataclass(frozen=True)
class FlipEvent:
    kind: ClassVar[EventKind] = EventKind.FLIP

    seq: int
    card_id: Optional[str]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, **asdict(self)}


@dataclass(frozen=True)
class ChooseTrumpEvent:
    kind: ClassVar[EventKind] = EventKind.CHOOSE_TRUMP

    seq: int
    dealer: int
    dealer_name: Optional[str]
    trump: Suit

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["trump"] = self.trump.symbol
        return {"type": self.kind.value, **payload}


@dataclass(frozen=True)
class BidEvent:
    kind: ClassVar[EventKind] = EventKind.BID

    seq: int
    player: int
    player_name: Optional[str]
    bid: int
    hand: Tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["hand"] = list(self.hand)
        return {"type": self.kind.value, **payload}


@dataclass(frozen=True)
class PlayEvent:
    kind: ClassVar[EventKind] = EventKind.PLAY

    seq: int
    player: int
    player_name: Optional[str]
    card_id: str
    led_suit: Optional[Suit]
    trump_suit: Optional[Suit]
    current_winner: int
    current_winner_name: Optional[str]
    current_winning_card_id: str
    hand_at_decision: Tuple[str, ...]
    play_number: int
    total_players: int

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["led_suit"] = _suit_value(self.led_suit)
        payload["trump_suit"] = _suit_value(self.trump_suit)
        payload["hand_at_decision"] = list(self.hand_at_decision)
        return {"type": self.kind.value, **payload}


@dataclass(frozen=True)
class ResolveEvent:
    kind: ClassVar[EventKind] = EventKind.RESOLVE

    seq: int
    winner: int
    winner_name: Optional[str]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, **asdict(self)}


SimEvent = Union[DealEvent, FlipEvent, ChooseTrumpEvent, BidEvent, PlayEvent, ResolveEvent]


def summarize_event(event: SimEvent) -> str:
    """Return a one-line description for console output."""
    if isinstance(event, DealEvent):
        return f"deal(dealer={event.dealer}, round={event.round})"
    if isinstance(event, FlipEvent):
        return f"flip({event.card_id or '-'})"
    if isinstance(event, ChooseTrumpEvent):
        return f"chooseTrump({event.trump.symbol})"
    if isinstance(event, BidEvent):
        return f"bid(p{event.player}={event.bid}, hand=[{', '.join(event.hand)}])"
    if isinstance(event, PlayEvent):
        return (
            f"play({event.play_number}/{event.total_players}, p{event.player}={event.card_id}, "
            f"led={_suit_value(event.led_suit) or '-'}, trump={_suit_value(event.trump_suit) or 'NONE'}, "
            f"hand=[{', '.join(event.hand_at_decision)}])"
        )
    return f"resolve(winner={event.winner})"

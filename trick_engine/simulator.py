"""High-level orchestration of a single trick."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from .cards import Card, Suit, SuitedCard, card_id, card_ids
from .deck import Deck, InvalidParameter, deal_round, remove_card
from .events import (
    BidEvent,
    ChooseTrumpEvent,
    DealEvent,
    FlipEvent,
    PlayEvent,
    ResolveEvent,
    SimEvent,
)
from .rng import SplittableRandom
from .rules_schema import RuleSet, max_rounds
from .trick import resolve_trick
from .trump import interpret_flip

logger = logging.getLogger(__name__)

EventCallback = Callable[[SimEvent], None]


class SimulationError(RuntimeError):
    """Base class for unrecoverable orchestration failures."""


class ParticipantCountMismatch(SimulationError):
    """Raised when the number of agents differs from the table size."""


class PlayedCardNotInHand(SimulationError):
    """Raised when an agent plays a card it does not hold."""


@dataclass(frozen=True)
class Play:
    player: int
    card: Card


@dataclass(frozen=True)
class TrickSummary:
    winner: int
    bids: List[int]
    plays: List[str]
    trump: Optional[Suit]
    dealer: int
    round: int

    def to_dict(self) -> dict[str, object]:
        return {
            "winner": self.winner,
            "bids": list(self.bids),
            "plays": list(self.plays),
            "trump": self.trump.symbol if self.trump is not None else None,
            "dealer": self.dealer,
            "round": self.round,
        }


@dataclass
class OneTrickResult:
    events: List[SimEvent]
    summary: TrickSummary


class Stepper:
    """Pause hook awaited after every emitted event; the base never blocks."""

    async def pause(self, event: SimEvent) -> None:
        return None


@dataclass
class _EventLog:
    stepper: Stepper
    on_event: Optional[EventCallback] = None
    events: List[SimEvent] = field(default_factory=list)

    async def emit(self, event_type: type, **data: object) -> SimEvent:
        event = event_type(seq=len(self.events), **data)
        self.events.append(event)
        if self.on_event is not None:
            self.on_event(event)
        await self.stepper.pause(event)
        return event


def seating_order(dealer_index: int, players: int) -> List[int]:
    """Return seats starting left of the dealer; the dealer comes last."""
    return [(dealer_index + 1 + offset) % players for offset in range(players)]


def _agent_name(agent: object) -> Optional[str]:
    return getattr(agent, "name", None)


class OneTrickSimulator:
    """Deal, bid and play one trick, recording every step as an event."""

    def __init__(self, rules: RuleSet) -> None:
        self.rules = rules

    async def run(
        self,
        agents: Sequence[object],
        rng: SplittableRandom,
        *,
        dealer_index: int = 0,
        round: int = 1,
        mode: str = "fast",
        stepper: Optional[Stepper] = None,
        on_event: Optional[EventCallback] = None,
        deck: Optional[Deck] = None,
    ) -> OneTrickResult:
        """Simulate one trick.

        ``deck`` replaces the shuffled deck with a prearranged one; the deal
        still consumes its own split stream so later draws are unchanged.
        """
        players = self._ensure_agent_count(agents)
        if not 0 <= dealer_index < players:
            raise InvalidParameter(f"Dealer index {dealer_index} outside 0..{players - 1}.")
        highest = max_rounds(self.rules)
        if not self.rules.rounds.min <= round <= highest:
            raise InvalidParameter(f"Round {round} outside {self.rules.rounds.min}..{highest}.")
        if mode not in ("fast", "step"):
            raise ValueError(f"Unknown mode: {mode!r}")

        effective_stepper = stepper if mode == "step" and stepper is not None else Stepper()
        log = _EventLog(stepper=effective_stepper, on_event=on_event)

        deal = deal_round(players, round, rng.split(), deck=deck)
        hands = [list(hand) for hand in deal.hands]
        logger.debug("Dealt %d cards to %d players (dealer %d).", round, players, dealer_index)
        await log.emit(
            DealEvent,
            dealer=dealer_index,
            dealer_name=_agent_name(agents[dealer_index]),
            round=round,
            hands=tuple(tuple(card_ids(hand)) for hand in hands),
        )

        flip_card = deal.remaining_deck[0] if deal.remaining_deck else None
        await log.emit(FlipEvent, card_id=card_id(flip_card) if flip_card is not None else None)

        decision = interpret_flip(flip_card, self.rules)
        trump = decision.trump_suit
        if decision.needs_dealer_choice:
            trump = await self._choose_trump(log, agents, dealer_index, rng.split())
        logger.debug("Trump after flip: %s", trump)

        bids = await self._collect_bids(log, agents, hands, dealer_index, rng)

        leader = (dealer_index + 1) % players
        plays, led_suit, trump = await self._play_trick(
            log, agents, hands, dealer_index, rng, trump, decision.deferred
        )

        winner = self._resolve_winner(plays, led_suit, trump, leader)
        logger.debug("Trick won by player %d.", winner)
        await log.emit(ResolveEvent, winner=winner, winner_name=_agent_name(agents[winner]))

        summary = TrickSummary(
            winner=winner,
            bids=bids,
            plays=[card_id(play.card) for play in plays],
            trump=trump,
            dealer=dealer_index,
            round=round,
        )
        return OneTrickResult(events=log.events, summary=summary)

    def run_sync(self, agents: Sequence[object], rng: SplittableRandom, **kwargs) -> OneTrickResult:
        """Run to completion without an event loop of the caller's own."""
        return asyncio.run(self.run(agents, rng, **kwargs))

    def _ensure_agent_count(self, agents: Sequence[object]) -> int:
        players = self.rules.players
        if len(agents) != players:
            raise ParticipantCountMismatch(f"Expected {players} agents, got {len(agents)}.")
        return players

    async def _choose_trump(
        self,
        log: _EventLog,
        agents: Sequence[object],
        dealer_index: int,
        choose_rng: SplittableRandom,
    ) -> Suit:
        dealer = agents[dealer_index]
        chooser = getattr(dealer, "choose_trump", None)
        if callable(chooser):
            chosen = chooser(rng=choose_rng, rules=self.rules)
            if not isinstance(chosen, Suit):
                raise SimulationError(f"Player {dealer_index} chose an invalid trump: {chosen!r}")
        else:
            chosen = choose_rng.choice(list(Suit))
        await log.emit(
            ChooseTrumpEvent,
            dealer=dealer_index,
            dealer_name=_agent_name(dealer),
            trump=chosen,
        )
        return chosen

    async def _collect_bids(
        self,
        log: _EventLog,
        agents: Sequence[object],
        hands: List[List[Card]],
        dealer_index: int,
        rng: SplittableRandom,
    ) -> List[int]:
        players = self.rules.players
        bids = [0] * players
        for player in seating_order(dealer_index, players):
            bid_rng = rng.split()
            bid = agents[player].bid(list(hands[player]), rng=bid_rng, rules=self.rules)
            bids[player] = bid
            await log.emit(
                BidEvent,
                player=player,
                player_name=_agent_name(agents[player]),
                bid=bid,
                hand=tuple(card_ids(hands[player])),
            )
        return bids

    async def _play_trick(
        self,
        log: _EventLog,
        agents: Sequence[object],
        hands: List[List[Card]],
        dealer_index: int,
        rng: SplittableRandom,
        trump: Optional[Suit],
        trump_deferred: bool,
    ) -> tuple[List[Play], Optional[Suit], Optional[Suit]]:
        players = self.rules.players
        leader = (dealer_index + 1) % players
        plays: List[Play] = []
        led_suit: Optional[Suit] = None

        for play_index, player in enumerate(seating_order(dealer_index, players)):
            play_rng = rng.split()
            hand_before = tuple(card_ids(hands[player]))
            chosen = agents[player].play(
                list(hands[player]),
                led_suit=led_suit,
                trump_suit=trump,
                plays_so_far=[play.card for play in plays],
                rng=play_rng,
                rules=self.rules,
            )
            if not remove_card(hands[player], chosen):
                raise PlayedCardNotInHand(
                    f"Played card {chosen!r} not found in hand for player {player}."
                )

            if led_suit is None and isinstance(chosen, SuitedCard):
                led_suit = chosen.suit
                if trump_deferred and trump is None:
                    trump = led_suit

            plays.append(Play(player=player, card=chosen))
            current_winner = self._resolve_winner(plays, led_suit, trump, leader)
            winning_play = next((play for play in plays if play.player == current_winner), None)
            if winning_play is None:
                raise SimulationError("Current winner has no corresponding play.")

            await log.emit(
                PlayEvent,
                player=player,
                player_name=_agent_name(agents[player]),
                card_id=card_id(chosen),
                led_suit=led_suit,
                trump_suit=trump,
                current_winner=current_winner,
                current_winner_name=_agent_name(agents[current_winner]),
                current_winning_card_id=card_id(winning_play.card),
                hand_at_decision=hand_before,
                play_number=play_index + 1,
                total_players=players,
            )

        return plays, led_suit, trump

    def _resolve_winner(
        self,
        plays: Sequence[Play],
        led_suit: Optional[Suit],
        trump: Optional[Suit],
        leader: int,
    ) -> int:
        relative = resolve_trick([play.card for play in plays], led_suit, trump)
        return (leader + relative) % self.rules.players

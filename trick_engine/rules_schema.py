"""Validation schema and loader for the game rules configuration."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, validator

from .cards import MAX_RANK, MIN_RANK, RANKS, Suit
from .deck import DECK_SIZE, JESTER_COUNT, WIZARD_COUNT

WizardFlipMode = Literal["dealerChooses", "ledSuit", "fixedNone"]

PLAY_PRIORITY = ["WIZARD", "TRUMP", "LED_SUIT", "OTHER"]

_EXACT_FORMULA = re.compile(r"^\s*(-?\d+)\s*\+\s*(-?\d+)\s*\*\s*bid\s*$")


class RulesError(ValueError):
    """Raised when a rules file cannot be read or fails validation."""


def exact_formula_terms(formula: str) -> Tuple[int, int]:
    """Split a formula of the form ``"A + B*bid"`` into ``(A, B)``."""
    match = _EXACT_FORMULA.match(formula)
    if match is None:
        raise ValueError(f"Unsupported exact-bid formula: {formula!r}")
    return int(match.group(1)), int(match.group(2))


class DeckConfig(BaseModel):
    suits: list[str] = Field(default_factory=lambda: [suit.symbol for suit in Suit])
    ranks: list[int] = Field(default_factory=lambda: list(RANKS))
    wizards: int = Field(WIZARD_COUNT, ge=0, description="Number of always-winning cards.")
    jesters: int = Field(JESTER_COUNT, ge=0, description="Number of always-losing cards.")

    @validator("suits")
    def validate_suits(cls, value: list[str]) -> list[str]:
        parsed = {Suit.parse(suit) for suit in value}
        if len(parsed) != len(value):
            raise ValueError("Deck suits must be distinct.")
        return value

    @validator("ranks")
    def validate_ranks(cls, value: list[int]) -> list[int]:
        for rank in value:
            if not MIN_RANK <= rank <= MAX_RANK:
                raise ValueError(f"Rank {rank} outside {MIN_RANK}..{MAX_RANK}.")
        if len(set(value)) != len(value):
            raise ValueError("Deck ranks must be distinct.")
        return value

    def total_cards(self) -> int:
        return len(self.suits) * len(self.ranks) + self.wizards + self.jesters


class RoundsConfig(BaseModel):
    min: int = Field(1, ge=1)
    max: Union[Literal["auto"], int] = Field("auto", description="Highest round, or 'auto' for deck size / players.")

    @validator("max")
    def validate_max(cls, value: Union[str, int], values: dict) -> Union[str, int]:
        if value != "auto" and value < values.get("min", 1):
            raise ValueError("Highest round must not be below the lowest round.")
        return value


class FlipInterpretation(BaseModel):
    jester: Literal["NONE"] = Field("NONE", description="A flipped jester always means no trump.")
    wizard: WizardFlipMode = Field(
        "dealerChooses",
        description="How a flipped wizard decides trump.",
    )


class TrumpConfig(BaseModel):
    flip_interpretation: FlipInterpretation = Field(default_factory=FlipInterpretation)


class BiddingScoring(BaseModel):
    exact: str = Field("20 + 10*bid", description="Score for hitting the bid exactly.")
    miss_penalty_per_trick: int = Field(-10, le=0, description="Score per trick of difference on a miss.")

    @validator("exact")
    def validate_exact(cls, value: str) -> str:
        exact_formula_terms(value)
        return value


class BiddingConfig(BaseModel):
    scoring: BiddingScoring = Field(default_factory=BiddingScoring)


class PlayConfig(BaseModel):
    priority: list[str] = Field(default_factory=lambda: list(PLAY_PRIORITY))
    first_wizard_wins_ties: bool = True
    all_jesters_first_jester_wins: bool = True

    @validator("priority")
    def validate_priority(cls, value: list[str]) -> list[str]:
        if [item.upper() for item in value] != PLAY_PRIORITY:
            raise ValueError(f"Play priority must be {PLAY_PRIORITY}.")
        return value

    @validator("first_wizard_wins_ties", "all_jesters_first_jester_wins")
    def require_first_occurrence(cls, value: bool) -> bool:
        if not value:
            raise ValueError("Only first-occurrence tie breaking is supported.")
        return value


class RuleSet(BaseModel):
    players: int = Field(4, ge=2, le=6)
    deck: DeckConfig = Field(default_factory=DeckConfig)
    rounds: RoundsConfig = Field(default_factory=RoundsConfig)
    trump: TrumpConfig = Field(default_factory=TrumpConfig)
    bidding: BiddingConfig = Field(default_factory=BiddingConfig)
    play: PlayConfig = Field(default_factory=PlayConfig)

    @validator("deck")
    def validate_deck_size(cls, value: DeckConfig) -> DeckConfig:
        if value.total_cards() != DECK_SIZE:
            raise ValueError(f"Deck must contain exactly {DECK_SIZE} cards.")
        return value

    @property
    def wizard_mode(self) -> str:
        return self.trump.flip_interpretation.wizard


def default_rules(**overrides: object) -> RuleSet:
    """Return the standard ruleset, optionally with top-level overrides."""
    return RuleSet(**overrides)


def load_rules(path: Optional[Union[str, Path]] = None) -> RuleSet:
    """Load and validate a JSON rules file; ``None`` yields the defaults."""
    if path is None:
        return default_rules()
    rules_path = Path(path)
    try:
        payload = json.loads(rules_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise RulesError(f"Failed to load rules from {rules_path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise RulesError(f"Failed to load rules from {rules_path}: top level must be an object.")
    try:
        return RuleSet(**payload)
    except ValidationError as exc:
        raise RulesError(f"Invalid rules file {rules_path}: {exc}") from exc


def max_rounds(rules: RuleSet) -> int:
    if rules.rounds.max == "auto":
        return rules.deck.total_cards() // rules.players
    return int(rules.rounds.max)

"""Bid scoring helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .rules_schema import RuleSet, exact_formula_terms


class ScoringError(ValueError):
    """Raised when scoring inputs are inconsistent."""


@dataclass(frozen=True)
class BidScore:
    score: int
    exact: bool


def score_bid(bid: int, tricks: int, rules: RuleSet) -> BidScore:
    scoring = rules.bidding.scoring
    if bid == tricks:
        base, per_bid = exact_formula_terms(scoring.exact)
        return BidScore(score=base + per_bid * bid, exact=True)
    return BidScore(score=scoring.miss_penalty_per_trick * abs(bid - tricks), exact=False)


def score_round(bids: Sequence[int], tricks: Sequence[int], rules: RuleSet) -> List[BidScore]:
    if len(bids) != len(tricks):
        raise ScoringError("Bids and tricks must have the same length.")
    return [score_bid(bid, taken, rules) for bid, taken in zip(bids, tricks)]


def total_score(scores: Sequence[BidScore]) -> int:
    return sum(result.score for result in scores)

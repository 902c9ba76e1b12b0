"""Simple bot arena: play many seeded tricks and tally the results."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Dict, List, Optional, Sequence

from trick_engine.rng import create_rng
from trick_engine.rules_schema import RuleSet, load_rules
from trick_engine.scoring import score_round
from trick_engine.simulator import OneTrickSimulator

from .base import BotStrategy
from .naive_bot import NaiveBot
from .random_bot import RandomBot

logger = logging.getLogger(__name__)

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "naive": NaiveBot,
    "random": RandomBot,
}


def make_bot(kind: str, name: Optional[str] = None) -> BotStrategy:
    try:
        bot_cls = BOT_REGISTRY[kind.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown bot {kind!r}; choose from {sorted(BOT_REGISTRY)}.") from exc
    return bot_cls(name=name)


def make_bots(kinds: Sequence[str]) -> List[BotStrategy]:
    return [make_bot(kind, name=f"{kind.title()} {seat}") for seat, kind in enumerate(kinds)]


def run_arena(
    bots: Sequence[BotStrategy],
    *,
    rules: Optional[RuleSet] = None,
    n_tricks: int = 10,
    seed: int = 0,
    round: int = 1,
) -> dict:
    """Play ``n_tricks`` one-trick rounds with a rotating dealer.

    Each trick is seeded from one master stream so the whole arena is
    reproducible from ``seed``. Bids are scored as if the round were the
    single trick just played.
    """
    rules = rules or load_rules()
    simulator = OneTrickSimulator(rules)
    master = create_rng(seed)
    players = len(bots)

    wins = [0] * players
    scores = [0] * players
    history = []
    for index in range(n_tricks):
        dealer = index % players
        result = simulator.run_sync(bots, master.split(), dealer_index=dealer, round=round)
        summary = result.summary
        tricks = [1 if seat == summary.winner else 0 for seat in range(players)]
        round_scores = score_round(summary.bids, tricks, rules)
        wins[summary.winner] += 1
        for seat, bid_score in enumerate(round_scores):
            scores[seat] += bid_score.score
        history.append(summary.to_dict())
        logger.debug("Trick %d: dealer=%d winner=%d bids=%s", index, dealer, summary.winner, summary.bids)

    return {
        "bots": [bot.name for bot in bots],
        "wins": wins,
        "scores": scores,
        "history": history,
    }


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run seeded single-trick simulations between bots.")
    parser.add_argument("--bots", nargs="+", default=["naive", "random", "random", "naive"], choices=sorted(BOT_REGISTRY))
    parser.add_argument("--tricks", type=int, default=100, help="Number of tricks to simulate.")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--round", type=int, default=1, help="Cards dealt to each player.")
    parser.add_argument("--rules", type=str, default=None, help="Path to a JSON rules file.")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    rules = load_rules(args.rules)
    results = run_arena(
        make_bots(args.bots),
        rules=rules,
        n_tricks=args.tricks,
        seed=args.seed,
        round=args.round,
    )
    print(json.dumps({key: results[key] for key in ("bots", "wins", "scores")}, indent=2))


if __name__ == "__main__":
    main()

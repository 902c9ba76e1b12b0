#!/usr/bin/env python3
"""Run one seeded trick and print its events, optionally stepping through them."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from bots.bot_arena import BOT_REGISTRY, make_bots
from trick_engine.events import PlayEvent, ResolveEvent, SimEvent, summarize_event
from trick_engine.rng import create_rng
from trick_engine.rules_schema import load_rules
from trick_engine.simulator import OneTrickSimulator, Stepper

HELP_TEXT = "Commands: Enter/n/next = continue, s/summary = print summary, q/quit = exit"


class QuitRequested(Exception):
    """Raised when the user quits from the step prompt."""


class CliStepper(Stepper):
    """Prints each event and waits for a command before continuing."""

    def __init__(self, prompt: Callable[[str], str] = input, out: Callable[[str], None] = print) -> None:
        self.events: List[SimEvent] = []
        self._prompt = prompt
        self._out = out

    async def pause(self, event: SimEvent) -> None:
        self.events.append(event)
        self._out(f"\nEVENT: {summarize_event(event)}")
        while True:
            command = self._prompt("[Enter=next, s=summary, h=help, q=quit] ").strip().lower() or "enter"
            if command in ("enter", "n", "next"):
                return
            if command in ("s", "summary"):
                self._out(self.summary_text())
                continue
            if command in ("h", "help"):
                self._out(HELP_TEXT)
                continue
            if command in ("q", "quit"):
                raise QuitRequested()
            self._out("Unknown command. Type h for help.")

    def summary_text(self) -> str:
        lines = [f"SUMMARY (so far): total events = {len(self.events)}"]
        last = self.events[-1] if self.events else None
        if isinstance(last, PlayEvent):
            lines.append(f"Current trick winner: p{last.current_winner} with {last.current_winning_card_id}")
        if isinstance(last, ResolveEvent):
            lines.append(f"Trick winner: p{last.winner}")
        return "\n".join(lines)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate a single trick.")
    parser.add_argument("--seed", type=int, default=123)
    parser.add_argument("--dealer", type=int, default=0)
    parser.add_argument("--round", type=int, default=2, help="Cards dealt to each player.")
    parser.add_argument("--bots", nargs="+", default=["naive", "random", "random", "naive"], choices=sorted(BOT_REGISTRY))
    parser.add_argument("--rules", type=str, default=str(ROOT / "rules" / "game_rules.json"))
    parser.add_argument("--step", action="store_true", help="Pause after every event.")
    parser.add_argument("--json", action="store_true", help="Print events as JSON lines.")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    rules = load_rules(args.rules)
    simulator = OneTrickSimulator(rules)
    try:
        result = simulator.run_sync(
            make_bots(args.bots),
            create_rng(args.seed),
            dealer_index=args.dealer,
            round=args.round,
            mode="step" if args.step else "fast",
            stepper=CliStepper() if args.step else None,
        )
    except QuitRequested:
        print("Exiting...")
        return 0

    print("OneTrick Summary:", json.dumps(result.summary.to_dict(), ensure_ascii=False))
    print("Events:")
    for event in result.events:
        print(json.dumps(event.to_dict(), ensure_ascii=False) if args.json else summarize_event(event))
    return 0


if __name__ == "__main__":
    sys.exit(main())

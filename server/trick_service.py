"""REST service that simulates a single seeded trick."""

from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from bots.bot_arena import BOT_REGISTRY, make_bot
from trick_engine.deck import InvalidParameter
from trick_engine.rng import create_rng
from trick_engine.rules_schema import RuleSet, WizardFlipMode, default_rules
from trick_engine.simulator import OneTrickSimulator, SimulationError


class TrickRequest(BaseModel):
    seed: int = 0
    dealer: int = Field(0, ge=0)
    round: int = Field(1, ge=1)
    agents: List[str] = Field(default_factory=lambda: ["naive", "random", "random", "naive"])
    names: Optional[List[str]] = None
    wizard_flip: Optional[WizardFlipMode] = Field(None, description="Override for trump.flip_interpretation.wizard.")


rules: RuleSet = default_rules()

app = FastAPI(title="One Trick Simulation Service")


def rules_for(request: TrickRequest) -> RuleSet:
    if request.wizard_flip is None and len(request.agents) == rules.players:
        return rules
    payload = rules.model_dump()
    payload["players"] = len(request.agents)
    if request.wizard_flip is not None:
        payload["trump"]["flip_interpretation"]["wizard"] = request.wizard_flip
    try:
        return RuleSet(**payload)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/rules")
def get_rules() -> Dict[str, object]:
    return rules.model_dump()


@app.get("/bots")
def list_bots() -> Dict[str, object]:
    return {"bots": sorted(BOT_REGISTRY)}


@app.post("/trick")
def simulate_trick(request: TrickRequest) -> Dict[str, object]:
    if request.names is not None and len(request.names) != len(request.agents):
        raise HTTPException(status_code=400, detail="Names must match agents one to one.")
    names = request.names or [f"{kind.title()} {seat}" for seat, kind in enumerate(request.agents)]
    try:
        agents = [make_bot(kind, name=name) for kind, name in zip(request.agents, names)]
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    simulator = OneTrickSimulator(rules_for(request))
    try:
        result = simulator.run_sync(
            agents,
            create_rng(request.seed),
            dealer_index=request.dealer,
            round=request.round,
        )
    except (InvalidParameter, SimulationError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return {
        "summary": result.summary.to_dict(),
        "events": [event.to_dict() for event in result.events],
    }

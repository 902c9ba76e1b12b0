import json

import pytest

from trick_engine.rules_schema import RuleSet, RulesError, default_rules, exact_formula_terms, load_rules, max_rounds
from trick_engine.scoring import ScoringError, score_bid, score_round, total_score

RULES_JSON = {
    "players": 4,
    "deck": {
        "suits": ["♠", "♥", "♦", "♣"],
        "ranks": [2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14],
        "wizards": 4,
        "jesters": 4,
    },
    "rounds": {"min": 1, "max": "auto"},
    "trump": {"flip_interpretation": {"jester": "NONE", "wizard": "dealerChooses"}},
    "bidding": {"scoring": {"exact": "20 + 10*bid", "miss_penalty_per_trick": -10}},
    "play": {
        "priority": ["WIZARD", "TRUMP", "LED_SUIT", "OTHER"],
        "first_wizard_wins_ties": True,
        "all_jesters_first_jester_wins": True,
    },
}


def write_rules(tmp_path, payload) -> str:
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_load_valid_rules(tmp_path):
    rules = load_rules(write_rules(tmp_path, RULES_JSON))
    assert rules.players == 4
    assert rules.wizard_mode == "dealerChooses"
    assert rules.deck.total_cards() == 60
    assert rules == default_rules()


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(RulesError, match="Failed to load rules"):
        load_rules(str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(RulesError):
        load_rules(tmp_path / "absent.json")


def test_invalid_values_raise(tmp_path):
    payload = json.loads(json.dumps(RULES_JSON))
    payload["trump"]["flip_interpretation"]["wizard"] = "sometimes"
    with pytest.raises(RulesError, match="Invalid rules file"):
        load_rules(write_rules(tmp_path, payload))


def test_non_standard_deck_rejected():
    with pytest.raises(ValueError):
        RuleSet(deck={"wizards": 2})


def test_unsupported_tie_policy_rejected():
    with pytest.raises(ValueError):
        RuleSet(play={"first_wizard_wins_ties": False})


def test_max_rounds_auto_and_fixed():
    assert max_rounds(default_rules()) == 15
    assert max_rounds(default_rules(players=6)) == 10
    assert max_rounds(default_rules(rounds={"min": 1, "max": 10})) == 10


def test_round_bounds_must_be_ordered():
    with pytest.raises(ValueError):
        RuleSet(rounds={"min": 5, "max": 3})
    assert RuleSet(rounds={"min": 3, "max": 3}).rounds.max == 3


def test_exact_formula_terms():
    assert exact_formula_terms("20 + 10*bid") == (20, 10)
    with pytest.raises(ValueError):
        exact_formula_terms("bid squared")


def test_score_exact_and_missed_bids():
    rules = default_rules()
    exact = score_bid(2, 2, rules)
    assert exact.exact and exact.score == 40
    missed = score_bid(3, 1, rules)
    assert not missed.exact and missed.score == -20


def test_score_round():
    rules = default_rules()
    results = score_round([0, 1, 1], [0, 1, 0], rules)
    assert [result.score for result in results] == [20, 30, -10]
    assert total_score(results) == 40
    with pytest.raises(ScoringError):
        score_round([1], [1, 0], rules)

import pytest

from bots.bot_arena import make_bot, make_bots, run_arena


def test_run_arena_executes():
    results = run_arena(make_bots(["naive", "random", "random", "naive"]), n_tricks=6, seed=7, round=2)
    assert results["bots"] == ["Naive 0", "Random 1", "Random 2", "Naive 3"]
    assert sum(results["wins"]) == 6
    assert len(results["scores"]) == 4
    assert [entry["dealer"] for entry in results["history"]] == [0, 1, 2, 3, 0, 1]


def test_run_arena_is_reproducible():
    first = run_arena(make_bots(["random"] * 4), n_tricks=5, seed=3)
    second = run_arena(make_bots(["random"] * 4), n_tricks=5, seed=3)
    assert first == second


def test_unknown_bot_rejected():
    with pytest.raises(ValueError):
        make_bot("oracle")

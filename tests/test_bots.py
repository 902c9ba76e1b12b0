from bots import NaiveBot, RandomBot
from bots.naive_bot import would_take_lead
from trick_engine.cards import JesterCard, Suit, SuitedCard, WizardCard
from trick_engine.mechanics import legal_plays
from trick_engine.rng import create_rng
from trick_engine.rules_schema import default_rules

RULES = default_rules()


def naive_play(hand, led_suit=None, trump_suit=None, plays_so_far=()):
    return NaiveBot().play(
        hand,
        led_suit=led_suit,
        trump_suit=trump_suit,
        plays_so_far=list(plays_so_far),
        rng=create_rng(0),
        rules=RULES,
    )


def test_naive_bid_counts_wizards_aces_and_kings():
    hand = [
        WizardCard(),
        SuitedCard(Suit.SPADES, 14),
        SuitedCard(Suit.HEARTS, 13),
        SuitedCard(Suit.HEARTS, 12),
        JesterCard(),
    ]
    assert NaiveBot().bid(hand, rng=create_rng(0), rules=RULES) == 3


def test_naive_has_no_trump_choice():
    assert not hasattr(NaiveBot(), "choose_trump")
    assert callable(getattr(RandomBot(), "choose_trump"))


def test_naive_takes_lead_with_cheapest_winner():
    hand = [SuitedCard(Suit.SPADES, 14), SuitedCard(Suit.SPADES, 13), WizardCard()]
    played = [SuitedCard(Suit.SPADES, 9)]
    assert naive_play(hand, Suit.SPADES, None, played) == SuitedCard(Suit.SPADES, 13)


def test_naive_prefers_ace_over_wizard():
    hand = [SuitedCard(Suit.SPADES, 14), WizardCard()]
    played = [SuitedCard(Suit.SPADES, 13)]
    assert naive_play(hand, Suit.SPADES, None, played) == SuitedCard(Suit.SPADES, 14)


def test_naive_dumps_jester_when_it_cannot_win():
    hand = [SuitedCard(Suit.CLUBS, 13), SuitedCard(Suit.DIAMONDS, 4), JesterCard()]
    played = [WizardCard()]
    assert naive_play(hand, None, Suit.HEARTS, played) == JesterCard()


def test_naive_leads_lowest_card():
    hand = [SuitedCard(Suit.CLUBS, 9), SuitedCard(Suit.DIAMONDS, 4), SuitedCard(Suit.HEARTS, 14)]
    assert naive_play(hand) == SuitedCard(Suit.DIAMONDS, 4)


def test_would_take_lead_considers_trump():
    played = [SuitedCard(Suit.CLUBS, 14)]
    assert would_take_lead(SuitedCard(Suit.HEARTS, 2), played, Suit.CLUBS, Suit.HEARTS)
    assert not would_take_lead(SuitedCard(Suit.HEARTS, 2), played, Suit.CLUBS, None)


def test_random_bot_is_seed_stable_and_legal():
    hand = [SuitedCard(Suit.CLUBS, 2), SuitedCard(Suit.CLUBS, 8), SuitedCard(Suit.HEARTS, 5), WizardCard()]
    legal = legal_plays(hand, Suit.CLUBS)
    bot = RandomBot()
    for seed in range(20):
        bid = bot.bid(hand, rng=create_rng(seed), rules=RULES)
        assert 0 <= bid <= len(hand)
        card = bot.play(
            hand,
            led_suit=Suit.CLUBS,
            trump_suit=None,
            plays_so_far=[SuitedCard(Suit.CLUBS, 10)],
            rng=create_rng(seed),
            rules=RULES,
        )
        assert card in legal
        assert bot.choose_trump(rng=create_rng(seed), rules=RULES) is bot.choose_trump(rng=create_rng(seed), rules=RULES)


def test_bot_names():
    assert RandomBot().name == "Random"
    assert NaiveBot(name="Nia").name == "Nia"

from trick_engine.cards import JesterCard, Suit, SuitedCard, WizardCard
from trick_engine.mechanics import legal_plays
from trick_engine.rules_schema import default_rules
from trick_engine.trump import interpret_flip


def rules_with(mode: str):
    return default_rules(trump={"flip_interpretation": {"jester": "NONE", "wizard": mode}})


def test_suited_flip_sets_trump():
    decision = interpret_flip(SuitedCard(Suit.SPADES, 10), rules_with("dealerChooses"))
    assert decision.trump_suit is Suit.SPADES
    assert not decision.needs_dealer_choice


def test_jester_flip_means_no_trump():
    for mode in ("dealerChooses", "ledSuit", "fixedNone"):
        decision = interpret_flip(JesterCard(), rules_with(mode))
        assert decision.trump_suit is None
        assert not decision.needs_dealer_choice
        assert decision.deferred is (mode == "ledSuit")


def test_wizard_flip_modes():
    dealer = interpret_flip(WizardCard(), rules_with("dealerChooses"))
    assert dealer.trump_suit is None and dealer.needs_dealer_choice

    led = interpret_flip(WizardCard(), rules_with("ledSuit"))
    assert led.trump_suit is None and not led.needs_dealer_choice and led.deferred

    fixed = interpret_flip(WizardCard(), rules_with("fixedNone"))
    assert fixed.trump_suit is None and not fixed.needs_dealer_choice and not fixed.deferred


def test_nothing_to_flip_means_no_trump():
    decision = interpret_flip(None, rules_with("dealerChooses"))
    assert decision.trump_suit is None
    assert not decision.needs_dealer_choice


def test_all_cards_legal_without_led_suit():
    hand = [SuitedCard(Suit.SPADES, 10), SuitedCard(Suit.HEARTS, 3), WizardCard(), JesterCard()]
    assert legal_plays(hand, None) == hand


def test_must_follow_led_suit_but_specials_allowed():
    hand = [
        SuitedCard(Suit.CLUBS, 2),
        SuitedCard(Suit.CLUBS, 14),
        SuitedCard(Suit.DIAMONDS, 5),
        WizardCard(),
        JesterCard(),
    ]
    assert legal_plays(hand, Suit.CLUBS) == [hand[0], hand[1], hand[3], hand[4]]


def test_void_in_led_suit_allows_everything():
    hand = [SuitedCard(Suit.HEARTS, 9), SuitedCard(Suit.DIAMONDS, 12), WizardCard(), JesterCard()]
    assert legal_plays(hand, Suit.CLUBS) == hand
    assert legal_plays([WizardCard(), JesterCard()], Suit.DIAMONDS) == [WizardCard(), JesterCard()]

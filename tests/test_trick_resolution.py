import pytest

from trick_engine.cards import JesterCard, Suit, SuitedCard, WizardCard
from trick_engine.trick import EmptyTrick, Trick, TrickError, led_suit_of, resolve_trick

S, H, D, C = Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS


def test_empty_trick_raises():
    with pytest.raises(EmptyTrick):
        resolve_trick([], None, None)
    assert issubclass(EmptyTrick, TrickError)


def test_wizard_beats_trump_king_and_led_ace():
    cards = [SuitedCard(S, 13), WizardCard(), SuitedCard(H, 14)]
    assert resolve_trick(cards, S, S) == 1


def test_first_wizard_wins_ties():
    cards = [SuitedCard(S, 14), WizardCard(), WizardCard(), JesterCard()]
    assert resolve_trick(cards, S, H) == 1
    assert resolve_trick([WizardCard(), WizardCard()], None, None) == 0


def test_all_jesters_first_wins():
    assert resolve_trick([JesterCard(), JesterCard(), JesterCard()], None, S) == 0


def test_jester_loses_to_any_suited_card():
    cards = [JesterCard(), SuitedCard(D, 2)]
    assert resolve_trick(cards, D, None) == 1


def test_highest_trump_wins():
    cards = [SuitedCard(S, 14), SuitedCard(H, 3), SuitedCard(H, 9), SuitedCard(S, 13)]
    assert resolve_trick(cards, S, H) == 2


def test_highest_led_suit_wins_without_trump():
    cards = [SuitedCard(C, 5), SuitedCard(D, 14), SuitedCard(C, 11)]
    assert resolve_trick(cards, C, None) == 2
    assert resolve_trick(cards, C, H) == 2


def test_off_suit_never_wins():
    cards = [SuitedCard(C, 2), SuitedCard(D, 14), SuitedCard(H, 14)]
    assert resolve_trick(cards, C, S) == 0


def test_degenerate_trick_falls_back_to_first_card():
    cards = [SuitedCard(D, 4), SuitedCard(H, 10)]
    assert resolve_trick(cards, None, None) == 0
    assert resolve_trick([JesterCard(), SuitedCard(H, 10)], None, None) == 0


def test_trick_snapshot_derives_led_suit():
    cards = (JesterCard(), SuitedCard(H, 6), SuitedCard(H, 12))
    assert led_suit_of(cards) is H
    assert led_suit_of([WizardCard(), JesterCard()]) is None
    trick = Trick.from_plays(cards, trump_suit=S)
    assert trick.led_suit is H
    assert trick.winner_index() == 2
    assert Trick(()).is_empty()

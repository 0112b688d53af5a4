import random

import pytest

from holdem_odds.helpers.cards import make_deck
from holdem_odds.helpers.evaluator import (
    CATEGORY,
    HandStrength,
    compare_hands,
    describe,
    evaluate_hand,
    find_winning_opponent,
)

def test_full_house_aces_over_kings():
    s = evaluate_hand(["As","Ah"], ["Ad","Kc","Kh","2s","3d"])
    assert s.level == CATEGORY["full_house"]
    assert s.primary == 12
    assert s.secondary == 11

def test_preflop_high_card():
    s = evaluate_hand(["2s","7h"])
    assert s.level == CATEGORY["high_card"]
    assert s.primary == 5
    assert s.secondary is None

def test_preflop_pair_has_no_kicker():
    assert evaluate_hand(["7c","7d"]) == HandStrength(CATEGORY["pair"], 5, None)

def test_seven_card_results_in_range():
    rng = random.Random(11)
    deck = make_deck()
    for _ in range(500):
        cards = rng.sample(deck, 7)
        s = evaluate_hand(cards[:2], cards[2:])
        assert 0 <= s.level <= 8
        assert 0 <= s.primary <= 12

def test_four_deuces_beat_three_aces():
    quads = evaluate_hand(["2s","2h"], ["2d","2c","9h"])
    trips = evaluate_hand(["As","Ah"], ["Ad","9c","5d"])
    assert quads.level == CATEGORY["quads"]
    assert trips.level == CATEGORY["trips"]
    assert compare_hands(quads, trips) == 1
    assert compare_hands(trips, quads) == -1

def test_trips_beat_two_pair_beat_pair():
    trips = evaluate_hand(["3s","3h"], ["3d","9c","Kd"])
    two_pair = evaluate_hand(["As","Ah"], ["Kh","Kc","5d"])
    pair = evaluate_hand(["As","Ad"], ["Kh","7c","5d"])
    assert compare_hands(trips, two_pair) == 1
    assert compare_hands(two_pair, pair) == 1

def test_same_hand_twice_is_tie():
    s1 = evaluate_hand(["Jc","3d"], ["2s","7d","Jh","4c","9c"])
    s2 = evaluate_hand(["Jc","3d"], ["2s","7d","Jh","4c","9c"])
    assert compare_hands(s1, s2) == 0

def test_pair_uses_highest_kicker():
    s = evaluate_hand(["Jc","3d"], ["2s","7d","Jh","4c","9c"])
    assert s == HandStrength(CATEGORY["pair"], 9, 7)

def test_two_pair_keeps_two_highest():
    s = evaluate_hand(["Kc","Kd"], ["Qh","Qs","2c","2d","9h"])
    assert s == HandStrength(CATEGORY["two_pair"], 11, 10)

def test_two_sets_make_full_house():
    s = evaluate_hand(["9c","9d"], ["9h","4s","4c","4d","Kh"])
    assert s == HandStrength(CATEGORY["full_house"], 7, 2)

def test_flush_checked_before_straight():
    s = evaluate_hand(["9h","8h"], ["7h","6h","2h","5c","Kd"])
    assert s.level == CATEGORY["flush"]
    assert s.primary == 11

def test_straight_top_rank():
    assert evaluate_hand(["9c","8d"], ["7h","6s","5c","2d","Kh"]) == HandStrength(CATEGORY["straight"], 7)
    assert evaluate_hand(["Ac","Kd"], ["Qh","Js","Tc"]).primary == 12

def test_ace_is_not_low_in_straights():
    s = evaluate_hand(["Ac","2d"], ["3h","4s","5c"])
    assert s.level == CATEGORY["high_card"]
    assert s.primary == 12

def test_duplicate_cards_rejected():
    with pytest.raises(ValueError):
        evaluate_hand(["Ac","Ac"], ["3h","4s","5c"])
    with pytest.raises(ValueError):
        evaluate_hand(["Ac"], [])

def test_defined_secondary_wins_over_missing():
    a = HandStrength(CATEGORY["pair"], 5, 3)
    b = HandStrength(CATEGORY["pair"], 5, None)
    assert compare_hands(a, b) == 1
    assert compare_hands(b, a) == -1
    assert compare_hands(b, b) == 0

def test_find_winning_opponent_player_wins():
    board = ["2c","7d","9h","Js","5c"]
    assert find_winning_opponent(["Ac","Ad"], [["Kc","Qd"], ["3s","4s"]], board) is None

def test_find_winning_opponent_picks_best_beater():
    board = ["2c","7d","9h","Js","4c"]
    opps = [["Ac","Kd"], ["9c","9d"], ["3c","5s"]]
    assert find_winning_opponent(["3h","5d"], opps, board) == 1

def test_tie_goes_to_player():
    board = ["Ah","Kd","Qc","Js","Td"]
    assert find_winning_opponent(["2c","3d"], [["4c","5d"], ["2h","3s"]], board) is None

def test_describe():
    assert describe(evaluate_hand(["As","Ah"], ["Ad","Kc","Kh","2s","3d"])) == "full house, A over K"
    assert describe(evaluate_hand(["2s","7h"])) == "high card, 7 high"

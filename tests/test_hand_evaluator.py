import random

import pytest
from pokerhand.cards import Deck, Rank, Suit, parse_cards
from pokerhand.hand_evaluator import HandCategory, evaluate, longest_run, straight_high


def ev(notation):
    return evaluate(parse_cards(notation))


class TestEvaluate:
    def test_four_of_a_kind_example(self):
        result = ev("2h2d2c5s5h9d9c9s9hKs")
        assert result.rank_counts[Rank.TWO] == 3
        assert result.rank_counts[Rank.NINE] == 4
        assert result.pairs == 3
        assert result.three_of_a_kind
        assert result.four_of_a_kind
        assert result.full_house
        assert result.best == HandCategory.FOUR_OF_A_KIND
        assert result.matched == (
            HandCategory.TWO_PAIR,
            HandCategory.THREE_OF_A_KIND,
            HandCategory.FULL_HOUSE,
            HandCategory.FOUR_OF_A_KIND,
        )

    def test_four_plus_one(self):
        result = ev("7h 7d 7c 7s Kd")
        assert result.four_of_a_kind
        assert result.pairs >= 1
        assert result.best == HandCategory.FOUR_OF_A_KIND

    def test_flush(self):
        result = ev("2h 5h 8h Jh Kh 3c 3d 7s Ts Qd")
        assert result.flush
        assert result.suit_counts[Suit.HEARTS] == 5
        assert not result.straight
        assert result.best == HandCategory.FLUSH

    def test_straight(self):
        result = ev("3h 4d 5c 6s 7h 9c 9d Qs Kh Jd")
        assert result.straight
        assert result.straight_high == Rank.SEVEN
        assert result.best == HandCategory.STRAIGHT

    def test_straight_with_duplicate_ranks(self):
        result = ev("3h 3d 4c 4s 5h 6c 6d 7s 2d Kh")
        assert result.straight_high == Rank.SEVEN
        assert result.longest_run == 6

    def test_ace_low_straight(self):
        result = ev("Ah 2d 3c 4s 5h 9c Jd")
        assert result.straight_high == Rank.FIVE

    def test_no_wrap_past_king(self):
        result = ev("Th Jd Qc Ks Ah 3c 6d")
        assert not result.straight
        assert result.best == HandCategory.HIGH_CARD

    def test_flush_and_straight_on_different_cards(self):
        result = ev("2h 4h 6h 8h Qh 3c 4d 5s 6c 7d")
        assert result.flush
        assert result.straight
        assert result.straight_flush_high is None
        assert result.best == HandCategory.FLUSH

    def test_straight_flush(self):
        result = ev("5s 6s 7s 8s 9s 2h 2d Kc Qd 3h")
        assert result.straight_flush_high == Rank.NINE
        assert result.best == HandCategory.STRAIGHT_FLUSH

    def test_royal_flush(self):
        result = ev("9h Th Jh Qh Kh 2c 4d 4s 6c 7d")
        assert result.straight_flush_high == Rank.KING
        assert result.best == HandCategory.ROYAL_FLUSH

    def test_full_house(self):
        result = ev("3h 3d 3c 8s 8h Jd Kc 2s 6h Qd")
        assert result.pairs == 2
        assert result.best == HandCategory.FULL_HOUSE

    def test_two_trips_is_full_house(self):
        assert ev("4h 4d 4c 9s 9h 9d").best == HandCategory.FULL_HOUSE

    def test_three_of_a_kind_counts_as_pair(self):
        result = ev("4h 4d 4c 9s Jh")
        assert result.pairs == 1
        assert not result.full_house
        assert result.matched == (HandCategory.ONE_PAIR, HandCategory.THREE_OF_A_KIND)
        assert result.best == HandCategory.THREE_OF_A_KIND

    def test_two_pair(self):
        assert ev("4h 4d 9c 9s Jh 2c").best == HandCategory.TWO_PAIR

    def test_one_pair(self):
        assert ev("4h 4d 9c Js 2h").best == HandCategory.ONE_PAIR

    def test_high_card(self):
        result = ev("2h 4d 6c 8s Th Qd")
        assert result.matched == ()
        assert result.trace() == []
        assert result.best == HandCategory.HIGH_CARD

    def test_empty(self):
        result = evaluate([])
        assert result.best == HandCategory.HIGH_CARD
        assert result.longest_run == 0

    def test_order_independent(self):
        cards = parse_cards("9h 2d Kc 5s 2h 9d 9c 5h 9s 2c")
        assert evaluate(cards) == evaluate(sorted(cards))

    def test_trace(self):
        assert ev("2h2d2c5s5h9d9c9s9hKs").trace() == [
            "This hand has a two pair",
            "This hand has a three of a kind",
            "This hand has a full house",
            "This hand has a four of a kind",
        ]


class TestStrengthOrder:
    @pytest.mark.parametrize("seed", range(200))
    def test_max_matches_last_match_without_straight_flush(self, seed):
        deck = Deck().shuffle(random.Random(seed))
        result = evaluate(deck.cards[:10])
        if result.matched and result.straight_flush_high is None:
            assert result.best == result.matched[-1]

    def test_labels(self):
        assert str(HandCategory.FOUR_OF_A_KIND) == "Four of a Kind"
        assert HandCategory.HIGH_CARD.label == "High Card"
        assert HandCategory.ROYAL_FLUSH.sentence() == "This hand has a royal flush"

    def test_categories_ordered(self):
        assert HandCategory.FLUSH > HandCategory.STRAIGHT > HandCategory.THREE_OF_A_KIND
        assert HandCategory.ROYAL_FLUSH == max(HandCategory)


class TestRuns:
    def test_longest_run(self):
        assert longest_run([1, 2, 3, 7, 8]) == 3
        assert longest_run([]) == 0

    def test_straight_high_picks_highest_window(self):
        assert straight_high(range(1, 12)) == Rank.JACK

    def test_four_is_not_enough(self):
        assert straight_high([2, 3, 4, 5, 5, 5]) is None

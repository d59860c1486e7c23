"""Tests for scoring.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from hkmahjong.core.hand import Hand
from hkmahjong.core.meld import Meld, MeldType
from hkmahjong.core.tile import Wind, make_tiles_from_string, make_flower
from hkmahjong.rules.scoring import (
    ScoreResult, calculate_score, check_special_patterns, fan_to_points,
    get_minimum_fan, meets_minimum_fan,
)


def meld(kind: MeldType, s: str, concealed: bool = True) -> Meld:
    return Meld(kind, tuple(make_tiles_from_string(s)), is_concealed=concealed)


def hand_of(tiles: str = "", melds=(), flowers=()) -> Hand:
    return Hand(tiles=tuple(make_tiles_from_string(tiles)),
                melds=tuple(melds), flowers=tuple(flowers), can_win=True)


class TestFanToPoints:
    def test_curve(self):
        assert fan_to_points(0) == 8
        assert fan_to_points(1) == 16
        assert fan_to_points(3) == 64

    def test_cap(self):
        assert fan_to_points(10) == 8 * 1024
        assert fan_to_points(13) == 8 * 1024


class TestCalculateScore:
    def test_basic_win(self):
        score = calculate_score(Hand(), Wind.EAST, Wind.EAST)
        assert score.fan >= 1
        assert score.description[0] == "Basic win"
        assert "Concealed hand" in score.description

    def test_points_follow_fan(self):
        score = calculate_score(hand_of("19c東"), Wind.EAST, Wind.EAST)
        assert score.points == 8 * 2 ** min(score.fan, 10)

    def test_concealed_pon(self):
        score = calculate_score(hand_of(melds=[meld(MeldType.PON, "111c")]),
                                Wind.EAST, Wind.EAST)
        assert "Concealed hand" in score.description

    def test_exposed_pon_not_concealed(self):
        score = calculate_score(hand_of(melds=[meld(MeldType.PON, "111c", False)]),
                                Wind.EAST, Wind.EAST)
        assert "Concealed hand" not in score.description

    def test_all_simples(self):
        score = calculate_score(hand_of("234c567b88d"), Wind.EAST, Wind.EAST)
        assert score.description == ["Basic win", "Concealed hand", "All simples"]
        assert score.fan == 3

    def test_terminal_breaks_all_simples(self):
        score = calculate_score(hand_of("234c567b89d"), Wind.EAST, Wind.EAST)
        assert "All simples" not in score.description

    def test_all_simples_ignores_meld_tiles(self):
        score = calculate_score(hand_of("234c", melds=[meld(MeldType.PON, "中中中", False)]),
                                Wind.EAST, Wind.EAST)
        assert score.description == ["Basic win", "All simples", "Dragon red pon"]
        assert score.fan == 3

    def test_dragon_pon(self):
        score = calculate_score(hand_of("19c", melds=[meld(MeldType.PON, "中中中")]),
                                Wind.EAST, Wind.EAST)
        assert "Dragon red pon" in score.description
        assert score.fan == 3

    def test_wind_pon_seat_or_round(self):
        score = calculate_score(hand_of("19c", melds=[meld(MeldType.PON, "東東東")]),
                                Wind.EAST, Wind.EAST)
        assert "east wind pon (seat/round wind)" in score.description

    def test_wind_pon_other_wind_same_fan(self):
        with_match = calculate_score(hand_of("19c", melds=[meld(MeldType.PON, "東東東")]),
                                     Wind.EAST, Wind.EAST)
        without = calculate_score(hand_of("19c", melds=[meld(MeldType.PON, "北北北")]),
                                  Wind.EAST, Wind.SOUTH)
        assert "north wind pon" in without.description
        assert with_match.fan == without.fan

    def test_kong_bonus_stacks(self):
        score = calculate_score(hand_of("19c", melds=[meld(MeldType.KONG, "發發發發", False)]),
                                Wind.EAST, Wind.EAST)
        assert score.description == ["Basic win", "Dragon green kong", "Kong bonus"]
        assert score.fan == 3

    def test_plain_kong_only_bonus(self):
        score = calculate_score(hand_of("19c", melds=[meld(MeldType.KONG, "9999b", False)]),
                                Wind.EAST, Wind.EAST)
        assert score.description == ["Basic win", "Kong bonus"]

    def test_chi_adds_nothing(self):
        score = calculate_score(hand_of("19c", melds=[meld(MeldType.CHI, "123d", False)]),
                                Wind.EAST, Wind.EAST)
        assert score.description == ["Basic win"]

    def test_flowers(self):
        score = calculate_score(hand_of("19c", flowers=[make_flower(1), make_flower(2)]),
                                Wind.EAST, Wind.EAST)
        assert "2 flower(s)" in score.description
        assert score.fan == 4

    def test_rule_order(self):
        hand = hand_of(
            "19c",
            melds=[meld(MeldType.KONG, "南南南南"), meld(MeldType.PON, "白白白")],
            flowers=[make_flower(3)],
        )
        score = calculate_score(hand, Wind.EAST, Wind.SOUTH)
        assert score.description == [
            "Basic win",
            "Concealed hand",
            "Dragon white pon",
            "south wind kong (seat/round wind)",
            "Kong bonus",
            "1 flower(s)",
        ]
        assert score.fan == 6


class TestSpecialPatterns:
    def test_all_one_suit(self):
        patterns = check_special_patterns(hand_of("123c"))
        assert ("All one suit", 6) in patterns

    def test_mixed_one_suit(self):
        patterns = check_special_patterns(hand_of("1c東"))
        assert [p.pattern for p in patterns] == ["Mixed one suit", "All terminals and honors"]

    def test_mixed_needs_single_honor_suit(self):
        assert check_special_patterns(hand_of("5c東中")) == []
        patterns = check_special_patterns(hand_of("5c東南"))
        assert [p.pattern for p in patterns] == ["Mixed one suit"]

    def test_two_suits_no_pattern(self):
        assert check_special_patterns(hand_of("55c55b")) == []

    def test_all_terminals_and_honors(self):
        patterns = check_special_patterns(hand_of("19c東中"))
        assert ("All terminals and honors", 13) in patterns

    def test_meld_tiles_ignored(self):
        hand = hand_of("234c", melds=[meld(MeldType.PON, "777b")])
        assert [p.pattern for p in check_special_patterns(hand)] == ["All one suit"]

    def test_not_folded_into_score(self):
        hand = hand_of("123456789c")
        assert check_special_patterns(hand)
        assert calculate_score(hand, Wind.EAST, Wind.EAST).fan == 2


class TestMinimumFan:
    def test_minimum(self):
        assert get_minimum_fan() == 3

    def test_meets_minimum(self):
        assert not meets_minimum_fan(ScoreResult(fan=2, points=32, description=["Basic win"]))
        assert meets_minimum_fan(ScoreResult(fan=3, points=64))
        assert meets_minimum_fan(ScoreResult(fan=4, points=128))

"""Tests for wall.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from hkmahjong.core.tile import create_tile_set
from hkmahjong.core.wall import shuffle_tiles, deal_hands, DealError, DEAL_SIZE


class TestShuffle:
    def test_keeps_all_tiles(self):
        tiles = create_tile_set()
        shuffled = shuffle_tiles(tiles)
        assert len(shuffled) == 136
        assert sorted(t.id for t in shuffled) == sorted(t.id for t in tiles)

    def test_does_not_mutate_input(self):
        tiles = create_tile_set()
        before = [t.id for t in tiles]
        shuffle_tiles(tiles, 7)
        assert [t.id for t in tiles] == before

    def test_deterministic_with_seed(self):
        tiles = create_tile_set()
        for seed in (0, 1, 12345, 2 ** 31):
            a = shuffle_tiles(tiles, seed)
            b = shuffle_tiles(tiles, seed)
            assert [t.id for t in a] == [t.id for t in b]

    def test_different_seeds_differ(self):
        tiles = create_tile_set()
        a = shuffle_tiles(tiles, 1)
        b = shuffle_tiles(tiles, 2)
        assert [t.id for t in a] != [t.id for t in b]

    def test_actually_shuffles(self):
        tiles = create_tile_set()
        shuffled = shuffle_tiles(tiles, 12345)
        moved = sum(1 for a, b in zip(tiles, shuffled) if a.id != b.id)
        assert moved > len(tiles) * 0.5


class TestDeal:
    def test_hand_sizes(self):
        hands, remaining = deal_hands(create_tile_set())
        assert [len(h) for h in hands] == [14, 13, 13, 13]
        assert len(remaining) == 83

    def test_conserves_tiles(self):
        wall = shuffle_tiles(create_tile_set(), 3)
        hands, remaining = deal_hands(wall)
        dealt = [t.id for h in hands for t in h]
        assert len(dealt) + len(remaining) == 136
        assert sorted(dealt + [t.id for t in remaining]) == sorted(t.id for t in wall)

    def test_round_robin_order(self):
        wall = create_tile_set()
        hands, remaining = deal_hands(wall)
        assert hands[0][0] is wall[0]
        assert hands[1][0] is wall[1]
        assert hands[3][0] is wall[3]
        assert hands[0][1] is wall[4]
        # Dealer's extra tile is the 53rd
        assert hands[0][13] is wall[52]
        assert remaining[0] is wall[53]

    def test_exact_minimum(self):
        hands, remaining = deal_hands(create_tile_set()[:DEAL_SIZE])
        assert len(hands[0]) == 14
        assert remaining == []

    def test_short_wall_raises(self):
        with pytest.raises(DealError):
            deal_hands(create_tile_set()[:DEAL_SIZE - 1])

    def test_deal_error_is_value_error(self):
        with pytest.raises(ValueError):
            deal_hands([])

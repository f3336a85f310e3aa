"""
Tests for automatic bracket filling.
"""

import pytest

from engine.autofill import AutoFillStrategy, auto_fill, pick_favorite
from engine.picks import select_winner
from engine.queries import find_feeders
from engine.validation import check_structure, validate
from models.team import Team
from conftest import FLORIDA, HOUSTON, YALE


class TestFavorites:
    """Tests for always advancing the better seed."""

    def test_better_seed_wins_every_game(self, bracket):
        filled = auto_fill(bracket, AutoFillStrategy.FAVORITES)
        for m in filled.matchups():
            assert m.winner is not None
            assert m.winner.seed == min(m.team_a.seed, m.team_b.seed)

    def test_top_seeds_reach_final_four(self, bracket, regions):
        filled = auto_fill(bracket, "favorites")
        semifinalists = [t for m in filled[5] for t in (m.team_a, m.team_b)]
        assert semifinalists == [r.teams[0] for r in regions]

    def test_champion(self, bracket):
        filled = auto_fill(bracket, "favorites")
        assert filled.champion == HOUSTON
        assert (filled.get(62).team_a, filled.get(62).team_b) == (FLORIDA, HOUSTON)

    def test_deterministic(self, bracket):
        assert auto_fill(bracket, "favorites") == auto_fill(bracket, "favorites")

    def test_equal_seeds_go_to_team_b(self):
        a, b = Team("Auburn", 1), Team("Florida", 1)
        assert pick_favorite(a, b) == b
        assert pick_favorite(b, a) == a

    def test_lower_seed_wins_from_either_slot(self):
        a, b = Team("Duke", 1), Team("Alabama", 2)
        assert pick_favorite(a, b) == a
        assert pick_favorite(b, a) == a

    def test_overwrites_existing_picks(self, bracket):
        picked = select_winner(bracket, 3, YALE)
        filled = auto_fill(picked, "favorites")
        assert filled == auto_fill(bracket, "favorites")


class TestRandom:
    """Tests for coin-flip filling."""

    def test_reproducible_with_seed(self, bracket):
        assert auto_fill(bracket, "random", seed=42) == auto_fill(bracket, "random", seed=42)

    def test_different_seeds_differ(self, bracket):
        results = {auto_fill(bracket, "random", seed=s).champion for s in range(20)}
        assert len(results) > 1

    def test_fills_every_game(self, bracket):
        filled = auto_fill(bracket, AutoFillStrategy.RANDOM, seed=3)
        assert validate(filled) == []
        assert all(m.winner is not None for m in filled.matchups())
        assert check_structure(filled) == []

    def test_winners_come_from_feeders(self, bracket):
        filled = auto_fill(bracket, "random", seed=11)
        for r in range(2, 7):
            for m in filled[r]:
                feeders = find_feeders(filled, m.id)
                assert (m.team_a, m.team_b) == (feeders[0].winner, feeders[1].winner)
                assert m.winner in (m.team_a, m.team_b)

    def test_input_unchanged(self, bracket):
        before = bracket.to_dict()
        auto_fill(bracket, "random", seed=1)
        assert bracket.to_dict() == before


class TestStrategyNames:
    """Tests for strategy arguments."""

    def test_string_values(self):
        assert AutoFillStrategy("random") is AutoFillStrategy.RANDOM
        assert AutoFillStrategy("favorites") is AutoFillStrategy.FAVORITES

    def test_unknown_strategy(self, bracket):
        with pytest.raises(ValueError):
            auto_fill(bracket, "chalkiest")

"""Tests for scoring."""

import pytest

from sdg_agents.game.scoring import (
    FAIL_REASON,
    PASS_REASON,
    finalize_game,
    goal_points,
    score,
)
from sdg_agents.models import Player


def make_player(make_cards, *goal_ids, name="Agent"):
    return Player(player_id=name.lower(), name=name, collected=make_cards(*goal_ids))


class TestScore:
    """Tests for per-player scoring."""

    def test_empty(self):
        """Test empty collection scores zero."""
        assert score([]) == 0

    def test_example_hand(self, make_cards):
        """Test {1,1,2,2,2,17,17} scores 4 + 4 + 2."""
        assert score(make_cards(1, 1, 2, 2, 2, 17, 17)) == 10

    def test_goal_one_doubles(self, make_cards):
        """Test goal 1 scores 2 per card."""
        assert score(make_cards(1)) == 2
        assert score(make_cards(1, 1, 1, 1, 1)) == 10

    def test_goal_two_count_plus_one(self, make_cards):
        """Test goal 2 scores count + 1."""
        assert score(make_cards(2)) == 2
        assert score(make_cards(2, 2, 2, 2)) == 5

    @pytest.mark.parametrize("goal_id,bonus", [(4, 2), (13, 2), (6, 1), (14, 1), (15, 1)])
    def test_flat_bonus(self, make_cards, goal_id, bonus):
        """Test flat bonuses do not scale with count."""
        assert score(make_cards(goal_id)) == bonus
        assert score(make_cards(*[goal_id] * 6)) == bonus

    @pytest.mark.parametrize(
        "count,points",
        [(0, 0), (1, 2), (3, 2), (4, 4), (6, 4), (7, 4), (19, 4)],
    )
    def test_partnership_curve(self, count, points):
        """Test goal 17 brackets, capped at 4."""
        assert goal_points(17, count) == points

    def test_mixed_collection(self, make_cards):
        """Test contributions are summed across goals."""
        cards = make_cards(1, 2, 4, 4, 6, 13, 14, 15, 17, 17, 17, 17)
        # 2 + 2 + 2 + 1 + 2 + 1 + 1 + 4
        assert score(cards) == 15

    def test_order_independent(self, make_cards):
        """Test card order does not matter."""
        assert score(make_cards(17, 1, 2, 1)) == score(make_cards(1, 1, 2, 17))


class TestFinalizeGame:
    """Tests for team scoring."""

    def test_pass_at_target(self, make_cards):
        """Test reaching the target exactly passes."""
        players = [
            make_player(make_cards, *[1] * 30, name="A"),  # 60
            make_player(make_cards, 2, 2, name="B"),  # 3
        ]
        result = finalize_game(players, 63)

        assert result.grand_total == 63
        assert result.passed
        assert result.reason == PASS_REASON

    def test_fail_below_target(self, make_cards):
        """Test one point short fails."""
        players = [
            make_player(make_cards, *[1] * 30, name="A"),  # 60
            make_player(make_cards, 2, name="B"),  # 2
        ]
        result = finalize_game(players, 63)

        assert result.grand_total == 62
        assert not result.passed
        assert result.reason == FAIL_REASON

    def test_player_scores(self, make_cards):
        """Test individual scores are reported on copies."""
        players = [
            make_player(make_cards, 1, 1, name="A"),
            make_player(make_cards, 17, name="B"),
            make_player(make_cards, name="C"),
        ]
        result = finalize_game(players)

        assert [p.final_score for p in result.players] == [4, 2, 0]
        assert result.scores() == {"a": 4, "b": 2, "c": 0}
        assert all(p.final_score == 0 for p in players)

    def test_idempotent(self, make_cards):
        """Test finalizing twice gives the same result."""
        players = [
            make_player(make_cards, 1, 2, 17, name="A"),
            make_player(make_cards, 4, 6, name="B"),
        ]
        first = finalize_game(players, 63)
        second = finalize_game(players, 63)

        assert first == second
        assert first.grand_total == 9

"""Tests for the gift exchange phase."""

import pytest

from sdg_agents.game.gift_exchange import give_card, select_gift_card, skip_gift
from sdg_agents.game.turns import collect, start_turn
from sdg_agents.models import EventType, Phase


@pytest.fixture
def gift_state(make_state, make_cards):
    state = make_state(phase=Phase.GIFT_EXCHANGE)
    state.players[0].collected = make_cards(1, 17)
    state.players[1].collected = make_cards(2)
    state.players[2].collected = make_cards(4, 6, 13)
    return state


def play_collect_one_game(state):
    """Flip and collect one card per turn until the pile runs out."""
    while state.phase == Phase.FLIP:
        state = start_turn(state).state
        state = collect(state).state
    return state


class TestGiveCard:
    """Tests for give_card."""

    def test_transfers_card(self, gift_state):
        """Test the card moves to the recipient and the slot ends."""
        given_id = gift_state.players[0].collected[1].card_id
        result = give_card(gift_state, 0, 1, 2)

        new = result.state
        assert new.players[0].collected_goal_ids() == [1]
        assert new.players[2].collected_goal_ids() == [4, 6, 13, 17]
        assert new.players[2].collected[-1].card_id == given_id
        assert new.turn_index == 1
        assert result.events[0].type == EventType.GIFT
        assert result.events[0].detail["to"] == 2

    def test_only_active_player_gives(self, gift_state):
        """Test a player outside their slot cannot give."""
        result = give_card(gift_state, 1, 0, 0)
        assert not result.is_valid
        assert result.state is gift_state

    def test_cannot_give_to_self(self, gift_state):
        """Test the recipient must be another player."""
        assert not give_card(gift_state, 0, 0, 0).is_valid

    def test_invalid_recipient(self, gift_state):
        """Test recipients outside the roster are rejected."""
        assert not give_card(gift_state, 0, 0, 3).is_valid
        assert not give_card(gift_state, 0, 0, -1).is_valid

    def test_invalid_card_index(self, gift_state):
        """Test card index must point into the giver's cards."""
        assert not give_card(gift_state, 0, 2, 1).is_valid

    def test_one_gift_per_slot(self, gift_state):
        """Test giving ends the slot, so the giver cannot give again."""
        new = give_card(gift_state, 0, 0, 1).state

        assert new.turn_index == 1
        assert not give_card(new, 0, 0, 1).is_valid

    def test_wrong_phase(self, make_state, make_cards):
        """Test gifts are only allowed during gift exchange."""
        state = make_state(pile=[1])
        state.players[0].collected = make_cards(2)
        assert not give_card(state, 0, 0, 1).is_valid


class TestSelectGiftCard:
    """Tests for select_gift_card."""

    def test_marks_selection(self, gift_state):
        """Test selecting records the index without moving cards."""
        new = select_gift_card(gift_state, 1).state

        assert new.gift_selected_index == 1
        assert new.players[0].collected_goal_ids() == [1, 17]
        assert new.turn_index == 0

    def test_give_clears_selection(self, gift_state):
        """Test the selection is cleared after giving."""
        selected = select_gift_card(gift_state, 0).state
        assert give_card(selected, 0, 0, 1).state.gift_selected_index is None

    def test_out_of_range(self, gift_state):
        """Test selecting a missing card is rejected."""
        assert not select_gift_card(gift_state, 5).is_valid


class TestSkipGift:
    """Tests for skip_gift and phase completion."""

    def test_visits_each_player_once_in_order(self, gift_state):
        """Test slots run 0..N-1 and then the game is scored."""
        state = gift_state
        visited = []
        while state.phase == Phase.GIFT_EXCHANGE:
            result = skip_gift(state)
            visited.append(result.events[0].player_index)
            state = result.state

        assert visited == [0, 1, 2]
        assert state.phase == Phase.GAME_OVER

    def test_last_slot_finalizes(self, gift_state):
        """Test the game is scored after the last player acts."""
        state = skip_gift(skip_gift(gift_state).state).state
        result = give_card(state, 2, 0, 0)

        new = result.state
        assert new.phase == Phase.GAME_OVER
        assert new.result is not None
        # p0: 1,17,4 -> 2+2+2; p1: 2 -> 2; p2: 6,13 -> 1+2
        assert [p.final_score for p in new.players] == [6, 2, 3]
        assert new.result.grand_total == 11
        assert not new.result.passed
        assert result.events[-1].type == EventType.GAME_OVER

    def test_rejected_after_game_over(self, gift_state):
        """Test the phase cannot run twice."""
        state = gift_state
        for _ in range(3):
            state = skip_gift(state).state

        assert not skip_gift(state).is_valid
        assert not give_card(state, 0, 0, 1).is_valid


class TestFullGame:
    """End-to-end games with a scripted draw pile."""

    def test_reaches_target_exactly(self, make_state):
        """Test a team total of exactly the target passes."""
        # 30 x goal 1 -> 60, plus goal 4 (+2) and goal 6 (+1)
        state = make_state(pile=[1] * 30 + [4, 6], target_score=63)
        state = play_collect_one_game(state)
        assert state.phase == Phase.GIFT_EXCHANGE
        assert state.total_cards() == 32

        while state.phase == Phase.GIFT_EXCHANGE:
            state = skip_gift(state).state

        assert state.result.grand_total == 63
        assert state.result.passed

    def test_one_point_short(self, make_state):
        """Test a team total one below the target fails."""
        state = make_state(pile=[1] * 30 + [4], target_score=63)
        state = play_collect_one_game(state)
        while state.phase == Phase.GIFT_EXCHANGE:
            state = skip_gift(state).state

        assert state.result.grand_total == 62
        assert not state.result.passed

    def test_gift_changes_team_total(self, make_state):
        """Test a gift can complete a flat bonus for the team."""
        # Seat 0 gets both goal 4 cards; moving one to seat 1 earns another +2
        state = make_state(pile=[4, 1, 1, 4, 1, 1])
        state = play_collect_one_game(state)
        assert state.players[0].collected_goal_ids() == [4, 4]

        state = give_card(state, 0, 0, 1).state
        state = skip_gift(skip_gift(state).state).state

        assert [p.final_score for p in state.players] == [2, 6, 4]
        assert state.result.grand_total == 12

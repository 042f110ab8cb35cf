"""Gift exchange: the cooperative phase between the last turn and scoring.

Players act once each, in seat order starting at index 0. In their slot a
player either gives one collected card to another player or skips. After
the last player acts the game is scored and ends.
"""

from sdg_agents.models.game_state import EventType, GameEvent, GameState, Phase

from .scoring import finalize_game
from .transition import Transition, begin, event, reject, require_phase


def enter_gift_exchange(state: GameState) -> list[GameEvent]:
    """Switch a state (already copied) into the gift exchange phase."""
    state.table = []
    state.phase = Phase.GIFT_EXCHANGE
    state.turn_index = 0
    state.gift_selected_index = None
    return [event(state, EventType.GIFT_EXCHANGE_START)]


def _next_slot(state: GameState) -> list[GameEvent]:
    """Advance to the next player, or score the game after the last one."""
    state.gift_selected_index = None
    if state.turn_index < len(state.players) - 1:
        state.turn_index += 1
        return []

    result = finalize_game(state.players, state.target_score)
    state.players = result.players
    state.result = result
    state.phase = Phase.GAME_OVER
    return [
        event(
            state,
            EventType.GAME_OVER,
            grand_total=result.grand_total,
            passed=result.passed,
        )
    ]


def select_gift_card(state: GameState, card_index: int) -> Transition:
    """Mark one of the active player's cards as the gift candidate."""
    rejected = require_phase(state, Phase.GIFT_EXCHANGE, "select_gift_card")
    if rejected:
        return rejected
    if not 0 <= card_index < len(state.active_player.collected):
        return reject(state, f"gift card index {card_index} out of range")

    new = begin(state)
    new.gift_selected_index = card_index
    goal_id = new.active_player.collected[card_index].goal_id
    return Transition(
        state=new,
        events=[event(new, EventType.GIFT_SELECT, [goal_id], index=card_index)],
    )


def give_card(
    state: GameState,
    from_index: int,
    card_index: int,
    to_index: int,
) -> Transition:
    """Transfer one collected card to another player and end the slot.

    Args:
        state: Current state.
        from_index: Giving player; must be the active player.
        card_index: Position of the card in the giver's collected cards.
        to_index: Receiving player; must differ from the giver.
    """
    rejected = require_phase(state, Phase.GIFT_EXCHANGE, "give_card")
    if rejected:
        return rejected
    if from_index != state.turn_index:
        return reject(state, f"player {from_index} is not the active gift giver")
    if not 0 <= to_index < len(state.players) or to_index == from_index:
        return reject(state, f"invalid gift recipient {to_index}")
    if not 0 <= card_index < len(state.players[from_index].collected):
        return reject(state, f"gift card index {card_index} out of range")

    new = begin(state)
    card = new.players[from_index].collected.pop(card_index)
    new.players[to_index].collected.append(card)

    events = [event(new, EventType.GIFT, [card.goal_id], to=to_index)]
    events.extend(_next_slot(new))
    return Transition(state=new, events=events)


def skip_gift(state: GameState) -> Transition:
    """Decline to give a card and end the slot."""
    rejected = require_phase(state, Phase.GIFT_EXCHANGE, "skip_gift")
    if rejected:
        return rejected

    new = begin(state)
    events = [event(new, EventType.GIFT_SKIP)]
    events.extend(_next_slot(new))
    return Transition(state=new, events=events)

"""Turn transitions: flip, push luck, bust, collect and discard.

Every function takes a GameState and returns a Transition holding a new
state; the input state is never modified.
"""

from sdg_agents.models.game_state import EventType, GameEvent, GameState, Phase

from .gift_exchange import enter_gift_exchange
from .transition import Transition, begin, event, reject, require_phase


def _end_turn(state: GameState) -> list[GameEvent]:
    """Clear the table and hand the turn over.

    Moves to gift exchange once the draw pile is exhausted.
    """
    state.table = []
    events = [event(state, EventType.TURN_END)]
    if not state.draw_pile:
        events.extend(enter_gift_exchange(state))
        return events

    state.turn_index = (state.turn_index + 1) % len(state.players)
    state.phase = Phase.FLIP
    return events


def start_turn(state: GameState) -> Transition:
    """Reveal the first card of a turn."""
    rejected = require_phase(state, Phase.FLIP, "start_turn")
    if rejected:
        return rejected

    new = begin(state)
    if not new.draw_pile:
        return Transition(state=new, events=enter_gift_exchange(new))

    card = new.draw_pile.pop(0)
    new.table = [card]
    new.phase = Phase.DECISION
    return Transition(
        state=new,
        events=[event(new, EventType.TURN_START, [card.goal_id])],
    )


def draw_more(state: GameState) -> Transition:
    """Push luck: reveal another card.

    A card whose goal is already on the table busts the turn. The duplicate
    stays on the table so it can be shown, but it is never collected.
    """
    rejected = require_phase(state, Phase.DECISION, "draw_more")
    if rejected:
        return rejected
    if not state.draw_pile:
        return reject(state, "draw pile is empty")

    new = begin(state)
    card = new.draw_pile.pop(0)
    is_bust = card.goal_id in new.table_goal_ids()
    new.table.append(card)

    if is_bust:
        new.phase = Phase.BUST
        return Transition(
            state=new,
            events=[event(new, EventType.BUST, new.table_goal_ids(), duplicate=card.goal_id)],
        )

    return Transition(state=new, events=[event(new, EventType.DRAW, [card.goal_id])])


def collect(state: GameState) -> Transition:
    """Stop drawing and keep the table.

    A single card is collected directly. Two or more cards require one to be
    discarded first.
    """
    rejected = require_phase(state, Phase.DECISION, "collect")
    if rejected:
        return rejected
    if not state.table:
        return reject(state, "table is empty")

    new = begin(state)
    if len(new.table) > 1:
        new.phase = Phase.DISCARD_SELECT
        return Transition(
            state=new,
            events=[event(new, EventType.DISCARD_REQUIRED, new.table_goal_ids())],
        )

    card = new.table[0]
    new.active_player.collected.append(card)
    events = [event(new, EventType.COLLECT, [card.goal_id], direct=True)]
    events.extend(_end_turn(new))
    return Transition(state=new, events=events)


def discard(state: GameState, index: int) -> Transition:
    """Sacrifice one table card and collect the rest.

    Args:
        state: Current state.
        index: Position on the table of the card to forfeit.
    """
    rejected = require_phase(state, Phase.DISCARD_SELECT, "discard")
    if rejected:
        return rejected
    if not 0 <= index < len(state.table):
        return reject(state, f"discard index {index} out of range")

    new = begin(state)
    sacrificed = new.table.pop(index)
    new.forfeited.append(sacrificed)
    kept = new.table
    new.active_player.collected.extend(kept)

    events = [
        event(new, EventType.DISCARD, [sacrificed.goal_id], index=index),
        event(new, EventType.COLLECT, [c.goal_id for c in kept], direct=False),
    ]
    events.extend(_end_turn(new))
    return Transition(state=new, events=events)


def acknowledge_bust(state: GameState) -> Transition:
    """Forfeit the busted table and end the turn."""
    rejected = require_phase(state, Phase.BUST, "acknowledge_bust")
    if rejected:
        return rejected

    new = begin(state)
    lost = new.table_goal_ids()
    new.forfeited.extend(new.table)
    events = [event(new, EventType.BUST_ACKNOWLEDGED, lost)]
    events.extend(_end_turn(new))
    return Transition(state=new, events=events)

"""Result of applying a trigger to a game state."""

from dataclasses import dataclass, field

from sdg_agents.models.game_state import EventType, GameEvent, GameState, Phase


@dataclass
class Transition:
    """Outcome of a state transition.

    A rejected transition carries the input state unchanged.
    """

    state: GameState
    events: list[GameEvent] = field(default_factory=list)
    is_valid: bool = True
    error_message: str = ""


def reject(state: GameState, message: str) -> Transition:
    """Build a rejected transition."""
    return Transition(state=state, is_valid=False, error_message=message)


def require_phase(state: GameState, phase: Phase, trigger: str) -> Transition | None:
    """Reject a trigger issued outside its phase.

    Returns:
        A rejected Transition, or None if the state is in the expected phase.
    """
    if state.phase != phase:
        return reject(state, f"{trigger} not allowed in {state.phase.value}")
    return None


def begin(state: GameState) -> GameState:
    """Copy a state for modification and bump its version."""
    new = state.model_copy(deep=True)
    new.version += 1
    return new


def event(
    state: GameState,
    event_type: EventType,
    goal_ids: list[int] | None = None,
    **detail,
) -> GameEvent:
    """Create an event for the active player."""
    return GameEvent(
        type=event_type,
        player_index=state.turn_index,
        goal_ids=goal_ids or [],
        detail=detail,
    )

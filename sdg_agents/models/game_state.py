"""Game state models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from .card import Card
from .player import Player


class Phase(str, Enum):
    """Phase of the game state machine."""

    FLIP = "flip"  # Waiting to reveal the first card of a turn
    DECISION = "decision"  # Push luck or collect
    BUST = "bust"  # Duplicate goal revealed, table forfeited
    DISCARD_SELECT = "discard_select"  # Sacrifice one card before collecting
    GIFT_EXCHANGE = "gift_exchange"  # One optional gift per player
    GAME_OVER = "game_over"


class EventType(str, Enum):
    """Kind of game event emitted by a transition."""

    TURN_START = "turn_start"
    DRAW = "draw"
    BUST = "bust"
    COLLECT = "collect"  # Cards moved to a player's collected set
    DISCARD_REQUIRED = "discard_required"
    DISCARD = "discard"
    BUST_ACKNOWLEDGED = "bust_acknowledged"
    TURN_END = "turn_end"
    GIFT_EXCHANGE_START = "gift_exchange_start"
    GIFT_SELECT = "gift_select"
    GIFT = "gift"
    GIFT_SKIP = "gift_skip"
    GAME_OVER = "game_over"


class GameEvent(BaseModel, frozen=True):
    """Something that happened during a transition."""

    type: EventType
    player_index: int
    goal_ids: list[int] = Field(default_factory=list)
    detail: dict[str, Any] = Field(default_factory=dict)


class ScoreResult(BaseModel):
    """Final team verdict."""

    grand_total: int
    target_score: int
    passed: bool
    reason: str
    players: list[Player]

    def scores(self) -> dict[str, int]:
        """Get final score by player identifier."""
        return {p.player_id: p.final_score for p in self.players}


class GameState(BaseModel):
    """Complete, serializable state of one game."""

    phase: Phase = Phase.FLIP
    turn_index: int = 0  # Index into players, wraps modulo player count
    version: int = 0  # Bumped on every accepted transition
    target_score: int = 63

    players: list[Player] = Field(default_factory=list)
    draw_pile: list[Card] = Field(default_factory=list)  # Index 0 is the top
    table: list[Card] = Field(default_factory=list)
    forfeited: list[Card] = Field(default_factory=list)  # Out of play for good

    # Index into the active player's collected cards during gift exchange
    gift_selected_index: int | None = None

    result: ScoreResult | None = None

    @property
    def active_player(self) -> Player:
        """Get the player whose turn it is."""
        return self.players[self.turn_index]

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self.phase == Phase.GAME_OVER

    def table_goal_ids(self) -> list[int]:
        """Get goal identifiers on the table in reveal order."""
        return [c.goal_id for c in self.table]

    def total_cards(self) -> int:
        """Count cards across every location."""
        return (
            len(self.draw_pile)
            + len(self.table)
            + sum(len(p.collected) for p in self.players)
            + len(self.forfeited)
        )

    def __str__(self) -> str:
        parts = [f"v{self.version} {self.phase.value}"]
        if self.players:
            parts.append(f"{self.active_player.name}'s turn")
        parts.append(f"pile={len(self.draw_pile)}")
        if self.table:
            parts.append(f"table={self.table_goal_ids()}")
        return " ".join(parts)

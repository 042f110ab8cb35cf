"""Player model."""

from pydantic import BaseModel, Field

from .card import Card


class Player(BaseModel):
    """Player state."""

    player_id: str
    name: str = "Agent"
    is_automated: bool = False
    is_initiator: bool = False  # Display only

    # Mutable during the game
    collected: list[Card] = Field(default_factory=list)
    final_score: int = 0  # Valid after game over

    def collected_goal_ids(self) -> list[int]:
        """Get goal identifiers of collected cards in order."""
        return [c.goal_id for c in self.collected]

    def __str__(self) -> str:
        kind = "auto" if self.is_automated else "human"
        return f"{self.name}[{kind}]"

    def __repr__(self) -> str:
        return (
            f"Player(id={self.player_id!r}, name={self.name!r}, "
            f"collected={len(self.collected)}, automated={self.is_automated})"
        )

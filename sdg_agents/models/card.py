"""Card model and deck construction."""

import random
from typing import Mapping

from pydantic import BaseModel, field_validator

from .goal import get_goal

# Number of cards per goal in a standard deck (79 cards)
DECK_COUNTS: dict[int, int] = {
    1: 7,
    2: 8,
    4: 10,
    6: 8,
    13: 5,
    14: 10,
    15: 12,
    17: 19,
}


class Card(BaseModel, frozen=True):
    """Single card instance."""

    card_id: str
    goal_id: int

    @field_validator("goal_id")
    @classmethod
    def _known_goal(cls, value: int) -> int:
        get_goal(value)
        return value

    def __str__(self) -> str:
        return f"SDG{self.goal_id}"

    def __repr__(self) -> str:
        return f"Card({self.card_id})"


def build_deck(
    counts: Mapping[int, int] | None = None,
    rng: random.Random | None = None,
) -> list[Card]:
    """Create a shuffled draw pile.

    Args:
        counts: Cards per goal identifier. Uses DECK_COUNTS if not provided.
        rng: Random source for the shuffle (module random if not provided).

    Returns:
        List of cards; index 0 is the top of the pile.
    """
    counts = DECK_COUNTS if counts is None else counts
    deck = [
        Card(card_id=f"card-{goal_id}-{i}", goal_id=goal_id)
        for goal_id, count in counts.items()
        for i in range(count)
    ]
    (rng or random).shuffle(deck)
    return deck

"""Sustainable Development Goal catalog."""

from enum import Enum

from pydantic import BaseModel


class ScoringRule(str, Enum):
    """How a goal's cards contribute to a player's score."""

    PER_CARD_DOUBLE = "per_card_double"  # 2 pts per card
    COUNT_PLUS_ONE = "count_plus_one"  # count + 1 if any
    FLAT_TWO = "flat_two"  # +2 if any
    FLAT_ONE = "flat_one"  # +1 if any
    CURVE = "curve"  # bracketed bonus


class GoalCategory(BaseModel, frozen=True):
    """Static scoring metadata for one goal."""

    goal_id: int
    name: str
    rule: ScoringRule

    def __str__(self) -> str:
        return f"SDG {self.goal_id} ({self.name})"


class UnknownGoalError(KeyError):
    """Raised when a goal identifier is not in the catalog."""


GOAL_CATALOG: dict[int, GoalCategory] = {
    1: GoalCategory(goal_id=1, name="No Poverty", rule=ScoringRule.PER_CARD_DOUBLE),
    2: GoalCategory(goal_id=2, name="Zero Hunger", rule=ScoringRule.COUNT_PLUS_ONE),
    4: GoalCategory(goal_id=4, name="Quality Education", rule=ScoringRule.FLAT_TWO),
    6: GoalCategory(goal_id=6, name="Clean Water & Sanitation", rule=ScoringRule.FLAT_ONE),
    13: GoalCategory(goal_id=13, name="Climate Action", rule=ScoringRule.FLAT_TWO),
    14: GoalCategory(goal_id=14, name="Life Below Water", rule=ScoringRule.FLAT_ONE),
    15: GoalCategory(goal_id=15, name="Life on Land", rule=ScoringRule.FLAT_ONE),
    17: GoalCategory(goal_id=17, name="Partnerships for the Goals", rule=ScoringRule.CURVE),
}

GOAL_IDS: tuple[int, ...] = tuple(sorted(GOAL_CATALOG))


def get_goal(goal_id: int) -> GoalCategory:
    """Look up a goal category.

    Args:
        goal_id: Goal identifier.

    Returns:
        The goal's category.

    Raises:
        UnknownGoalError: If the identifier is not a known goal.
    """
    try:
        return GOAL_CATALOG[goal_id]
    except KeyError:
        raise UnknownGoalError(goal_id) from None

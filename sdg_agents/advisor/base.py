"""Base advisor class.

Advisors supply flavour text only. Their output never affects game state,
and none of their methods may raise.
"""

from abc import ABC, abstractmethod

FALLBACK_ADVICE = "The future depends on your decision."
EMPTY_ADVICE = "Continue if you're feeling lucky, Agent."


class Advisor(ABC):
    """Abstract base class for strategist advice and goal insight."""

    @abstractmethod
    def get_strategist_advice(
        self,
        table_goal_ids: list[int],
        remaining_deck_size: int,
        player_goal_ids: list[int],
    ) -> str:
        """Recommend pushing luck or collecting.

        Args:
            table_goal_ids: Goals currently on the table
            remaining_deck_size: Cards left in the draw pile
            player_goal_ids: Goals already collected by the active player

        Returns:
            Short recommendation; FALLBACK_ADVICE on failure
        """
        pass

    @abstractmethod
    def get_sdg_insight(self, goal_id: int) -> str | None:
        """Get a one-sentence fact about a goal.

        Returns:
            The fact, or None on failure
        """
        pass

    def is_available(self) -> bool:
        """Check if the advisor can reach its backend."""
        return True


class OfflineAdvisor(Advisor):
    """Advisor used when no generative backend is configured."""

    def get_strategist_advice(
        self,
        table_goal_ids: list[int],
        remaining_deck_size: int,
        player_goal_ids: list[int],
    ) -> str:
        return FALLBACK_ADVICE

    def get_sdg_insight(self, goal_id: int) -> str | None:
        return None

    def is_available(self) -> bool:
        return False

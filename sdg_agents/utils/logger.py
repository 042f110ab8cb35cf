"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

from sdg_agents.models.goal import get_goal

if TYPE_CHECKING:
    from sdg_agents.models.game_state import GameEvent, GameState, ScoreResult
    from sdg_agents.models.player import Player


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display game progress to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to show every player's collected cards
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_game_start(self, game_number: int, num_games: int, state: "GameState") -> None:
        """Print game start message."""
        self.print_separator()
        print(f"GAME {game_number}/{num_games} - {len(state.draw_pile)} cards, target {state.target_score}")
        self.print_separator()

    def print_event(self, event: "GameEvent", state: "GameState") -> None:
        """Print one engine event."""
        player = state.players[event.player_index]
        goals = ", ".join(str(get_goal(g)) for g in event.goal_ids)
        print(f"  {player.name}: {event.type.value}" + (f" [{goals}]" if goals else ""))

    def print_collections(self, players: list["Player"]) -> None:
        """Print collected cards for all players (if show_hands is enabled)."""
        if not self.show_hands:
            return

        print("\nCollected:")
        for player in players:
            goals = ",".join(str(g) for g in player.collected_goal_ids())
            print(f"  {player.name}: [{goals}]")

    def print_game_end(self, game_number: int, result: "ScoreResult") -> None:
        """Print game end results."""
        print(f"\nGame {game_number} finished!")
        print("Scores:")
        for player in result.players:
            print(f"  {player.name}: {player.final_score} pts ({len(player.collected)} cards)")
        verdict = "PASSED" if result.passed else "FAILED"
        print(f"Team total: {result.grand_total}/{result.target_score} - {verdict}")
        print(f"  {result.reason}")
        self.print_collections(result.players)

    def print_final_results(self, totals: list[int], target_score: int) -> None:
        """Print results across all simulated games."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()

        if not totals:
            print("  No games played")
            return

        passed = sum(1 for t in totals if t >= target_score)
        print(f"  Games: {len(totals)}")
        print(f"  Passed: {passed} ({passed / len(totals):.0%})")
        print(f"  Average total: {sum(totals) / len(totals):.1f}")
        print(f"  Best total: {max(totals)}")

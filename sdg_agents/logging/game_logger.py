"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from sdg_agents.models.game_state import GameEvent, GameState, ScoreResult
from sdg_agents.models.player import Player

from .formatters import format_cards, format_collections


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, record: dict[str, Any]) -> None:
        """Write a record to the log file.

        Args:
            record: Dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(record, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, players: list[Player]) -> None:
        """Log session start with the roster.

        Args:
            players: Players in seat order.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "players": [
                {"id": p.player_id, "name": p.name, "automated": p.is_automated}
                for p in players
            ],
        })

    def log_game_start(self, game_num: int, state: GameState) -> None:
        """Log game start with the shuffled draw pile.

        Args:
            game_num: Game number.
            state: Initial state.
        """
        self._write({
            "type": "game_start",
            "game": game_num,
            "target_score": state.target_score,
            "draw_pile": format_cards(state.draw_pile),
        })

    def log_event(self, game_num: int, event: GameEvent, state: GameState) -> None:
        """Log a single engine event.

        Args:
            game_num: Game number.
            event: Event emitted by the transition.
            state: State after the transition.
        """
        record: dict[str, Any] = {
            "type": event.type.value,
            "game": game_num,
            "version": state.version,
            "player": event.player_index,
            "goals": event.goal_ids,
            "phase": state.phase.value,
            "table": format_cards(state.table),
            "pile": len(state.draw_pile),
        }
        if event.detail:
            record["detail"] = event.detail
        self._write(record)

    def log_game_end(self, game_num: int, result: ScoreResult) -> None:
        """Log game end with the final verdict.

        Args:
            game_num: Game number.
            result: Final scores.
        """
        self._write({
            "type": "game_end",
            "game": game_num,
            "grand_total": result.grand_total,
            "target_score": result.target_score,
            "passed": result.passed,
            "scores": {str(i): p.final_score for i, p in enumerate(result.players)},
            "collected": format_collections(result.players),
        })

    def log_session_end(self, total_games: int, totals: list[int]) -> None:
        """Log session end with every game's grand total.

        Args:
            total_games: Total number of games played.
            totals: Grand total of each game in order.
        """
        self._write({
            "type": "session_end",
            "total_games": total_games,
            "totals": totals,
        })

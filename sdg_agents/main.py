"""Main entry point: headless simulation of automated games."""

import argparse
import logging
import random
import sys
from datetime import datetime
from pathlib import Path

from sdg_agents.config import Config, load_config
from sdg_agents.game.auto_player import AutoPlayer, play_until_human
from sdg_agents.game.engine import TurnEngine
from sdg_agents.logging import GameLogConfig, GameLogger
from sdg_agents.models.game_state import GameEvent, GameState
from sdg_agents.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, config: Config) -> str:
    """Generate log filename with timestamp and player names.

    Format: {ISO timestamp}_{player1}_{player2}_..._{playerN}.jsonl
    Player names keep seat order, with spaces replaced by dashes.

    Args:
        log_dir: Directory for log files.
        config: Configuration holding the roster.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    player_names = "_".join(p.name.replace(" ", "-") for p in config.game.players)
    filename = f"{timestamp}_{player_names}.jsonl"
    return str(Path(log_dir) / filename)


def run_simulation(
    config: Config,
    num_games: int,
    game_logger: GameLogger,
    display: GameDisplay,
    seed: int | None = None,
) -> list[int]:
    """Play games with every seat automated.

    Returns:
        Grand total of each game
    """
    rng = random.Random(seed)
    engine = TurnEngine(config, game_logger, rng=rng)
    auto_player = AutoPlayer(config.automation, rng=rng)

    if config.logging.level.upper() == "DEBUG":
        def on_change(state: GameState, events: list[GameEvent]) -> None:
            for event in events:
                display.print_event(event, state)

        engine.subscribe(on_change)

    totals: list[int] = []
    for game_num in range(1, num_games + 1):
        state = engine.new_game()
        if game_num == 1:
            game_logger.log_session_start(state.players)
        display.print_game_start(game_num, num_games, state)

        play_until_human(engine, auto_player)
        result = engine.state.result
        if result is None:
            raise RuntimeError(f"Game {game_num} stopped in {engine.state.phase.value}")

        display.print_game_end(game_num, result)
        totals.append(result.grand_total)

    game_logger.log_session_end(num_games, totals)
    return totals


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="SDG Agents cooperative card game simulator"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--num-games",
        type=int,
        default=1,
        help="Number of games to simulate (default: 1)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for reproducible games",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show collected cards at game end",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args()
    if args.num_games < 1:
        parser.error("--num-games must be at least 1")

    # Load config
    config = load_config(args.config)

    # Simulation drives every seat
    for seat in config.game.players:
        seat.automated = True

    # Apply command-line overrides
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True

    # Determine game log directory (CLI argument overrides config file)
    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.directory

    setup_logging(config.logging.level)
    display = GameDisplay(show_hands=config.logging.show_hands)

    print("SDG Agents simulation starting...")
    print(f"Games: {args.num_games}")
    print(f"Players: {', '.join(p.name for p in config.game.players)}")
    print(f"Target score: {config.game.target_score}")

    if game_log_enabled:
        log_path = generate_log_filename(game_log_dir, config)
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
        print(f"Game log: {log_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)
    print()

    try:
        with GameLogger(game_log_config) as game_logger:
            totals = run_simulation(
                config, args.num_games, game_logger, display, seed=args.seed
            )
        display.print_final_results(totals, config.game.target_score)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Simulation error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""Game models."""

from .card import DECK_COUNTS, Card, build_deck
from .game_state import EventType, GameEvent, GameState, Phase, ScoreResult
from .goal import GOAL_CATALOG, GOAL_IDS, GoalCategory, ScoringRule, UnknownGoalError, get_goal
from .player import Player

__all__ = [
    "Card",
    "DECK_COUNTS",
    "build_deck",
    "EventType",
    "GameEvent",
    "GameState",
    "Phase",
    "ScoreResult",
    "GOAL_CATALOG",
    "GOAL_IDS",
    "GoalCategory",
    "ScoringRule",
    "UnknownGoalError",
    "get_goal",
    "Player",
]

"""Game logic."""

from .auto_player import Action, AutoPlayer, AutoPlayerScheduler, play_until_human
from .engine import TurnEngine
from .scoring import TARGET_SCORE, finalize_game, score
from .transition import Transition

__all__ = [
    "Action",
    "AutoPlayer",
    "AutoPlayerScheduler",
    "play_until_human",
    "TurnEngine",
    "TARGET_SCORE",
    "finalize_game",
    "score",
    "Transition",
]

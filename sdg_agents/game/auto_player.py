"""Automated player driver.

AutoPlayer decides one action for the current state and issues it through
the same TurnEngine triggers a human would use. AutoPlayerScheduler arms a
timer whenever the engine hands the turn to an automated player.
"""

from __future__ import annotations

import logging
import random
import threading
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from sdg_agents.config import AutomationConfig
from sdg_agents.models.game_state import GameEvent, GameState, Phase

if TYPE_CHECKING:
    from .engine import TurnEngine

logger = logging.getLogger(__name__)

TimerFactory = Callable[..., Any]


class Action(str, Enum):
    """Trigger chosen by the automated player."""

    START_TURN = "start_turn"
    DRAW_MORE = "draw_more"
    COLLECT = "collect"
    DISCARD_FIRST = "discard_first"
    ACKNOWLEDGE_BUST = "acknowledge_bust"
    SKIP_GIFT = "skip_gift"


class AutoPlayer:
    """Simple push-your-luck policy."""

    def __init__(
        self,
        config: AutomationConfig | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize automated player.

        Args:
            config: Automation settings (uses defaults if not provided)
            rng: Random source for the draw decision
        """
        self.config = config or AutomationConfig()
        self.rng = rng or random.Random()

    def controls(self, state: GameState) -> bool:
        """Check if the automated player should act in this state."""
        if state.is_over or not state.players:
            return False
        return state.active_player.is_automated

    def choose_action(self, state: GameState) -> Action | None:
        """Choose the next action for the active player.

        Returns:
            The action, or None if the active player is not automated or
            the game is over.
        """
        if not self.controls(state):
            return None

        if state.phase == Phase.FLIP:
            return Action.START_TURN
        if state.phase == Phase.DECISION:
            if (
                len(state.table) < self.config.max_table_for_draw
                and state.draw_pile
                and self.rng.random() < self.config.draw_probability
            ):
                return Action.DRAW_MORE
            return Action.COLLECT
        if state.phase == Phase.BUST:
            return Action.ACKNOWLEDGE_BUST
        if state.phase == Phase.DISCARD_SELECT:
            return Action.DISCARD_FIRST
        if state.phase == Phase.GIFT_EXCHANGE:
            return Action.SKIP_GIFT
        return None

    def act(self, engine: TurnEngine) -> bool:
        """Take one action on the engine.

        Returns:
            True if an action was chosen and accepted
        """
        action = self.choose_action(engine.state)
        if action is None:
            return False

        name = engine.state.active_player.name
        logger.debug(f"{name} (auto): {action.value}")
        if action == Action.START_TURN:
            return engine.start_turn()
        if action == Action.DRAW_MORE:
            return engine.draw_more()
        if action == Action.COLLECT:
            return engine.collect()
        if action == Action.DISCARD_FIRST:
            return engine.discard(0)
        if action == Action.ACKNOWLEDGE_BUST:
            return engine.acknowledge_bust()
        return engine.skip_gift()


def play_until_human(engine: TurnEngine, auto_player: AutoPlayer) -> int:
    """Drive automated players synchronously until a human must act.

    Returns:
        Number of actions taken
    """
    actions = 0
    while auto_player.act(engine):
        actions += 1
    return actions


class AutoPlayerScheduler:
    """Runs the automated player on a timer after each state change.

    At most one timer is pending; every state change cancels it and, if the
    new active player is automated, arms a fresh one. A timer only acts if
    the state has not moved on since it was armed.
    """

    def __init__(
        self,
        engine: TurnEngine,
        auto_player: AutoPlayer | None = None,
        delay_seconds: float | None = None,
        timer_factory: TimerFactory = threading.Timer,
    ):
        """Initialize scheduler.

        Args:
            engine: Engine to drive
            auto_player: Policy (created from engine config if not provided)
            delay_seconds: Delay before acting (uses config if not provided)
            timer_factory: threading.Timer compatible factory
        """
        automation = engine.config.automation
        self.engine = engine
        self.auto_player = auto_player or AutoPlayer(automation)
        self.delay_seconds = (
            automation.delay_seconds if delay_seconds is None else delay_seconds
        )
        self._timer_factory = timer_factory
        self._timer: Any = None
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def pending(self) -> bool:
        """Check if a timer is armed."""
        return self._timer is not None

    def start(self) -> None:
        """Start following the engine."""
        if self._unsubscribe is None:
            self._unsubscribe = self.engine.subscribe(self._on_change)
        with self.engine.lock:
            self._on_change(self.engine.state, [])

    def stop(self) -> None:
        """Cancel any pending timer and stop following the engine."""
        self._cancel()
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    def _cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_change(self, state: GameState, events: list[GameEvent]) -> None:
        self._cancel()
        if not self.auto_player.controls(state):
            return

        timer = self._timer_factory(self.delay_seconds, self._fire, args=(state.version,))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _fire(self, version: int) -> None:
        with self.engine.lock:
            if self.engine.state.version != version:
                logger.debug(f"Skipping stale automated action for v{version}")
                return
            self._timer = None
            self.auto_player.act(self.engine)

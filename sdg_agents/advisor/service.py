"""Background advice and insight services.

Both services follow a TurnEngine and hold transient display text. They
never write game state, and a failing or slow advisor only leaves the text
empty.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, Callable

from sdg_agents.models.game_state import EventType, GameEvent, GameState, Phase

from .base import FALLBACK_ADVICE, Advisor

if TYPE_CHECKING:
    from sdg_agents.game.engine import TurnEngine

logger = logging.getLogger(__name__)

TimerFactory = Callable[..., Any]


class AdviceService:
    """Debounced strategist advice for the decision phase.

    Every state change restarts the quiet period. A request is tagged with
    the state version it was made for, and its answer is dropped if the
    state has moved on by the time it arrives.
    """

    def __init__(
        self,
        engine: TurnEngine,
        advisor: Advisor,
        debounce_seconds: float = 1.0,
        timer_factory: TimerFactory = threading.Timer,
        on_update: Callable[[str], None] | None = None,
    ):
        self.engine = engine
        self.advisor = advisor
        self.debounce_seconds = debounce_seconds
        self.on_update = on_update
        self.advice = ""

        self._timer_factory = timer_factory
        self._timer: Any = None
        self._lock = threading.Lock()
        self._unsubscribe: Callable[[], None] | None = None

    def start(self) -> None:
        """Start following the engine."""
        if self._unsubscribe is None:
            self._unsubscribe = self.engine.subscribe(self._on_change)

    def stop(self) -> None:
        """Cancel any pending request and stop following the engine."""
        self._cancel()
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    def _cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _set_advice(self, text: str) -> None:
        with self._lock:
            if text == self.advice:
                return
            self.advice = text
        if self.on_update:
            self.on_update(text)

    def _on_change(self, state: GameState, events: list[GameEvent]) -> None:
        self._cancel()
        self._set_advice("")
        if state.phase != Phase.DECISION:
            return

        timer = self._timer_factory(
            self.debounce_seconds,
            self._request,
            args=(
                state.version,
                state.table_goal_ids(),
                len(state.draw_pile),
                state.active_player.collected_goal_ids(),
            ),
        )
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _request(
        self,
        version: int,
        table_goal_ids: list[int],
        remaining_deck_size: int,
        player_goal_ids: list[int],
    ) -> None:
        try:
            text = self.advisor.get_strategist_advice(
                table_goal_ids, remaining_deck_size, player_goal_ids
            )
        except Exception as e:
            logger.error(f"Advisor failed: {e}")
            text = FALLBACK_ADVICE

        # Listeners run under the engine lock, so no transition can clear
        # the advice between the version check and the write.
        with self.engine.lock:
            if self.engine.state.version != version:
                logger.debug(f"Dropping advice for stale state v{version}")
                return
            self._set_advice(text)


class InsightService:
    """Shows a goal fact after a single card is collected directly.

    The fact is cleared after a fixed display time. Clearing an older fact
    never removes a newer one.
    """

    def __init__(
        self,
        engine: TurnEngine,
        advisor: Advisor,
        display_seconds: float = 8.0,
        timer_factory: TimerFactory = threading.Timer,
        on_update: Callable[[str | None], None] | None = None,
    ):
        self.engine = engine
        self.advisor = advisor
        self.display_seconds = display_seconds
        self.on_update = on_update
        self.insight: str | None = None

        self._timer_factory = timer_factory
        self._serial = 0
        self._lock = threading.Lock()
        self._unsubscribe: Callable[[], None] | None = None

    def start(self) -> None:
        """Start following the engine."""
        if self._unsubscribe is None:
            self._unsubscribe = self.engine.subscribe(self._on_change)

    def stop(self) -> None:
        """Stop following the engine."""
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    def _start_timer(self, delay: float, fn: Callable[..., None], *args: Any) -> None:
        timer = self._timer_factory(delay, fn, args=args)
        timer.daemon = True
        timer.start()

    def _on_change(self, state: GameState, events: list[GameEvent]) -> None:
        for event in events:
            if event.type == EventType.COLLECT and event.detail.get("direct"):
                self._start_timer(0, self._fetch, event.goal_ids[0])

    def _fetch(self, goal_id: int) -> None:
        try:
            insight = self.advisor.get_sdg_insight(goal_id)
        except Exception as e:
            logger.error(f"Insight lookup failed: {e}")
            insight = None
        if insight is None:
            return

        with self._lock:
            self._serial += 1
            serial = self._serial
            self.insight = insight
        if self.on_update:
            self.on_update(insight)
        self._start_timer(self.display_seconds, self._clear, serial)

    def _clear(self, serial: int) -> None:
        with self._lock:
            if serial != self._serial:
                return
            self.insight = None
        if self.on_update:
            self.on_update(None)

"""Turn engine for SDG Agents."""

from __future__ import annotations

import logging
import random
import threading
from typing import Callable

from sdg_agents.config import Config
from sdg_agents.logging import GameLogger
from sdg_agents.models.card import build_deck
from sdg_agents.models.game_state import EventType, GameEvent, GameState, Phase
from sdg_agents.models.player import Player

from . import gift_exchange, turns
from .transition import Transition

logger = logging.getLogger(__name__)

Listener = Callable[[GameState, list[GameEvent]], None]


class TurnEngine:
    """Owns the current game state and applies triggers to it.

    Humans and automated players drive the game through the same trigger
    methods. Each trigger is one atomic transition; a trigger issued in the
    wrong phase is rejected and leaves the state untouched.
    """

    def __init__(
        self,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize turn engine.

        Args:
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
            rng: Random source for shuffling
        """
        self.config = config or Config()
        self.game_logger = game_logger
        self.rng = rng or random.Random()

        self.game_number = 0
        self._state = GameState()
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> GameState:
        """Get the current state (read-only by convention)."""
        return self._state

    @property
    def lock(self) -> threading.RLock:
        """Lock serializing transitions."""
        return self._lock

    @property
    def players(self) -> list[Player]:
        """Get players of the current game."""
        return self._state.players

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every accepted transition.

        Args:
            listener: Called with (new state, events)

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def new_game(self) -> GameState:
        """Shuffle a fresh deck, seat the roster and wait for the first flip.

        Returns:
            The initial state
        """
        with self._lock:
            self.game_number += 1
            game = self.config.game
            players = [
                Player(
                    player_id=f"p{i + 1}",
                    name=seat.name,
                    is_automated=seat.automated,
                    is_initiator=seat.initiator,
                )
                for i, seat in enumerate(game.players)
            ]
            self._state = GameState(
                phase=Phase.FLIP,
                version=self._state.version + 1,
                target_score=game.target_score,
                players=players,
                draw_pile=build_deck(game.deck_counts, self.rng),
            )

            logger.info(
                f"Game {self.game_number} initialized: {len(players)} players, "
                f"{len(self._state.draw_pile)} cards, target {game.target_score}"
            )
            if self.game_logger:
                self.game_logger.log_game_start(self.game_number, self._state)

            self._notify([])
            return self._state

    # Turn triggers

    def start_turn(self) -> bool:
        """Reveal the first card of the active player's turn."""
        return self._apply("start_turn", turns.start_turn)

    def draw_more(self) -> bool:
        """Reveal another card, risking a bust."""
        return self._apply("draw_more", turns.draw_more)

    def collect(self) -> bool:
        """Keep the table (directly, or via discard selection)."""
        return self._apply("collect", turns.collect)

    def discard(self, index: int) -> bool:
        """Forfeit the table card at index and collect the rest."""
        return self._apply("discard", turns.discard, index)

    def acknowledge_bust(self) -> bool:
        """Forfeit the busted table and pass the turn."""
        return self._apply("acknowledge_bust", turns.acknowledge_bust)

    # Gift exchange triggers

    def select_gift_card(self, card_index: int) -> bool:
        """Mark a card of the active player as the gift candidate."""
        return self._apply("select_gift_card", gift_exchange.select_gift_card, card_index)

    def give_card(self, from_index: int, card_index: int, to_index: int) -> bool:
        """Give one collected card to another player."""
        return self._apply(
            "give_card", gift_exchange.give_card, from_index, card_index, to_index
        )

    def skip_gift(self) -> bool:
        """Decline to give a card."""
        return self._apply("skip_gift", gift_exchange.skip_gift)

    def _apply(
        self,
        name: str,
        transition_fn: Callable[..., Transition],
        *args: int,
    ) -> bool:
        """Apply a pure transition to the current state.

        Returns:
            True if the trigger was accepted
        """
        with self._lock:
            if not self._state.players:
                logger.debug(f"Ignoring {name}: no game in progress")
                return False

            transition = transition_fn(self._state, *args)
            if not transition.is_valid:
                logger.debug(f"Rejected {name}: {transition.error_message}")
                return False

            self._state = transition.state
            self._record(transition.events)
            self._notify(transition.events)
            return True

    def _record(self, events: list[GameEvent]) -> None:
        """Write events to the diagnostic and replay logs."""
        state = self._state
        for event in events:
            name = state.players[event.player_index].name
            logger.debug(f"[v{state.version}] {name}: {event.type.value} {event.goal_ids}")
            if self.game_logger:
                self.game_logger.log_event(self.game_number, event, state)

            if event.type == EventType.GAME_OVER and state.result:
                logger.info(
                    f"Game {self.game_number} over: {state.result.grand_total}/"
                    f"{state.result.target_score} "
                    f"({'passed' if state.result.passed else 'failed'})"
                )
                if self.game_logger:
                    self.game_logger.log_game_end(self.game_number, state.result)

    def _notify(self, events: list[GameEvent]) -> None:
        """Call listeners with the new state."""
        for listener in list(self._listeners):
            listener(self._state, events)

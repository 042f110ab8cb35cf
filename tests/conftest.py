"""Shared fixtures."""

import itertools

import pytest

from sdg_agents.config import Config, PlayerConfig
from sdg_agents.models import Card, GameState, Phase, Player

_card_ids = itertools.count()


class FakeTimer:
    """threading.Timer stand-in that fires only when told to."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False
        self.fired = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if self.cancelled or self.fired:
            return
        self.fired = True
        self.function(*self.args, **self.kwargs)


class TimerRecorder:
    """Timer factory that records every timer it creates."""

    def __init__(self):
        self.timers: list[FakeTimer] = []

    def __call__(self, interval, function, args=None, kwargs=None):
        timer = FakeTimer(interval, function, args, kwargs)
        self.timers.append(timer)
        return timer

    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if t.started and not t.cancelled and not t.fired]

    def fire_next(self) -> bool:
        pending = self.pending()
        if not pending:
            return False
        pending[0].fire()
        return True


@pytest.fixture
def timers():
    return TimerRecorder()


@pytest.fixture
def make_cards():
    """Create cards with unique identifiers for the given goals."""

    def factory(*goal_ids: int) -> list[Card]:
        return [Card(card_id=f"test-{g}-{next(_card_ids)}", goal_id=g) for g in goal_ids]

    return factory


@pytest.fixture
def make_state(make_cards):
    """Create a game state with a known draw pile and table."""

    def factory(
        pile=(),
        table=(),
        phase=Phase.FLIP,
        num_players=3,
        turn_index=0,
        target_score=63,
    ) -> GameState:
        players = [
            Player(player_id=f"p{i + 1}", name=f"Agent {i + 1}", is_automated=i > 0)
            for i in range(num_players)
        ]
        return GameState(
            phase=phase,
            turn_index=turn_index,
            target_score=target_score,
            players=players,
            draw_pile=make_cards(*pile),
            table=make_cards(*table),
        )

    return factory


def make_config(automated=(False, True, True), deck_counts=None) -> Config:
    """Build a config with a roster of the given automation flags."""
    config = Config()
    config.game.players = [
        PlayerConfig(name=f"Agent {i + 1}", automated=auto, initiator=i == 0)
        for i, auto in enumerate(automated)
    ]
    if deck_counts is not None:
        config.game.deck_counts = deck_counts
    return config


@pytest.fixture
def config_factory():
    return make_config

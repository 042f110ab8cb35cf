"""Team scoring."""

from collections import Counter
from typing import Iterable

from sdg_agents.models.card import Card
from sdg_agents.models.game_state import ScoreResult
from sdg_agents.models.goal import ScoringRule, get_goal
from sdg_agents.models.player import Player

TARGET_SCORE = 63

PASS_REASON = "Future stabilized. Goals met."
FAIL_REASON = "Insufficient momentum. Collapse imminent."


def _curve_bonus(count: int) -> int:
    """Bracketed bonus for partnership cards (capped at 4)."""
    if count == 0:
        return 0
    if count <= 3:
        return 2
    return 4


def goal_points(goal_id: int, count: int) -> int:
    """Get the points contributed by one goal.

    Args:
        goal_id: Goal identifier.
        count: Number of cards of that goal held by the player.

    Returns:
        Points for this goal.
    """
    rule = get_goal(goal_id).rule
    if rule == ScoringRule.PER_CARD_DOUBLE:
        return 2 * count
    if count == 0:
        return 0
    if rule == ScoringRule.COUNT_PLUS_ONE:
        return count + 1
    if rule == ScoringRule.FLAT_TWO:
        return 2
    if rule == ScoringRule.FLAT_ONE:
        return 1
    return _curve_bonus(count)


def score(cards: Iterable[Card]) -> int:
    """Score a player's collected cards."""
    counts = Counter(c.goal_id for c in cards)
    return sum(goal_points(goal_id, n) for goal_id, n in counts.items())


def finalize_game(
    players: list[Player],
    target_score: int = TARGET_SCORE,
) -> ScoreResult:
    """Score every player and judge the team total.

    Only the grand total decides the outcome; individual scores are
    informational. Players are not mutated.

    Args:
        players: Players with their collected cards.
        target_score: Total needed to pass.

    Returns:
        ScoreResult with scored copies of the players.
    """
    scored = [
        p.model_copy(deep=True, update={"final_score": score(p.collected)})
        for p in players
    ]
    grand_total = sum(p.final_score for p in scored)
    passed = grand_total >= target_score
    return ScoreResult(
        grand_total=grand_total,
        target_score=target_score,
        passed=passed,
        reason=PASS_REASON if passed else FAIL_REASON,
        players=scored,
    )

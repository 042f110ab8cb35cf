"""Formatters for game log output."""

from typing import Iterable

from sdg_agents.models.card import Card
from sdg_agents.models.player import Player


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "G17" for a Partnerships card).
    """
    return f"G{card.goal_id}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string in their current order.

    Args:
        cards: Cards to format.

    Returns:
        Comma-separated card strings (e.g., "G1,G2,G17").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_collections(players: list[Player]) -> dict[str, str]:
    """Format all players' collected cards to dict.

    Args:
        players: Players in seat order.

    Returns:
        Dict mapping seat index (as string) to formatted collected cards.
    """
    return {str(i): format_cards(p.collected) for i, p in enumerate(players)}

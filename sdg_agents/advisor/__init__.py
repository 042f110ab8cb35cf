"""Strategist advice and goal insight collaborators."""

from sdg_agents.config import AdvisorConfig

from .base import EMPTY_ADVICE, FALLBACK_ADVICE, Advisor, OfflineAdvisor
from .gemini import GeminiAdvisor
from .service import AdviceService, InsightService


def create_advisor(config: AdvisorConfig | None = None, target_score: int = 63) -> Advisor:
    """Create the configured advisor.

    Falls back to OfflineAdvisor when disabled or when no API key is set.
    """
    config = config or AdvisorConfig()
    if not config.enabled:
        return OfflineAdvisor()

    advisor = GeminiAdvisor(config, target_score=target_score)
    if not advisor.is_available():
        return OfflineAdvisor()
    return advisor


__all__ = [
    "Advisor",
    "OfflineAdvisor",
    "GeminiAdvisor",
    "AdviceService",
    "InsightService",
    "FALLBACK_ADVICE",
    "EMPTY_ADVICE",
    "create_advisor",
]

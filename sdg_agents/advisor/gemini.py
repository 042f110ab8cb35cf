"""Google Gemini advisor."""
import logging
import os

from google import genai
from google.genai import types

from sdg_agents.config import AdvisorConfig

from .base import EMPTY_ADVICE, FALLBACK_ADVICE, Advisor

logger = logging.getLogger(__name__)


ADVICE_PROMPT = """You are a strategic advisor for a cooperative Sustainable Development Goals card game.
Cards on the table (SDG numbers): [{table}]
Cards left in the deck: {remaining}
Goals already held by the active player (SDG numbers): [{hand}]

The team needs a combined score of {target} or more. Every agent benefits from SDGs 1, 2 and 17.
Drawing a goal that is already on the table loses the whole table.

In at most 20 words, tell the active player whether to flip again or collect."""

INSIGHT_PROMPT = (
    "Give one inspiring sentence about United Nations Sustainable Development "
    "Goal #{goal_id}, explaining why achieving it matters."
)


class GeminiAdvisor(Advisor):
    """
    Advisor powered by Google's Gemini models.
    Provides push-your-luck advice and short goal facts.
    """

    def __init__(self, config: AdvisorConfig | None = None, target_score: int = 63, client=None):
        self.config = config or AdvisorConfig()
        self.model_name = self.config.model
        self.target_score = target_score
        if client is not None:
            self.client = client
        else:
            self._setup_api(self.config.api_key)

    def _setup_api(self, api_key: str = None):
        """Configure the Gemini API client."""
        if not api_key:
            # GOOGLE_API_KEY is preferred by the google-genai SDK
            api_key = os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")

        if not api_key:
            logger.warning("GOOGLE_API_KEY or GEMINI_API_KEY not found. Advisor will use fallback text.")
            self.client = None
            return

        self.client = genai.Client(api_key=api_key)

    def _call_api(self, prompt: str, temperature: float) -> str:
        """Make API call to Google Gemini."""
        response = self.client.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=temperature,
                candidate_count=1,
            ),
        )
        if not response.text:
            return ""
        return response.text.strip()

    def get_strategist_advice(
        self,
        table_goal_ids: list[int],
        remaining_deck_size: int,
        player_goal_ids: list[int],
    ) -> str:
        if not self.client:
            return FALLBACK_ADVICE

        prompt = ADVICE_PROMPT.format(
            table=", ".join(str(g) for g in table_goal_ids),
            remaining=remaining_deck_size,
            hand=", ".join(str(g) for g in player_goal_ids),
            target=self.target_score,
        )
        try:
            text = self._call_api(prompt, self.config.advice_temperature)
        except Exception as e:
            logger.error(f"Gemini advice error: {e}")
            return FALLBACK_ADVICE
        return text or EMPTY_ADVICE

    def get_sdg_insight(self, goal_id: int) -> str | None:
        if not self.client:
            return None

        try:
            text = self._call_api(
                INSIGHT_PROMPT.format(goal_id=goal_id),
                self.config.insight_temperature,
            )
        except Exception as e:
            logger.error(f"Gemini insight error: {e}")
            return None
        return text or None

    def is_available(self) -> bool:
        """Check if the Gemini API is configured."""
        return self.client is not None

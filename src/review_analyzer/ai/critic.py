"""Obtains a six-section critique from the generative-text service."""

import logging

import anthropic

from ..exceptions import UpstreamServiceError
from .prompts import REVIEW_CRITIC, REVIEW_CRITIC_USER

logger = logging.getLogger(__name__)


class ReviewCritic:
    """Asks an AI client to critique a review and returns the raw critique text."""

    def __init__(self, ai_client):
        """Initialize with an AI client.

        Args:
            ai_client: Object with generate(system_prompt, user_prompt) method.
        """
        self.ai_client = ai_client
        self.last_prompt = ""

    def critique(self, material: str) -> str:
        """Return the critique for ``material`` (a transcript or description).

        Raises:
            UpstreamServiceError: if the service call fails or returns no text.
        """
        if not material or not material.strip():
            raise UpstreamServiceError("Nothing to critique: review material is empty")

        prompt = REVIEW_CRITIC_USER.format(material=material.strip())
        self.last_prompt = prompt
        logger.info("Requesting critique for %d chars of review material", len(material))

        try:
            result = self.ai_client.generate(REVIEW_CRITIC, prompt)
        except anthropic.APIError as e:
            raise UpstreamServiceError(f"Critique request failed: {e}") from e

        result = (result or "").strip()
        # Strip markdown fences if the AI wrapped the response
        if result.startswith('```') and result.endswith('```'):
            lines = result.split('\n')
            result = '\n'.join(lines[1:-1]).strip()

        if not result:
            raise UpstreamServiceError("Critique service returned an empty response")

        logger.info("Received critique: %d chars", len(result))
        logger.debug("Critique preview: %s", result[:200])
        return result

"""Claude API client for Video Review Analyzer."""

import anthropic

from ..config import Config
from ..exceptions import MissingAPIKeyError


class AIClient:
    """Wrapper for Claude API calls."""

    def __init__(self, api_key: str = None, model: str = None):
        api_key = api_key or Config.ANTHROPIC_API_KEY
        if not api_key:
            raise MissingAPIKeyError("ANTHROPIC_API_KEY")
        self.client = anthropic.Anthropic(api_key=api_key)
        self.model = model or Config.MODEL

    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = Config.MAX_TOKENS,
        temperature: float = 0.2
    ) -> str:
        """Generate text using Claude API.

        Args:
            system_prompt: Instructions for the AI
            user_prompt: User's input/request
            max_tokens: Maximum response length
            temperature: Creativity level (0-1)

        Returns:
            Generated text response
        """
        message = self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            system=system_prompt,
            messages=[
                {"role": "user", "content": user_prompt}
            ],
            temperature=temperature
        )
        return message.content[0].text

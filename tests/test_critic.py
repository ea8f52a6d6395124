"""Tests for the review critic."""

import anthropic
import httpx
import pytest

from review_analyzer.ai.critic import ReviewCritic
from review_analyzer.ai.prompts import REVIEW_CRITIC
from review_analyzer.exceptions import UpstreamServiceError

from conftest import MockAIClient


class FailingAIClient:
    def generate(self, system_prompt, user_prompt, max_tokens=4096):
        raise anthropic.APIConnectionError(
            request=httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        )


class TestCritique:
    def test_sends_review_prompt(self):
        client = MockAIClient()
        critic = ReviewCritic(client)

        critic.critique("I bought this blender last week.")

        system_prompt, user_prompt = client.calls[0]
        assert system_prompt == REVIEW_CRITIC
        assert "I bought this blender last week." in user_prompt
        assert critic.last_prompt == user_prompt

    def test_prompt_lists_all_sections(self):
        for name in ["Clarity", "Engagement", "Relevance", "Informative Content",
                     "Visuals and Audio Quality", "Presentation"]:
            assert name in REVIEW_CRITIC

    def test_strips_code_fences(self):
        critic = ReviewCritic(MockAIClient("```markdown\n**Clarity (7/10)**\n```"))
        assert critic.critique("material") == "**Clarity (7/10)**"

    def test_empty_response_raises(self):
        critic = ReviewCritic(MockAIClient("   "))
        with pytest.raises(UpstreamServiceError, match="empty response"):
            critic.critique("material")

    def test_empty_material_raises(self):
        client = MockAIClient()
        with pytest.raises(UpstreamServiceError, match="empty"):
            ReviewCritic(client).critique("  ")
        assert client.calls == []

    def test_api_error_wrapped(self):
        critic = ReviewCritic(FailingAIClient())
        with pytest.raises(UpstreamServiceError, match="Critique request failed") as exc:
            critic.critique("material")
        assert isinstance(exc.value.__cause__, anthropic.APIConnectionError)
        assert exc.value.service == "generative-text"

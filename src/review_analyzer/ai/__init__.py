"""AI service adapters for Video Review Analyzer."""

from .client import AIClient
from .critic import ReviewCritic
from .annotations import bundle_from_response, build_metadata, estimate_api_cost

__all__ = ["AIClient", "ReviewCritic", "bundle_from_response", "build_metadata", "estimate_api_cost"]

"""Configuration for Video Review Analyzer."""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Global configuration."""

    # API
    ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")
    MODEL = os.getenv("MODEL", "claude-sonnet-4-20250514")
    MAX_TOKENS = int(os.getenv("MAX_TOKENS", "4096"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "info")

    # Output
    DEFAULT_OUTPUT_FORMAT = "table"
    OUTPUT_FORMATS = ("table", "json", "yaml")

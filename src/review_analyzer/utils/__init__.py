"""Utility modules for Video Review Analyzer."""

from .file_handler import FileHandler
from .logger import setup_logging

__all__ = ["FileHandler", "setup_logging"]

"""File handling utilities for Video Review Analyzer."""

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from ..exceptions import InputFormatError


class FileHandler:
    """Read inputs and write reports."""

    @staticmethod
    def load_text(filepath: Path) -> str:
        """Load text file content."""
        return filepath.read_text(encoding='utf-8')

    @staticmethod
    def save_text(filepath: Path, content: str) -> Path:
        """Save text content to file."""
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(content, encoding='utf-8')
        return filepath

    @staticmethod
    def load_json(filepath: Path) -> Dict[str, Any]:
        """Load JSON file."""
        return json.loads(filepath.read_text(encoding='utf-8'))

    @staticmethod
    def save_json(filepath: Path, data: Dict[str, Any], indent: int = 2) -> Path:
        """Save data as JSON file."""
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(json.dumps(data, indent=indent), encoding='utf-8')
        return filepath

    @staticmethod
    def load_yaml(filepath: Path) -> Dict[str, Any]:
        """Load YAML file."""
        return yaml.safe_load(filepath.read_text(encoding='utf-8'))

    @staticmethod
    def save_yaml(filepath: Path, data: Dict[str, Any]) -> Path:
        """Save data as YAML file."""
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(
            yaml.dump(data, default_flow_style=False, sort_keys=False),
            encoding='utf-8'
        )
        return filepath

    @classmethod
    def load_structured(cls, filepath: Path) -> Dict[str, Any]:
        """Load a JSON or YAML mapping, chosen by file extension.

        Raises:
            InputFormatError: if the file does not parse or is not a mapping.
        """
        try:
            if filepath.suffix.lower() in ('.yaml', '.yml'):
                data = cls.load_yaml(filepath)
            else:
                data = cls.load_json(filepath)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise InputFormatError(f"Could not parse {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise InputFormatError(f"{filepath} does not contain a mapping")
        return data

    @classmethod
    def save_report(cls, filepath: Path, data: Dict[str, Any]) -> Path:
        """Save a report as YAML or JSON, chosen by file extension."""
        if filepath.suffix.lower() in ('.yaml', '.yml'):
            return cls.save_yaml(filepath, data)
        return cls.save_json(filepath, data)

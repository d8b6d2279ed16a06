"""Top-level topicsummary configuration."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any
import json
import os

from dotenv import load_dotenv

from .sections import TRUE_VALUES, LoggingConfig, ReportConfig


class TopicSummaryConfig:
    """
    Main configuration class for topicsummary.

    Settings come from three sources, lowest to highest priority:
    1. Default values
    2. Configuration file (JSON, optional)
    3. Environment variables with the TOPICSUMMARY_ prefix

    Sections:
    - report: number of words per topic, token escaping, default report kind
    - logging: level and optional log file
    """

    def __init__(self, config_file: str | None = None):
        """
        Initialize configuration with default values and optional file loading.

        Args:
            config_file: Path to configuration file (JSON format). A path that
                        does not exist is ignored.
        """
        self.report = ReportConfig()
        self.logging = LoggingConfig()

        if config_file:
            self._load_from_file(config_file)

        self._load_from_env()

    def _load_from_env(self) -> None:
        """
        Load configuration from environment variables.

        Supported environment variables:
        - TOPICSUMMARY_NUM_WORDS: Top words per topic
        - TOPICSUMMARY_ESCAPE_TOKENS: Escape word tokens (1/true/yes/on)
        - TOPICSUMMARY_DEFAULT_REPORT: Report kind used when none is given
        - TOPICSUMMARY_LOG_LEVEL: Logging level
        - TOPICSUMMARY_LOG_FILE: Log file path
        """
        if os.getenv("TOPICSUMMARY_NUM_WORDS"):
            try:
                num_words = int(os.getenv("TOPICSUMMARY_NUM_WORDS", "20"))
                if num_words >= 0:
                    self.report.num_words = num_words
            except ValueError:
                pass  # Keep default value if conversion fails

        escape_env = os.getenv("TOPICSUMMARY_ESCAPE_TOKENS")
        if escape_env is not None:
            self.report.escape_tokens = escape_env.strip().lower() in TRUE_VALUES

        if os.getenv("TOPICSUMMARY_DEFAULT_REPORT"):
            report = os.getenv("TOPICSUMMARY_DEFAULT_REPORT", "").strip().lower()
            if report:
                self.report.default_report = report

        if os.getenv("TOPICSUMMARY_LOG_LEVEL"):
            log_level = os.getenv("TOPICSUMMARY_LOG_LEVEL")
            if log_level:
                self.logging.level = log_level

        if os.getenv("TOPICSUMMARY_LOG_FILE"):
            self.logging.file = os.getenv("TOPICSUMMARY_LOG_FILE")

    def _load_from_file(self, config_file: str) -> None:
        """
        Load configuration from JSON file.

        The file mirrors the section layout:
            {
                "report": {"num_words": 10, "escape_tokens": false},
                "logging": {"level": "DEBUG"}
            }

        Raises:
            ValueError: If the file cannot be read or parsed
        """
        if not os.path.exists(config_file):
            return
        try:
            with open(config_file, encoding="utf-8") as f:
                config_data = json.load(f)
        except (OSError, ValueError) as e:
            raise ValueError(f"Failed to load configuration from {config_file}: {e}")

        if not isinstance(config_data, dict):
            raise ValueError(
                f"Failed to load configuration from {config_file}: expected a JSON object"
            )

        for section_name in ("report", "logging"):
            section_data = config_data.get(section_name)
            if isinstance(section_data, dict):
                self._apply_to_section(getattr(self, section_name), section_data)

    def _apply_to_section(self, config_obj: Any, data: dict[str, Any]) -> None:
        for key, value in data.items():
            if hasattr(config_obj, key):
                setattr(config_obj, key, value)
        if hasattr(config_obj, "validate"):
            config_obj.validate()

    def to_dict(self) -> dict[str, Any]:
        """Return a complete configuration snapshot as a dictionary."""
        return {
            "report": asdict(self.report),
            "logging": asdict(self.logging),
        }

    def save_to_file(self, config_file: str) -> None:
        """Save current configuration to a JSON file."""
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)


# Global configuration instance
_config: TopicSummaryConfig | None = None
_env_loaded = False


def _load_dotenv() -> None:
    global _env_loaded
    if _env_loaded:
        return
    _env_loaded = True
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)


def get_config() -> TopicSummaryConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _load_dotenv()
        _config = TopicSummaryConfig()
    return _config


def set_config(config: TopicSummaryConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def load_config(config_file: str) -> TopicSummaryConfig:
    """Load configuration from file and set as global config."""
    _load_dotenv()
    config = TopicSummaryConfig(config_file)
    set_config(config)
    return config


def reset_config() -> None:
    """Drop the global configuration so the next get_config() rebuilds it."""
    global _config
    _config = None

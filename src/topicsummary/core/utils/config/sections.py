"""Configuration section classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Number of top words per topic in reports when nothing else is configured
DEFAULT_NUM_WORDS = 20

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class ReportConfig:
    """Configuration for report rendering."""

    num_words: int = DEFAULT_NUM_WORDS
    escape_tokens: bool = False  # raw tokens keep the historical layout
    default_report: str = "summary"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Normalize report settings (warn + default on invalid)."""
        from topicsummary.core.utils.logger import log_warning

        try:
            num_words = int(self.num_words)
        except (TypeError, ValueError):
            num_words = -1
        if num_words < 0:
            log_warning(
                "CONFIG",
                f"Invalid report.num_words '{self.num_words}', using {DEFAULT_NUM_WORDS}",
            )
            num_words = DEFAULT_NUM_WORDS
        self.num_words = num_words
        if isinstance(self.escape_tokens, str):
            value = self.escape_tokens.strip().lower()
            if value in TRUE_VALUES:
                self.escape_tokens = True
            elif value in FALSE_VALUES:
                self.escape_tokens = False
            else:
                log_warning(
                    "CONFIG",
                    f"Invalid report.escape_tokens '{self.escape_tokens}', using False",
                )
                self.escape_tokens = False
        else:
            self.escape_tokens = bool(self.escape_tokens)
        self.default_report = str(self.default_report).strip().lower()


@dataclass
class LoggingConfig:
    """Configuration for the logging system."""

    level: str = "INFO"
    file: Optional[str] = None

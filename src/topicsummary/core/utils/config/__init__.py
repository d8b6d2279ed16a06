from .sections import DEFAULT_NUM_WORDS, LoggingConfig, ReportConfig
from .main import (
    TopicSummaryConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)

__all__ = [
    "DEFAULT_NUM_WORDS",
    "LoggingConfig",
    "ReportConfig",
    "TopicSummaryConfig",
    "get_config",
    "load_config",
    "reset_config",
    "set_config",
]

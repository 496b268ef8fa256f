"""Core infrastructure layer - no estimation logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging (Loguru)

Clean architecture principle: The core layer has no dependencies on
domain or application layers.
"""

# Configuration
from .config import (
    Config,
    EstimatorConfig,
    LoggingConfig,
    SimulationConfig,
    ViewerConfig,
    load_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    create_default_config,
)

# Output
from .output import get_log_file_path, log, setup_loguru

__all__ = [
    # Config
    "Config",
    "EstimatorConfig",
    "LoggingConfig",
    "SimulationConfig",
    "ViewerConfig",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "create_default_config",
    # Output
    "get_log_file_path",
    "log",
    "setup_loguru",
]

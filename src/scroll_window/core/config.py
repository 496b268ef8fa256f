"""
Configuration management for scroll-window
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class EstimatorConfig:
    """Configuration for the scroll window estimator."""

    min_row_height: float = 20.0  # Lower bound for any rendered row, in pixels

    def validate(self) -> None:
        """Validate estimator configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.min_row_height <= 0:
            raise ValueError(
                f"min_row_height must be positive, got {self.min_row_height}"
            )


@dataclass
class SimulationConfig:
    """Configuration for the simulated rendering host."""

    total_items: int = 10000
    viewport_height: float = 500.0
    max_row_height: float = 120.0
    seed: int = 0
    max_render_passes: int = 8  # Estimate/render round trips per scroll event

    def validate(self) -> None:
        """Validate simulation configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.total_items < 0:
            raise ValueError(f"total_items must be >= 0, got {self.total_items}")
        if self.viewport_height < 0:
            raise ValueError(
                f"viewport_height must be >= 0, got {self.viewport_height}"
            )
        if self.max_render_passes < 1:
            raise ValueError(
                f"max_render_passes must be >= 1, got {self.max_render_passes}"
            )


@dataclass
class ViewerConfig:
    """Configuration for the interactive terminal viewer."""

    total_items: int = 5000
    seed: int = 0
    max_words_per_row: int = 60
    scroll_step: int = 1  # Lines per arrow key press


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/scroll-window/scroll-window.log)
    )
    console_output: bool = False  # Also log to stderr (for debugging)


@dataclass
class Config:
    """Main configuration object."""

    estimator: EstimatorConfig = field(default_factory=EstimatorConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    viewer: ViewerConfig = field(default_factory=ViewerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "scroll-window"
    return Path.home() / ".config" / "scroll-window"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            if config_path.exists():
                return config_path
            # Found project root but no config.toml there
            return None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/scroll-window (or ~/.config/scroll-window)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "scroll-window"
    return Path.home() / ".local" / "share" / "scroll-window"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# scroll-window Configuration

[estimator]
# Smallest height any rendered row can have, in pixels.
# Keep this a realistic lower bound: it sizes the sampled windows.
min_row_height = 20.0

[simulation]
# Number of rows in the simulated list
total_items = 10000

# Height of the simulated viewport in pixels
viewport_height = 500.0

# Rows get a random height between min_row_height and this value
max_row_height = 120.0

# Seed for the random row heights
seed = 0

# Estimate/render round trips allowed per scroll event
max_render_passes = 8

[viewer]
# Number of rows in the interactive viewer
total_items = 5000

# Seed for the generated row text
seed = 0

# Upper bound on the words of generated text per row
max_words_per_row = 60

# Lines scrolled per arrow key press
scroll_step = 1

[logging]
# Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/scroll-window/scroll-window.log)
# log_file = "/path/to/custom/scroll-window.log"

# Also write logs to stderr (useful for debugging)
console_output = false
""".strip()


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - SCROLL_WINDOW_LOG_LEVEL
    - SCROLL_WINDOW_MIN_ROW_HEIGHT
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        print(f"Created default configuration at: {config_path}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"Error loading configuration from {config_path}: {e}")
        print("Using default configuration.")
        return _apply_env_overrides(Config())

    config = Config()

    if "estimator" in toml_data:
        estimator_data = toml_data["estimator"]
        config.estimator = EstimatorConfig(
            min_row_height=float(
                estimator_data.get("min_row_height", config.estimator.min_row_height)
            ),
        )
        try:
            config.estimator.validate()
        except ValueError as e:
            print(f"Warning: Invalid estimator configuration: {e}")
            print("Using default estimator configuration.")
            config.estimator = EstimatorConfig()

    if "simulation" in toml_data:
        simulation_data = toml_data["simulation"]
        config.simulation = SimulationConfig(
            total_items=simulation_data.get(
                "total_items", config.simulation.total_items
            ),
            viewport_height=float(
                simulation_data.get(
                    "viewport_height", config.simulation.viewport_height
                )
            ),
            max_row_height=float(
                simulation_data.get("max_row_height", config.simulation.max_row_height)
            ),
            seed=simulation_data.get("seed", config.simulation.seed),
            max_render_passes=simulation_data.get(
                "max_render_passes", config.simulation.max_render_passes
            ),
        )
        try:
            config.simulation.validate()
        except ValueError as e:
            print(f"Warning: Invalid simulation configuration: {e}")
            print("Using default simulation configuration.")
            config.simulation = SimulationConfig()

    if "viewer" in toml_data:
        viewer_data = toml_data["viewer"]
        config.viewer = ViewerConfig(
            total_items=viewer_data.get("total_items", config.viewer.total_items),
            seed=viewer_data.get("seed", config.viewer.seed),
            max_words_per_row=viewer_data.get(
                "max_words_per_row", config.viewer.max_words_per_row
            ),
            scroll_step=viewer_data.get("scroll_step", config.viewer.scroll_step),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )

    return _apply_env_overrides(config)


def _apply_env_overrides(config: Config) -> Config:
    """Override config values with environment variables if present."""
    log_level = os.environ.get("SCROLL_WINDOW_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    min_row_height = os.environ.get("SCROLL_WINDOW_MIN_ROW_HEIGHT")
    if min_row_height:
        try:
            override = EstimatorConfig(min_row_height=float(min_row_height))
            override.validate()
        except ValueError as e:
            print(f"Warning: Ignoring SCROLL_WINDOW_MIN_ROW_HEIGHT: {e}")
        else:
            config.estimator = override

    return config

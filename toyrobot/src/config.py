"""
ToyRobot Configuration Module

Handles all configuration settings for the robot and its command loop.
Supports environment variables, .env files, and programmatic configuration.

Configuration can be set via:
1. Environment variables (TOYROBOT_GRID_WIDTH, TOYROBOT_LOG_FILE, etc.)
2. .env file in the project root
3. Programmatic configuration via create_config()
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_PROMPT = "Please enter command : "


def _int_from_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class GridConfig:
    """
    Size of the table the robot moves on.

    Coordinates run from 0 to width-1 on the x axis and from 0 to
    height-1 on the y axis, both inclusive.
    """

    width: int = 6
    height: int = 6

    @property
    def max_x(self) -> int:
        return self.width - 1

    @property
    def max_y(self) -> int:
        return self.height - 1

    def contains(self, x: int, y: int) -> bool:
        """Check if a position lies on the table."""
        return 0 <= x <= self.max_x and 0 <= y <= self.max_y

    def validate(self) -> None:
        """
        Validate grid dimensions.

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        for name, value in (("width", self.width), ("height", self.height)):
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(
                    f"Grid {name} must be a positive integer, got {value!r}"
                )

    @classmethod
    def from_env(cls) -> "GridConfig":
        """
        Create grid configuration from environment variables.

        Raises:
            ValueError: If a size variable is not an integer
        """
        return cls(
            width=_int_from_env("TOYROBOT_GRID_WIDTH", 6),
            height=_int_from_env("TOYROBOT_GRID_HEIGHT", 6),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"width": self.width, "height": self.height}


@dataclass
class AppConfig:
    """
    Main configuration for the command-line robot.

    Example usage:
        # From environment variables
        config = AppConfig()

        # Programmatic configuration
        config = create_config(width=8, height=8, log_file="robot.log")
    """

    grid: GridConfig = field(default_factory=GridConfig.from_env)

    # Logging settings
    log_level: str = field(
        default_factory=lambda: os.getenv("TOYROBOT_LOG_LEVEL", "INFO").upper()
    )
    log_file: Optional[str] = field(
        default_factory=lambda: os.getenv("TOYROBOT_LOG_FILE")
    )

    # Command input: read from this file instead of the console when set
    command_file: Optional[str] = field(
        default_factory=lambda: os.getenv("TOYROBOT_COMMAND_FILE")
    )
    prompt: str = field(
        default_factory=lambda: os.getenv("TOYROBOT_PROMPT", DEFAULT_PROMPT)
    )

    def validate(self) -> None:
        """
        Validate all configuration sections.

        Raises:
            ValueError: If the grid size or log level is invalid
        """
        self.grid.validate()
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{self.log_level}'. "
                f"Expected one of: {', '.join(LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create configuration from environment variables."""
        return cls()

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "AppConfig":
        """
        Create configuration from a dictionary.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            AppConfig instance
        """
        grid_cfg = config_dict.get("grid", {})

        return cls(
            grid=GridConfig(
                width=grid_cfg.get("width", 6),
                height=grid_cfg.get("height", 6),
            ),
            log_level=config_dict.get("log_level", "INFO").upper(),
            log_file=config_dict.get("log_file"),
            command_file=config_dict.get("command_file"),
            prompt=config_dict.get("prompt", DEFAULT_PROMPT),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration to dictionary."""
        return {
            "grid": self.grid.to_dict(),
            "log_level": self.log_level,
            "log_file": self.log_file,
            "command_file": self.command_file,
            "prompt": self.prompt,
        }


def get_default_config() -> AppConfig:
    """Get the default configuration from environment."""
    return AppConfig.from_env()


def create_config(
    width: Optional[int] = None,
    height: Optional[int] = None,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    command_file: Optional[str] = None,
    **kwargs
) -> AppConfig:
    """
    Convenience function to create a configuration.

    Values left as None keep the environment/default setting.

    Args:
        width: Grid width (number of columns)
        height: Grid height (number of rows)
        log_level: Logging level name
        log_file: Append log output to this file instead of stdout
        command_file: Read commands from this file instead of the console
        **kwargs: Additional configuration options

    Returns:
        Configured AppConfig

    Example:
        # Bigger table, commands from a file
        config = create_config(width=10, height=10, command_file="cmds.txt")
    """
    config = AppConfig()

    if width is not None:
        config.grid.width = width
    if height is not None:
        config.grid.height = height
    if log_level:
        config.log_level = log_level.upper()
    if log_file:
        config.log_file = log_file
    if command_file:
        config.command_file = command_file

    if "prompt" in kwargs:
        config.prompt = kwargs["prompt"]

    return config

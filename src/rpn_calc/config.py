"""
Configuration management for rpn-calc.

Handles loading configuration from environment variables, YAML files,
and provides sensible defaults for all settings.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="RPN_CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: LogLevel = "WARNING"

    # Interactive loop
    exit_command: str = "exit"
    prompt: str = "Enter an expression (or 'exit' to quit): "
    show_postfix: bool = True

    # Output styles (rich markup styles)
    number_style: str = "green"
    brace_style: str = "cyan"
    operator_style: str = "yellow"
    error_style: str = "bold red"
    result_style: str = "bold green"

    # Batch evaluation
    batch_workers: int = Field(default=4, ge=1)

    @property
    def token_styles(self) -> dict[str, str]:
        """Styles keyed by token kind, as used by the renderer."""
        return {
            "number": self.number_style,
            "brace": self.brace_style,
            "operator": self.operator_style,
        }


def load_yaml_config(path: Path) -> dict:
    """Load configuration from a YAML file."""
    import yaml

    if not path.exists():
        return {}

    with open(path) as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path | None = None, **overrides: Any) -> Settings:
    """
    Build settings from environment, an optional YAML file and overrides.

    Explicit overrides win over YAML values, which win over the environment.
    """
    values: dict[str, Any] = {}
    if config_path is not None:
        values.update(load_yaml_config(config_path))
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)

"""Configuration loader.

Loads output and export settings from the packaged config.yaml.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import yaml

__all__ = ["TidyConfig", "config"]


class TidyConfig:
    """Tidy configuration singleton."""

    _instance: TidyConfig | None = None
    _config: dict[str, Any] | None = None

    def __new__(cls) -> TidyConfig:
        """Singleton pattern to ensure config is loaded once."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Load configuration from YAML file."""
        if self._config is None:
            config_path = Path(__file__).parent / "config.yaml"
            with open(config_path, encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}

    def get(self, *keys: str, default: Any = None) -> Any:
        """Get configuration value by nested keys.

        Args:
            *keys: Nested keys to traverse (e.g., "export", "precision")
            default: Default value if key path not found

        Returns:
            Configuration value or default

        Examples:
            >>> config = TidyConfig()
            >>> config.get("output", "flavor")
            'records'

        """
        value = self._config
        for key in keys:
            if not isinstance(value, dict) or key not in value:
                return default
            value = value[key]
        return value

    @property
    def output_flavor(self) -> str:
        """Default output container for tidiers."""
        return cast(str, self.get("output", "flavor", default="records"))

    @property
    def precision(self) -> int:
        """Number of decimal places for floats in rendered tables."""
        return cast(int, self.get("export", "precision", default=4))

    @property
    def default_format(self) -> str:
        """Export format used when none is requested."""
        return cast(str, self.get("export", "default_format", default="csv"))

    @property
    def log_format(self) -> str:
        """Log record format for the CLI."""
        return cast(
            str,
            self.get(
                "logging", "format", default="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
            ),
        )

    @property
    def log_datefmt(self) -> str:
        """Timestamp format for the CLI."""
        return cast(str, self.get("logging", "datefmt", default="%Y-%m-%d %H:%M:%S"))

    @property
    def config_version(self) -> str:
        """Configuration file version."""
        return cast(str, self.get("reproducibility", "config_version", default="1.0.0"))


# Global singleton instance
config = TidyConfig()
